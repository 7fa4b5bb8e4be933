"""Dependency injection for the discussions API.

``PROVIDERS`` lists provider bases. A base with no subclasses is used as
is; a base with subclasses is a mockable component, and ``get_provider``
picks the production or the in-memory implementation.
"""

from typing import Type

from campus.util.di.application import ProdApplicationProvider
from campus.util.di.base import Component, ProviderBase
from campus.util.di.core import ProdConfigProvider
from campus.util.di.domain import ProdDomainProvider
from campus.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable: "persistence"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the implementation flagged ``__is_mock__``

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {name}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
