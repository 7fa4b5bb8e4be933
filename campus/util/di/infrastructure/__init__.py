"""Infrastructure providers.

Mockable components are discovered through ``__subclasses__()``, so every
implementation module has to be imported here.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
