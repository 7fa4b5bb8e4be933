"""Provider base and mockable component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for every provider in ``PROVIDERS``.

    A provider whose class sets ``__mock_component__`` is a mockable base;
    its subclasses are the production (``__is_mock__ = False``) and test
    (``__is_mock__ = True``) implementations.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
