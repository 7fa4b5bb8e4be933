"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes that must land together.

    Used where one domain operation writes through more than one
    repository, e.g. a report's status change and the removal of the
    content it points at.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Every write made inside the block is kept if the block exits
        normally and discarded if it raises. The exception still
        propagates to the caller.
        """
        pass
