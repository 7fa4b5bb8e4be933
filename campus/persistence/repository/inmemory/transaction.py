"""In-memory transaction boundary for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

from campus.domain.repository import TransactionManager


class Restorable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


class InMemoryTransactionManager(TransactionManager):
    """Atomic blocks over in-memory repositories.

    The participating repositories are snapshotted on entry and restored
    if the block raises. Writes made by other coroutines while a failing
    block is open are lost with it.
    """

    def __init__(self, *repositories: Restorable):
        self.repositories = repositories

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshots = [repo.snapshot() for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, snapshot in zip(self.repositories, snapshots):
                repo.restore(snapshot)
            raise
