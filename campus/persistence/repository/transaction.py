"""PostgreSQL transaction boundary."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic blocks as savepoints on the request session.

    A failed block rolls back to its savepoint even when the caller turns
    the exception into a response and the request session later commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
