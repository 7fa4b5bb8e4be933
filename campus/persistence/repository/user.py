"""PostgreSQL implementation of User repository."""

from typing import Dict, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import User
from campus.domain.repository import UserRepository
from campus.domain.value import UserId
from campus.persistence.mappers import row_to_user, user_to_dict
from campus.persistence.tables import students_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(students_table).where(students_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> Dict[UserId, User]:
        """Batch lookup of users in a single query."""
        ids = list(set(user_ids))
        if not ids:
            return {}
        stmt = select(students_table).where(students_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        users = [row_to_user(row._asdict()) for row in result.fetchall()]
        return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (upsert on ID)."""
        user_dict = user_to_dict(user)
        stmt = insert(students_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[students_table.c.id],
            set_={k: v for k, v in user_dict.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
