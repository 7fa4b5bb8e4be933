"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from campus.domain.model.user import User
from campus.domain.value import UserId


class UserRepository(ABC):
    """Repository for the student directory."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> Dict[UserId, User]:
        """Batch lookup of users.

        Args:
            user_ids: User IDs to look up (duplicates allowed)

        Returns:
            Mapping of found user IDs to users; unknown IDs are omitted
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
