"""User domain service."""

from typing import Iterable

import logfire

from campus.domain.error import NotFoundError
from campus.domain.model import User
from campus.domain.repository import UserRepository
from campus.domain.value import UserId, UserSummary

from .base import Service


class UserService(Service):
    """Domain service for student directory lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_summaries(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserSummary]:
        """Batch-load display info for a set of users.

        Unknown users are left out of the result; callers decide how to
        render them.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to display summary
        """
        ids = set(user_ids)
        if not ids:
            return {}
        with logfire.span("user_service.get_summaries", count=len(ids)):
            users = await self.user_repository.find_by_ids(ids)
            if len(users) < len(ids):
                logfire.info(
                    "Some users missing from directory",
                    requested=len(ids),
                    found=len(users),
                )
            return {user_id: user.summary() for user_id, user in users.items()}

    async def save(self, user: User) -> User:
        """Save user (create or update)."""
        with logfire.span("user_service.save", user_id=str(user.id)):
            return await self.user_repository.save(user)
