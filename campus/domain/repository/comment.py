"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from campus.domain.model.comment import Comment
from campus.domain.value import CommentId, CourseCode


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        """Find the comments that still exist among the given IDs.

        Args:
            comment_ids: Comment IDs to look up

        Returns:
            Existing comments, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_course(self, course_code: CourseCode) -> List[Comment]:
        """Find all comments for a course as a flat list.

        Args:
            course_code: The course code

        Returns:
            Comments ordered by creation time (oldest first)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment together with all of its descendants.

        Must remove the whole subtree atomically: either every row goes
        or none does.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            Number of rows deleted (0 if the comment did not exist)
        """
        pass
