"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from campus.config import ThreadSettings
from campus.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from campus.domain.model import Comment, Course
from campus.domain.repository import CommentRepository, CourseRepository
from campus.domain.value import Actor, CommentId, CourseCode, ThreadOrder, UserId

from .base import Service
from .thread_service import ThreadNode, build_thread


class CommentService(Service):
    """Domain service for course comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        course_repository: CourseRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            course_repository: Course repository (course code validity)
            thread_settings: Thread configuration
        """
        self.comment_repository = comment_repository
        self.course_repository = course_repository
        self.thread_settings = thread_settings

    async def require_course(self, course_code: CourseCode) -> Course:
        """Get a course, failing if the code is unknown.

        Raises:
            NotFoundError: If the course does not exist
        """
        course = await self.course_repository.find_by_code(course_code)
        if not course:
            logfire.warn("Course not found", course_code=course_code.root)
            raise NotFoundError("Course", course_code.root)
        return course

    async def create_comment(
        self,
        course_code: CourseCode,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment on a course or a reply to a comment.

        All checks run before anything is written.

        Args:
            course_code: Course the discussion belongs to
            author_id: Author user ID
            content: Comment text (surrounding whitespace is stripped)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the course does not exist
            ValidationError: If content is empty or too long, or the parent
                is missing or belongs to another course
        """
        with logfire.span(
            "comment_service.create_comment",
            course_code=course_code.root,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.require_course(course_code)

            text = content.strip()
            if not text:
                logfire.warn("Rejected empty comment", course_code=course_code.root)
                raise ValidationError("Comment content cannot be empty")
            if len(text) > self.thread_settings.max_content_length:
                raise ValidationError(
                    f"Comment content exceeds "
                    f"{self.thread_settings.max_content_length} characters"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        course_code=course_code.root,
                    )
                    raise ValidationError("Parent comment not found")
                if parent.course_code != course_code:
                    logfire.warn(
                        "Parent comment belongs to another course",
                        parent_id=str(parent_id),
                        parent_course_code=parent.course_code.root,
                        target_course_code=course_code.root,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this course"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                course_code=course_code,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                course_code=course_code.root,
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments_for_course(self, course_code: CourseCode) -> list[Comment]:
        """Get the flat comment list of a course.

        Raises:
            NotFoundError: If the course does not exist
        """
        with logfire.span(
            "comment_service.get_comments_for_course", course_code=course_code.root
        ):
            await self.require_course(course_code)
            comments = await self.comment_repository.find_by_course(course_code)
            logfire.info(
                "Comments retrieved for course",
                course_code=course_code.root,
                count=len(comments),
            )
            return comments

    async def get_thread(
        self, course_code: CourseCode, order: ThreadOrder | None = None
    ) -> list[ThreadNode]:
        """Get the discussion thread of a course.

        Args:
            course_code: Course code
            order: Sibling order (defaults to the configured order)

        Returns:
            Root nodes of the thread forest

        Raises:
            NotFoundError: If the course does not exist
        """
        comments = await self.get_comments_for_course(course_code)
        return build_thread(comments, order or self.thread_settings.order)

    async def delete_comment(self, comment_id: CommentId, actor: Actor) -> int:
        """Delete a comment and its whole reply subtree on a user's request.

        Only the author or an administrator may delete.

        Args:
            comment_id: Comment ID
            actor: Requesting user

        Returns:
            Number of comments removed (the comment plus its descendants)

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.user_id),
            is_admin=actor.is_admin,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Delete of unknown comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if not actor.can_modify(comment.author_id):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    actor_id=str(actor.user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(actor.user_id)
                )

            removed = await self.delete_thread(comment_id)
            if removed == 0:
                # Lost a race with another delete of the same subtree
                raise NotFoundError("Comment", str(comment_id))
            return removed

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Remove a comment and all of its descendants.

        No ownership check; callers authorize first.

        Returns:
            Number of comments removed, 0 if the comment was already gone
        """
        with logfire.span("comment_service.delete_thread", comment_id=str(comment_id)):
            removed = await self.comment_repository.delete_thread(comment_id)
            logfire.info(
                "Comment thread deleted", comment_id=str(comment_id), removed=removed
            )
            return removed
