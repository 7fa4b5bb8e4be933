"""Create comment use case."""

from pydantic import BaseModel

from campus.application.usecase.base import parse_course_code, parse_id
from campus.domain.service import CommentService, UserService
from campus.domain.value import CommentId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    course_code: str
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on a course or replying to a comment."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author display info
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Returns:
            The created comment with author display info

        Raises:
            NotFoundError: If the course does not exist
            ValidationError: If content is empty or the parent is invalid
        """
        parent_id = (
            CommentId(parse_id(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )
        comment = await self.comment_service.create_comment(
            course_code=parse_course_code(request.course_code),
            author_id=UserId(parse_id(request.author_id, "author_id")),
            content=request.content,
            parent_id=parent_id,
        )

        authors = await self.user_service.get_summaries([comment.author_id])
        return CommentItem.from_domain(comment, authors.get(comment.author_id))
