"""List comments use case."""

from pydantic import BaseModel

from campus.application.usecase.base import parse_course_code
from campus.domain.service import CommentService, UserService

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    course_code: str


class ListCommentsResponse(BaseModel):
    """Flat comment listing, oldest first."""

    course_code: str
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase:
    """Use case for getting the flat comment list of a course."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author display info
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the course does not exist
        """
        course_code = parse_course_code(request.course_code)
        comments = await self.comment_service.get_comments_for_course(course_code)
        authors = await self.user_service.get_summaries(c.author_id for c in comments)

        items = [CommentItem.from_domain(c, authors.get(c.author_id)) for c in comments]
        return ListCommentsResponse(
            course_code=course_code.root,
            comments=items,
            total=len(items),
        )
