"""Get comment thread use case."""

from datetime import datetime

from pydantic import BaseModel

from campus.application.usecase.base import parse_course_code
from campus.domain.service import CommentService, ThreadNode, UserService, count_nodes
from campus.domain.service.thread_service import iter_nodes
from campus.domain.value import ThreadOrder, UserId, UserSummary

from .common import CommentAuthor


class ThreadNodeResponse(BaseModel):
    """Comment with its replies nested below it."""

    comment_id: str
    author: CommentAuthor
    content: str
    parent_id: str | None
    depth: int
    is_orphan: bool
    reply_count: int
    created_at: datetime
    replies: list["ThreadNodeResponse"]

    @classmethod
    def from_domain(
        cls, node: ThreadNode, authors: dict[UserId, UserSummary]
    ) -> "ThreadNodeResponse":
        """Convert a thread node and its subtree.

        Built bottom-up without recursion, so deep chains are safe.
        """
        built: dict[int, ThreadNodeResponse] = {}
        for current in reversed(list(node.walk())):
            comment = current.comment
            children = [built[id(child)] for child in current.children]
            built[id(current)] = cls(
                comment_id=str(comment.id),
                author=CommentAuthor.from_summary(
                    str(comment.author_id), authors.get(comment.author_id)
                ),
                content=comment.content,
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                depth=current.depth,
                is_orphan=current.is_orphan,
                reply_count=sum(child.reply_count + 1 for child in children),
                created_at=comment.created_at,
                replies=children,
            )
        return built[id(node)]


class GetThreadRequest(BaseModel):
    """Get thread request."""

    course_code: str
    order: ThreadOrder | None = None


class GetThreadResponse(BaseModel):
    """Course discussion as a forest."""

    course_code: str
    roots: list[ThreadNodeResponse]
    total: int


class GetThreadUseCase:
    """Use case for getting a course discussion as a nested thread."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author display info
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the course does not exist
        """
        course_code = parse_course_code(request.course_code)
        forest = await self.comment_service.get_thread(course_code, request.order)
        authors = await self.user_service.get_summaries(
            node.comment.author_id for node in iter_nodes(forest)
        )

        return GetThreadResponse(
            course_code=course_code.root,
            roots=[ThreadNodeResponse.from_domain(root, authors) for root in forest],
            total=count_nodes(forest),
        )
