"""Delete comment use case."""

from pydantic import BaseModel

from campus.application.usecase.base import parse_id
from campus.domain.service import CommentService
from campus.domain.value import Actor, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    actor: Actor


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    removed: int  # The comment plus all of its replies


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        removed = await self.comment_service.delete_comment(comment_id, request.actor)
        return DeleteCommentResponse(comment_id=str(comment_id), removed=removed)
