"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from campus.domain.model import Comment
from campus.domain.value import UserSummary


class CommentAuthor(BaseModel):
    """Display info for a comment author."""

    user_id: str
    display_name: str
    avatar_url: str | None = None

    @classmethod
    def from_summary(cls, user_id: str, summary: UserSummary | None) -> "CommentAuthor":
        if summary is None:
            # Directory entry gone; the comment still renders
            return cls(user_id=user_id, display_name="Anonymous")
        return cls(
            user_id=user_id,
            display_name=summary.display_name,
            avatar_url=summary.avatar_url,
        )


class CommentItem(BaseModel):
    """Comment in a flat listing."""

    comment_id: str
    course_code: str
    author: CommentAuthor
    content: str
    parent_id: str | None
    created_at: datetime

    @classmethod
    def from_domain(
        cls, comment: Comment, author: UserSummary | None
    ) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            course_code=comment.course_code.root,
            author=CommentAuthor.from_summary(str(comment.author_id), author),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
