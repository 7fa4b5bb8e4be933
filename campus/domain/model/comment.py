"""Comment entity.

Comments are per-course discussion posts with unlimited reply depth.
Rows are stored flat; the thread shape is derived from ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CommentId, CourseCode, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a course or a reply to another comment.

    Threading is managed through ``parent_id`` only:
    - None for top-level comments
    - Otherwise an older comment of the same course

    Depth is not stored; it is computed when the thread is built.
    """

    id: CommentId
    course_code: CourseCode
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
