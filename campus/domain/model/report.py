"""Report entity.

Reports are user complaints against a comment or an uploaded material.
They are never deleted and outlive the content they point at.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import (
    ReportId,
    ReportReason,
    ReportStatus,
    ReportTargetType,
    UserId,
)


class Report(DomainModel):
    """Report entity.

    Business rules:
    - Created as ``pending``
    - Moves once, to ``reviewed`` (content removed) or ``dismissed``
    - Terminal reports never change again
    - Polymorphic reference to the target (comment or material)
    """

    id: ReportId
    target_type: ReportTargetType
    target_id: UUID  # CommentId or MaterialId (both are UUIDs)
    reason: ReportReason
    details: Optional[str] = Field(default=None, max_length=1000)
    reporter_id: UserId
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
