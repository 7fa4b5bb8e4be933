"""Domain value objects for the campus discussion service."""

from campus.domain.value.identifiers import (
    CommentId,
    MaterialId,
    ReportId,
    UserId,
)
from campus.domain.value.types import (
    Actor,
    CourseCode,
    ModerationAction,
    ReportReason,
    ReportStatus,
    ReportStatusFilter,
    ReportTargetType,
    ThreadOrder,
    UserSummary,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "MaterialId",
    "ReportId",
    # Types
    "Actor",
    "CourseCode",
    "ModerationAction",
    "ReportReason",
    "ReportStatus",
    "ReportStatusFilter",
    "ReportTargetType",
    "ThreadOrder",
    "UserSummary",
]
