"""Domain value objects for the campus discussion service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from campus.domain.error import ValidationError
from campus.domain.value.common import RootValueObject, ValueObject
from campus.domain.value.identifiers import UserId


def _parse_choice(enum_cls, value: str, field: str):
    """Parse a raw string into an enum member, raising a domain error."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {field} '{value}', expected one of: {allowed}")


class ThreadOrder(str, Enum):
    """Sibling order inside a discussion thread."""

    OLDEST_FIRST = "oldest_first"
    NEWEST_FIRST = "newest_first"


class ReportTargetType(str, Enum):
    """Kind of content a report refers to."""

    COMMENT = "comment"
    MATERIAL = "material"

    @classmethod
    def parse(cls, value: str) -> "ReportTargetType":
        return _parse_choice(cls, value, "target type")


class ReportReason(str, Enum):
    """Why a piece of content was reported.

    Comment dialogs offer the conduct reasons, material dialogs the
    quality and rights reasons; both share ``inappropriate`` and ``other``.
    """

    SPAM = "spam"
    INAPPROPRIATE = "inappropriate"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    MISINFORMATION = "misinformation"
    COPYRIGHT = "copyright"
    OUTDATED = "outdated"
    DUPLICATE = "duplicate"
    QUALITY = "quality"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human readable label shown in the moderation tables."""
        return _REASON_LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "ReportReason":
        return _parse_choice(cls, value, "reason")


_REASON_LABELS = {
    ReportReason.SPAM: "Spam or misleading",
    ReportReason.INAPPROPRIATE: "Inappropriate content",
    ReportReason.HARASSMENT: "Harassment or bullying",
    ReportReason.HATE_SPEECH: "Hate speech",
    ReportReason.MISINFORMATION: "False or misleading information",
    ReportReason.COPYRIGHT: "Copyright violation",
    ReportReason.OUTDATED: "Outdated or incorrect information",
    ReportReason.DUPLICATE: "Duplicate material",
    ReportReason.QUALITY: "Poor quality or unreadable",
    ReportReason.OTHER: "Other",
}


class ReportStatus(str, Enum):
    """Moderation status of a report.

    ``pending`` is the only non-terminal status.
    """

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"

    @property
    def is_terminal(self) -> bool:
        return self is not ReportStatus.PENDING


class ModerationAction(str, Enum):
    """Disposition an administrator gives a pending report.

    ``reviewed`` removes the reported content, ``dismissed`` keeps it.
    """

    REVIEWED = "reviewed"
    DISMISSED = "dismissed"

    @property
    def status(self) -> ReportStatus:
        """Terminal status this action moves a report into."""
        return ReportStatus(self.value)

    @classmethod
    def parse(cls, value: str) -> "ModerationAction":
        return _parse_choice(cls, value, "action")


class ReportStatusFilter(str, Enum):
    """Moderation queue tabs."""

    PENDING = "pending"
    PROCESSED = "processed"
    ALL = "all"

    @property
    def statuses(self) -> tuple[ReportStatus, ...] | None:
        """Statuses shown on this tab, None meaning no filter."""
        if self is ReportStatusFilter.PENDING:
            return (ReportStatus.PENDING,)
        if self is ReportStatusFilter.PROCESSED:
            return (ReportStatus.REVIEWED, ReportStatus.DISMISSED)
        return None

    @classmethod
    def parse(cls, value: str) -> "ReportStatusFilter":
        # The admin screens historically called the processed tab "reviewed"
        if value == "reviewed":
            return cls.PROCESSED
        return _parse_choice(cls, value, "status filter")


class CourseCode(RootValueObject[str]):
    """Course code, e.g. 'CPIT370'.

    Normalized to upper case; letters, digits, '-' and '_' only.
    """

    @field_validator("root")
    @classmethod
    def validate_course_code(cls, v: str) -> str:
        """Normalize and validate course code format."""
        v = v.strip().upper()
        if not re.match(r"^[A-Z0-9_-]{2,20}$", v):
            raise ValueError(
                "Course code must be 2-20 characters: letters, digits, '-' or '_'"
            )
        return v


class Actor(ValueObject):
    """The authenticated user performing a request."""

    user_id: UserId
    is_admin: bool = False

    def can_modify(self, owner_id: UserId) -> bool:
        """Whether this actor may modify content owned by ``owner_id``."""
        return self.is_admin or self.user_id == owner_id


class UserSummary(ValueObject):
    """Denormalized display info for a user."""

    user_id: UserId
    display_name: str
    email: str | None = None
    student_id: str | None = None
    avatar_url: str | None = None
