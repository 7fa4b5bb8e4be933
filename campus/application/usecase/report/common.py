"""Response items shared by the report use cases."""

from datetime import datetime

from pydantic import BaseModel

from campus.domain.model import Report
from campus.domain.service import ReportTarget, ReportView
from campus.domain.value import UserSummary


class ReportItem(BaseModel):
    """Report as returned after filing or processing."""

    report_id: str
    target_type: str
    target_id: str
    reason: str
    reason_label: str
    details: str | None
    reporter_id: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            target_type=report.target_type.value,
            target_id=str(report.target_id),
            reason=report.reason.value,
            reason_label=report.reason.label,
            details=report.details,
            reporter_id=str(report.reporter_id),
            status=report.status.value,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )


class UserInfo(BaseModel):
    """User columns of the moderation tables."""

    user_id: str
    display_name: str
    email: str | None = None
    student_id: str | None = None

    @classmethod
    def from_summary(cls, summary: UserSummary) -> "UserInfo":
        return cls(
            user_id=str(summary.user_id),
            display_name=summary.display_name,
            email=summary.email,
            student_id=summary.student_id,
        )


class TargetInfo(BaseModel):
    """Summary of the reported content, while it still exists."""

    course_code: str
    preview: str  # Comment excerpt or material file name
    created_at: datetime
    author: UserInfo | None

    @classmethod
    def from_domain(
        cls, target: ReportTarget, author: UserSummary | None
    ) -> "TargetInfo":
        return cls(
            course_code=target.course_code.root,
            preview=target.preview,
            created_at=target.created_at,
            author=UserInfo.from_summary(author) if author else None,
        )


class ReportListItem(ReportItem):
    """Report row in the moderation tables."""

    reporter: UserInfo | None
    target: TargetInfo | None  # None once the content has been removed

    @classmethod
    def from_view(cls, view: ReportView) -> "ReportListItem":
        base = ReportItem.from_domain(view.report).model_dump()
        return cls(
            **base,
            reporter=UserInfo.from_summary(view.reporter) if view.reporter else None,
            target=(
                TargetInfo.from_domain(view.target, view.target_author)
                if view.target
                else None
            ),
        )
