"""File report use case."""

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase, parse_id
from campus.domain.service import ReportService
from campus.domain.value import ReportReason, ReportTargetType, UserId

from .common import ReportItem


class FileReportRequest(BaseModel):
    """File report request.

    Choice fields stay plain strings here so that unknown values surface
    as domain validation errors rather than schema errors.
    """

    target_type: str
    target_id: str
    reason: str
    details: str | None = None
    reporter_id: str  # User ID from authenticated user


class FileReportUseCase(BaseUseCase):
    """Use case for reporting a comment or a material."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize file report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: FileReportRequest) -> ReportItem:
        """Execute file report flow.

        Raises:
            ValidationError: If the target type, reason, IDs or details
                are invalid
            NotFoundError: If the target does not exist
        """
        report = await self.report_service.file_report(
            target_type=ReportTargetType.parse(request.target_type),
            target_id=parse_id(request.target_id, "target_id"),
            reporter_id=UserId(parse_id(request.reporter_id, "reporter_id")),
            reason=ReportReason.parse(request.reason),
            details=request.details,
        )
        return ReportItem.from_domain(report)
