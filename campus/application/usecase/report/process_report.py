"""Process report use case."""

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase, parse_id
from campus.domain.service import ModerationService
from campus.domain.value import Actor, ModerationAction, ReportId

from .common import ReportItem


class ProcessReportRequest(BaseModel):
    """Process report request."""

    report_id: str
    action: str  # "reviewed" or "dismissed"
    actor: Actor


class ProcessReportUseCase(BaseUseCase):
    """Use case for giving a pending report its disposition."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize process report use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ProcessReportRequest) -> ReportItem:
        """Execute process report flow.

        Raises:
            ValidationError: If the report ID or action is invalid
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the report does not exist
            ConflictError: If the report already has the other disposition
        """
        report = await self.moderation_service.process_report(
            report_id=ReportId(parse_id(request.report_id, "report_id")),
            action=ModerationAction.parse(request.action),
            actor=request.actor,
        )
        return ReportItem.from_domain(report)
