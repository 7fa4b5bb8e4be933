"""List reports use case."""

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.error import NotAuthorizedError
from campus.domain.service import ReportService
from campus.domain.value import Actor, ReportStatusFilter

from .common import ReportListItem


class ListReportsRequest(BaseModel):
    """List reports request."""

    status: str = ReportStatusFilter.PENDING.value
    actor: Actor


class ListReportsResponse(BaseModel):
    """Moderation table contents, newest first."""

    status: str
    reports: list[ReportListItem]
    total: int


class ListReportsUseCase(BaseUseCase):
    """Use case for the administrator report tables."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize list reports use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            ValidationError: If the status filter is unknown
        """
        if not request.actor.is_admin:
            raise NotAuthorizedError(
                "list", "reports", "*", str(request.actor.user_id)
            )

        status_filter = ReportStatusFilter.parse(request.status)
        views = await self.report_service.list_reports(status_filter)
        items = [ReportListItem.from_view(view) for view in views]
        return ListReportsResponse(
            status=status_filter.value,
            reports=items,
            total=len(items),
        )
