"""In-memory report repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from campus.domain.model.report import Report
from campus.domain.repository.report import ReportRepository
from campus.domain.value import ReportId, ReportStatus


def _newest_first(reports: list[Report]) -> list[Report]:
    return sorted(reports, key=lambda r: (r.created_at, str(r.id)), reverse=True)


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_by_statuses(
        self, statuses: Optional[Sequence[ReportStatus]] = None
    ) -> list[Report]:
        """List reports newest first, optionally filtered by status."""
        reports = list(self._reports.values())
        if statuses is not None:
            reports = [r for r in reports if r.status in statuses]
        return _newest_first(reports)

    async def save(self, report: Report) -> Report:
        """Insert a new report."""
        self._reports[report.id] = report
        return report

    async def transition_from_pending(
        self,
        report_id: ReportId,
        status: ReportStatus,
        updated_at: datetime,
    ) -> Optional[Report]:
        """Conditionally move a pending report to a terminal status.

        Check and write happen without an await in between, which is what
        makes this a compare-and-set under asyncio.
        """
        report = self._reports.get(report_id)
        if report is None or report.status is not ReportStatus.PENDING:
            return None

        updated = report.model_copy(update={"status": status, "updated_at": updated_at})
        self._reports[report_id] = updated
        return updated

    def snapshot(self) -> dict[ReportId, Report]:
        return dict(self._reports)

    def restore(self, snapshot: dict[ReportId, Report]) -> None:
        self._reports = dict(snapshot)
