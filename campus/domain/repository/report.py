"""Report repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from campus.domain.model.report import Report
from campus.domain.value import ReportId, ReportStatus


class ReportRepository(ABC):
    """Repository for Report entity.

    Reports are append-only apart from the single status transition,
    so there is no delete operation.
    """

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_statuses(
        self, statuses: Optional[Sequence[ReportStatus]] = None
    ) -> List[Report]:
        """List reports, newest first.

        Args:
            statuses: Statuses to include (None for all reports)

        Returns:
            Matching reports ordered by created_at descending
        """
        pass


    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Insert a new report.

        Args:
            report: The report to save

        Returns:
            The saved report
        """
        pass

    @abstractmethod
    async def transition_from_pending(
        self,
        report_id: ReportId,
        status: ReportStatus,
        updated_at: datetime,
    ) -> Optional[Report]:
        """Move a pending report to a terminal status.

        Implemented as a single conditional update ("set status only if
        it is still pending") so that concurrent moderators cannot both
        win.

        Args:
            report_id: The report ID
            status: Terminal status to set
            updated_at: Timestamp of the transition

        Returns:
            The updated report, or None if the report does not exist or
            is no longer pending
        """
        pass
