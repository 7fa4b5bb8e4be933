"""PostgreSQL implementation of Report repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Report
from campus.domain.repository import ReportRepository
from campus.domain.value import ReportId, ReportStatus
from campus.persistence.mappers import report_to_dict, row_to_report
from campus.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_by_statuses(
        self, statuses: Optional[Sequence[ReportStatus]] = None
    ) -> List[Report]:
        """List reports newest first, optionally filtered by status."""
        stmt = select(reports_table)
        if statuses is not None:
            stmt = stmt.where(reports_table.c.status.in_([s.value for s in statuses]))
        stmt = stmt.order_by(desc(reports_table.c.created_at), desc(reports_table.c.id))

        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()]


    async def save(self, report: Report) -> Report:
        """Insert a new report."""
        stmt = insert(reports_table).values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report

    async def transition_from_pending(
        self,
        report_id: ReportId,
        status: ReportStatus,
        updated_at: datetime,
    ) -> Optional[Report]:
        """Conditionally move a pending report to a terminal status.

        The ``status = 'pending'`` guard makes the row lock decide races:
        a second concurrent update re-checks the guard after the first
        commits and matches nothing.
        """
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .where(reports_table.c.status == ReportStatus.PENDING.value)
            .values(status=status.value, updated_at=updated_at)
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Report missing or no longer pending
            return None

        await self.session.flush()
        return row_to_report(row._asdict())
