"""Report queue domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

import logfire

from campus.config import ModerationSettings
from campus.domain.error import NotFoundError, ValidationError
from campus.domain.model import Report
from campus.domain.repository import ReportRepository
from campus.domain.value import (
    ReportId,
    ReportReason,
    ReportStatus,
    ReportStatusFilter,
    ReportTargetType,
    UserId,
    UserSummary,
)

from .base import Service
from .reportable import ContentRegistry, ReportTarget
from .user_service import UserService


@dataclass
class ReportView:
    """Report row as shown in the moderation tables.

    ``target`` is None once the reported content has been removed.
    """

    report: Report
    reporter: UserSummary | None
    target: ReportTarget | None
    target_author: UserSummary | None


class ReportService(Service):
    """Domain service for filing and listing reports."""

    def __init__(
        self,
        report_repository: ReportRepository,
        user_service: UserService,
        contents: ContentRegistry,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            user_service: User service for display info
            contents: Target-type dispatch table
            moderation_settings: Moderation configuration
        """
        self.report_repository = report_repository
        self.user_service = user_service
        self.contents = contents
        self.moderation_settings = moderation_settings

    def _clean_details(self, reason: ReportReason, details: str | None) -> str | None:
        text = details.strip() if details else ""
        if len(text) > self.moderation_settings.max_details_length:
            raise ValidationError(
                f"Report details exceed "
                f"{self.moderation_settings.max_details_length} characters"
            )
        if (
            reason is ReportReason.OTHER
            and not text
            and self.moderation_settings.require_details_for_other
        ):
            raise ValidationError("Please provide details for reports of type 'other'")
        return text or None

    async def file_report(
        self,
        target_type: ReportTargetType,
        target_id: UUID,
        reporter_id: UserId,
        reason: ReportReason,
        details: str | None = None,
    ) -> Report:
        """File a report against a comment or material.

        Every call creates a new pending report; several reports on the
        same content (even from the same user) are all kept.

        Args:
            target_type: Kind of reported content
            target_id: Reported content ID
            reporter_id: Reporting user
            reason: Report reason
            details: Optional free text

        Returns:
            The new pending report

        Raises:
            ValidationError: If details are invalid for the reason
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "report_service.file_report",
            target_type=target_type.value,
            target_id=str(target_id),
            reporter_id=str(reporter_id),
            reason=reason.value,
        ):
            cleaned = self._clean_details(reason, details)

            target = await self.contents[target_type].find(target_id)
            if not target:
                logfire.warn(
                    "Report on non-existent content",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            now = datetime.now()
            report = Report(
                id=ReportId(uuid4()),
                target_type=target_type,
                target_id=target_id,
                reason=reason,
                details=cleaned,
                reporter_id=reporter_id,
                status=ReportStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            saved = await self.report_repository.save(report)
            logfire.info(
                "Report filed",
                report_id=str(saved.id),
                target_type=target_type.value,
                target_id=str(target_id),
            )
            return saved

    async def list_reports(self, status_filter: ReportStatusFilter) -> list[ReportView]:
        """List reports for a moderation tab, newest first.

        Each row is enriched with reporter and target-author display info.
        Lookups are batched per content kind rather than per row.

        Args:
            status_filter: Moderation tab

        Returns:
            Report views ordered by created_at descending
        """
        with logfire.span(
            "report_service.list_reports", status_filter=status_filter.value
        ):
            reports = await self.report_repository.find_by_statuses(
                status_filter.statuses
            )

            targets: dict[tuple[ReportTargetType, UUID], ReportTarget] = {}
            for target_type, handler in self.contents.items():
                ids = [r.target_id for r in reports if r.target_type is target_type]
                if not ids:
                    continue
                found = await handler.find_many(ids)
                for target_id, target in found.items():
                    targets[(target_type, target_id)] = target

            user_ids = {r.reporter_id for r in reports}
            user_ids.update(t.author_id for t in targets.values())
            users = await self.user_service.get_summaries(user_ids)

            views = []
            for report in reports:
                target = targets.get((report.target_type, report.target_id))
                views.append(
                    ReportView(
                        report=report,
                        reporter=users.get(report.reporter_id),
                        target=target,
                        target_author=users.get(target.author_id) if target else None,
                    )
                )

            logfire.info(
                "Reports listed",
                status_filter=status_filter.value,
                count=len(views),
            )
            return views
