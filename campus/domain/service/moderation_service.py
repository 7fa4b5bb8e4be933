"""Moderation state machine.

    pending --process(reviewed)--> reviewed   (+ cascade delete of target)
    pending --process(dismissed)-> dismissed

Terminal reports never move again. Repeating the action a report already
has is a no-op success; asking for the other action is a conflict.
"""

from datetime import datetime

import logfire

from campus.domain.error import (
    CascadeInconsistencyError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
)
from campus.domain.model import Report
from campus.domain.repository import ReportRepository, TransactionManager
from campus.domain.value import Actor, ModerationAction, ReportId

from .base import Service
from .reportable import ContentRegistry


class ModerationService(Service):
    """Domain service driving report dispositions."""

    def __init__(
        self,
        report_repository: ReportRepository,
        contents: ContentRegistry,
        transactions: TransactionManager,
    ) -> None:
        """Initialize moderation service.

        Args:
            report_repository: Report repository
            contents: Target-type dispatch table
            transactions: Boundary for the status change and its cascade
        """
        self.report_repository = report_repository
        self.contents = contents
        self.transactions = transactions

    async def process_report(
        self,
        report_id: ReportId,
        action: ModerationAction,
        actor: Actor,
    ) -> Report:
        """Give a report its disposition.

        The status change is a conditional update, so when two
        administrators race on one report exactly one of them moves it;
        the other sees the terminal row and gets a no-op (same action) or
        a conflict (other action). The cascade only runs for the winner,
        in the same atomic block as the status change: if removing the
        content fails, the report stays pending and the error propagates.

        Args:
            report_id: Report ID
            action: ``reviewed`` removes the content, ``dismissed`` keeps it
            actor: Requesting user (must be an administrator)

        Returns:
            The report in its terminal status

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the report does not exist
            ConflictError: If the report already has the other disposition
        """
        with logfire.span(
            "moderation_service.process_report",
            report_id=str(report_id),
            action=action.value,
            actor_id=str(actor.user_id),
        ):
            if not actor.is_admin:
                logfire.warn(
                    "Non-admin attempted to process report",
                    report_id=str(report_id),
                    actor_id=str(actor.user_id),
                )
                raise NotAuthorizedError(
                    "process", "report", str(report_id), str(actor.user_id)
                )

            async with self.transactions.atomic():
                updated = await self.report_repository.transition_from_pending(
                    report_id, action.status, datetime.now()
                )
                if updated is not None and action is ModerationAction.REVIEWED:
                    await self._remove_target(updated)

            if updated is None:
                return await self._resolve_lost_transition(report_id, action)

            logfire.info(
                "Report processed",
                report_id=str(report_id),
                status=updated.status.value,
                target_type=updated.target_type.value,
                target_id=str(updated.target_id),
            )
            return updated

    async def _resolve_lost_transition(
        self, report_id: ReportId, action: ModerationAction
    ) -> Report:
        """Explain why the conditional update matched nothing."""
        existing = await self.report_repository.find_by_id(report_id)
        if existing is None:
            logfire.warn("Report not found", report_id=str(report_id))
            raise NotFoundError("Report", str(report_id))

        if existing.status is action.status:
            logfire.info(
                "Report already processed with same action",
                report_id=str(report_id),
                status=existing.status.value,
            )
            return existing

        logfire.warn(
            "Conflicting moderation action",
            report_id=str(report_id),
            current_status=existing.status.value,
            requested=action.value,
        )
        raise ConflictError(str(report_id), existing.status.value, action.value)

    async def _remove_target(self, report: Report) -> None:
        """Cascade-delete the content a reviewed report points at."""
        handler = self.contents[report.target_type]
        try:
            removed = await handler.remove(report.target_id)
        except CascadeInconsistencyError as e:
            # Deleted by its author or another report first; nothing left to do
            logfire.warn(
                "Reported content already removed",
                report_id=str(report.id),
                target_type=e.target_type,
                target_id=e.target_id,
            )
            return

        logfire.info(
            "Reported content removed",
            report_id=str(report.id),
            target_type=report.target_type.value,
            target_id=str(report.target_id),
            removed=removed,
        )
