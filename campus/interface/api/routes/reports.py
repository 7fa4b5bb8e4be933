"""Report and moderation routes."""

import sys

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from campus.application.usecase.report import (
    FileReportRequest,
    FileReportUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    ReportItem,
)
from campus.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from campus.domain.service import JWTService
from campus.domain.value import Actor

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


def _require_actor(jwt_service: JWTService, auth_token: str | None) -> Actor:
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return actor


class FileReportAPIRequest(BaseModel):
    """API request for reporting content."""

    target_type: str  # "comment" or "material"
    target_id: str
    reason: str
    details: str | None = None


@router.post("", response_model=ReportItem, status_code=status.HTTP_201_CREATED)
async def file_report(
    request: FileReportAPIRequest,
    file_report_use_case: FromDishka[FileReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Report a comment or a course material.

    Every call files a new pending report.

    Args:
        request: Target, reason and optional details
        file_report_use_case: File report use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The new pending report

    Raises:
        HTTPException: 401 if not authenticated, 400 for an invalid reason
            or missing details, 404 if the target does not exist
    """
    actor = _require_actor(jwt_service, auth_token)

    try:
        return await file_report_use_case.execute(
            FileReportRequest(
                target_type=request.target_type,
                target_id=request.target_id,
                reason=request.reason,
                details=request.details,
                reporter_id=str(actor.user_id),
            )
        )
    except ValidationError as e:
        logfire.warn("Report rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: str = Query(default="pending", alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListReportsResponse:
    """List reports for a moderation tab, newest first.

    Administrators only. ``status`` is ``pending``, ``processed`` (reviewed
    or dismissed, also accepted as ``reviewed``) or ``all``.

    Args:
        list_reports_use_case: List reports use case from DI
        jwt_service: JWT service for token verification (injected)
        status_filter: Moderation tab (query parameter ``status``)
        auth_token: JWT token from cookie

    Returns:
        Reports with reporter and target info
    """
    actor = _require_actor(jwt_service, auth_token)

    try:
        return await list_reports_use_case.execute(
            ListReportsRequest(status=status_filter, actor=actor)
        )
    except NotAuthorizedError as e:
        logfire.warn("Non-admin attempted to list reports", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required",
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class ProcessReportAPIRequest(BaseModel):
    """API request for processing a report."""

    action: str  # "reviewed" removes the content, "dismissed" keeps it


@router.api_route("/{report_id}", methods=["PATCH", "PUT"], response_model=ReportItem)
async def process_report(
    report_id: str,
    request: ProcessReportAPIRequest,
    process_report_use_case: FromDishka[ProcessReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Mark a report reviewed (removing the content) or dismissed.

    Administrators only. Repeating the action a report already has
    succeeds without doing anything; the other action is a conflict.

    Args:
        report_id: Report UUID
        request: Moderation action
        process_report_use_case: Process report use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The report in its terminal status

    Raises:
        HTTPException: 401, 403 for non-admins, 404 for unknown reports,
            409 if already handled with the other action
    """
    actor = _require_actor(jwt_service, auth_token)

    try:
        return await process_report_use_case.execute(
            ProcessReportRequest(report_id=report_id, action=request.action, actor=actor)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Non-admin attempted to process report", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required",
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        logfire.warn("Moderation conflict", report_id=report_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Report already handled: {e.current_status}",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error processing report",
            report_id=report_id,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process report, please try again",
        ) from e
