"""Logfire setup and instrumentation.

Services open a span per operation and emit structured events inside it:

    with logfire.span("moderation_service.process_report", report_id=...):
        logfire.info("Report processed", status=...)

Client mistakes are logged with ``logfire.warn``; unexpected failures with
``logfire.error``.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from campus.config import Settings

SERVICE_NAME = "campus-discussions"


def _should_send(settings: Settings) -> bool:
    # An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins over token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the logfire SDK once per process.

    Without a token everything is printed to the console only.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request.

    Headers are not captured because the ``auth_token`` cookie carries the
    session JWT.
    """

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path if hasattr(request, "url") else None,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements (the subtree deletes and report updates among them)."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
