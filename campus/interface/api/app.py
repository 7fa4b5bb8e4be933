"""FastAPI application for course discussions and moderation."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus.config import Settings
from campus.interface.api.routes import comments, health, reports
from campus.util.di.container import create_container, setup_di
from campus.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured (``scripts/start_app.py`` does it).

    Args:
        container: DI container; tests pass one with in-memory persistence
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Campus Discussions API",
        description="Course discussion threads, content reports and moderation "
        "for the university portal",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # The portal frontend sends the auth_token cookie cross-origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for module in (health, comments, reports):
        app_instance.include_router(module.router)

    return app_instance


# Module-level app for uvicorn ("campus.interface.api.app:app")
app = create_app()
