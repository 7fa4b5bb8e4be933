"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from campus.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with the Postgres-backed persistence component.

    ``FastapiProvider`` makes the current ``Request`` resolvable inside
    REQUEST-scoped providers.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; routes resolve ``FromDishka`` through it."""
    setup_dishka(container, app)
