"""Main FastAPI application entry point."""

from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from iam.application.listeners import WelcomeEmailListener
from iam.dependencies.events import get_event_bus
from iam.domain.events import TenantRegistered
from iam.presentation import router as iam_router
from infrastructure.database.dependencies import (
    close_database_connections,
    get_write_engine,
)
from infrastructure.database.models import Base
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe, StartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__


def register_event_listeners(probe: StartupProbe) -> Callable[[], None]:
    """Subscribe the IAM listeners to the application event bus.

    Returns:
        Callback that removes the listeners again
    """
    bus = get_event_bus()
    listener = WelcomeEmailListener()
    bus.subscribe(TenantRegistered, listener.handle)
    probe.event_listener_registered(
        event_type=TenantRegistered.__name__,
        listener=type(listener).__name__,
    )

    def unregister() -> None:
        bus.unsubscribe(TenantRegistered, listener.handle)

    return unregister


async def create_schema() -> None:
    """Create any missing tables on the write engine."""
    async with get_write_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def iam_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Event listener registration (removed again on shutdown)
    - Optional schema creation (IAM_DB_CREATE_SCHEMA)
    - Engine lifecycle (created lazily, disposed on shutdown)
    """
    probe = DefaultStartupProbe()
    settings = get_settings()
    probe.application_starting(app_name=settings.app_name)

    unregister_listeners = register_event_listeners(probe)
    try:
        if settings.database.create_schema:
            await create_schema()
        yield
    finally:
        unregister_listeners()
        await close_database_connections()
        probe.application_stopped()


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400, like domain validation failures."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Build the IAM FastAPI application."""
    settings = get_settings()
    configure_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant identity and access management",
        version=__version__,
        lifespan=iam_lifespan,
    )
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(iam_router)

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
