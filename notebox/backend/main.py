"""
NoteBox ASGI application.

``uvicorn notebox.backend.main:app`` builds the app on first attribute
access, so importing this module does not read any configuration.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notebox.backend.api import health
from notebox.backend.api.v1 import router as api_v1_router
from notebox.backend.core.config import get_app_config
from notebox.backend.core.config_schema import ApplicationSchema
from notebox.backend.core.database import dispose_engine
from notebox.backend.core.exception_handlers import register_exception_handlers
from notebox.backend.core.logging import get_logger, setup_logging
from notebox.backend.core.middleware import RequestContextMiddleware

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config = get_app_config()
    setup_logging(level=config.logging.level)
    logger.info(
        "NoteBox starting",
        extra={"version": config.application.version, "env": config.application.environment},
    )
    yield
    await dispose_engine()
    logger.info("NoteBox stopped")


def _install_middleware(app: FastAPI, settings: ApplicationSchema) -> None:
    # Starlette runs the last-added middleware outermost
    app.add_middleware(RequestContextMiddleware)
    if settings.cors.origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors.origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )


def create_app() -> FastAPI:
    settings = get_app_config().application
    docs = settings.docs_enabled

    app = FastAPI(
        title=settings.name,
        description=settings.description,
        version=settings.version,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        lifespan=lifespan,
    )
    _install_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_v1_router, prefix=settings.api_prefix)
    return app


def get_app() -> FastAPI:
    global _app
    if _app is None:
        _app = create_app()
    return _app


def __getattr__(name: str) -> FastAPI:
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
