"""
Application entry point.

Creates the FastAPI application and wires together:
- Stores (PostgreSQL or in-memory), built once per process
- Routers (health, Q&A)
- Error handlers (centralized handler-error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.engine import Engine

from app.core.config import Settings, settings as default_settings
from app.infrastructure.database import create_db_engine, init_schema
from app.infrastructure.qa.answer_repository import SqlAnswerStore
from app.infrastructure.qa.memory_repository import (
    InMemoryAnswerStore,
    InMemoryQaDatabase,
    InMemoryQuestionStore,
)
from app.infrastructure.qa.question_repository import SqlQuestionStore
from app.interfaces.health import router as health_router
from app.interfaces.qa.router import router as qa_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def _attach_stores(app: FastAPI, settings: Settings, engine: Optional[Engine]) -> None:
    """Build the stores for the configured backend and keep them on app.state."""
    if settings.storage_backend == "memory":
        db = InMemoryQaDatabase()
        app.state.engine = None
        app.state.questions_store = InMemoryQuestionStore(db)
        app.state.answers_store = InMemoryAnswerStore(db)
        logger.info("Using in-memory stores.")
        return

    # Engines connect lazily; no database is touched until the first request.
    engine = engine or create_db_engine(settings)
    app.state.engine = engine
    app.state.questions_store = SqlQuestionStore(engine)
    app.state.answers_store = SqlAnswerStore(engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the schema, dispose the pool on shutdown."""
    settings: Settings = app.state.settings
    engine: Optional[Engine] = app.state.engine

    if engine is not None and settings.init_schema:
        init_schema(engine)

    yield

    if engine is not None:
        engine.dispose()


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers stores, routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded settings.
        engine: Pre-built engine for the PostgreSQL backend. Built from
            settings when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    _attach_stores(app, settings, engine)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(qa_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    logger.info("Running on %s:%d", default_settings.host, default_settings.port)
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
    )


if __name__ == "__main__":
    run()
