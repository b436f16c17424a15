"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.interfaces import TimeRecordRepository
from app.config import Settings, get_settings
from app.infrastructure.auth import LocalIdentityStore
from app.infrastructure.database import Base, build_engine, build_session_factory
from app.infrastructure.database.repositories import SQLAlchemyTimeRecordRepository
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.memory import InMemoryTimeRecordRepository
from app.presentation.api.responses import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _build_time_record_repository(app: FastAPI, settings: Settings) -> TimeRecordRepository:
    """Pick the repository adapter once for the lifetime of the process."""
    if settings.time_record_store == "database":
        engine = build_engine(
            settings.database_url,
            echo=(settings.app_env == "development" and settings.log_level_sql == "DEBUG"),
        )
        app.state.db_engine = engine
        return SQLAlchemyTimeRecordRepository(build_session_factory(engine))
    return InMemoryTimeRecordRepository()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: logging setup, table creation, client shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    engine = app.state.db_engine
    if engine is not None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Time records stored in database")
    else:
        logger.warning("Time records stored in memory; they will be lost on restart")

    logger.info("Auth backend: %s", settings.auth_backend)

    yield

    # Shutdown
    if app.state.http_client is not None:
        await app.state.http_client.aclose()
    if engine is not None:
        await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_engine = None
    app.state.time_record_repository = _build_time_record_repository(app, settings)
    app.state.identity_store = LocalIdentityStore()
    app.state.http_client = (
        httpx.AsyncClient(timeout=settings.auth_timeout_seconds)
        if settings.auth_backend == "supabase"
        else None
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
