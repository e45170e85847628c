"""
Credit Application Service - Main Application Entry Point

Registers customers and records the credits requested against them.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from credit_app import __version__
from credit_app.core.config import settings
from credit_app.core.logging import setup_logging
from credit_app.core.metrics import get_metrics, get_metrics_content_type
from credit_app.infrastructure.database import db_manager
from credit_app.presentation.api import router
from credit_app.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize database connection pool (and tables, if enabled)
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()
    if settings.db_create_tables:
        await db_manager.create_tables()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", app=settings.app_name, version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Credit Application Service",
    description="Customer registration and credit requests",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")
