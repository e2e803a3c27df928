"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from lgview.db.executor import DataRetrievalError
from lgview.db.session import get_session

logger = logging.getLogger(__name__)

CORS_ORIGINS_ENV_VAR = "LGVIEW_CORS_ORIGINS"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """Dependency to get database session for the app's database.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def _cors_origins() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV_VAR)
    if not raw:
        return DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="lgview API",
        description="Linkage group, marker and QTL diagram data",
        version="0.1.0",
    )
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from lgview.api.routes import report

    app.include_router(report.router, prefix="/api")

    @app.exception_handler(DataRetrievalError)
    def data_retrieval_error(request: Request, exc: DataRetrievalError) -> JSONResponse:
        """Turn store failures into a 500 response."""
        logger.error(f"{request.method} {request.url.path} failed: {exc.__cause__}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
