"""FastAPI Application Factory.

Serves the stored calendar snapshot to the web client and exposes the
refresh trigger used by the scheduler.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import pytz
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.dependencies import get_store
from src.api.models import HealthResponse
from src.api.routes import calendar, cron
from src.shared.config import Config
from src.shared.utils import setup_logger
from src.storage.snapshot_store import JsonSnapshotStore

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
API_VERSION = "2.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logger("src.api", Config.LOGS_DIR / "api.log", Config.LOG_LEVEL)
    logger.info("Calendar API starting up, snapshot=%s", Config.SNAPSHOT_PATH)
    yield
    logger.info("Calendar API shutting down")


def create_app(store: Optional[JsonSnapshotStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Snapshot store to serve. Defaults to the store at
            Config.SNAPSHOT_PATH.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Economic Calendar API",
        version=API_VERSION,
        description="Scheduled macroeconomic releases and central bank events",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.API_CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    if store is not None:
        app.dependency_overrides[get_store] = lambda: store

    @app.get(f"{API_PREFIX}/health", response_model=HealthResponse)
    def health(snapshot_store: JsonSnapshotStore = Depends(get_store)):
        available = snapshot_store.read() is not None
        body = HealthResponse(
            status="ok" if available else "degraded",
            timestamp=datetime.now(pytz.UTC).isoformat(),
            snapshot="available" if available else "missing",
        )
        if not available:
            return JSONResponse(status_code=503, content=body.model_dump())
        return body

    app.include_router(calendar.router, prefix=API_PREFIX)
    app.include_router(cron.router, prefix=API_PREFIX)

    logger.info("Calendar API v%s initialized", API_VERSION)
    return app
