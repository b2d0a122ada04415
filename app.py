"""
app.py: FastAPI application factory.

Exposes the room allocator over HTTP, one customer batch per request.

Usage:
    python app.py

Direct uvicorn usage:
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from room_allocation.controllers.allocation_controller import router as allocation_router
from room_allocation.services.allocation_service import RoomAllocationService
from room_allocation.utils.config import Settings, get_settings
from room_allocation.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = settings or get_settings()
    allocation_service = RoomAllocationService(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Startup complete | app=%s | version=%s | verify_assignments=%s",
            settings.app_name,
            settings.app_version,
            settings.allocation_verify_assignments,
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(allocation_router)
    app.state.allocation_service = allocation_service

    return app


HOST = "127.0.0.1"
PORT = 8000


def serve() -> None:
    """Serve the module-level app; blocks until CTRL+C."""
    settings = get_settings()
    uvicorn.run(
        "app:app",
        host=HOST,
        port=PORT,
        log_level=settings.log_level.lower(),
    )


# Module-level app object for uvicorn
app = create_app()


if __name__ == "__main__":
    serve()
