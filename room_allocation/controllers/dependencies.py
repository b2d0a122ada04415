"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import Request

from room_allocation.services.allocation_service import RoomAllocationService
from room_allocation.utils.config import get_settings


def get_allocation_service(request: Request) -> RoomAllocationService:
    service = getattr(request.app.state, "allocation_service", None)
    if service is None:
        service = RoomAllocationService(settings=get_settings())
        request.app.state.allocation_service = service
    return service
