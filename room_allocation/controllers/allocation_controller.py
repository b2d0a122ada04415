"""HTTP controller layer for room allocation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from room_allocation.controllers.dependencies import get_allocation_service
from room_allocation.domain.models import Interval
from room_allocation.services.allocation_service import (
    AllocationInvariantError,
    RoomAllocationService,
)
from room_allocation.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["allocation"])


class CustomerStay(BaseModel):
    """Input DTO validated before entering service layer."""

    arrival: int
    departure: int

    @field_validator("departure")
    @classmethod
    def validate_departure_not_before_arrival(cls, value: int, info: ValidationInfo) -> int:
        arrival = info.data.get("arrival")
        if arrival is not None and value < arrival:
            raise ValueError("departure must not be earlier than arrival")
        return value


class AllocateRoomsRequest(BaseModel):
    customers: list[CustomerStay]


class AllocateRoomsResponse(BaseModel):
    room_count: int = Field(ge=0)
    assignments: list[int]


@router.post(
    "/allocate_rooms",
    response_model=AllocateRoomsResponse,
    status_code=status.HTTP_200_OK,
)
async def allocate_rooms(
    payload: AllocateRoomsRequest,
    service: RoomAllocationService = Depends(get_allocation_service),
) -> AllocateRoomsResponse:
    """Assign rooms to one batch of customers, answering in request order."""
    if len(payload.customers) > service.max_customers:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"at most {service.max_customers} customers are accepted per request",
        )

    intervals = [
        Interval(original_index=index, arrival=item.arrival, departure=item.departure)
        for index, item in enumerate(payload.customers)
    ]
    try:
        result = service.allocate(intervals)
    except AllocationInvariantError as exc:
        logger.exception("Allocation failed verification")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("Unexpected allocation failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to allocate rooms",
        ) from exc
    return AllocateRoomsResponse(
        room_count=result.room_count,
        assignments=result.assignments,
    )
