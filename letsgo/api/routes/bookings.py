from typing import Optional

from fastapi import APIRouter, Depends

from letsgo.core.dependencies import get_booking_service, require_actor
from letsgo.models.user import User
from letsgo.schemas.booking import BookingCreate, BookingOut, DrinkOrderCreate, DrinkOrderOut
from letsgo.schemas.common import ApiResponse
from letsgo.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------
# LIST BOOKINGS
# ---------------------------------------------------------------------
@router.get("/", response_model=ApiResponse[list[BookingOut]])
def list_bookings(
    status: Optional[str] = None,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    bookings = service.list_bookings(status)
    return ApiResponse(data=[BookingOut.model_validate(b) for b in bookings])


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("/", response_model=ApiResponse[BookingOut], status_code=201)
def create_booking(
    data: BookingCreate,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = service.create_booking(
        actor,
        room_id=data.room_id,
        customer_id=data.customer_id,
        booking_type=data.type,
        start_time=data.start_time,
        end_time=data.end_time,
    )
    return ApiResponse(data=BookingOut.model_validate(booking))


# ---------------------------------------------------------------------
# SINGLE BOOKING
# ---------------------------------------------------------------------
@router.get("/{booking_id}", response_model=ApiResponse[BookingOut])
def get_booking(
    booking_id: int,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    return ApiResponse(data=BookingOut.model_validate(service.get_booking(booking_id)))


# ---------------------------------------------------------------------
# ADD DRINK TO BOOKING
# ---------------------------------------------------------------------
@router.post("/{booking_id}/drinks", response_model=ApiResponse[DrinkOrderOut], status_code=201)
def add_drink_order(
    booking_id: int,
    data: DrinkOrderCreate,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    order = service.add_drink_order(actor, booking_id, data.drink_id, data.quantity)
    return ApiResponse(data=DrinkOrderOut.model_validate(order))


# ---------------------------------------------------------------------
# END BOOKING
# ---------------------------------------------------------------------
@router.post("/{booking_id}/end", response_model=ApiResponse[BookingOut])
def end_booking(
    booking_id: int,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = service.end_booking(actor, booking_id)
    return ApiResponse(data=BookingOut.model_validate(booking))
