from fastapi import APIRouter, Depends

from letsgo.core.dependencies import get_booking_service, require_actor
from letsgo.models.user import User
from letsgo.schemas.common import ApiResponse
from letsgo.services.booking_service import BookingService

router = APIRouter(prefix="/drink-orders", tags=["Drink Orders"])


@router.delete("/{order_id}", response_model=ApiResponse[None])
def remove_drink_order(
    order_id: int,
    actor: User = Depends(require_actor),
    service: BookingService = Depends(get_booking_service),
):
    service.remove_drink_order(actor, order_id)
    return ApiResponse()
