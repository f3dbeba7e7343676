from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from letsgo.schemas.common import LocalDateTime, Money
from letsgo.schemas.customer import CustomerOut
from letsgo.schemas.drink import DrinkOut
from letsgo.schemas.room import RoomOut
from letsgo.schemas.user import ActorOut


class BookingCreate(BaseModel):
    # Presence is checked by the booking service so it can answer with
    # a readable message.
    room_id: Optional[int] = None
    customer_id: Optional[int] = None
    type: Optional[str] = None
    start_time: Optional[LocalDateTime] = None
    end_time: Optional[LocalDateTime] = None


class DrinkOrderCreate(BaseModel):
    drink_id: Optional[int] = None
    quantity: Optional[int] = None


class DrinkOrderOut(BaseModel):
    id: int
    quantity: int
    total_price: Money
    booking_id: int
    drink: Optional[DrinkOut] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BookingSummaryOut(BaseModel):
    id: int
    type: str
    start_time: datetime
    end_time: Optional[datetime] = None
    room_cost: Money
    drinks_cost: Money
    total_cost: Money
    status: str
    room: Optional[RoomOut] = None
    customer: Optional[CustomerOut] = None

    model_config = {"from_attributes": True}


class BookingOut(BookingSummaryOut):
    user: Optional[ActorOut] = None
    drink_orders: List[DrinkOrderOut] = []
    created_at: Optional[datetime] = None
