from datetime import datetime
from typing import Callable, Optional

from letsgo.core.exceptions import Conflict, InvalidInput, InvalidState, NotFound
from letsgo.core.logging_config import get_logger
from letsgo.models.enums import BookingStatus, BookingType
from letsgo.repositories.base import BookingRepository
from letsgo.utils.pricing import (
    ZERO,
    calculate_room_cost,
    line_total,
    sum_drink_orders,
)

logger = get_logger()


class BookingService:
    """Booking lifecycle: open, attach drinks, end and bill.

    Every mutating operation runs inside a single repository transaction.
    The acting staff member is passed in explicitly by the caller.
    """

    def __init__(self, repo: BookingRepository, clock: Callable[[], datetime] = datetime.now):
        self.repo = repo
        self.clock = clock

    # ---------------------------------------------------------------------
    # READS
    # ---------------------------------------------------------------------
    def get_booking(self, booking_id: int):
        booking = self.repo.get_booking(booking_id)
        if booking is None:
            raise NotFound("Booking not found")
        return booking

    def list_bookings(self, status: Optional[str] = None):
        if status in (None, "", "all"):
            return self.repo.list_bookings()
        if status not in {s.value for s in BookingStatus}:
            raise InvalidInput("Unknown booking status filter")
        return self.repo.list_bookings(status)

    # ---------------------------------------------------------------------
    # CREATE
    # ---------------------------------------------------------------------
    def create_booking(
        self,
        actor,
        room_id: Optional[int],
        customer_id: Optional[int],
        booking_type: Optional[str],
        start_time: Optional[datetime],
        end_time: Optional[datetime] = None,
    ):
        if not room_id or not customer_id or not booking_type or start_time is None:
            raise InvalidInput("Booking details are incomplete")

        if booking_type not in {t.value for t in BookingType}:
            raise InvalidInput("Booking type must be 'open' or 'fixed'")

        fixed = booking_type == BookingType.FIXED.value
        if fixed:
            if end_time is None:
                raise InvalidInput("A fixed booking needs an end time")
            if end_time <= start_time:
                raise InvalidInput("End time must be after start time")

        with self.repo.atomic():
            if not self.repo.reserve_room(room_id):
                if self.repo.get_room(room_id) is None:
                    raise NotFound("Room not found")
                raise Conflict("Room is currently occupied")

            if self.repo.get_customer(customer_id) is None:
                raise NotFound("Customer not found")

            room = self.repo.get_room(room_id)
            room_cost = calculate_room_cost(start_time, end_time, room.hourly_rate) if fixed else ZERO

            booking = self.repo.add_booking(
                type=booking_type,
                start_time=start_time,
                end_time=end_time if fixed else None,
                room_cost=room_cost,
                drinks_cost=ZERO,
                total_cost=room_cost,
                status=BookingStatus.ACTIVE.value,
                room_id=room_id,
                customer_id=customer_id,
                user_id=actor.id,
            )
            booking_id = booking.id

        logger.bind(log_type="booking").info(
            f"Booking Created | Booking={booking_id} | Room={room_id} | "
            f"Customer={customer_id} | Type={booking_type} | By={actor.id}"
        )
        return self.repo.get_booking(booking_id)

    # ---------------------------------------------------------------------
    # DRINK ORDERS
    # ---------------------------------------------------------------------
    def add_drink_order(self, actor, booking_id: int, drink_id: Optional[int], quantity: Optional[int]):
        if not drink_id or quantity is None:
            raise InvalidInput("Drink and quantity are required")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidInput("Quantity must be a positive whole number")

        with self.repo.atomic():
            booking = self.repo.get_booking(booking_id, for_update=True)
            if booking is None:
                raise NotFound("Booking not found")
            if booking.status == BookingStatus.COMPLETED.value:
                raise InvalidState("Cannot modify a completed booking")

            drink = self.repo.get_drink(drink_id)
            if drink is None:
                raise NotFound("Drink not found")
            if not drink.is_available:
                raise InvalidInput("Drink is currently unavailable")

            order = self.repo.add_drink_order(
                quantity=quantity,
                total_price=line_total(drink.price, quantity),
                booking_id=booking_id,
                drink_id=drink_id,
            )
            order_id = order.id
            self._resum_drinks(booking_id)

        logger.bind(log_type="booking").info(
            f"Drink Added | Booking={booking_id} | Drink={drink_id} x{quantity} | By={actor.id}"
        )
        return self.repo.get_drink_order(order_id)

    def remove_drink_order(self, actor, order_id: int) -> None:
        with self.repo.atomic():
            order = self.repo.get_drink_order(order_id)
            if order is None:
                raise NotFound("Drink order not found")

            booking_id = order.booking_id
            booking = self.repo.get_booking(booking_id, for_update=True)
            if booking.status == BookingStatus.COMPLETED.value:
                raise InvalidState("Cannot modify a completed booking")
            # Removed by someone else while we waited for the lock
            if self.repo.get_drink_order(order_id) is None:
                raise NotFound("Drink order not found")

            self.repo.delete_drink_order(order_id)
            self._resum_drinks(booking_id)

        logger.bind(log_type="booking").info(
            f"Drink Removed | Booking={booking_id} | Order={order_id} | By={actor.id}"
        )

    def _resum_drinks(self, booking_id: int):
        # Always recomputed from the stored orders, never incremented.
        drinks_cost = sum_drink_orders(self.repo.list_drink_orders(booking_id))
        self.repo.set_drinks_cost(booking_id, drinks_cost)

    # ---------------------------------------------------------------------
    # END
    # ---------------------------------------------------------------------
    def end_booking(self, actor, booking_id: int):
        with self.repo.atomic():
            booking = self.repo.get_booking(booking_id, for_update=True)
            if booking is None:
                raise NotFound("Booking not found")
            if booking.status == BookingStatus.COMPLETED.value:
                raise InvalidState("Booking is already completed")

            # Fixed bookings are re-billed on actual time as well.
            end_time = self.clock()
            room_cost = calculate_room_cost(booking.start_time, end_time, booking.room.hourly_rate)
            drinks_cost = sum_drink_orders(self.repo.list_drink_orders(booking_id))

            self.repo.update_booking(
                booking_id,
                end_time=end_time,
                room_cost=room_cost,
                drinks_cost=drinks_cost,
                total_cost=room_cost + drinks_cost,
                status=BookingStatus.COMPLETED.value,
            )
            room_id = booking.room_id
            self.repo.release_room(room_id)

        logger.bind(log_type="booking").info(
            f"Booking Ended | Booking={booking_id} | Room={room_id} | "
            f"Total={room_cost + drinks_cost} | By={actor.id}"
        )
        return self.repo.get_booking(booking_id)
