import copy
import itertools
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from letsgo.models.enums import BookingStatus, RoomStatus, UserRole
from letsgo.repositories.base import BookingRepository
from letsgo.utils.pricing import ZERO


@dataclass
class RoomRecord:
    id: int
    name: str
    hourly_rate: Decimal
    status: str = RoomStatus.AVAILABLE.value
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class CustomerRecord:
    id: int
    name: str
    phone: str
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class DrinkRecord:
    id: int
    name: str
    price: Decimal
    is_available: bool = True


@dataclass
class UserRecord:
    id: int
    name: str
    email: str
    role: str = UserRole.EMPLOYEE.value


@dataclass
class DrinkOrderRecord:
    id: int
    quantity: int
    total_price: Decimal
    booking_id: int
    drink_id: int
    created_at: datetime = field(default_factory=datetime.now)
    booking: Optional["BookingRecord"] = None
    drink: Optional[DrinkRecord] = None


@dataclass
class BookingRecord:
    id: int
    type: str
    start_time: datetime
    room_id: int
    customer_id: int
    user_id: int
    end_time: Optional[datetime] = None
    room_cost: Decimal = ZERO
    drinks_cost: Decimal = ZERO
    total_cost: Decimal = ZERO
    status: str = BookingStatus.ACTIVE.value
    created_at: datetime = field(default_factory=datetime.now)
    room: Optional[RoomRecord] = None
    customer: Optional[CustomerRecord] = None
    user: Optional[UserRecord] = None
    drink_orders: List[DrinkOrderRecord] = field(default_factory=list)


class InMemoryBookingRepository(BookingRepository):
    """Dictionary-backed repository.

    ``atomic`` blocks are serialized with a re-entrant lock and roll the
    tables back to their snapshot when the block raises. Reads hand out
    copies, so callers never mutate stored rows directly.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._depth = 0
        self._ids = itertools.count(1)
        self._rooms: Dict[int, RoomRecord] = {}
        self._customers: Dict[int, CustomerRecord] = {}
        self._drinks: Dict[int, DrinkRecord] = {}
        self._users: Dict[int, UserRecord] = {}
        self._bookings: Dict[int, BookingRecord] = {}
        self._drink_orders: Dict[int, DrinkOrderRecord] = {}

    def _tables(self):
        return (
            self._rooms,
            self._customers,
            self._drinks,
            self._users,
            self._bookings,
            self._drink_orders,
        )

    @contextmanager
    def atomic(self):
        with self._lock:
            snapshot = copy.deepcopy(self._tables()) if self._depth == 0 else None
            self._depth += 1
            try:
                yield
            except Exception:
                if snapshot is not None:
                    for table, saved in zip(self._tables(), snapshot):
                        table.clear()
                        table.update(saved)
                raise
            finally:
                self._depth -= 1

    # ---- seeding helpers, used by tests and fixtures --------------------

    def add_room(self, name: str, hourly_rate, status: str = RoomStatus.AVAILABLE.value):
        with self._lock:
            room = RoomRecord(next(self._ids), name, Decimal(str(hourly_rate)), status)
            self._rooms[room.id] = room
            return replace(room)

    def add_customer(self, name: str, phone: str, notes: Optional[str] = None):
        with self._lock:
            customer = CustomerRecord(next(self._ids), name, phone, notes)
            self._customers[customer.id] = customer
            return replace(customer)

    def add_drink(self, name: str, price, is_available: bool = True):
        with self._lock:
            drink = DrinkRecord(next(self._ids), name, Decimal(str(price)), is_available)
            self._drinks[drink.id] = drink
            return replace(drink)

    def add_user(self, name: str, email: str, role: str = UserRole.EMPLOYEE.value):
        with self._lock:
            user = UserRecord(next(self._ids), name, email, role)
            self._users[user.id] = user
            return replace(user)

    # ---- lookups --------------------------------------------------------

    def _copy(self, table, key):
        row = table.get(key)
        return replace(row) if row is not None else None

    def get_room(self, room_id: int):
        with self._lock:
            return self._copy(self._rooms, room_id)

    def get_customer(self, customer_id: int):
        with self._lock:
            return self._copy(self._customers, customer_id)

    def get_drink(self, drink_id: int):
        with self._lock:
            return self._copy(self._drinks, drink_id)

    def get_user(self, user_id: int):
        with self._lock:
            return self._copy(self._users, user_id)

    def _orders_of(self, booking_id: int) -> List[DrinkOrderRecord]:
        return [
            replace(order, drink=self._copy(self._drinks, order.drink_id))
            for order in sorted(self._drink_orders.values(), key=lambda o: o.id)
            if order.booking_id == booking_id
        ]

    def _assemble(self, booking: BookingRecord) -> BookingRecord:
        return replace(
            booking,
            room=self._copy(self._rooms, booking.room_id),
            customer=self._copy(self._customers, booking.customer_id),
            user=self._copy(self._users, booking.user_id),
            drink_orders=self._orders_of(booking.id),
        )

    def get_booking(self, booking_id: int, for_update: bool = False):
        # Row locking is covered by the atomic() lock.
        with self._lock:
            booking = self._bookings.get(booking_id)
            return self._assemble(booking) if booking is not None else None

    def get_drink_order(self, order_id: int):
        with self._lock:
            order = self._drink_orders.get(order_id)
            if order is None:
                return None
            return replace(
                order,
                booking=self._copy(self._bookings, order.booking_id),
                drink=self._copy(self._drinks, order.drink_id),
            )

    def list_bookings(self, status: Optional[str] = None):
        with self._lock:
            bookings = [
                b for b in self._bookings.values() if status is None or b.status == status
            ]
            bookings.sort(key=lambda b: (b.created_at, b.id), reverse=True)
            return [self._assemble(b) for b in bookings]

    def list_drink_orders(self, booking_id: int):
        with self._lock:
            return self._orders_of(booking_id)

    # ---- room availability guard ----------------------------------------

    def reserve_room(self, room_id: int) -> bool:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None or room.status != RoomStatus.AVAILABLE.value:
                return False
            room.status = RoomStatus.OCCUPIED.value
            return True

    def release_room(self, room_id: int) -> None:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is not None:
                room.status = RoomStatus.AVAILABLE.value

    # ---- writes ---------------------------------------------------------

    def add_booking(self, **fields):
        with self._lock:
            booking = BookingRecord(id=next(self._ids), **fields)
            self._bookings[booking.id] = booking
            return replace(booking)

    def update_booking(self, booking_id: int, **fields) -> None:
        with self._lock:
            self._bookings[booking_id] = replace(self._bookings[booking_id], **fields)

    def set_drinks_cost(self, booking_id: int, drinks_cost) -> None:
        with self._lock:
            booking = self._bookings[booking_id]
            self._bookings[booking_id] = replace(
                booking, drinks_cost=drinks_cost, total_cost=booking.room_cost + drinks_cost
            )

    def add_drink_order(self, **fields):
        with self._lock:
            order = DrinkOrderRecord(id=next(self._ids), **fields)
            self._drink_orders[order.id] = order
            return replace(order, drink=self._copy(self._drinks, order.drink_id))

    def delete_drink_order(self, order_id: int) -> None:
        with self._lock:
            self._drink_orders.pop(order_id, None)

    # ---- report queries -------------------------------------------------

    def count_rooms(self, status: str) -> int:
        with self._lock:
            return sum(1 for room in self._rooms.values() if room.status == status)

    def count_bookings(self, status: str) -> int:
        with self._lock:
            return sum(1 for b in self._bookings.values() if b.status == status)

    def list_completed_between(self, start: datetime, end: datetime):
        with self._lock:
            bookings = [
                b
                for b in self._bookings.values()
                if b.status == BookingStatus.COMPLETED.value
                and b.end_time is not None
                and start <= b.end_time < end
            ]
            bookings.sort(key=lambda b: b.end_time)
            return [self._assemble(b) for b in bookings]

    def count_customers(self) -> int:
        with self._lock:
            return len(self._customers)
