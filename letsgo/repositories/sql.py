from contextlib import contextmanager
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from letsgo.models.registry import Booking, Customer, Drink, DrinkOrder, Room, User
from letsgo.models.enums import BookingStatus, RoomStatus
from letsgo.repositories.base import BookingRepository


def _booking_query(db: Session):
    return db.query(Booking).options(
        joinedload(Booking.room),
        joinedload(Booking.customer),
        joinedload(Booking.user),
        selectinload(Booking.drink_orders).joinedload(DrinkOrder.drink),
    )


class SqlAlchemyBookingRepository(BookingRepository):
    """Repository over one SQLAlchemy session (one request)."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def atomic(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # ---------------------------------------------------------------------
    # LOOKUPS
    # ---------------------------------------------------------------------
    def get_room(self, room_id: int):
        return self.db.query(Room).filter(Room.id == room_id).first()

    def get_customer(self, customer_id: int):
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def get_drink(self, drink_id: int):
        return self.db.query(Drink).filter(Drink.id == drink_id).first()

    def get_user(self, user_id: int):
        return self.db.query(User).filter(User.id == user_id).first()

    def get_booking(self, booking_id: int, for_update: bool = False):
        if for_update:
            # A no-op write takes the row lock on PostgreSQL and the database
            # write lock on SQLite, which ignores FOR UPDATE. The status read
            # below therefore happens under the lock.
            locked = (
                self.db.query(Booking)
                .filter(Booking.id == booking_id)
                .update({Booking.status: Booking.status}, synchronize_session=False)
            )
            if locked == 0:
                return None

        return (
            _booking_query(self.db)
            .filter(Booking.id == booking_id)
            .populate_existing()
            .first()
        )

    def get_drink_order(self, order_id: int):
        return (
            self.db.query(DrinkOrder)
            .options(joinedload(DrinkOrder.booking), joinedload(DrinkOrder.drink))
            .filter(DrinkOrder.id == order_id)
            .first()
        )

    def list_bookings(self, status: Optional[str] = None):
        query = _booking_query(self.db)
        if status:
            query = query.filter(Booking.status == status)
        return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def list_drink_orders(self, booking_id: int):
        return (
            self.db.query(DrinkOrder)
            .filter(DrinkOrder.booking_id == booking_id)
            .order_by(DrinkOrder.id)
            .all()
        )

    # ---------------------------------------------------------------------
    # ROOM AVAILABILITY GUARD
    # ---------------------------------------------------------------------
    def reserve_room(self, room_id: int) -> bool:
        updated = (
            self.db.query(Room)
            .filter(Room.id == room_id, Room.status == RoomStatus.AVAILABLE.value)
            .update({Room.status: RoomStatus.OCCUPIED.value}, synchronize_session="evaluate")
        )
        return updated == 1

    def release_room(self, room_id: int) -> None:
        (
            self.db.query(Room)
            .filter(Room.id == room_id)
            .update({Room.status: RoomStatus.AVAILABLE.value}, synchronize_session="evaluate")
        )

    # ---------------------------------------------------------------------
    # WRITES
    # ---------------------------------------------------------------------
    def add_booking(self, **fields):
        booking = Booking(**fields)
        self.db.add(booking)
        self.db.flush()
        return booking

    def update_booking(self, booking_id: int, **fields) -> None:
        booking = self.db.get(Booking, booking_id)
        for name, value in fields.items():
            setattr(booking, name, value)
        self.db.flush()

    def set_drinks_cost(self, booking_id: int, drinks_cost) -> None:
        (
            self.db.query(Booking)
            .filter(Booking.id == booking_id)
            .update(
                {
                    Booking.drinks_cost: drinks_cost,
                    Booking.total_cost: Booking.room_cost + drinks_cost,
                },
                synchronize_session=False,
            )
        )
        # total_cost is computed by the database
        self.db.expire_all()

    def add_drink_order(self, **fields):
        order = DrinkOrder(**fields)
        self.db.add(order)
        self.db.flush()
        return order

    def delete_drink_order(self, order_id: int) -> None:
        self.db.query(DrinkOrder).filter(DrinkOrder.id == order_id).delete(
            synchronize_session="evaluate"
        )
        self.db.flush()

    # ---------------------------------------------------------------------
    # REPORT QUERIES
    # ---------------------------------------------------------------------
    def count_rooms(self, status: str) -> int:
        return self.db.query(Room).filter(Room.status == status).count()

    def count_bookings(self, status: str) -> int:
        return self.db.query(Booking).filter(Booking.status == status).count()

    def list_completed_between(self, start: datetime, end: datetime):
        return (
            self.db.query(Booking)
            .options(joinedload(Booking.room), joinedload(Booking.customer))
            .filter(
                Booking.status == BookingStatus.COMPLETED.value,
                Booking.end_time >= start,
                Booking.end_time < end,
            )
            .order_by(Booking.end_time)
            .all()
        )

    def count_customers(self) -> int:
        return self.db.query(Customer).count()
