from abc import ABC, abstractmethod
from datetime import datetime
from typing import ContextManager, List, Optional


class BookingRepository(ABC):
    """Persistence operations the booking lifecycle and reports rely on.

    Bookings are returned with ``room``, ``customer``, ``user`` and
    ``drink_orders`` (each with its ``drink``) populated. Drink orders are
    returned with ``booking`` and ``drink`` populated.
    """

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Commit everything written inside the block, or nothing."""
        raise NotImplementedError

    # ---- lookups -------------------------------------------------------

    @abstractmethod
    def get_room(self, room_id: int):
        raise NotImplementedError

    @abstractmethod
    def get_customer(self, customer_id: int):
        raise NotImplementedError

    @abstractmethod
    def get_drink(self, drink_id: int):
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: int):
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: int, for_update: bool = False):
        """Fetch a booking; ``for_update`` locks the row until the transaction ends.

        With ``for_update`` the lock is taken before the row is read, so the
        returned status cannot change until the transaction ends.
        """
        raise NotImplementedError

    @abstractmethod
    def get_drink_order(self, order_id: int):
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self, status: Optional[str] = None) -> List:
        """Bookings, newest first, optionally filtered by status."""
        raise NotImplementedError

    @abstractmethod
    def list_drink_orders(self, booking_id: int) -> List:
        raise NotImplementedError

    # ---- room availability guard ---------------------------------------

    @abstractmethod
    def reserve_room(self, room_id: int) -> bool:
        """Flip the room from available to occupied in one conditional write.

        Returns False when the room is missing or already occupied.
        """
        raise NotImplementedError

    @abstractmethod
    def release_room(self, room_id: int) -> None:
        raise NotImplementedError

    # ---- writes --------------------------------------------------------

    @abstractmethod
    def add_booking(self, **fields):
        raise NotImplementedError

    @abstractmethod
    def update_booking(self, booking_id: int, **fields) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_drinks_cost(self, booking_id: int, drinks_cost) -> None:
        """Store ``drinks_cost`` and set ``total_cost`` from the stored room cost."""
        raise NotImplementedError

    @abstractmethod
    def add_drink_order(self, **fields):
        raise NotImplementedError

    @abstractmethod
    def delete_drink_order(self, order_id: int) -> None:
        raise NotImplementedError

    # ---- report queries ------------------------------------------------

    @abstractmethod
    def count_rooms(self, status: str) -> int:
        raise NotImplementedError

    @abstractmethod
    def count_bookings(self, status: str) -> int:
        raise NotImplementedError

    @abstractmethod
    def list_completed_between(self, start: datetime, end: datetime) -> List:
        """Completed bookings whose end time falls in ``[start, end)``."""
        raise NotImplementedError

    @abstractmethod
    def count_customers(self) -> int:
        raise NotImplementedError
