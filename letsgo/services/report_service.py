from datetime import date, datetime, time, timedelta
from typing import Callable, Optional

from letsgo.models.enums import BookingStatus, RoomStatus
from letsgo.repositories.base import BookingRepository
from letsgo.utils.pricing import ZERO, to_decimal


class ReportService:
    def __init__(self, repo: BookingRepository, clock: Callable[[], datetime] = datetime.now):
        self.repo = repo
        self.clock = clock

    def daily_report(self, today: Optional[date] = None) -> dict:
        """Snapshot of the day, recomputed from current state on every call.

        The day runs from local midnight to the next midnight. Income counts
        bookings completed inside that window.
        """
        day = today or self.clock().date()
        day_start = datetime.combine(day, time.min)
        day_end = day_start + timedelta(days=1)

        today_bookings = self.repo.list_completed_between(day_start, day_end)
        today_income = sum((to_decimal(b.total_cost) for b in today_bookings), ZERO)

        stats = {
            "active_bookings": self.repo.count_bookings(BookingStatus.ACTIVE.value),
            "available_rooms": self.repo.count_rooms(RoomStatus.AVAILABLE.value),
            "occupied_rooms": self.repo.count_rooms(RoomStatus.OCCUPIED.value),
            "today_income": today_income,
            "total_customers": self.repo.count_customers(),
        }

        return {"report_date": day, "stats": stats, "today_bookings": today_bookings}
