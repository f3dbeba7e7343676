from datetime import date
from typing import List

from pydantic import BaseModel

from letsgo.schemas.booking import BookingSummaryOut
from letsgo.schemas.common import Money


class DailyStats(BaseModel):
    active_bookings: int
    available_rooms: int
    occupied_rooms: int
    today_income: Money
    total_customers: int


class DailyReportOut(BaseModel):
    report_date: date
    stats: DailyStats
    today_bookings: List[BookingSummaryOut] = []
