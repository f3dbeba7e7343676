from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

ZERO = Decimal("0")
CENT = Decimal("0.01")

_MICROSECONDS_PER_MINUTE = Decimal(60 * 1_000_000)


def to_decimal(value) -> Decimal:
    """Coerce ints, floats and strings to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    return Decimal(str(value))


def elapsed_minutes(start: datetime, end: datetime) -> Decimal:
    """Exact minutes between two datetimes, never negative."""
    microseconds = (end - start) // timedelta(microseconds=1)
    return max(Decimal(microseconds) / _MICROSECONDS_PER_MINUTE, ZERO)


def calculate_room_cost(start: datetime, end: datetime, hourly_rate) -> Decimal:
    """Room time billed proportionally: (minutes / 60) x hourly rate."""
    # Multiply before dividing so whole-minute bookings stay exact.
    return elapsed_minutes(start, end) * to_decimal(hourly_rate) / 60


def line_total(unit_price, quantity: int) -> Decimal:
    return to_decimal(unit_price) * quantity


def sum_drink_orders(orders) -> Decimal:
    """Resum a booking's drinks cost from the orders that exist right now."""
    return sum((to_decimal(order.total_price) for order in orders), ZERO)


def round_money(value) -> Decimal:
    """Round to cents, for presentation only."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
