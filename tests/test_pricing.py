from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

from letsgo.utils.pricing import (
    calculate_room_cost,
    elapsed_minutes,
    line_total,
    round_money,
    sum_drink_orders,
    to_decimal,
)

START = datetime(2026, 10, 19, 9, 0)


def test_partial_hours_are_billed_proportionally():
    assert calculate_room_cost(START, START + timedelta(minutes=90), "100") == Decimal("150")
    assert calculate_room_cost(START, START + timedelta(minutes=20), Decimal("60")) == Decimal("20")


def test_zero_elapsed_time_costs_nothing():
    assert calculate_room_cost(START, START, Decimal("100")) == 0


def test_end_before_start_is_not_negative():
    assert elapsed_minutes(START, START - timedelta(minutes=5)) == 0
    assert calculate_room_cost(START, START - timedelta(hours=1), 100) == 0


def test_elapsed_minutes_keeps_seconds():
    assert elapsed_minutes(START, START + timedelta(minutes=1, seconds=30)) == Decimal("1.5")


def test_line_total_uses_decimal_prices():
    assert line_total(Decimal("15"), 2) == Decimal("30")
    assert line_total(0.1, 3) == Decimal("0.3")


def test_resum_adds_up_current_orders():
    orders = [SimpleNamespace(total_price=Decimal("30")), SimpleNamespace(total_price=Decimal("20"))]
    assert sum_drink_orders(orders) == Decimal("50")
    assert sum_drink_orders([]) == 0


def test_repeated_resumming_does_not_drift():
    orders = [SimpleNamespace(total_price=Decimal("0.1")) for _ in range(10)]
    assert sum_drink_orders(orders) == Decimal("1.0")


def test_to_decimal_avoids_binary_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) == 0


def test_round_money_rounds_half_up_to_cents():
    assert round_money(Decimal("33.333333")) == Decimal("33.33")
    assert round_money(Decimal("0.005")) == Decimal("0.01")
