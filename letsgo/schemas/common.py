from datetime import datetime
from decimal import Decimal
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, PlainSerializer

from letsgo.utils.pricing import round_money

T = TypeVar("T")


def _present_money(value: Decimal) -> float:
    return float(round_money(value))


def _to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    # Stored times are naive local server time.
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


# Decimal internally, cents in JSON
Money = Annotated[Decimal, PlainSerializer(_present_money, return_type=float, when_used="json")]

LocalDateTime = Annotated[datetime, AfterValidator(_to_local_naive)]


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
