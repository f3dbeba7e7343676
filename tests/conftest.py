"""
Shared fixtures: a controllable clock, an in-memory repository with a
small catalog, and a throwaway SQLite database per test.
"""
import os
import tempfile
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

# Must be set before anything under letsgo is imported.
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "letsgo-test-logs"))
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from sqlalchemy.orm import sessionmaker

from letsgo.core.security import hash_password
from letsgo.db.session import Base, create_db_engine
from letsgo.models.enums import UserRole
from letsgo.models.registry import Customer, Drink, Room, User
from letsgo.repositories.memory import InMemoryBookingRepository
from letsgo.services.booking_service import BookingService
from letsgo.services.report_service import ReportService

T0 = datetime(2026, 10, 19, 9, 0)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now

    def advance(self, minutes: float) -> None:
        self.now += timedelta(minutes=minutes)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(T0)


# ---------------------------------------------------------------------
# In-memory repository
# ---------------------------------------------------------------------
@pytest.fixture
def repo() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def actor(repo):
    return repo.add_user("Front Desk", "desk@letsgo.com", UserRole.EMPLOYEE.value)


@pytest.fixture
def room(repo):
    return repo.add_room("Private Office", "100")


@pytest.fixture
def cheap_room(repo):
    return repo.add_room("Coworking Hall", "50")


@pytest.fixture
def customer(repo):
    return repo.add_customer("Sara Khaled", "01098765432")


@pytest.fixture
def coffee(repo):
    return repo.add_drink("Arabic Coffee", "15")


@pytest.fixture
def juice(repo):
    return repo.add_drink("Orange Juice", "20")


@pytest.fixture
def service(repo, clock) -> BookingService:
    return BookingService(repo, clock=clock)


@pytest.fixture
def report_service(repo, clock) -> ReportService:
    return ReportService(repo, clock=clock)


# ---------------------------------------------------------------------
# SQLite database
# ---------------------------------------------------------------------
@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'letsgo-test.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def seeded(session_factory) -> dict:
    """Ids of one staff member, two rooms, one customer and two drinks."""
    db = session_factory()
    try:
        user = User(
            name="Front Desk",
            email="desk@letsgo.com",
            password_hash=hash_password("desk-pass"),
            role=UserRole.EMPLOYEE.value,
        )
        office = Room(name="Private Office", hourly_rate=Decimal("100"))
        hall = Room(name="Coworking Hall", hourly_rate=Decimal("50"))
        customer = Customer(name="Sara Khaled", phone="01098765432")
        coffee = Drink(name="Arabic Coffee", price=Decimal("15"))
        juice = Drink(name="Orange Juice", price=Decimal("20"))
        db.add_all([user, office, hall, customer, coffee, juice])
        db.commit()
        return {
            "user_id": user.id,
            "room_id": office.id,
            "cheap_room_id": hall.id,
            "customer_id": customer.id,
            "coffee_id": coffee.id,
            "juice_id": juice.id,
        }
    finally:
        db.close()
