"""Demo data: two staff accounts, rooms, drinks and customers.

Run with ``python -m letsgo.db.seed``. Each group is only created when its
table is empty, so running it twice is harmless.
"""
from decimal import Decimal

from sqlalchemy.orm import Session

from letsgo.core.logging_config import get_logger
from letsgo.core.security import hash_password
from letsgo.db.session import SessionLocal
from letsgo.models.enums import RoomStatus, UserRole
from letsgo.models.registry import Customer, Drink, Room, User

logger = get_logger()

STAFF = [
    ("System Admin", "admin@letsgo.com", "admin123", UserRole.ADMIN),
    ("Front Desk", "employee@letsgo.com", "employee123", UserRole.EMPLOYEE),
]

ROOMS = [
    ("Main Meeting Room", "150"),
    ("Coworking Hall", "50"),
    ("Private Office 1", "100"),
    ("Private Office 2", "100"),
    ("Training Hall", "200"),
]

DRINKS = [
    ("Arabic Coffee", "15"),
    ("Turkish Coffee", "20"),
    ("Tea", "10"),
    ("Instant Coffee", "15"),
    ("Cappuccino", "25"),
    ("Latte", "25"),
    ("Orange Juice", "20"),
    ("Mineral Water", "5"),
]

CUSTOMERS = [
    ("Mohamed Ahmed", "01012345678", "Regular customer"),
    ("Sara Khaled", "01098765432", None),
    ("Ahmed Ali", "01234567890", "Tech company"),
]


def seed_demo_data(db: Session) -> dict:
    created = {"users": 0, "rooms": 0, "drinks": 0, "customers": 0}

    for name, email, password, role in STAFF:
        if not db.query(User).filter(User.email == email).first():
            db.add(User(name=name, email=email, password_hash=hash_password(password), role=role.value))
            created["users"] += 1

    if db.query(Room).count() == 0:
        for name, rate in ROOMS:
            db.add(Room(name=name, hourly_rate=Decimal(rate), status=RoomStatus.AVAILABLE.value))
            created["rooms"] += 1

    if db.query(Drink).count() == 0:
        for name, price in DRINKS:
            db.add(Drink(name=name, price=Decimal(price), is_available=True))
            created["drinks"] += 1

    if db.query(Customer).count() == 0:
        for name, phone, notes in CUSTOMERS:
            db.add(Customer(name=name, phone=phone, notes=notes))
            created["customers"] += 1

    db.commit()
    logger.bind(log_type="admin").info(f"Seeded demo data | {created}")
    return created


if __name__ == "__main__":
    session = SessionLocal()
    try:
        print(seed_demo_data(session))
    finally:
        session.close()
