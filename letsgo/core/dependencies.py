from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from letsgo.db.session import SessionLocal
from letsgo.core.exceptions import Unauthenticated
from letsgo.core.jwt import decode_access_token
from letsgo.models.user import User
from letsgo.repositories.sql import SqlAlchemyBookingRepository
from letsgo.services.booking_service import BookingService
from letsgo.services.report_service import ReportService

# Missing credentials resolve to "no actor" instead of a 403
security = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """Resolve the signed-in staff member from the bearer token, or None"""
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        return None

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None

    return db.query(User).filter(User.id == user_id).first()


def require_actor(actor: Optional[User] = Depends(get_current_actor)) -> User:
    if actor is None:
        raise Unauthenticated()
    return actor


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(SqlAlchemyBookingRepository(db))


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(SqlAlchemyBookingRepository(db))
