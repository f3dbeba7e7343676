from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from letsgo.db.session import Base
from letsgo.models.enums import RoomStatus
from letsgo.models.types import Money


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    hourly_rate = Column(Money, nullable=False, default=0)

    # available | occupied, flipped only by the booking lifecycle
    status = Column(String, nullable=False, default=RoomStatus.AVAILABLE.value, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    bookings = relationship("Booking", back_populates="room")

    __table_args__ = (
        CheckConstraint("hourly_rate >= 0", name="check_room_hourly_rate_non_negative"),
        CheckConstraint("status IN ('available', 'occupied')", name="check_room_status"),
    )
