from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from letsgo.db.session import Base
from letsgo.models.enums import BookingStatus
from letsgo.models.types import Money


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False)  # open | fixed

    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)

    # total_cost is always room_cost + drinks_cost
    room_cost = Column(Money, nullable=False, default=0)
    drinks_cost = Column(Money, nullable=False, default=0)
    total_cost = Column(Money, nullable=False, default=0)

    status = Column(String, nullable=False, default=BookingStatus.ACTIVE.value, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    room = relationship("Room", back_populates="bookings")
    customer = relationship("Customer", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
    drink_orders = relationship(
        "DrinkOrder",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="DrinkOrder.id",
    )

    __table_args__ = (
        CheckConstraint("type IN ('open', 'fixed')", name="check_booking_type"),
        CheckConstraint("status IN ('active', 'completed')", name="check_booking_status"),
    )
