from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from letsgo.db.session import Base
from letsgo.models.types import Money


class DrinkOrder(Base):
    __tablename__ = "drink_orders"

    id = Column(Integer, primary_key=True, index=True)
    quantity = Column(Integer, nullable=False)

    # quantity x the drink price at the time of the order
    total_price = Column(Money, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    booking_id = Column(
        Integer, ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    drink_id = Column(Integer, ForeignKey("drinks.id"), nullable=False)

    booking = relationship("Booking", back_populates="drink_orders")
    drink = relationship("Drink")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_drink_order_quantity_positive"),
    )
