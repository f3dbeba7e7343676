from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint
from letsgo.db.session import Base
from letsgo.models.types import Money


class Drink(Base):
    __tablename__ = "drinks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Money, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_drink_price_non_negative"),
    )
