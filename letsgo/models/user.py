from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from letsgo.db.session import Base
from letsgo.models.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.EMPLOYEE.value)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Bookings opened by this staff member
    bookings = relationship("Booking", back_populates="user")
