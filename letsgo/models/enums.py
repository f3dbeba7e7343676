from enum import Enum


class RoomStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"


class BookingType(str, Enum):
    OPEN = "open"
    FIXED = "fixed"


class BookingStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class UserRole(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"
