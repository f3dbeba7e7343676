# Importing this module registers every mapped class on Base.metadata.
from letsgo.models.user import User
from letsgo.models.room import Room
from letsgo.models.customer import Customer
from letsgo.models.drink import Drink
from letsgo.models.booking import Booking
from letsgo.models.drink_order import DrinkOrder

__all__ = ["User", "Room", "Customer", "Drink", "Booking", "DrinkOrder"]
