from .guest import Guest
from .room import Room
from .reservation import Reservation

__all__ = [
    "Guest",
    "Room",
    "Reservation",
]
