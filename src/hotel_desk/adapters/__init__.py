from .base import ReservationAdapter
from .memory_adapter import InMemoryReservationAdapter

__all__ = [
    "ReservationAdapter",
    "InMemoryReservationAdapter",
]
