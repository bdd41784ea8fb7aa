from .registry import ReservationRegistry, is_valid_contact

__all__ = [
    "ReservationRegistry",
    "is_valid_contact",
]
