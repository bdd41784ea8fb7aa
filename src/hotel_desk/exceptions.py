"""Custom exceptions for Hotel Desk."""
from __future__ import annotations


class HotelDeskError(Exception):
    """Base exception for all Hotel Desk errors."""
    pass


class ConfigurationError(HotelDeskError):
    """Raised when configuration is invalid or missing."""
    pass


class RoomError(HotelDeskError):
    """Raised when room-specific domain errors occur."""
    pass


class DuplicateRoomError(RoomError):
    """Raised when a room number is already registered."""
    pass


class RoomNotFoundError(RoomError):
    """Raised when no room exists for the given room number."""
    pass


class RoomUnavailableError(RoomError):
    """Raised when the requested room does not exist or is already booked."""
    pass


class ReservationError(HotelDeskError):
    """Raised when reservation-specific domain errors occur."""
    pass


class InvalidContactError(ReservationError):
    """Raised when guest contact info is not exactly 10 digits."""
    pass


class ReservationNotFoundError(ReservationError):
    """Raised when no active reservation matches the given ID."""
    pass
