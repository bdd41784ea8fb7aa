from __future__ import annotations
from typing import Optional
import logging

from hotel_desk.tools import tool, get_registry
from hotel_desk.services import is_valid_contact
from hotel_desk.exceptions import (
    InvalidContactError,
    ReservationError,
    ReservationNotFoundError,
    RoomUnavailableError,
)
from hotel_desk.prompts import (
    ALL_RESERVATIONS_HEADER,
    INVALID_CONTACT_MESSAGE,
    RESERVATION_NOT_FOUND_MESSAGE,
    RESERVATION_FAILED_MESSAGE,
    ROOM_UNAVAILABLE_MESSAGE,
)

logger = logging.getLogger(__name__)


# ------------------------------------
# Ön Kontroller
# ------------------------------------

@tool
def validate_contact(contact_info: str) -> Optional[str]:
    """Return an error message if ``contact_info`` is not exactly 10 digits, else None."""
    if not is_valid_contact(contact_info):
        return INVALID_CONTACT_MESSAGE
    return None


@tool
def check_room(room_number: str) -> Optional[str]:
    """Return an error message if the room cannot be booked, else None."""
    try:
        get_registry().find_available_room(room_number)
    except RoomUnavailableError:
        return ROOM_UNAVAILABLE_MESSAGE
    return None


# ------------------------------------
# TOOLS IMPLEMENTATION
# ------------------------------------

@tool
def book_room(
    guest_name: str,
    contact_info: str,
    room_number: str,
    check_in_date: str,
    check_out_date: str,
) -> str:
    """
    Book a room for a guest.

    Args:
        guest_name: Guest full name
        contact_info: Exactly 10 digits
        room_number: Number of an available room
        check_in_date: Check-in date, taken verbatim
        check_out_date: Check-out date, taken verbatim

    Returns:
        Confirmation line, or the error message when the booking is rejected.
    """
    registry = get_registry()

    try:
        reservation = registry.book_room(
            guest_name=guest_name,
            contact_info=contact_info,
            room_number=room_number,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )
    except InvalidContactError:
        return INVALID_CONTACT_MESSAGE
    except RoomUnavailableError:
        return ROOM_UNAVAILABLE_MESSAGE
    except ReservationError as e:
        logger.error(f"Booking for room {room_number!r} failed: {e}")
        return RESERVATION_FAILED_MESSAGE

    return reservation.confirm()


@tool
def cancel_reservation(reservation_id: str) -> str:
    """
    Cancel a reservation by ID (e.g. ``R1``) and free its room.

    Returns:
        Cancellation line, or the not-found message.
    """
    registry = get_registry()

    try:
        reservation = registry.cancel_reservation(reservation_id)
    except ReservationNotFoundError:
        return RESERVATION_NOT_FOUND_MESSAGE

    return reservation.cancel()


@tool
def list_reservations() -> str:
    """
    List all active reservations in booking order.

    Returns:
        Header line followed by one confirmation line per reservation.
    """
    registry = get_registry()

    result = ALL_RESERVATIONS_HEADER
    for reservation in registry.list_reservations():
        result += f"\n{reservation.confirm()}"

    return result
