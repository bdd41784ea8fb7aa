"""
Console prompts and messages for the hotel desk.
"""
from __future__ import annotations

from hotel_desk.config import get_config

# Menu
MENU_OPTIONS = (
    "1. Book a Room",
    "2. Cancel a Reservation",
    "3. Display All Reservations",
    "4. Display Available Rooms",
    "5. Exit",
)
CHOICE_PROMPT = "Enter your choice: "

# Booking / cancel prompts
GUEST_NAME_PROMPT = "Enter guest name: "
GUEST_CONTACT_PROMPT = "Enter guest contact info (10 digits only): "
ROOM_NUMBER_PROMPT = "Enter room number: "
CHECK_IN_PROMPT = "Enter check-in date (YYYY-MM-DD): "
CHECK_OUT_PROMPT = "Enter check-out date (YYYY-MM-DD): "
CANCEL_ID_PROMPT = "Enter reservation ID to cancel: "

# Messages
INVALID_CONTACT_MESSAGE = "Invalid phone number. It should be exactly 10 digits."
ROOM_UNAVAILABLE_MESSAGE = "Room is not available or does not exist."
RESERVATION_NOT_FOUND_MESSAGE = "Reservation ID not found."
RESERVATION_FAILED_MESSAGE = "Reservation could not be created. Please try again."
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
GOODBYE_MESSAGE = "Exiting the system. Goodbye!"
ALL_RESERVATIONS_HEADER = "All Reservations:"
AVAILABLE_ROOMS_HEADER = "Available Rooms:"


def get_menu_text() -> str:
    """Return the main menu, titled with the configured hotel name."""
    title = f"{get_config().get_hotel_display_name()} Menu:"
    return "\n".join(("", title) + MENU_OPTIONS)
