from __future__ import annotations

from hotel_desk.tools import tool, get_registry
from hotel_desk.prompts import AVAILABLE_ROOMS_HEADER


@tool
def list_available_rooms() -> str:
    """
    List every room that can currently be booked, in the order rooms were added.

    Returns:
        Header line followed by one ``Room Number: <n> - Type: <t>`` line per room.
    """
    registry = get_registry()

    result = AVAILABLE_ROOMS_HEADER
    for room in registry.list_available_rooms():
        result += f"\nRoom Number: {room.room_number} - Type: {room.room_type}"

    return result
