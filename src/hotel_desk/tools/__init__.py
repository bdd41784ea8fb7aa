from __future__ import annotations
from typing import Callable, Optional

from hotel_desk.config import get_config
from hotel_desk.services import ReservationRegistry

# Global registry instance
_registry: Optional[ReservationRegistry] = None


# ------------------------------------
# Arayüz Utility'leri
# ------------------------------------
def tool(func: Callable) -> Callable:
    """
    Marks a function as an operator-facing tool.

    Tools take plain strings and always return display text; the console
    channel only ever calls functions carrying this marker.
    """
    func._is_tool = True
    return func


def get_registry() -> ReservationRegistry:
    """
    Get or create the global registry.

    The adapter comes from ``config.create_adapter()`` and the config's seed
    rooms are added on first use.
    """
    global _registry
    if _registry is None:
        config = get_config()
        registry = ReservationRegistry(config.create_adapter())
        config.seed_registry(registry)
        _registry = registry
    return _registry


def set_registry(registry: Optional[ReservationRegistry]) -> None:
    """Set a custom registry instance (useful for testing)."""
    global _registry
    _registry = registry


# ------------------------------------
# Tool Fonksiyonlarını İçeri Aktar
# ------------------------------------
from .reservation_tools import (
    validate_contact,
    check_room,
    book_room,
    cancel_reservation,
    list_reservations,
)
from .room_tools import list_available_rooms


__all__ = [
    # Utilities
    "tool",
    "get_registry",
    "set_registry",

    # Reservation tools
    "validate_contact",
    "check_room",
    "book_room",
    "cancel_reservation",
    "list_reservations",

    # Room tools
    "list_available_rooms",
]
