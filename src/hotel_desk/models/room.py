from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Room:
    """Hotel room with an availability flag."""

    # Zorunlu Alanlar
    room_number: str
    room_type: str  # Örn: "Single", "Double"

    is_available: bool = field(default=True)

    # ------------------------------------
    # Metodlar
    # ------------------------------------

    def book(self) -> None:
        """Marks the room as booked. Calling it twice leaves it booked."""
        self.is_available = False

    def vacate(self) -> None:
        """Marks the room as available again."""
        self.is_available = True

    def check_availability(self) -> bool:
        return self.is_available
