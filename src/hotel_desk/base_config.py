"""
Base configuration abstractions for Hotel Desk.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

from hotel_desk.adapters.base import ReservationAdapter
from hotel_desk.models import Room
from hotel_desk.services import ReservationRegistry


class HotelDeskConfig(ABC):
    """Abstract configuration contract for the hotel desk."""

    @abstractmethod
    def get_seed_rooms(self) -> List[Tuple[str, str]]:
        """Return ``(room_number, room_type)`` pairs added at startup."""

    @abstractmethod
    def get_log_level(self) -> str:
        """Return logging level name, e.g. ``"WARNING"``."""

    @abstractmethod
    def create_adapter(self) -> ReservationAdapter:
        """
        Create and return the storage adapter for this hotel.
        Returns:
            ReservationAdapter: Initialized adapter instance
        """

    def get_hotel_display_name(self) -> str:
        """Human friendly hotel label used as the menu title."""
        return "Hotel Management System"

    def seed_registry(self, registry: ReservationRegistry) -> None:
        """Adds the configured seed rooms to ``registry``."""
        for room_number, room_type in self.get_seed_rooms():
            registry.add_room(Room(room_number, room_type))
