from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from hotel_desk.exceptions import DuplicateRoomError, ReservationError
from hotel_desk.models import Room, Reservation

logger = logging.getLogger(__name__)


class InMemoryReservationAdapter:
    """Process-lifetime storage for rooms and reservations.

    Both collections are dicts keyed by room number / reservation ID, so they
    keep insertion order for listings and give direct lookups.
    """

    def __init__(self) -> None:
        self._rooms: Dict[str, Room] = {}
        self._reservations: Dict[str, Reservation] = {}
        self._counter = itertools.count(1)

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def init(self) -> None:
        """Clears all stored data and restarts reservation numbering."""
        self._rooms.clear()
        self._reservations.clear()
        self._counter = itertools.count(1)
        logger.debug("In-memory storage initialised")

    # ---------- Rooms ----------
    def add_room(self, room: Room) -> Room:
        if room.room_number in self._rooms:
            raise DuplicateRoomError(f"Room {room.room_number} already exists")
        self._rooms[room.room_number] = room
        return room

    def get_room(self, room_number: str) -> Optional[Room]:
        return self._rooms.get(room_number)

    def list_rooms(self, only_available: bool = False) -> List[Room]:
        if only_available:
            return [r for r in self._rooms.values() if r.check_availability()]
        return list(self._rooms.values())

    # ---------- Reservations ----------
    def next_reservation_number(self) -> int:
        # Never rewinds on delete, so IDs are not reused within a session
        return next(self._counter)

    def add_reservation(self, reservation: Reservation) -> Reservation:
        if reservation.reservation_id in self._reservations:
            raise ReservationError(f"Reservation {reservation.reservation_id} already exists")
        self._reservations[reservation.reservation_id] = reservation
        return reservation

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self._reservations.get(reservation_id)

    def list_reservations(self) -> List[Reservation]:
        return list(self._reservations.values())

    def delete_reservation(self, reservation_id: str) -> bool:
        return self._reservations.pop(reservation_id, None) is not None
