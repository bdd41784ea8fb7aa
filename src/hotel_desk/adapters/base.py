from __future__ import annotations

from typing import Protocol, runtime_checkable, Optional, List

from hotel_desk.models import Room, Reservation


@runtime_checkable
class ReservationAdapter(Protocol):
    # lifecycle
    def init(self) -> None: ...

    # rooms
    def add_room(self, room: Room) -> Room: ...
    def get_room(self, room_number: str) -> Optional[Room]: ...
    def list_rooms(self, only_available: bool = False) -> List[Room]: ...

    # reservations
    def next_reservation_number(self) -> int: ...
    def add_reservation(self, reservation: Reservation) -> Reservation: ...
    def get_reservation(self, reservation_id: str) -> Optional[Reservation]: ...
    def list_reservations(self) -> List[Reservation]: ...
    def delete_reservation(self, reservation_id: str) -> bool: ...
