from __future__ import annotations
from dataclasses import dataclass, field

from hotel_desk.models.guest import Guest
from hotel_desk.models.room import Room


@dataclass(frozen=True)
class Reservation:
    """
    A guest's booking of one room between two dates.

    The room is recorded by its number; availability is only ever tracked on
    the registry's own ``Room``. ``room_type`` is kept for display since a
    room's type never changes. Two reservations are equal when their IDs match.
    """

    reservation_id: str
    guest: Guest = field(compare=False)
    room_number: str = field(compare=False)
    room_type: str = field(compare=False)
    check_in_date: str = field(compare=False)   # YYYY-MM-DD, doğrulanmaz
    check_out_date: str = field(compare=False)

    @classmethod
    def for_room(
        cls,
        reservation_id: str,
        guest: Guest,
        room: Room,
        check_in_date: str,
        check_out_date: str,
    ) -> Reservation:
        """Builds a reservation pointing at ``room`` by number."""
        return cls(
            reservation_id=reservation_id,
            guest=guest,
            room_number=room.room_number,
            room_type=room.room_type,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )

    # ------------------------------------
    # Metodlar
    # ------------------------------------

    def confirm(self) -> str:
        return (
            f"Reservation confirmed for {self.guest.name} in room {self.room_number} "
            f"({self.room_type}) from {self.check_in_date} to {self.check_out_date}"
        )

    def cancel(self) -> str:
        return f"Reservation cancelled for {self.guest.name}"
