from __future__ import annotations

import logging
from typing import List, Optional

from hotel_desk.adapters.base import ReservationAdapter
from hotel_desk.exceptions import (
    InvalidContactError,
    ReservationNotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotel_desk.models import Guest, Room, Reservation

logger = logging.getLogger(__name__)

CONTACT_DIGITS = 10
RESERVATION_ID_PREFIX = "R"


def is_valid_contact(contact_info: str) -> bool:
    """True when ``contact_info`` is exactly 10 ASCII digits."""
    return (
        len(contact_info) == CONTACT_DIGITS
        and contact_info.isascii()
        and contact_info.isdigit()
    )


class ReservationRegistry:
    """
    Owns the hotel's rooms and reservations and coordinates their state.

    Every operation here is a pure state transition over the adapter; prompting
    and printing live in the channel layer. Failures raise ``HotelDeskError``
    subclasses and leave state untouched.
    """

    def __init__(self, adapter: ReservationAdapter):
        self.adapter = adapter

    # ------------------------------------
    # Rooms
    # ------------------------------------
    def add_room(self, room: Room) -> Room:
        """
        Registers a room.

        Raises:
            DuplicateRoomError: A room with the same number already exists.
        """
        added = self.adapter.add_room(room)
        logger.info(f"Room {room.room_number} ({room.room_type}) added")
        return added

    def get_room(self, room_number: str) -> Optional[Room]:
        return self.adapter.get_room(room_number)

    def list_rooms(self) -> List[Room]:
        return self.adapter.list_rooms()

    def list_available_rooms(self) -> List[Room]:
        return self.adapter.list_rooms(only_available=True)

    def find_available_room(self, room_number: str) -> Room:
        """
        Returns the room with exactly ``room_number`` if it can be booked.

        Raises:
            RoomUnavailableError: No such room, or it is already booked.
        """
        room = self.adapter.get_room(room_number)
        if room is None or not room.check_availability():
            logger.warning(f"Room {room_number!r} is not available or does not exist")
            raise RoomUnavailableError(f"Room {room_number} is not available or does not exist")
        return room

    # ------------------------------------
    # Reservations
    # ------------------------------------
    def next_reservation_id(self) -> str:
        """Next unused ``R<n>`` ID; numbers already taken by stored reservations are skipped."""
        while True:
            candidate = f"{RESERVATION_ID_PREFIX}{self.adapter.next_reservation_number()}"
            if self.adapter.get_reservation(candidate) is None:
                return candidate

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self.adapter.get_reservation(reservation_id)

    def list_reservations(self) -> List[Reservation]:
        return self.adapter.list_reservations()

    def make_reservation(self, reservation: Reservation) -> Reservation:
        """
        Stores ``reservation`` and marks its room as booked.

        Availability is not re-checked here; callers are expected to pick the
        room through ``find_available_room`` first.

        Raises:
            RoomNotFoundError: The reservation names a room that is not registered.
        """
        room = self.adapter.get_room(reservation.room_number)
        if room is None:
            raise RoomNotFoundError(f"Room {reservation.room_number} does not exist")

        stored = self.adapter.add_reservation(reservation)
        room.book()
        logger.info(
            f"Reservation {reservation.reservation_id} created for room {room.room_number}"
        )
        return stored

    def cancel_reservation(self, reservation_id: str) -> Reservation:
        """
        Removes the reservation and makes its room available again.

        Raises:
            ReservationNotFoundError: No active reservation has this ID.
        """
        reservation = self.adapter.get_reservation(reservation_id)
        if reservation is None:
            logger.warning(f"Cancel requested for unknown reservation {reservation_id!r}")
            raise ReservationNotFoundError(f"Reservation {reservation_id} not found")

        room = self.adapter.get_room(reservation.room_number)
        if room is not None:
            room.vacate()
        self.adapter.delete_reservation(reservation_id)
        logger.info(f"Reservation {reservation_id} cancelled, room {reservation.room_number} vacated")
        return reservation

    def book_room(
        self,
        guest_name: str,
        contact_info: str,
        room_number: str,
        check_in_date: str,
        check_out_date: str,
    ) -> Reservation:
        """
        Validates the booking request and creates the reservation.

        Dates are accepted verbatim.

        Raises:
            InvalidContactError: ``contact_info`` is not exactly 10 digits.
            RoomUnavailableError: The room does not exist or is already booked.
        """
        if not is_valid_contact(contact_info):
            logger.warning(f"Rejected booking for {guest_name!r}: invalid contact info")
            raise InvalidContactError("Contact info must be exactly 10 digits")

        room = self.find_available_room(room_number)
        reservation = Reservation.for_room(
            reservation_id=self.next_reservation_id(),
            guest=Guest(name=guest_name, contact_info=contact_info),
            room=room,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )
        return self.make_reservation(reservation)
