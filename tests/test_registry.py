"""
Tests for ReservationRegistry state transitions (no console I/O involved).
"""
import pytest

from hotel_desk.adapters.memory_adapter import InMemoryReservationAdapter
from hotel_desk.exceptions import (
    DuplicateRoomError,
    InvalidContactError,
    ReservationNotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotel_desk.models import Guest, Room, Reservation
from hotel_desk.services import ReservationRegistry, is_valid_contact


@pytest.fixture
def registry():
    adapter = InMemoryReservationAdapter()
    adapter.init()
    reg = ReservationRegistry(adapter)
    reg.add_room(Room("101", "Single"))
    reg.add_room(Room("102", "Double"))
    return reg


def book_alice(registry, room_number="101"):
    return registry.book_room(
        guest_name="Alice",
        contact_info="1234567890",
        room_number=room_number,
        check_in_date="2024-01-01",
        check_out_date="2024-01-05",
    )


def snapshot(registry):
    return (
        [(r.room_number, r.is_available) for r in registry.list_rooms()],
        [r.reservation_id for r in registry.list_reservations()],
    )


# ============================================================================
# Contact validation
# ============================================================================

class TestIsValidContact:

    @pytest.mark.parametrize("contact", ["1234567890", "0000000000", "9876543210"])
    def test_ten_digits_accepted(self, contact):
        assert is_valid_contact(contact) is True

    @pytest.mark.parametrize(
        "contact",
        ["", "12345", "123456789", "12345678901", "12345abcde", "123-456-78", " 123456789", "١٢٣٤٥٦٧٨٩٠"],
    )
    def test_everything_else_rejected(self, contact):
        assert is_valid_contact(contact) is False


# ============================================================================
# Booking
# ============================================================================

class TestBookRoom:

    def test_successful_booking_marks_room_booked(self, registry):
        reservation = book_alice(registry)

        assert reservation.reservation_id == "R1"
        assert reservation.guest == Guest("Alice", "1234567890")
        assert registry.get_room("101").check_availability() is False
        assert registry.list_reservations() == [reservation]

    @pytest.mark.parametrize("contact", ["12345", "123456789012", "12345678ab"])
    def test_invalid_contact_changes_nothing(self, registry, contact):
        before = snapshot(registry)
        with pytest.raises(InvalidContactError):
            registry.book_room("Alice", contact, "101", "2024-01-01", "2024-01-05")
        assert snapshot(registry) == before

    def test_unknown_room_changes_nothing(self, registry):
        before = snapshot(registry)
        with pytest.raises(RoomUnavailableError):
            book_alice(registry, room_number="999")
        assert snapshot(registry) == before

    def test_booked_room_cannot_be_booked_again(self, registry):
        book_alice(registry)
        before = snapshot(registry)
        with pytest.raises(RoomUnavailableError):
            book_alice(registry)
        assert snapshot(registry) == before

    def test_room_number_must_match_exactly(self, registry):
        with pytest.raises(RoomUnavailableError):
            book_alice(registry, room_number=" 101")

    def test_dates_are_not_validated(self, registry):
        reservation = registry.book_room("Bob", "1234567890", "102", "later", "earlier")
        assert reservation.check_in_date == "later"
        assert reservation.check_out_date == "earlier"

    def test_ids_are_sequential(self, registry):
        first = book_alice(registry, "101")
        second = book_alice(registry, "102")
        assert [first.reservation_id, second.reservation_id] == ["R1", "R2"]

    def test_generated_id_skips_ids_already_in_use(self, registry):
        taken = Reservation.for_room("R1", Guest("Bob", "1234567890"), registry.get_room("102"), "a", "b")
        registry.make_reservation(taken)

        reservation = book_alice(registry, "101")

        assert reservation.reservation_id == "R2"
        assert [r.reservation_id for r in registry.list_reservations()] == ["R1", "R2"]

# ============================================================================
# make_reservation
# ============================================================================

class TestMakeReservation:

    def test_books_the_registry_room(self, registry):
        room = registry.get_room("102")
        reservation = Reservation.for_room("R9", Guest("Bob", "1234567890"), room, "a", "b")

        assert registry.make_reservation(reservation) is reservation
        assert room.check_availability() is False

    def test_unknown_room_rejected(self, registry):
        reservation = Reservation(
            reservation_id="R9",
            guest=Guest("Bob", "1234567890"),
            room_number="404",
            room_type="Ghost",
            check_in_date="a",
            check_out_date="b",
        )
        with pytest.raises(RoomNotFoundError):
            registry.make_reservation(reservation)
        assert registry.list_reservations() == []


# ============================================================================
# Cancellation
# ============================================================================

class TestCancelReservation:

    def test_cancel_frees_room_and_removes_reservation(self, registry):
        book_alice(registry)

        cancelled = registry.cancel_reservation("R1")

        assert cancelled.guest.name == "Alice"
        assert registry.list_reservations() == []
        assert registry.get_room("101").check_availability() is True

    def test_cancel_unknown_id_changes_nothing(self, registry):
        book_alice(registry)
        before = snapshot(registry)

        with pytest.raises(ReservationNotFoundError):
            registry.cancel_reservation("R42")
        assert snapshot(registry) == before

    def test_cancel_removes_only_the_matching_reservation(self, registry):
        book_alice(registry, "101")
        book_alice(registry, "102")

        registry.cancel_reservation("R1")

        assert [r.reservation_id for r in registry.list_reservations()] == ["R2"]
        assert registry.get_room("102").check_availability() is False

    def test_ids_are_not_reused_after_cancel(self, registry):
        book_alice(registry, "101")
        registry.cancel_reservation("R1")

        again = book_alice(registry, "101")
        assert again.reservation_id == "R2"


# ============================================================================
# Rooms
# ============================================================================

class TestRooms:

    def test_duplicate_room_rejected(self, registry):
        with pytest.raises(DuplicateRoomError):
            registry.add_room(Room("101", "Suite"))
        assert len(registry.list_rooms()) == 2

    def test_available_rooms_in_insertion_order(self, registry):
        registry.add_room(Room("100", "Suite"))
        book_alice(registry, "102")

        assert [r.room_number for r in registry.list_available_rooms()] == ["101", "100"]


def test_alice_scenario(registry):
    reservation = book_alice(registry)
    assert reservation.reservation_id == "R1"
    assert registry.get_room("101").check_availability() is False
    assert [r.room_number for r in registry.list_available_rooms()] == ["102"]

    registry.cancel_reservation("R1")
    assert registry.get_room("101").check_availability() is True
    assert registry.list_reservations() == []
