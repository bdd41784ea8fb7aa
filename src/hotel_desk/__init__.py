"""Hotel Desk - In-memory hotel room and reservation tracker"""

__version__ = "0.1.0"

# Core abstractions
from hotel_desk.base_config import HotelDeskConfig
from hotel_desk.exceptions import (
    HotelDeskError,
    ConfigurationError,
    RoomError,
    DuplicateRoomError,
    RoomNotFoundError,
    RoomUnavailableError,
    ReservationError,
    InvalidContactError,
    ReservationNotFoundError,
)

# Models
from hotel_desk.models import Guest, Room, Reservation

# Config management
from hotel_desk.config import get_config, set_config

# Adapters
from hotel_desk.adapters.base import ReservationAdapter
from hotel_desk.adapters.memory_adapter import InMemoryReservationAdapter

# Services
from hotel_desk.services import ReservationRegistry

# Tools
from hotel_desk.tools import get_registry, set_registry

__all__ = [
    # Version
    "__version__",

    # Core
    "HotelDeskConfig",

    # Exceptions
    "HotelDeskError",
    "ConfigurationError",
    "RoomError",
    "DuplicateRoomError",
    "RoomNotFoundError",
    "RoomUnavailableError",
    "ReservationError",
    "InvalidContactError",
    "ReservationNotFoundError",

    # Models
    "Guest",
    "Room",
    "Reservation",

    # Config
    "get_config",
    "set_config",

    # Adapters
    "ReservationAdapter",
    "InMemoryReservationAdapter",

    # Services
    "ReservationRegistry",

    # Tools
    "get_registry",
    "set_registry",
]
