from __future__ import annotations

import importlib
import os
import logging
from typing import List, Optional, Tuple, Type

from dotenv import load_dotenv

load_dotenv()

from hotel_desk.base_config import HotelDeskConfig
from hotel_desk.adapters.base import ReservationAdapter
from hotel_desk.adapters.memory_adapter import InMemoryReservationAdapter
from hotel_desk.exceptions import ConfigurationError

DEFAULT_CONFIG_CLASS = "hotel_desk.config.EnvironmentHotelDeskConfig"
CONFIG_ENV_KEY = "HOTELDESK_CONFIG"
DEFAULT_SEED_ROOMS = "101:Single,102:Double"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[HotelDeskConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, HotelDeskConfig):
        raise ConfigurationError(f"{path} is not a subclass of HotelDeskConfig")

    return cls


def parse_seed_rooms(value: str) -> List[Tuple[str, str]]:
    """
    Parse ``"101:Single,102:Double"`` into ``[("101", "Single"), ("102", "Double")]``.
    Blank entries are skipped.
    """
    rooms = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        number, sep, room_type = item.partition(":")
        number, room_type = number.strip(), room_type.strip()
        if not sep or not number or not room_type:
            raise ConfigurationError(f"Invalid seed room entry '{item}', expected NUMBER:TYPE")
        rooms.append((number, room_type))
    return rooms


class EnvironmentHotelDeskConfig(HotelDeskConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_seed_rooms(self) -> List[Tuple[str, str]]:
        return parse_seed_rooms(self._env.get("HOTEL_SEED_ROOMS", DEFAULT_SEED_ROOMS))

    def get_log_level(self) -> str:
        level = self._env.get("LOG_LEVEL", "WARNING").upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown LOG_LEVEL {level!r}, falling back to WARNING")
            return "WARNING"
        return level

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTEL_NAME", super().get_hotel_display_name())

    def create_adapter(self) -> ReservationAdapter:
        adapter = InMemoryReservationAdapter()
        adapter.init()
        return adapter


_CONFIG: Optional[HotelDeskConfig] = None


def get_config() -> HotelDeskConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[HotelDeskConfig]) -> None:
    global _CONFIG
    _CONFIG = config
