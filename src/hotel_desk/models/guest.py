from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Guest:
    """Hotel guest embedded by value in a reservation."""

    name: str
    contact_info: str  # 10 haneli telefon numarası
