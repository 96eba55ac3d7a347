"""
Colors component models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

# --- Constants ---

CHANNEL_MIN = 0
CHANNEL_MAX = 255

# --- Types ---

FilterName = Literal["brighten", "darken", "negate", "grayscale"]


# --- Error Types ---


class ColorError(Exception):
    """Base exception for colors component errors."""

    pass


class ColorValueError(ColorError, ValueError):
    """Argument outside its allowed range or missing."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


# --- Color Model ---


@dataclass(frozen=True)
class Color:
    """RGB colour with channels in 0..255."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ColorValueError(f"{name} must be an int, got {value!r}", field=name)
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ColorValueError(
                    f"{name} must be between {CHANNEL_MIN} and {CHANNEL_MAX}, got {value}",
                    field=name,
                )

    @property
    def channels(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.channels)


ColorFilter = Callable[[Color], Color]
