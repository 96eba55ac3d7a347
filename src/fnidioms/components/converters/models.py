"""
Converters component models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Converter = Callable[[float], float]


@dataclass(frozen=True)
class ConverterSpec:
    """Factor and baseline of a linear unit conversion."""

    name: str
    factor: float
    baseline: float = 0.0
    description: str = ""


# --- Error Types ---


class ConverterError(Exception):
    """Base exception for converters component errors."""

    pass


class UnknownConverterError(ConverterError, KeyError):
    """No converter registered under the requested name."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        self.name = name
        super().__init__(f"Unknown converter {name!r}; expected one of {', '.join(known)}")

    def __str__(self) -> str:
        return str(self.args[0])
