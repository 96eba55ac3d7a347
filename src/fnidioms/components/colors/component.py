"""
Colors component - decorator pattern replaced by function composition.

Colour transformations are plain functions of Color -> Color. A Camera
takes any number of them and applies their left-to-right composition,
so stacking behaviour needs no wrapper classes.

Invariants:
- Channels stay within 0..255 after every transformation
- Missing colours and negative modifiers are rejected up front
- A Camera without filters returns the colour unchanged
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial

from fnidioms.functional import pipe

from .models import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    Color,
    ColorFilter,
    ColorValueError,
    FilterName,
)

# --- Preconditions ---


def _check_argument(condition: bool, message: str, field: str | None = None) -> None:
    if not condition:
        raise ColorValueError(message, field=field)


def _check_color(color: Color | None) -> None:
    _check_argument(color is not None, "color is required", field="color")


def _check_modifier(modifier: int) -> None:
    _check_argument(modifier >= 0, f"modifier must be >= 0, got {modifier}", field="modifier")


def _clamp(channel: int) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_MAX, channel))


# --- Pure Functions (Functional Core) ---


def brighten(color: Color, modifier: int) -> Color:
    """Raise every channel by `modifier`, capped at 255."""
    _check_color(color)
    _check_modifier(modifier)

    return Color(*(_clamp(c + modifier) for c in color.channels))


def darken(color: Color, modifier: int) -> Color:
    """Lower every channel by `modifier`, floored at 0."""
    _check_color(color)
    _check_modifier(modifier)

    return Color(*(_clamp(c - modifier) for c in color.channels))


def negate(color: Color) -> Color:
    _check_color(color)

    return Color(*(_negate_channel(c) for c in color.channels))


def _negate_channel(channel: int) -> int:
    _check_argument(CHANNEL_MIN <= channel <= CHANNEL_MAX, f"channel out of range: {channel}")

    return CHANNEL_MAX - channel


def grayscale(color: Color) -> Color:
    """Set every channel to the integer mean of the three."""
    _check_color(color)

    mean = sum(color.channels) // 3
    return Color(mean, mean, mean)


# --- Composition ---


class Camera:
    """
    Applies a fixed chain of colour filters.

        camera = Camera(partial(brighten, modifier=10), negate)
        camera.snap(Color(0, 0, 0))  # negate(brighten(...))
    """

    def __init__(self, *filters: ColorFilter) -> None:
        self._filters = filters
        self._pipeline = pipe(*filters)

    @property
    def filters(self) -> tuple[ColorFilter, ...]:
        return self._filters

    def with_filters(self, *filters: ColorFilter) -> Camera:
        """Return a new camera using `filters` instead."""
        return Camera(*filters)

    def snap(self, color: Color) -> Color:
        _check_color(color)

        result: Color = self._pipeline(color)
        return result


FILTER_NAMES: tuple[FilterName, ...] = ("brighten", "darken", "negate", "grayscale")


def filter_chain(names: Iterable[str], modifier: int = 10) -> tuple[ColorFilter, ...]:
    """
    Build filters from their names.

    Args:
        names: Filter names, applied in the given order
        modifier: Amount used by brighten/darken

    Returns:
        Tuple of filters ready for Camera

    Raises:
        ColorValueError: Unknown filter name or negative modifier
    """
    _check_modifier(modifier)

    registry: dict[str, ColorFilter] = {
        "brighten": partial(brighten, modifier=modifier),
        "darken": partial(darken, modifier=modifier),
        "negate": negate,
        "grayscale": grayscale,
    }

    filters: list[ColorFilter] = []
    for name in names:
        if name not in registry:
            raise ColorValueError(
                f"Unknown filter {name!r}; expected one of {', '.join(FILTER_NAMES)}",
                field="filter",
            )
        filters.append(registry[name])
    return tuple(filters)
