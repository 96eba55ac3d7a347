"""
Unit tests for Colors component.

Tests:
- Channel validation on Color
- brighten/darken/negate/grayscale results and preconditions
- Camera applies filters left to right
- filter_chain builds filters by name
"""

from __future__ import annotations

from functools import partial

import pytest

from ..component import (
    Camera,
    brighten,
    darken,
    filter_chain,
    grayscale,
    negate,
)
from ..models import Color, ColorValueError


class TestColor:
    """Tests for the Color value."""

    def test_valid_color(self) -> None:
        color = Color(10, 20, 30)
        assert color.channels == (10, 20, 30)

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
    def test_out_of_range_channel_raises(self, channels: tuple[int, int, int]) -> None:
        with pytest.raises(ColorValueError, match="between 0 and 255"):
            Color(*channels)

    def test_non_int_channel_raises(self) -> None:
        with pytest.raises(ColorValueError) as exc_info:
            Color(1.5, 0, 0)  # type: ignore[arg-type]
        assert exc_info.value.field == "red"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Color(0, 0, 999)

    def test_to_hex(self) -> None:
        assert Color(255, 0, 16).to_hex() == "#ff0010"


class TestTransformations:
    """Tests for the colour library functions."""

    def test_brighten(self) -> None:
        assert brighten(Color(10, 20, 30), 5) == Color(15, 25, 35)

    def test_brighten_caps_at_max(self) -> None:
        assert brighten(Color(250, 100, 0), 10) == Color(255, 110, 10)

    def test_brighten_zero_is_identity(self) -> None:
        color = Color(1, 2, 3)
        assert brighten(color, 0) == color

    def test_brighten_negative_modifier_raises(self) -> None:
        with pytest.raises(ColorValueError, match="modifier"):
            brighten(Color(0, 0, 0), -1)

    def test_brighten_none_raises(self) -> None:
        with pytest.raises(ColorValueError, match="color is required"):
            brighten(None, 1)  # type: ignore[arg-type]

    def test_darken_floors_at_min(self) -> None:
        assert darken(Color(5, 100, 255), 10) == Color(0, 90, 245)

    def test_darken_negative_modifier_raises(self) -> None:
        with pytest.raises(ColorValueError):
            darken(Color(0, 0, 0), -5)

    def test_negate(self) -> None:
        assert negate(Color(0, 100, 255)) == Color(255, 155, 0)

    def test_negate_twice_is_identity(self) -> None:
        color = Color(12, 34, 56)
        assert negate(negate(color)) == color

    def test_negate_none_raises(self) -> None:
        with pytest.raises(ColorValueError):
            negate(None)  # type: ignore[arg-type]

    def test_grayscale(self) -> None:
        assert grayscale(Color(10, 20, 31)) == Color(20, 20, 20)

    def test_input_not_mutated(self) -> None:
        color = Color(10, 20, 30)
        brighten(color, 50)
        assert color == Color(10, 20, 30)


class TestCamera:
    """Camera composes filters instead of wrapping decorators."""

    def test_no_filters_is_identity(self) -> None:
        color = Color(1, 2, 3)
        assert Camera().snap(color) == color

    def test_single_filter(self) -> None:
        assert Camera(negate).snap(Color(0, 0, 0)) == Color(255, 255, 255)

    def test_filters_apply_left_to_right(self) -> None:
        brighten_10 = partial(brighten, modifier=10)

        # brighten then negate: 245 - 10
        assert Camera(brighten_10, negate).snap(Color(0, 0, 0)) == Color(245, 245, 245)
        # negate then brighten: capped at 255
        assert Camera(negate, brighten_10).snap(Color(0, 0, 0)) == Color(255, 255, 255)

    def test_with_filters_returns_new_camera(self) -> None:
        camera = Camera(negate)
        other = camera.with_filters(grayscale)

        assert other is not camera
        assert camera.filters == (negate,)
        assert other.filters == (grayscale,)

    def test_snap_none_raises(self) -> None:
        with pytest.raises(ColorValueError):
            Camera().snap(None)  # type: ignore[arg-type]


class TestFilterChain:
    """Tests for building filters by name."""

    def test_builds_in_order(self) -> None:
        filters = filter_chain(["brighten", "negate"], modifier=20)
        assert Camera(*filters).snap(Color(0, 0, 0)) == Color(235, 235, 235)

    def test_empty_names(self) -> None:
        assert filter_chain([]) == ()

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ColorValueError, match="Unknown filter 'blur'"):
            filter_chain(["negate", "blur"])

    def test_negative_modifier_raises(self) -> None:
        with pytest.raises(ColorValueError):
            filter_chain(["brighten"], modifier=-1)
