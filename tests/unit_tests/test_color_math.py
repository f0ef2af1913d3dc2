"""Unit tests for the approximate HSL <-> OKLCH mapping."""

from __future__ import annotations

import math

import pytest

from converter.color_math import (
    hsl_to_oklch_approx,
    hsl_to_rgb,
    oklch_to_hsl_approx,
    round_half_up,
)
from converter.errors import ColorConversionError


def test_white_maps_to_full_lightness_and_zero_chroma() -> None:
    """White has luma 1 and no distance from it."""
    assert hsl_to_oklch_approx(0, 0, 100).to_css() == "oklch(1.000 0.000 0.000)"


def test_black_maps_to_zero() -> None:
    assert hsl_to_oklch_approx(0, 0, 0).to_css() == "oklch(0.000 0.000 0.000)"


def test_pure_red_uses_luma_and_rgb_distance() -> None:
    """Red is (1, 0, 0): lightness is the red luma weight."""
    color = hsl_to_oklch_approx(0, 100, 50)

    assert color.lightness == pytest.approx(0.299)
    assert color.chroma == pytest.approx(math.sqrt(0.701**2 + 2 * 0.299**2))
    assert color.hue == 0


@pytest.mark.parametrize(
    ("hue", "expected"),
    [
        (0, (1.0, 0.0, 0.0)),
        (60, (1.0, 1.0, 0.0)),
        (120, (0.0, 1.0, 0.0)),
        (180, (0.0, 1.0, 1.0)),
        (240, (0.0, 0.0, 1.0)),
        (300, (1.0, 0.0, 1.0)),
    ],
)
def test_hsl_to_rgb_sectors(hue: float, expected: tuple[float, float, float]) -> None:
    """Each 60 degree sector assigns chroma and intermediate to fixed channels."""
    assert hsl_to_rgb(hue, 100, 50) == pytest.approx(expected)


def test_hue_is_passed_through_with_three_decimals() -> None:
    assert hsl_to_oklch_approx(222.2, 84, 4.9).to_css().endswith(" 222.200)")


def test_out_of_range_hue_is_not_clamped() -> None:
    """A hue past 360 falls outside every sector and keeps only the lightness offset."""
    color = hsl_to_oklch_approx(400, 0, 50)

    assert color.to_css() == "oklch(0.500 0.000 400.000)"


def test_negative_lightness_is_accepted() -> None:
    color = hsl_to_oklch_approx(0, 0, -20)

    assert color.lightness == pytest.approx(-0.2)


def test_oklch_to_hsl_rescales_and_rounds() -> None:
    assert oklch_to_hsl_approx(0.5, 0.2, 180).to_css() == "180 20% 50%"
    assert oklch_to_hsl_approx(1, 0, 0).to_css() == "0 0% 100%"
    assert oklch_to_hsl_approx(0.141, 0.014, 285.823).to_css() == "286 1% 14%"


def test_round_trip_is_only_approximate() -> None:
    """v3 -> v4 -> v3 does not reproduce the original triple."""
    forward = hsl_to_oklch_approx(221.2, 83.2, 53.3)
    back = oklch_to_hsl_approx(forward.lightness, forward.chroma, forward.hue)

    assert back.hue == 221
    assert (back.saturation, back.lightness) != (83.2, 53.3)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.49) == 2


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_components_raise(bad: float) -> None:
    with pytest.raises(ColorConversionError):
        oklch_to_hsl_approx(bad, 0.1, 200)
    with pytest.raises(ColorConversionError):
        hsl_to_oklch_approx(bad, 50, 50)


def test_color_conversion_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        oklch_to_hsl_approx(0.5, math.nan, 0)


def test_three_decimal_ties_round_up() -> None:
    """0.0625 is exact in binary, so it is a true tie at three digits."""
    assert hsl_to_oklch_approx(0.0625, 0, 50).to_css() == "oklch(0.500 0.000 0.063)"


def test_intermediate_overflow_raises() -> None:
    """Finite but huge inputs must not leak `inf`/`nan` into the output."""
    huge = float("1" + "0" * 307)

    with pytest.raises(ColorConversionError):
        hsl_to_oklch_approx(huge, huge, huge)
    with pytest.raises(ColorConversionError):
        hsl_to_oklch_approx(0, 1e200, 50)


def test_huge_finite_hue_still_renders() -> None:
    color = hsl_to_oklch_approx(1e20, 0, 50)

    assert color.to_css() == "oklch(0.500 0.000 100000000000000000000.000)"
