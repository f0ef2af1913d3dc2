"""
Approximate HSL <-> OKLCH mapping used by the theme converter.

This is NOT a colorimetric OKLab conversion. The forward map goes through
sRGB and then uses the Rec. 601 luma as lightness and the RGB distance from
that luma as chroma; hue is passed through. The backward map only rescales and
rounds. Neither is the inverse of the other, so v3 -> v4 -> v3 round trips are
approximate. The formulas are kept as-is because existing themes and fixtures
depend on the exact numbers.
"""

import math
from typing import Tuple

from .errors import ColorConversionError
from .models import HslColor, OklchColor


def _require_finite(*values: float) -> None:
    """Reject NaN and infinities; finite out-of-range values are accepted."""
    for v in values:
        if not math.isfinite(v):
            raise ColorConversionError(f"non-finite color component: {v!r}")


def round_half_up(x: float) -> int:
    """Round halves toward +infinity (1.5 -> 2, -1.5 -> -1)."""
    return int(math.floor(x + 0.5))


# HSL -> RGB ------------------------------------------------------

def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB. h in deg, s,l in percent; channels in [0,1] for in-range input."""
    c = ((1 - abs((2 * l) / 100 - 1)) * s) / 100
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = l / 100 - c / 2

    # Hues outside [0, 360) fall through every sector and keep only the offset.
    r1, g1, b1 = 0.0, 0.0, 0.0
    if 0 <= h < 60:
        r1, g1, b1 = c, x, 0
    elif 60 <= h < 120:
        r1, g1, b1 = x, c, 0
    elif 120 <= h < 180:
        r1, g1, b1 = 0, c, x
    elif 180 <= h < 240:
        r1, g1, b1 = 0, x, c
    elif 240 <= h < 300:
        r1, g1, b1 = x, 0, c
    elif 300 <= h < 360:
        r1, g1, b1 = c, 0, x

    return r1 + m, g1 + m, b1 + m


# Approximations --------------------------------------------------

def hsl_to_oklch_approx(h: float, s: float, l: float) -> OklchColor:
    """Map an HSL triple to the approximate OKLCH triple."""
    _require_finite(h, s, l)
    r, g, b = hsl_to_rgb(h, s, l)

    lightness = 0.299 * r + 0.587 * g + 0.114 * b
    try:
        chroma = math.sqrt(
            (r - lightness) ** 2 + (g - lightness) ** 2 + (b - lightness) ** 2
        )
    except OverflowError as exc:
        raise ColorConversionError(f"chroma overflows for hsl({h}, {s}, {l})") from exc
    _require_finite(lightness, chroma)
    return OklchColor(lightness=lightness, chroma=chroma, hue=h)


def oklch_to_hsl_approx(l: float, c: float, h: float) -> HslColor:
    """Map an OKLCH triple back to HSL by rescaling and rounding."""
    _require_finite(l, c, h)
    return HslColor(
        hue=round_half_up(h),
        saturation=round_half_up(c * 100),
        lightness=round_half_up(l * 100),
    )
