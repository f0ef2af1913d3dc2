"""
Tailwind theme converter core.

Converts shadcn/ui style theme variables between the v3 layout (HSL triples
inside `@layer base`) and the v4 layout (`oklch()` literals, unwrapped).
Everything here is a pure function of the input text.
"""

from .color_math import hsl_to_oklch_approx, oklch_to_hsl_approx
from .errors import ColorConversionError, ThemeConverterError
from .models import ConversionOutcome, Direction, HslColor, OklchColor
from .samples import conversion_stats, sample_for
from .transform import convert, convert_backward, convert_forward
from .validation import validate
from .values import parse_hsl, parse_oklch

__all__ = [
    "ColorConversionError",
    "ConversionOutcome",
    "Direction",
    "HslColor",
    "OklchColor",
    "ThemeConverterError",
    "conversion_stats",
    "convert",
    "convert_backward",
    "convert_forward",
    "hsl_to_oklch_approx",
    "oklch_to_hsl_approx",
    "parse_hsl",
    "parse_oklch",
    "sample_for",
    "validate",
]
