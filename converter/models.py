"""
Value types shared by the converter modules.
All models are frozen; a conversion never mutates what it has produced.
"""

from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field


class Direction(str, Enum):
    V3_TO_V4 = "v3-to-v4"
    V4_TO_V3 = "v4-to-v3"


# Colors ----------------------------------------------------------

class HslColor(BaseModel):
    """HSL triple: hue in degrees, saturation and lightness in percent."""

    model_config = ConfigDict(frozen=True)

    hue: float
    saturation: float
    lightness: float

    def to_css(self) -> str:
        """Render as a v3 theme value (`H S% L%`)."""
        return f"{format_number(self.hue)} {format_number(self.saturation)}% {format_number(self.lightness)}%"


class OklchColor(BaseModel):
    """Approximate OKLCH triple. No bounds are enforced."""

    model_config = ConfigDict(frozen=True)

    lightness: float
    chroma: float
    hue: float

    def to_css(self) -> str:
        """Render as a v4 theme value with three fractional digits."""
        return f"oklch({format_fixed(self.lightness)} {format_fixed(self.chroma)} {format_fixed(self.hue)})"


def format_fixed(x: float, digits: int = 3) -> str:
    """Fixed-point rendering with ties rounded away from zero (0.0625 -> "0.063")."""
    if not math.isfinite(x):
        return f"{x:.{digits}f}"
    quantum = Decimal(1).scaleb(-digits)
    # Room for every integer digit of the largest double.
    exact = Context(prec=330 + digits)
    return format(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP, context=exact), "f")


def format_number(x: float) -> str:
    """Drop the fractional part of whole numbers (180.0 -> "180")."""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


# Lines -----------------------------------------------------------

class Line(BaseModel):
    """One physical line of the source document."""

    model_config = ConfigDict(frozen=True)

    number: int
    text: str

    @computed_field
    @property
    def stripped(self) -> str:
        return self.text.strip()

    @computed_field
    @property
    def indent(self) -> str:
        return self.text[: len(self.text) - len(self.text.lstrip())]


class Declaration(BaseModel):
    """A `--name: value` custom property split out of a line."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    indent: str = ""

    def render(self, value: str) -> str:
        """Re-emit the declaration with a new value and the original indent."""
        return f"{self.indent}{self.name}: {value};"


# Outcome ---------------------------------------------------------

class ConversionOutcome(BaseModel):
    """
    Result of one conversion pass.
    `diagnostics` only lists values that matched the source color pattern but
    could not be converted; validation advisories travel separately.
    """

    model_config = ConfigDict(frozen=True)

    converted_text: str
    diagnostics: Tuple[str, ...] = ()

    @computed_field
    @property
    def succeeded(self) -> bool:
        return not self.diagnostics
