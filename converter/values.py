"""
Recognizers for the two theme value formats.
v3: `222.2 84% 4.9%`   v4: `oklch(0.141 0.005 285.823)`
A non-match returns None and the caller leaves the value alone.
"""

import logging
import math
import re
from typing import List, Optional

from .models import HslColor, OklchColor

logger = logging.getLogger(__name__)

# Regular expression patterns
ws = r"\s*"
num = r"\d+(?:\.\d+)?"
plain_num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"

HSL_RE = re.compile(f"^({num})\\s+({num})%\\s+({num})%$", re.ASCII)
OKLCH_RE = re.compile(f"^oklch{ws}\\(([^)]+)\\)$")
PLAIN_NUM_RE = re.compile(f"^{plain_num}$", re.ASCII)


def _to_number(token: str) -> float:
    """Plain numbers convert; anything else (`50%`, `none`) becomes NaN."""
    if PLAIN_NUM_RE.match(token):
        return float(token)
    return math.nan


def parse_hsl(value: str) -> Optional[HslColor]:
    """Parse a v3 `H S% L%` value."""
    m = HSL_RE.match(value.strip())
    if not m:
        return None
    h, s, l = m.groups()
    return HslColor(hue=float(h), saturation=float(s), lightness=float(l))


def parse_oklch(value: str) -> Optional[OklchColor]:
    """Parse a v4 `oklch(L C H)` value. Alpha and tokens past the third are dropped."""
    m = OKLCH_RE.match(value.strip())
    if not m:
        return None
    channels, slash, alpha = m.group(1).partition("/")
    parts: List[str] = channels.split()
    if len(parts) < 3:
        return None
    if len(parts) > 3 or slash:
        # TODO: decide whether `/ alpha` should survive v4 -> v3; v3 triples have no alpha slot.
        logger.debug("Discarding trailing oklch tokens %r", parts[3:] + ([alpha.strip()] if slash else []))
    return OklchColor(
        lightness=_to_number(parts[0]),
        chroma=_to_number(parts[1]),
        hue=_to_number(parts[2]),
    )
