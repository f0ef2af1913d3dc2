"""
Structural transformers between the v3 (HSL, wrapped) and v4 (OKLCH,
unwrapped) theme layouts. Both are a single pass over the document lines.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from .color_math import hsl_to_oklch_approx, oklch_to_hsl_approx
from .errors import ColorConversionError
from .lines import (
    ALTERNATE_OPENER,
    CLOSER,
    ROOT_OPENER,
    TRANSITIONS,
    WRAPPER_OPENER,
    Context,
    LineKind,
    Section,
    classify,
    is_passthrough,
    split_declaration,
    split_lines,
)
from .models import ConversionOutcome, Direction, HslColor, Line, OklchColor
from .values import parse_hsl, parse_oklch

logger = logging.getLogger(__name__)

Color = Union[HslColor, OklchColor]

NESTED_INDENT = "  "


def _rewrite_declaration(
    line: Line,
    parse: Callable[[str], Optional[Color]],
    convert: Callable[[Color], Color],
    label: str,
    diagnostics: List[str],
) -> str:
    """Return the line to emit for a declaration, recording unconvertible values."""
    decl = split_declaration(line)
    if decl is None or is_passthrough(decl):
        return line.text

    color = parse(decl.value)
    if color is None:
        return line.text

    try:
        converted = convert(color)
    except ColorConversionError as exc:
        logger.warning("Line %d: cannot convert %s value %r: %s", line.number, label, decl.value, exc)
        diagnostics.append(f'Line {line.number}: Failed to convert {label} value "{decl.value}"')
        return line.text
    return decl.render(converted.to_css())


def _hsl_to_oklch(color: HslColor) -> OklchColor:
    return hsl_to_oklch_approx(color.hue, color.saturation, color.lightness)


def _oklch_to_hsl(color: OklchColor) -> HslColor:
    return oklch_to_hsl_approx(color.lightness, color.chroma, color.hue)


# v3 -> v4 --------------------------------------------------------

def convert_forward(source_text: str) -> ConversionOutcome:
    """Convert a v3 theme (HSL triples inside `@layer base`) to v4 OKLCH."""
    diagnostics: List[str] = []
    result: List[str] = []
    ctx = Context()

    for line in split_lines(source_text):
        kind = classify(line)

        if kind is LineKind.WRAPPER_OPEN:
            ctx = TRANSITIONS[kind](ctx)
            continue

        if kind is LineKind.CLOSE:
            closes_wrapper = ctx.wrapper_only
            ctx = TRANSITIONS[kind](ctx)
            if not closes_wrapper:
                result.append(line.text)
            continue

        if kind in (LineKind.ROOT_OPEN, LineKind.ALTERNATE_OPEN):
            ctx = TRANSITIONS[kind](ctx)
            result.append(line.text)
            continue

        if kind is LineKind.DECLARATION:
            result.append(
                _rewrite_declaration(line, parse_hsl, _hsl_to_oklch, "HSL", diagnostics)
            )
            continue

        result.append(line.text)

    logger.debug("v3 -> v4: %d lines in, %d out, %d failures", source_text.count("\n") + 1, len(result), len(diagnostics))
    return ConversionOutcome(converted_text="\n".join(result), diagnostics=tuple(diagnostics))


# v4 -> v3 --------------------------------------------------------

def _layered(tagged: List[Tuple[Section, str]]) -> List[str]:
    """Lay the tagged lines out inside a synthesized `@layer base` block."""
    root = [text for section, text in tagged if section is Section.ROOT]
    alternate = [text for section, text in tagged if section is Section.ALTERNATE]
    other = [text for section, text in tagged if section is Section.NONE]
    return [
        WRAPPER_OPENER,
        NESTED_INDENT + ROOT_OPENER,
        *root,
        NESTED_INDENT + CLOSER,
        "",
        NESTED_INDENT + ALTERNATE_OPENER,
        *alternate,
        NESTED_INDENT + CLOSER,
        CLOSER,
        "",
        *other,
    ]


def convert_backward(source_text: str) -> ConversionOutcome:
    """Convert a v4 theme (OKLCH, unwrapped) to v3 HSL inside `@layer base`."""
    diagnostics: List[str] = []
    tagged: List[Tuple[Section, str]] = []
    needs_wrapper = False
    ctx = Context()

    for line in split_lines(source_text):
        kind = classify(line)

        # Delimiters are dropped; the synthesized wrapper supplies its own.
        if kind in TRANSITIONS:
            if kind is LineKind.ROOT_OPEN:
                needs_wrapper = True
            ctx = TRANSITIONS[kind](ctx)
            continue

        if kind is LineKind.DECLARATION:
            text = _rewrite_declaration(line, parse_oklch, _oklch_to_hsl, "OKLCH", diagnostics)
        else:
            text = line.text
        tagged.append((ctx.section, text))

    if needs_wrapper:
        result = _layered(tagged)
    else:
        result = [text for section, text in tagged if section is Section.NONE]

    logger.debug("v4 -> v3: %d lines in, %d out, %d failures", source_text.count("\n") + 1, len(result), len(diagnostics))
    return ConversionOutcome(converted_text="\n".join(result), diagnostics=tuple(diagnostics))


def convert(source_text: str, direction: Union[Direction, str]) -> ConversionOutcome:
    """Dispatch to the transformer for `direction`."""
    if Direction(direction) is Direction.V3_TO_V4:
        return convert_forward(source_text)
    return convert_backward(source_text)
