"""
Line classification and section tracking for theme stylesheets.

Only the handful of constructs a Tailwind theme file uses are recognized:

    @layer base {        wrapper (v3 only)
      :root { ... }      default theme
      .dark { ... }      alternate theme
    }

Anything else is OTHER and is forwarded untouched by the transformers.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .models import Declaration, Line

WRAPPER_OPENER = "@layer base {"
ROOT_OPENER = ":root {"
ALTERNATE_OPENER = ".dark {"
CLOSER = "}"

# Custom properties that are not colors and are never rewritten.
PASSTHROUGH_PROPERTIES = frozenset({"--radius"})


class LineKind(Enum):
    BLANK_OR_COMMENT = "blank_or_comment"
    WRAPPER_OPEN = "wrapper_open"
    ROOT_OPEN = "root_open"
    ALTERNATE_OPEN = "alternate_open"
    CLOSE = "close"
    DECLARATION = "declaration"
    OTHER = "other"


def classify(line: Line) -> LineKind:
    """Classify one line by its trimmed text."""
    s = line.stripped
    if not s or s.startswith("/*") or s.startswith("//"):
        return LineKind.BLANK_OR_COMMENT
    if s == WRAPPER_OPENER:
        return LineKind.WRAPPER_OPEN
    if s == ROOT_OPENER:
        return LineKind.ROOT_OPEN
    if s == ALTERNATE_OPENER:
        return LineKind.ALTERNATE_OPEN
    if s == CLOSER:
        return LineKind.CLOSE
    if s.startswith("--") and ":" in s:
        return LineKind.DECLARATION
    return LineKind.OTHER


def split_declaration(line: Line) -> Optional[Declaration]:
    """Split `--name: value;` into name and value (trimmed, one `;` removed)."""
    if classify(line) is not LineKind.DECLARATION:
        return None
    name, _, value = line.stripped.partition(":")
    value = value.strip()
    if value.endswith(";"):
        value = value[:-1]
    return Declaration(name=name.strip(), value=value.strip(), indent=line.indent)


def is_passthrough(decl: Declaration) -> bool:
    return decl.name in PASSTHROUGH_PROPERTIES


# Section state ---------------------------------------------------

class Section(Enum):
    NONE = "none"
    ROOT = "root"
    ALTERNATE = "alternate"


class Context(NamedTuple):
    """Where the scanner is: at most one theme section, possibly inside the wrapper."""

    section: Section = Section.NONE
    wrapped: bool = False

    @property
    def wrapper_only(self) -> bool:
        return self.wrapped and self.section is Section.NONE


def enter_wrapper(ctx: Context) -> Context:
    return ctx._replace(wrapped=True)


def enter_root(ctx: Context) -> Context:
    return ctx._replace(section=Section.ROOT)


def enter_alternate(ctx: Context) -> Context:
    return ctx._replace(section=Section.ALTERNATE)


def close_block(ctx: Context) -> Context:
    """Apply a `}` line: leave the wrapper if nothing else is open, else leave the section."""
    if ctx.wrapper_only:
        return Context()
    return ctx._replace(section=Section.NONE)


TRANSITIONS = {
    LineKind.WRAPPER_OPEN: enter_wrapper,
    LineKind.ROOT_OPEN: enter_root,
    LineKind.ALTERNATE_OPEN: enter_alternate,
    LineKind.CLOSE: close_block,
}


def split_lines(text: str):
    """Yield the document as numbered `Line`s (1-based)."""
    for i, raw in enumerate(text.split("\n"), start=1):
        yield Line(number=i, text=raw)
