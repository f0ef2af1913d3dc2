"""Advisory syntax checks for theme stylesheets. Never blocks a conversion."""

import re
from typing import List

CSS_VARIABLE_RE = re.compile(r"^--[\w-]+:\s*[^;]+;?$", re.ASCII)

UNMATCHED_BRACES = "Unmatched braces in CSS"


def is_valid_css_variable(line: str) -> bool:
    """Check `--name: value;` syntax on the trimmed line."""
    return bool(CSS_VARIABLE_RE.match(line.strip()))


def validate(source_text: str) -> List[str]:
    """Return advisory diagnostics: malformed custom properties and brace balance."""
    errors: List[str] = []
    brace_count = 0

    for i, line in enumerate(source_text.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed:
            continue

        brace_count += line.count("{") - line.count("}")

        if trimmed.startswith("--") and not is_valid_css_variable(trimmed):
            errors.append(f"Line {i}: Invalid CSS variable syntax")

    if brace_count != 0:
        errors.append(UNMATCHED_BRACES)

    return errors
