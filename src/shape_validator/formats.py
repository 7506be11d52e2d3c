"""Named string formats.

Each format maps to one fixed regular expression.  Unknown format names
resolve to ``None`` so the format check is skipped rather than failed.
"""

from __future__ import annotations

import re

EMAIL = "email"
DATE = "date"

FORMAT_PATTERNS: dict[str, re.Pattern[str]] = {
    EMAIL: re.compile(
        r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\Z"
    ),
    # 2024-01-31 or 2024/01/31; the separator must repeat.
    DATE: re.compile(r"^\d{4}([-/])\d{2}\1\d{2}\Z", re.ASCII),
}

KNOWN_FORMATS: tuple[str, ...] = tuple(sorted(FORMAT_PATTERNS))


def resolve_format(name: str | None) -> re.Pattern[str] | None:
    """Return the pattern for *name*, or ``None`` when the format is unknown."""
    if not isinstance(name, str):
        return None
    return FORMAT_PATTERNS.get(name)
