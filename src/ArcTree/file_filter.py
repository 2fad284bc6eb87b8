"""Regex path filtering for archive entries."""

from __future__ import annotations

import re
from typing import Any, Iterable


def parse_pattern_input(raw: str) -> list[str]:
    """Split a comma-separated string into individual pattern strings.

    Whitespace around each pattern is stripped. Empty segments are ignored.
    """
    if not raw or not raw.strip():
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def validate_patterns(patterns: list[str]) -> list[str]:
    """Return a list of error messages for invalid regex patterns.

    An empty list means all patterns are valid.
    """
    errors: list[str] = []
    for p in patterns:
        try:
            re.compile(p)
        except re.error as exc:
            errors.append(f"`{p}`: {exc}")
    return errors


def compile_patterns(patterns: list[str]) -> list[re.Pattern[str]]:
    """Compile a list of regex pattern strings. Invalid ones are skipped."""
    compiled: list[re.Pattern[str]] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any_pattern(path: str, compiled: list[re.Pattern[str]]) -> bool:
    """Return True if the path matches **any** of the compiled patterns.

    Uses `re.search` so the pattern can match anywhere in the path.
    If *compiled* is empty every path matches (no filter).
    """
    if not compiled:
        return True
    return any(pat.search(path) for pat in compiled)


def filter_entries(entries: Iterable[Any], compiled: list[re.Pattern[str]]) -> list[Any]:
    """Keep file entries matching *compiled*; directory entries always stay."""
    return [
        e for e in entries if e.is_directory or matches_any_pattern(e.path, compiled)
    ]
