"""Month keys (``YYYY-MM``) and the arithmetic the engine does on them.

Keys are zero-padded and fixed width, so plain string comparison is
chronological. Nothing here raises on bad input: malformed keys are replaced
with ``DEFAULT_MONTH``.
"""
from __future__ import annotations

import re
from typing import Any, List

DEFAULT_MONTH = "2026-01"

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def is_month_key(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    match = _MONTH_RE.match(value)
    if not match:
        return False
    return 1 <= int(match.group(2)) <= 12


def normalize_month(value: Any, default: str = DEFAULT_MONTH) -> str:
    if isinstance(value, str) and is_month_key(value.strip()):
        return value.strip()
    return default


def compare_months(a: str, b: str) -> int:
    return -1 if a < b else 1 if a > b else 0


def month_parts(month: str) -> tuple[int, int]:
    key = normalize_month(month)
    return int(key[:4]), int(key[5:7])


def _absolute(month: str) -> int:
    year, month_in_year = month_parts(month)
    return year * 12 + (month_in_year - 1)


def _from_absolute(total: int) -> str:
    year, index = divmod(total, 12)
    return f"{year}-{index + 1:02d}"


def add_months(month: str, offset: int) -> str:
    return _from_absolute(_absolute(month) + int(offset))


def month_offset(start: str, month: str) -> int:
    """Number of months from ``start`` to ``month`` (negative when earlier)."""
    return _absolute(month) - _absolute(start)


def month_range(start: str, count: int = 360) -> List[str]:
    """``count + 1`` consecutive month keys beginning at ``start``."""
    base = _absolute(start)
    return [_from_absolute(base + i) for i in range(max(0, int(count)) + 1)]
