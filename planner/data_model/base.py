from __future__ import annotations

import math
from typing import Any


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        return False


def coerce_amount(value: Any) -> float:
    """Float conversion that keeps "missing" distinct from zero (returns nan)."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def finite_or_zero(value: Any) -> float:
    amount = coerce_amount(value)
    return amount if math.isfinite(amount) else 0.0
