"""Per-month amounts for recurring and one-time cash flows."""
from __future__ import annotations

from typing import Iterable

from ..data_model import (
    MONTH_ONLY,
    OneTimeItem,
    Plan,
    RecurringItem,
    finite_or_zero,
    is_finite_number,
    is_month_key,
    normalize_month,
)


def amount_for_month(item: RecurringItem, month: str) -> float:
    """Amount ``item`` contributes in ``month``.

    Month-only items read an exact-month override; carry-forward items use the
    latest change at or before ``month``. Anything after a valid end month is 0.
    """
    month = normalize_month(month)
    if is_month_key(item.end_month) and month > item.end_month:
        return 0.0

    base = finite_or_zero(item.default_amount)

    if item.behavior == MONTH_ONLY:
        hit = next((o for o in item.overrides or [] if o.month == month), None)
        return float(hit.amount) if hit is not None and is_finite_number(hit.amount) else base

    changes = sorted((c for c in item.changes or [] if isinstance(c.month, str)), key=lambda c: c.month)
    best = base
    for change in changes:
        if change.month > month:
            break
        if is_finite_number(change.amount):
            best = float(change.amount)
    return best


def _sum_recurring(items: Iterable[RecurringItem], month: str) -> float:
    return sum(amount_for_month(item, month) for item in items)


def _sum_one_time(items: Iterable[OneTimeItem], month: str) -> float:
    month = normalize_month(month)
    return sum(finite_or_zero(item.amount) for item in items if item.month == month)


def recurring_totals(plan: Plan, month: str) -> tuple[float, float]:
    return _sum_recurring(plan.income, month), _sum_recurring(plan.expenses, month)


def one_time_totals(plan: Plan, month: str) -> tuple[float, float]:
    return _sum_one_time(plan.one_time_income, month), _sum_one_time(plan.one_time_expenses, month)


def net_cash_flow(plan: Plan, month: str) -> float:
    income, expense = recurring_totals(plan, month)
    one_income, one_expense = one_time_totals(plan, month)
    return (income + one_income) - (expense + one_expense)
