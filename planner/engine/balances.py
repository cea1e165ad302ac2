"""Account balance aggregation and snapshot lookup.

A snapshot is an entered balance (valid month, finite amount) on any account.
Month-locating helpers return ``None`` for "no data"; they never return 0 in
its place.
"""
from __future__ import annotations

from typing import List

from ..data_model import NetWorthAccount, Plan, finite_or_zero, is_finite_number, is_month_key, normalize_month


def account_balance_for_month(account: NetWorthAccount, month: str) -> float:
    month = normalize_month(month)
    hit = next((b for b in account.balances or [] if b.month == month), None)
    return float(hit.amount) if hit is not None and is_finite_number(hit.amount) else 0.0


def net_worth_for_month(plan: Plan, month: str) -> float:
    month = normalize_month(month)
    accounts = plan.net_worth_accounts or []
    if not accounts:
        return finite_or_zero(plan.starting_net_worth)
    return sum(account_balance_for_month(acct, month) for acct in accounts)


def _snapshot_months(plan: Plan) -> List[str]:
    months = {
        b.month
        for acct in plan.net_worth_accounts or []
        for b in acct.balances or []
        if is_month_key(b.month) and is_finite_number(b.amount)
    }
    return sorted(months)


def has_snapshot(plan: Plan, month: str) -> bool:
    month = normalize_month(month)
    return any(
        b.month == month and is_finite_number(b.amount)
        for acct in plan.net_worth_accounts or []
        for b in acct.balances or []
    )


def latest_snapshot_month(plan: Plan) -> str | None:
    months = _snapshot_months(plan)
    return months[-1] if months else None


def snapshot_month_at_or_before(plan: Plan, target: str) -> str | None:
    target = normalize_month(target)
    best = None
    for month in _snapshot_months(plan):
        if month > target:
            break
        best = month
    return best


def baseline_at_or_before(plan: Plan, target: str) -> float | None:
    """Summed net worth at the latest snapshot <= ``target``.

    With no snapshots anywhere, the legacy starting net worth stands in when it
    is non-zero.
    """
    target = normalize_month(target)
    months = _snapshot_months(plan)
    if not months:
        legacy = finite_or_zero(plan.starting_net_worth)
        return legacy if legacy != 0 else None
    month = snapshot_month_at_or_before(plan, target)
    if month is None:
        return None
    return net_worth_for_month(plan, month)
