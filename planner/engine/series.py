"""Month-by-month net worth under the plan's net worth mode.

snapshot
    Entered balances are the truth. The last snapshot at or before each month
    is carried forward; no returns and no cash flow.
projection
    Start from the snapshot at the start month (or the legacy starting net
    worth) and apply returns plus cash flow every month. Later snapshots are
    ignored.
hybrid
    Like projection, except a month with a snapshot is an anchor: its value is
    the entered total and no return or cash flow is applied inside it.
    Compounding resumes the following month.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from ..data_model import NetWorthMode, Plan, add_months, finite_or_zero, normalize_mode, normalize_month
from .balances import baseline_at_or_before, has_snapshot, net_worth_for_month, snapshot_month_at_or_before
from .resolver import net_cash_flow

HORIZON_MONTHS = 12 * 50


@dataclass(frozen=True)
class SeriesPoint:
    month_index: int
    net_worth: float

    def to_dict(self) -> dict:
        return {"monthIndex": self.month_index, "netWorth": self.net_worth}


@dataclass(frozen=True)
class NetWorthAsOf:
    month: str
    net_worth: float
    source: Literal["snapshot", "legacy"]

    def to_dict(self) -> dict:
        return {"month": self.month, "netWorth": self.net_worth, "source": self.source}


def monthly_rate(plan: Plan) -> float:
    # Flat annual/12 rather than a geometric monthly rate.
    return finite_or_zero(plan.expected_return_pct) / 100 / 12


def _baseline(plan: Plan, mode: NetWorthMode, start: str) -> float:
    legacy = finite_or_zero(plan.starting_net_worth)
    if mode is NetWorthMode.SNAPSHOT:
        value = baseline_at_or_before(plan, start)
        return 0.0 if value is None else value
    if mode is NetWorthMode.HYBRID:
        value = baseline_at_or_before(plan, start)
        return legacy if value is None else value
    return net_worth_for_month(plan, start) if has_snapshot(plan, start) else legacy


def _advance(plan: Plan, mode: NetWorthMode, month: str, net_worth: float, rate: float) -> float:
    if mode is NetWorthMode.SNAPSHOT:
        value = baseline_at_or_before(plan, month)
        return net_worth if value is None else value
    if mode is NetWorthMode.HYBRID and has_snapshot(plan, month):
        return net_worth_for_month(plan, month)
    return net_worth * (1 + rate) + net_cash_flow(plan, month)


def build_net_worth_series(plan: Plan) -> List[SeriesPoint]:
    mode = normalize_mode(plan.net_worth_mode)
    start = normalize_month(plan.start_month)
    rate = monthly_rate(plan)

    net_worth = _baseline(plan, mode, start)
    series: List[SeriesPoint] = []
    for i in range(HORIZON_MONTHS + 1):
        net_worth = _advance(plan, mode, add_months(start, i), net_worth, rate)
        series.append(SeriesPoint(month_index=i, net_worth=net_worth))
    return series


def net_worth_as_of(plan: Plan, target: str) -> NetWorthAsOf | None:
    target = normalize_month(target)
    month = snapshot_month_at_or_before(plan, target)
    if month is not None:
        return NetWorthAsOf(month=month, net_worth=net_worth_for_month(plan, month), source="snapshot")
    legacy = finite_or_zero(plan.starting_net_worth)
    if legacy != 0:
        return NetWorthAsOf(month=target, net_worth=legacy, source="legacy")
    return None
