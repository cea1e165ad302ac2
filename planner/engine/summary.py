"""Dashboard figures derived from a plan and its series."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

from ..data_model import NetWorthMode, Plan, finite_or_zero, normalize_mode, normalize_month
from .balances import latest_snapshot_month
from .series import SeriesPoint, build_net_worth_series, net_worth_as_of

MODE_LABELS = {
    NetWorthMode.SNAPSHOT: "Track actual balances",
    NetWorthMode.PROJECTION: "Hypothetical projection",
    NetWorthMode.HYBRID: "Reality-anchored projection",
}


@dataclass
class PlanSummary:
    mode: str
    mode_label: str
    monthly_income: float
    monthly_expense: float
    monthly_net: float
    net_worth: float
    as_of_month: str | None
    projected_net_worth: float
    goal_net_worth: float
    current_pct: float
    projected_pct: float

    def to_dict(self) -> dict:
        return asdict(self)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def build_summary(plan: Plan, series: Sequence[SeriesPoint] | None = None) -> PlanSummary:
    mode = normalize_mode(plan.net_worth_mode)
    start = normalize_month(plan.start_month)
    if series is None:
        series = build_net_worth_series(plan)

    # Headline totals use default amounts, not the per-month resolution.
    income = sum(finite_or_zero(item.default_amount) for item in plan.income)
    expense = sum(finite_or_zero(item.default_amount) for item in plan.expenses)

    # Projection ignores reality, so its KPI is the start-month baseline.
    if mode is NetWorthMode.PROJECTION:
        as_of = net_worth_as_of(plan, start)
    else:
        as_of = net_worth_as_of(plan, latest_snapshot_month(plan) or start)
    net_worth = as_of.net_worth if as_of else 0.0
    projected = series[-1].net_worth if series else net_worth

    goal = max(0.0, finite_or_zero(plan.goal_net_worth))
    return PlanSummary(
        mode=mode.value,
        mode_label=MODE_LABELS[mode],
        monthly_income=income,
        monthly_expense=expense,
        monthly_net=income - expense,
        net_worth=net_worth,
        as_of_month=as_of.month if as_of else None,
        projected_net_worth=projected,
        goal_net_worth=goal,
        current_pct=_clamp01(net_worth / goal) if goal > 0 else 0.0,
        projected_pct=_clamp01(projected / goal) if goal > 0 else 0.0,
    )
