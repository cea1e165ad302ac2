from .aggregate import aggregate_period, clamp_window_offset, series_to_frame, window_series
from .balances import (
    account_balance_for_month,
    baseline_at_or_before,
    has_snapshot,
    latest_snapshot_month,
    net_worth_for_month,
    snapshot_month_at_or_before,
)
from .resolver import amount_for_month, net_cash_flow, one_time_totals, recurring_totals
from .series import HORIZON_MONTHS, NetWorthAsOf, SeriesPoint, build_net_worth_series, monthly_rate, net_worth_as_of
from .state import PlanState
from .summary import PlanSummary, build_summary

__all__ = [
    "HORIZON_MONTHS",
    "NetWorthAsOf",
    "PlanState",
    "PlanSummary",
    "SeriesPoint",
    "account_balance_for_month",
    "aggregate_period",
    "clamp_window_offset",
    "amount_for_month",
    "baseline_at_or_before",
    "build_net_worth_series",
    "build_summary",
    "has_snapshot",
    "latest_snapshot_month",
    "monthly_rate",
    "net_cash_flow",
    "net_worth_as_of",
    "net_worth_for_month",
    "one_time_totals",
    "recurring_totals",
    "series_to_frame",
    "snapshot_month_at_or_before",
    "window_series",
]
