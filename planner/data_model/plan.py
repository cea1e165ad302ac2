# data_model/plan.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from .accounts import NetWorthAccount, default_accounts
from .base import finite_or_zero
from .items import OneTimeItem, RecurringItem
from .months import DEFAULT_MONTH, normalize_month


class NetWorthMode(str, Enum):
    SNAPSHOT = "snapshot"
    PROJECTION = "projection"
    HYBRID = "hybrid"


def normalize_mode(value: Any) -> NetWorthMode:
    try:
        return NetWorthMode(value)
    except (TypeError, ValueError):
        return NetWorthMode.HYBRID


@dataclass
class Plan:
    currency: str = "USD"
    start_month: str = DEFAULT_MONTH
    # Pre-dates multi-account support; only consulted as a fallback.
    starting_net_worth: float = 0.0
    goal_net_worth: float = 0.0
    expected_return_pct: float = 0.0
    income: List[RecurringItem] = field(default_factory=list)
    expenses: List[RecurringItem] = field(default_factory=list)
    one_time_income: List[OneTimeItem] = field(default_factory=list)
    one_time_expenses: List[OneTimeItem] = field(default_factory=list)
    net_worth_accounts: List[NetWorthAccount] = field(default_factory=list)
    net_worth_mode: NetWorthMode = NetWorthMode.HYBRID


def default_plan() -> Plan:
    return Plan(net_worth_accounts=default_accounts())


def _records(raw: Any) -> List[dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    return [row for row in raw if isinstance(row, dict)]


def plan_from_dict(raw: Any) -> Plan:
    """Overlay a stored document on the defaults, coercing anything malformed."""
    plan = default_plan()
    if not isinstance(raw, dict):
        return plan

    currency = raw.get("currency")
    if isinstance(currency, str) and currency.strip():
        plan.currency = currency.strip().upper()
    plan.start_month = normalize_month(raw.get("startMonth", raw.get("startMonthISO")))
    plan.starting_net_worth = finite_or_zero(raw.get("startingNetWorth"))
    plan.goal_net_worth = finite_or_zero(raw.get("goalNetWorth"))
    plan.expected_return_pct = finite_or_zero(raw.get("expectedReturnPct"))

    plan.income = [RecurringItem.from_dict(row, "income") for row in _records(raw.get("income"))]
    plan.expenses = [RecurringItem.from_dict(row, "expense") for row in _records(raw.get("expenses"))]
    plan.one_time_income = [OneTimeItem.from_dict(row, "income") for row in _records(raw.get("oneTimeIncome"))]
    plan.one_time_expenses = [OneTimeItem.from_dict(row, "expense") for row in _records(raw.get("oneTimeExpenses"))]
    if "netWorthAccounts" in raw:
        plan.net_worth_accounts = [NetWorthAccount.from_dict(row) for row in _records(raw.get("netWorthAccounts"))]
    plan.net_worth_mode = normalize_mode(raw.get("netWorthMode"))
    return plan


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    return {
        "currency": plan.currency,
        "startMonth": plan.start_month,
        "startingNetWorth": plan.starting_net_worth,
        "goalNetWorth": plan.goal_net_worth,
        "expectedReturnPct": plan.expected_return_pct,
        "income": [item.to_dict() for item in plan.income],
        "expenses": [item.to_dict() for item in plan.expenses],
        "oneTimeIncome": [item.to_dict() for item in plan.one_time_income],
        "oneTimeExpenses": [item.to_dict() for item in plan.one_time_expenses],
        "netWorthAccounts": [acct.to_dict() for acct in plan.net_worth_accounts],
        "netWorthMode": plan.net_worth_mode.value,
    }
