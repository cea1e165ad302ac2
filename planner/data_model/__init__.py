from .accounts import NetWorthAccount, default_accounts, new_net_worth_account, set_account_balance
from .base import coerce_amount, finite_or_zero, is_finite_number
from .items import (
    BEHAVIORS,
    CARRY_FORWARD,
    MONTH_ONLY,
    DatedAmount,
    OneTimeItem,
    RecurringItem,
    dedupe_dated,
    new_one_time_item,
    new_recurring_item,
    set_amount_for_month,
    upsert_dated,
)
from .months import (
    DEFAULT_MONTH,
    add_months,
    compare_months,
    is_month_key,
    month_offset,
    month_parts,
    month_range,
    normalize_month,
)
from .plan import NetWorthMode, Plan, default_plan, normalize_mode, plan_from_dict, plan_to_dict

__all__ = [
    "BEHAVIORS",
    "CARRY_FORWARD",
    "DEFAULT_MONTH",
    "MONTH_ONLY",
    "DatedAmount",
    "NetWorthAccount",
    "NetWorthMode",
    "OneTimeItem",
    "Plan",
    "RecurringItem",
    "add_months",
    "coerce_amount",
    "compare_months",
    "dedupe_dated",
    "default_accounts",
    "default_plan",
    "finite_or_zero",
    "is_finite_number",
    "is_month_key",
    "month_offset",
    "month_parts",
    "month_range",
    "new_net_worth_account",
    "new_one_time_item",
    "new_recurring_item",
    "normalize_mode",
    "normalize_month",
    "plan_from_dict",
    "plan_to_dict",
    "set_account_balance",
    "set_amount_for_month",
    "upsert_dated",
]
