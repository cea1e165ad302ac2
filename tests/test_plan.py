import math

from planner.data_model import (
    CARRY_FORWARD,
    DEFAULT_MONTH,
    MONTH_ONLY,
    DatedAmount,
    NetWorthMode,
    dedupe_dated,
    default_plan,
    new_net_worth_account,
    new_one_time_item,
    new_recurring_item,
    normalize_mode,
    plan_from_dict,
    plan_to_dict,
    set_account_balance,
    set_amount_for_month,
    upsert_dated,
)


def test_default_plan_matches_stored_defaults():
    plan = default_plan()

    assert plan.currency == "USD"
    assert plan.start_month == DEFAULT_MONTH
    assert plan.net_worth_mode is NetWorthMode.HYBRID
    assert [a.name for a in plan.net_worth_accounts] == ["Checking", "Savings", "Brokerage", "Roth IRA"]
    assert default_plan().net_worth_accounts is not plan.net_worth_accounts


def test_plan_from_dict_coerces_malformed_documents():
    plan = plan_from_dict(
        {
            "startMonth": "Jan 2026",
            "income": "not a list",
            "expenses": [None, {"defaultAmount": "abc", "behavior": "sometimes", "endMonth": "never"}],
            "netWorthAccounts": [{}],
            "netWorthMode": None,
        }
    )

    assert plan.start_month == DEFAULT_MONTH
    assert plan.income == []
    assert len(plan.expenses) == 1
    expense = plan.expenses[0]
    assert expense.default_amount == 0.0
    assert expense.behavior == CARRY_FORWARD
    assert expense.end_month is None
    assert plan.net_worth_accounts[0].name == "Account"
    assert plan.net_worth_accounts[0].id
    assert plan.net_worth_mode is NetWorthMode.HYBRID


def test_plan_from_dict_accepts_legacy_iso_field_names():
    plan = plan_from_dict(
        {
            "startMonthISO": "2027-04",
            "oneTimeIncome": [{"monthISO": "2027-06", "amount": 10}],
            "netWorthAccounts": [{"id": "a", "balances": [{"monthISO": "2027-04", "amount": 5}]}],
        }
    )

    assert plan.start_month == "2027-04"
    assert plan.one_time_income[0].month == "2027-06"
    assert plan.net_worth_accounts[0].balances == [DatedAmount("2027-04", 5.0)]


def test_non_dict_document_yields_default_plan():
    assert plan_from_dict(None) == default_plan()
    assert plan_from_dict([1, 2]) == default_plan()


def test_plan_to_dict_round_trip_keeps_fields():
    raw = {
        "currency": "eur",
        "startMonth": "2026-05",
        "startingNetWorth": 100,
        "goalNetWorth": 1_000_000,
        "expectedReturnPct": 5,
        "income": [{"id": "i", "name": "Pay", "defaultAmount": 10, "behavior": "monthOnly", "overrides": [{"month": "2026-06", "amount": 0}]}],
        "netWorthAccounts": [{"id": "a", "name": "A", "balances": [{"month": "2026-05", "amount": 1}]}],
        "netWorthMode": "snapshot",
    }

    doc = plan_to_dict(plan_from_dict(raw))

    assert doc["currency"] == "EUR"
    assert doc["netWorthMode"] == "snapshot"
    assert doc["income"][0]["overrides"] == [{"month": "2026-06", "amount": 0.0}]
    assert plan_from_dict(doc) == plan_from_dict(raw)


def test_normalize_mode():
    assert normalize_mode("projection") is NetWorthMode.PROJECTION
    assert normalize_mode(NetWorthMode.SNAPSHOT) is NetWorthMode.SNAPSHOT
    assert normalize_mode("nope") is NetWorthMode.HYBRID
    assert normalize_mode(["x"]) is NetWorthMode.HYBRID


def test_dedupe_is_last_write_wins_and_sorted():
    entries = [DatedAmount("2026-03", 1.0), DatedAmount("2026-01", 2.0), DatedAmount("2026-03", 3.0), DatedAmount("bad", 4.0)]

    assert dedupe_dated(entries) == [DatedAmount("2026-01", 2.0), DatedAmount("2026-03", 3.0)]


def test_upsert_replaces_or_inserts_in_order():
    entries = [DatedAmount("2026-01", 1.0), DatedAmount("2026-05", 5.0)]

    assert upsert_dated(entries, "2026-03", 3.0) == [DatedAmount("2026-01", 1.0), DatedAmount("2026-03", 3.0), DatedAmount("2026-05", 5.0)]
    assert upsert_dated(entries, "2026-05", 6.0)[-1] == DatedAmount("2026-05", 6.0)
    assert entries == [DatedAmount("2026-01", 1.0), DatedAmount("2026-05", 5.0)]


def test_set_amount_for_month_targets_active_history():
    carry = new_recurring_item("income")
    month_only = new_recurring_item("expense")
    month_only.behavior = MONTH_ONLY

    updated_carry = set_amount_for_month(carry, "2026-02", 10.0)
    updated_month_only = set_amount_for_month(month_only, "2026-02", 20.0)

    assert updated_carry.changes == [DatedAmount("2026-02", 10.0)]
    assert updated_carry.overrides == []
    assert updated_month_only.overrides == [DatedAmount("2026-02", 20.0)]
    assert carry.changes == []


def test_factories():
    item = new_one_time_item("expense", "bogus")
    acct = set_account_balance(new_net_worth_account(), "2026-01", math.pi)

    assert item.month == DEFAULT_MONTH
    assert item.name == "One-time expense"
    assert new_recurring_item("income").name == "New income"
    assert acct.name == "New account"
    assert acct.balances == [DatedAmount("2026-01", math.pi)]


def test_starting_net_worth_is_defaulted_when_missing_or_malformed():
    assert plan_from_dict({"startingNetWorth": None}).starting_net_worth == 0.0
    assert plan_from_dict({"startingNetWorth": "abc"}).starting_net_worth == 0.0
    assert plan_from_dict({"startingNetWorth": "250"}).starting_net_worth == 250.0
    assert plan_to_dict(plan_from_dict({"startingNetWorth": math.inf}))["startingNetWorth"] == 0.0
