import pandas as pd
import pytest

from planner.data_model import plan_from_dict
from planner.engine import SeriesPoint, aggregate_period, build_net_worth_series, series_to_frame, window_series


def _plan():
    return plan_from_dict(
        {
            "startMonth": "2026-01",
            "netWorthMode": "projection",
            "netWorthAccounts": [],
            "income": [{"id": "pay", "defaultAmount": 100}],
        }
    )


def test_series_to_frame_labels_calendar_months():
    plan = _plan()
    df = series_to_frame(plan, build_net_worth_series(plan), name="Demo")

    assert len(df) == 601
    assert df.loc[0, "Month"] == "2026-01"
    assert df.loc[13, "Month"] == "2027-02"
    assert df.loc[13, "CalendarYear"] == 2027
    assert df.loc[13, "MonthInYear"] == 2
    assert set(df["Plan"]) == {"Demo"}


def test_aggregate_quarterly_keeps_end_of_quarter_value():
    plan = _plan()
    df = aggregate_period(series_to_frame(plan, build_net_worth_series(plan)), freq="q")

    assert len(df) == 201
    assert df.iloc[0]["Period"] == "2026 Q1"
    assert df.iloc[0]["NetWorth"] == pytest.approx(300.0)
    assert df.iloc[-1]["Period"] == "2076 Q1"


def test_aggregate_yearly_and_monthly():
    plan = _plan()
    monthly = series_to_frame(plan, build_net_worth_series(plan))

    yearly = aggregate_period(monthly, freq="Y")
    assert list(yearly["Period"][:2]) == ["2026", "2027"]
    assert yearly.iloc[0]["NetWorth"] == pytest.approx(1200.0)

    passthrough = aggregate_period(monthly, freq="M")
    assert len(passthrough) == 601
    assert passthrough.iloc[5]["Period"] == "2026-06"


def test_aggregate_requires_month_columns():
    with pytest.raises(KeyError):
        aggregate_period(pd.DataFrame([{"NetWorth": 1.0}]))


def test_aggregate_empty_frame_passthrough():
    empty = pd.DataFrame()

    assert aggregate_period(empty, "Q").empty


def test_window_series_rebases_and_clamps_offset():
    series = [SeriesPoint(month_index=i, net_worth=float(i)) for i in range(601)]

    first = window_series(series, 12, 0)
    assert [p.month_index for p in first] == list(range(13))

    clamped = window_series(series, 12, 10_000)
    assert [p.month_index for p in clamped] == list(range(13))
    assert clamped[0].net_worth == 588.0

    assert window_series([], 12, 0) == []


def test_series_to_frame_labels_windowed_series():
    plan = _plan()
    windowed = window_series(build_net_worth_series(plan), 3, 14)

    df = series_to_frame(plan, windowed, offset=14)

    assert list(df["Month"]) == ["2027-03", "2027-04", "2027-05", "2027-06"]
    assert list(df["MonthIndex"]) == [0, 1, 2, 3]
