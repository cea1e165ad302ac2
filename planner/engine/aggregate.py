from typing import List, Sequence

import pandas as pd

from ..data_model import Plan, add_months, month_parts, normalize_month
from .series import SeriesPoint

REQUIRED_COLUMNS = {"MonthIndex", "CalendarYear", "MonthInYear"}


def series_to_frame(plan: Plan, series: Sequence[SeriesPoint], name: str = "Plan", offset: int = 0) -> pd.DataFrame:
    # offset: month index of the first point when the series was windowed
    start = add_months(normalize_month(plan.start_month), offset)
    records = []
    for point in series:
        month = add_months(start, point.month_index)
        calendar_year, month_in_year = month_parts(month)
        records.append(
            {
                "Plan": name,
                "MonthIndex": point.month_index,
                "Month": month,
                "CalendarYear": calendar_year,
                "MonthInYear": month_in_year,
                "NetWorth": point.net_worth,
            }
        )
    return pd.DataFrame(records, columns=["Plan", "MonthIndex", "Month", "CalendarYear", "MonthInYear", "NetWorth"])


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("MonthIndex").copy()


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Collapse a monthly net worth frame to monthly/quarterly/yearly end-of-period rows."""
    if df.empty:
        return df

    freq = (freq or "M").upper()
    df = _prepare(df)

    if freq == "Q":
        quarter = ((df["MonthInYear"] - 1) // 3 + 1).astype(int)
        df["Period"] = df["CalendarYear"].astype(str) + " Q" + quarter.astype(str)
        df["PeriodValue"] = df["CalendarYear"] * 4 + quarter - 1
        return df.groupby("PeriodValue", as_index=False).last()

    if freq == "Y":
        df["Period"] = df["CalendarYear"].astype(str)
        df["PeriodValue"] = df["CalendarYear"]
        return df.groupby("PeriodValue", as_index=False).last()

    df["PeriodValue"] = df["MonthIndex"]
    df["Period"] = df.get("Month", df["MonthIndex"].astype(str))
    return df


def clamp_window_offset(max_index: int, window_months: int, offset: int) -> int:
    return min(max(0, int(offset)), max(0, max_index - max(0, int(window_months))))


def window_series(series: Sequence[SeriesPoint], window_months: int, offset: int = 0) -> List[SeriesPoint]:
    """Slice ``window_months + 1`` points starting at ``offset`` and rebase their indexes to 0."""
    if not series:
        return []
    window_months = max(0, int(window_months))
    offset = clamp_window_offset(series[-1].month_index, window_months, offset)
    return [
        SeriesPoint(month_index=p.month_index - offset, net_worth=p.net_worth)
        for p in series
        if offset <= p.month_index <= offset + window_months
    ]
