"""
Daily aggregation: groups raw step records into one total per calendar day.

Pure transforms over the caller's records; the input is never mutated.
Day truncation uses the calendar date carried by each timestamp as given.
Resolving timezones is the caller's job.
"""

from datetime import date, datetime
from typing import Dict, List, Sequence, Union

import pandas as pd

from stepwise.models import DailyTotal, StepRecord


FRAME_COLUMNS = ("day", "count")


def truncate_to_day(value: Union[datetime, date]) -> date:
    """Drop the time-of-day component. pd.Timestamp is a datetime, so it is covered."""
    if isinstance(value, datetime):
        return value.date()
    return value


def records_to_frame(records: Sequence[StepRecord]) -> pd.DataFrame:
    """One row per record with its truncated day and step count."""
    return pd.DataFrame(
        {
            "day": [truncate_to_day(r.date) for r in records],
            "count": pd.Series([int(r.count) for r in records], dtype="int64"),
        },
        columns=list(FRAME_COLUMNS),
    )


def daily_totals_series(records: Sequence[StepRecord]) -> pd.Series:
    """
    Steps per day as a Series indexed by day, ascending.

    Days with no records are absent. A day whose records all carry 0
    steps is present with total 0.
    """
    df = records_to_frame(records)
    if df.empty:
        return pd.Series(dtype="int64", name="total_steps")

    totals = df.groupby("day", sort=True)["count"].sum()
    totals.name = "total_steps"
    return totals


def aggregate_daily(records: Sequence[StepRecord]) -> Dict[date, DailyTotal]:
    """Map each recorded day to its DailyTotal, in ascending day order."""
    totals = daily_totals_series(records)
    return {
        day: DailyTotal(day=day, total_steps=int(total))
        for day, total in totals.items()
    }


def daily_totals(records: Sequence[StepRecord]) -> List[DailyTotal]:
    """Chronologically ordered DailyTotals (input for the weekly summary)."""
    return list(aggregate_daily(records).values())
