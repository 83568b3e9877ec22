"""
Risk time series: one RiskPoint per recorded day, plus the views consumers
take over it.

The chart plots only scored points; the recent-days list keeps missing
days so they can be shown as "No data". Both read the same series.
"""

from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from stepwise.aggregation import daily_totals_series
from stepwise.config import StepwiseConfig
from stepwise.models import RiskPoint, StepRecord
from stepwise.scoring import ScoreFn, round_half_away, score_totals


# ---------------------------------------------------------------------------
# Series builder
# ---------------------------------------------------------------------------

def build_series(
    records: Sequence[StepRecord],
    cfg: StepwiseConfig,
    scorer: Optional[ScoreFn] = None,
) -> List[RiskPoint]:
    """
    Daily risk points ascending by day.

    Days with steps <= 0 carry no score or label. Rebuilt from the
    records on every call; identical input gives identical output.
    """
    scored = score_totals(daily_totals_series(records), cfg, scorer)

    points = []
    for day, row in scored.iterrows():
        if pd.isna(row["score"]):
            points.append(RiskPoint(day=day, steps=int(row["steps"])))
        else:
            points.append(
                RiskPoint(
                    day=day,
                    steps=int(row["steps"]),
                    score=int(row["score"]),
                    label=row["label"],
                )
            )
    return points


# ---------------------------------------------------------------------------
# Consumer views
# ---------------------------------------------------------------------------

def recent_points(series: Sequence[RiskPoint], cfg: StepwiseConfig) -> List[RiskPoint]:
    """Trailing chart window, missing days included."""
    return list(series)[-cfg.windows.chart:]


def chart_points(series: Sequence[RiskPoint], cfg: StepwiseConfig) -> List[RiskPoint]:
    """Trailing chart window restricted to scored days."""
    return [p for p in recent_points(series, cfg) if not p.is_missing]


def latest_scored_point(series: Sequence[RiskPoint]) -> Optional[RiskPoint]:
    for point in reversed(series):
        if not point.is_missing:
            return point
    return None


def has_any_data(series: Sequence[RiskPoint]) -> bool:
    return any(not p.is_missing for p in series)


def trend_stats(series: Sequence[RiskPoint], cfg: StepwiseConfig) -> Dict[str, object]:
    """
    Headline numbers for the trends screen.

    Returns:
        {"latest": dict | None, "average": int, "delta": int}

    average and delta are taken over the scored points of the trailing
    chart window; delta needs at least two of them, otherwise 0.
    """
    scores = np.array([p.score for p in chart_points(series, cfg)], dtype=np.int64)
    latest = latest_scored_point(series)

    average = int(round_half_away(scores.mean())) if len(scores) else 0
    delta = int(scores[-1] - scores[0]) if len(scores) >= 2 else 0

    return {
        "latest": latest.to_dict() if latest is not None else None,
        "average": average,
        "delta": delta,
    }
