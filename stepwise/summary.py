"""
Window summaries: whole-history risk, rolling weekly summary, activity totals.

All functions are pure; "no data" is returned as None or as an explicit
empty summary, never raised.
"""

from typing import Optional, Sequence

import numpy as np

from stepwise.config import StepwiseConfig
from stepwise.models import (
    ActivityTotals,
    BurnoutRiskResult,
    DailyTotal,
    StepRecord,
    WeeklySummary,
)
from stepwise.scoring import ScoreFn, heuristic_scorer, round_half_away


# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------

def compute_confidence(record_count: int, cfg: StepwiseConfig) -> int:
    """
    Heuristic confidence in [floor, ceiling].

    Counts raw records, not distinct days: several records on one day
    still raise confidence. Kept as-is until the product defines it.
    """
    c = cfg.confidence
    raw = c.base + record_count * c.per_record
    return int(min(c.ceiling, max(c.floor, raw)))


# ---------------------------------------------------------------------------
# Whole-history result
# ---------------------------------------------------------------------------

def summarize_whole_history(
    records: Sequence[StepRecord],
    cfg: StepwiseConfig,
    scorer: Optional[ScoreFn] = None,
) -> Optional[BurnoutRiskResult]:
    """Score the summed history; None when it holds no positive step total."""
    if scorer is None:
        scorer = heuristic_scorer(cfg)

    total_steps = sum(int(r.count) for r in records)
    if total_steps <= 0:
        return None

    score, label = scorer(total_steps)
    return BurnoutRiskResult(
        total_steps=total_steps,
        score=score,
        label=label,
        confidence=compute_confidence(len(records), cfg),
    )


# ---------------------------------------------------------------------------
# Rolling weekly summary
# ---------------------------------------------------------------------------

def classify_trend(delta: int, cfg: StepwiseConfig) -> str:
    """Pick the weekly narrative from the score delta."""
    t = cfg.trend
    n = cfg.narratives
    if delta >= t.rising:
        return n.increasing
    if delta <= t.falling:
        return n.decreasing
    return n.stable


def weekly_summary(
    totals: Sequence[DailyTotal],
    cfg: StepwiseConfig,
    scorer: Optional[ScoreFn] = None,
) -> WeeklySummary:
    """
    Summarize the trailing week of chronologically ordered daily totals.

    Only days with positive steps are scored. trend_delta is the last
    scored day's score minus the first one's.
    """
    if scorer is None:
        scorer = heuristic_scorer(cfg)

    recent = list(totals)[-cfg.windows.weekly:]
    valid = [d for d in recent if d.total_steps > 0]

    if not valid:
        return WeeklySummary(
            scored_days=0,
            average_score=0,
            trend_delta=0,
            narrative=cfg.narratives.no_data,
        )

    scores = np.array([scorer(d.total_steps)[0] for d in valid], dtype=np.int64)
    average = int(round_half_away(scores.mean()))
    delta = int(scores[-1] - scores[0])

    return WeeklySummary(
        scored_days=len(valid),
        average_score=average,
        trend_delta=delta,
        narrative=classify_trend(delta, cfg),
    )


def has_sufficient_data(summary: WeeklySummary, cfg: StepwiseConfig) -> bool:
    """Display policy: fewer scored days than the minimum → show a prompt instead."""
    return summary.scored_days >= cfg.windows.min_scored_days


# ---------------------------------------------------------------------------
# Activity totals
# ---------------------------------------------------------------------------

def activity_totals(records: Sequence[StepRecord], cfg: StepwiseConfig) -> ActivityTotals:
    a = cfg.activity
    total_steps = sum(int(r.count) for r in records)
    return ActivityTotals(
        total_steps=total_steps,
        calories=total_steps // a.steps_per_kcal,
        distance_km=total_steps / a.steps_per_km,
    )
