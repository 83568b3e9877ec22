"""
Risk scoring: maps a step total onto a [0, 100] burnout risk score and label.

Placeholder heuristic, to be replaced by a model. Everything downstream
talks to it through ScoreFn, (total_steps) -> (score, label), so a
different strategy can be passed in without touching aggregation or
summarization.
"""

from functools import partial
from typing import Callable, Optional, Tuple

import numpy as np
import pandas as pd

from stepwise.config import StepwiseConfig


ScoreFn = Callable[[int], Tuple[int, str]]

LABELS = ("Low", "Moderate", "High")


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round_half_away(values):
    """
    Round to the nearest integer with ties going away from zero.

    np.round ties to even, which would move scores sitting exactly on .5
    (and therefore label boundaries) relative to the mobile client.
    Accepts scalars or arrays; returns float64 of the same shape.
    """
    arr = np.asarray(values, dtype=np.float64)
    mag = np.abs(arr)
    whole = np.floor(mag)
    rounded = np.where(mag - whole >= 0.5, whole + 1.0, whole)
    return np.copysign(rounded, arr)


# ---------------------------------------------------------------------------
# Scalar scorer (the swappable contract)
# ---------------------------------------------------------------------------

def classify_score(score: int, cfg: StepwiseConfig) -> str:
    """Map a numeric score to its qualitative label."""
    lt = cfg.labels
    if score < lt.moderate:
        return "Low"
    if score < lt.high:
        return "Moderate"
    return "High"


def score_steps(total_steps: int, cfg: StepwiseConfig) -> Tuple[int, str]:
    """
    Score a step total. Fewer steps → higher risk.

    Totals outside [min_steps, max_steps] are clamped, so any integer is
    accepted. A total <= 0 means "no data" and should be filtered by the
    caller; here it simply scores as maximum risk.
    """
    s = cfg.scoring
    clamped = min(max(int(total_steps), s.min_steps), s.max_steps)
    ratio = (s.max_steps - clamped) / (s.max_steps - s.min_steps)
    score = int(round_half_away(ratio * s.scale_max))
    return score, classify_score(score, cfg)


def heuristic_scorer(cfg: Optional[StepwiseConfig] = None) -> ScoreFn:
    """Default ScoreFn bound to a config."""
    if cfg is None:
        cfg = StepwiseConfig()
    return partial(score_steps, cfg=cfg)


# ---------------------------------------------------------------------------
# Column scorer (daily series)
# ---------------------------------------------------------------------------

def score_totals(
    totals: pd.Series,
    cfg: StepwiseConfig,
    scorer: Optional[ScoreFn] = None,
) -> pd.DataFrame:
    """
    Score a Series of daily totals, returning columns steps / score / label.

    Days with steps <= 0 are missing: score is <NA> and label is None.
    Without a custom scorer the heuristic runs vectorised; with one, it is
    applied to each scored day.
    """
    steps = totals.astype("int64")
    missing = steps <= 0

    if scorer is None:
        s = cfg.scoring
        lt = cfg.labels
        clamped = steps.clip(lower=s.min_steps, upper=s.max_steps)
        ratio = (s.max_steps - clamped) / (s.max_steps - s.min_steps)
        raw = round_half_away(ratio.to_numpy() * s.scale_max)
        labels = np.select(
            [raw < lt.moderate, raw < lt.high],
            ["Low", "Moderate"],
            default="High",
        ).astype(object)
        scores = pd.Series(raw, index=steps.index).astype("Int64")
        labels = pd.Series(labels, index=steps.index, dtype=object)
    else:
        pairs = [scorer(int(n)) if n > 0 else (None, None) for n in steps]
        scores = pd.Series([p[0] for p in pairs], index=steps.index, dtype="Int64")
        labels = pd.Series([p[1] for p in pairs], index=steps.index, dtype=object)

    scores[missing] = pd.NA
    labels[missing] = None

    return pd.DataFrame({"steps": steps, "score": scores, "label": labels})
