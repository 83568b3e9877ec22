"""
Centralized configuration for all bounds, thresholds, windows, and messages.

Every tunable constant lives here. When the heuristic scorer is replaced by
a learned model, this module stays the parameter store for everything
around it (windows, confidence, narratives).
"""

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Risk scoring
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoringParams:
    """Step range mapped linearly (and inversely) onto the risk scale."""

    # At or below min_steps → maximum risk; at or above max_steps → zero risk
    min_steps: int = 2000
    max_steps: int = 14000

    scale_max: int = 100

    def __post_init__(self):
        if self.min_steps >= self.max_steps:
            raise ValueError(
                f"min_steps must be below max_steps, got {self.min_steps} >= {self.max_steps}"
            )


@dataclass(frozen=True)
class LabelThresholds:
    """Score boundaries for the qualitative label (lower bound inclusive)."""

    moderate: int = 35
    high: int = 70

    def __post_init__(self):
        if not 0 <= self.moderate <= self.high:
            raise ValueError(
                f"Label thresholds must satisfy 0 <= moderate <= high, "
                f"got moderate={self.moderate}, high={self.high}"
            )


# ---------------------------------------------------------------------------
# Confidence heuristic
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfidenceParams:
    """
    confidence = clamp(base + records * per_record, floor, ceiling)

    `records` is the raw record count, standing in for days of signal.
    """

    base: int = 55
    per_record: int = 6
    floor: int = 55
    ceiling: int = 95

    def __post_init__(self):
        if self.floor > self.ceiling:
            raise ValueError(
                f"Confidence floor must not exceed ceiling, got {self.floor} > {self.ceiling}"
            )


# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WindowParams:
    """Trailing window sizes, in days."""

    weekly: int = 7
    chart: int = 7
    # Below this many scored days the weekly summary is shown as a prompt
    min_scored_days: int = 3


# ---------------------------------------------------------------------------
# Weekly trend narrative
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrendThresholds:
    """Score delta (last scored day minus first) that flips the narrative."""

    rising: int = 12
    falling: int = -12


@dataclass(frozen=True)
class Narratives:
    """Fixed one-line summaries for the weekly card."""

    increasing: str = (
        "Strain appears to be increasing this week. "
        "Consider prioritizing recovery and sleep."
    )
    decreasing: str = (
        "Strain is trending down this week. "
        "Nice—keep your recovery habits consistent."
    )
    stable: str = (
        "Strain is relatively stable this week. "
        "Keep an eye on rest and workload balance."
    )
    no_data: str = "No data available."


# ---------------------------------------------------------------------------
# Activity estimates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ActivityParams:
    """Rough conversions used by the dashboard totals."""

    steps_per_kcal: int = 20
    steps_per_km: float = 2000.0


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StepwiseConfig:
    """Complete engine configuration. Pass to pipeline to override defaults."""

    scoring: ScoringParams = field(default_factory=ScoringParams)
    labels: LabelThresholds = field(default_factory=LabelThresholds)
    confidence: ConfidenceParams = field(default_factory=ConfidenceParams)
    windows: WindowParams = field(default_factory=WindowParams)
    trend: TrendThresholds = field(default_factory=TrendThresholds)
    narratives: Narratives = field(default_factory=Narratives)
    activity: ActivityParams = field(default_factory=ActivityParams)
