"""
Value objects passed between engine stages.

- StepRecord: one raw observation supplied by the caller
- DailyTotal: steps summed per calendar day
- RiskPoint: one day of the risk time series (score absent == missing day)
- WeeklySummary: rolling statistics over the trailing week
- BurnoutRiskResult: whole-history risk estimate
- ActivityTotals: dashboard totals and rough estimates

All are frozen and recomputed on every call; nothing here is cached.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class StepRecord:
    """Raw step observation. Not validated here."""
    date: Union[datetime, date]
    count: int


@dataclass(frozen=True)
class DailyTotal:
    """Steps summed over one calendar day."""
    day: date
    total_steps: int

    def to_dict(self) -> Dict:
        return {"day": self.day.isoformat(), "total_steps": self.total_steps}


@dataclass(frozen=True)
class RiskPoint:
    """One day of the risk series. score/label are None for a missing day."""
    day: date
    steps: int
    score: Optional[int] = None
    label: Optional[str] = None

    @property
    def is_missing(self) -> bool:
        return self.score is None

    def to_dict(self) -> Dict:
        return {
            "day": self.day.isoformat(),
            "steps": self.steps,
            "score": self.score,
            "label": self.label,
        }


@dataclass(frozen=True)
class WeeklySummary:
    """Trailing-week statistics over scored days only."""
    scored_days: int
    average_score: int
    trend_delta: int
    narrative: str

    @property
    def delta_text(self) -> str:
        if self.scored_days == 0:
            return "—"
        if self.trend_delta > 0:
            return f"+{self.trend_delta}"
        return str(self.trend_delta)

    def to_dict(self) -> Dict:
        return {
            "scored_days": self.scored_days,
            "average_score": self.average_score,
            "trend_delta": self.trend_delta,
            "delta_text": self.delta_text,
            "narrative": self.narrative,
        }


@dataclass(frozen=True)
class BurnoutRiskResult:
    """Risk estimate treating the whole supplied history as one window."""
    total_steps: int
    score: int
    label: str
    confidence: int

    def to_dict(self) -> Dict:
        return {
            "total_steps": self.total_steps,
            "score": self.score,
            "label": self.label,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class ActivityTotals:
    total_steps: int
    calories: int
    distance_km: float

    @property
    def has_data(self) -> bool:
        return self.total_steps > 0

    def to_dict(self) -> Dict:
        return {
            "total_steps": self.total_steps,
            "calories": self.calories,
            "distance_km": round(self.distance_km, 1),
        }
