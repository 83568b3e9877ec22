"""
Pipeline orchestration: load → aggregate → score → summarize → report.

This is the only module with I/O (file loading, report formatting).
All analytical logic is delegated to aggregation, scoring, summary, series.

Entry points:
    - analyze(filepath)        CLI mode, reads a JSON list of records
    - analyze_data(data)       UI / backend mode, list-of-dict input
    - analyze_records(records) pure core over StepRecord objects
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from stepwise.aggregation import daily_totals
from stepwise.config import StepwiseConfig
from stepwise.models import StepRecord
from stepwise.scoring import ScoreFn, heuristic_scorer
from stepwise.series import build_series, recent_points, trend_stats
from stepwise.summary import (
    activity_totals,
    has_sufficient_data,
    summarize_whole_history,
    weekly_summary,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data loading and validation (boundary only; the core never validates)
# ---------------------------------------------------------------------------

REQUIRED_FIELDS = {"date", "count"}


def parse_records(data: List[dict]) -> List[StepRecord]:
    """
    Validate list-of-dict input and convert it to StepRecords.

    Dates are parsed with pandas; timezone-aware values keep their own
    wall-clock day. An empty list is valid and yields no records.
    Dates must be strings and counts non-negative integers.
    """
    records = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Record {idx}: expected an object, got {type(entry).__name__}")

        missing = REQUIRED_FIELDS - set(entry.keys())
        if missing:
            raise ValueError(f"Record {idx}: missing required fields: {sorted(missing)}")

        if not isinstance(entry["date"], str):
            raise ValueError(f"Record {idx}: date must be a string, got {entry['date']!r}")
        try:
            stamp = pd.Timestamp(entry["date"])
        except (ValueError, TypeError) as e:
            raise ValueError(f"Record {idx}: invalid date {entry['date']!r}: {e}") from e
        if pd.isna(stamp):
            raise ValueError(f"Record {idx}: date is empty")

        count = entry["count"]
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Record {idx}: count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError(f"Record {idx}: count must be non-negative, got {count}")

        records.append(StepRecord(date=stamp.to_pydatetime(), count=count))

    return records


def load_data(filepath: Union[str, Path]) -> List[StepRecord]:
    """Load and validate step records from a JSON file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Data file must contain a JSON list, got {type(data).__name__}")
    if not data:
        raise ValueError("Data file is empty")

    records = parse_records(data)
    logger.debug("Loaded %d step records from %s", len(records), path)
    return records


# ---------------------------------------------------------------------------
# Core analysis (PURE FUNCTION — NO FILE I/O)
# ---------------------------------------------------------------------------

def analyze_records(
    records: Sequence[StepRecord],
    cfg: Optional[StepwiseConfig] = None,
    scorer: Optional[ScoreFn] = None,
) -> Dict:
    """
    Run every engine stage over one snapshot of the records.

    Stateless; recomputed from scratch on each call.
    """
    if cfg is None:
        cfg = StepwiseConfig()
    if scorer is None:
        scorer = heuristic_scorer(cfg)

    # Stage 1: Whole-history risk
    risk = summarize_whole_history(records, cfg, scorer)

    # Stage 2: Rolling week
    weekly = weekly_summary(daily_totals(records), cfg, scorer)

    # Stage 3: Daily series
    series = build_series(records, cfg, scorer)

    logger.debug(
        "Analyzed %d records over %d days (scored this week: %d)",
        len(records), len(series), weekly.scored_days,
    )

    return {
        "risk": risk.to_dict() if risk is not None else None,
        "weekly": weekly.to_dict(),
        "weekly_sufficient": has_sufficient_data(weekly, cfg),
        "series": [p.to_dict() for p in series],
        "recent": [p.to_dict() for p in recent_points(series, cfg)],
        "trend": trend_stats(series, cfg),
        "activity": activity_totals(records, cfg).to_dict(),
        "windows": {
            "weekly": cfg.windows.weekly,
            "chart": cfg.windows.chart,
            "min_scored_days": cfg.windows.min_scored_days,
        },
    }


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def analyze(
    filepath: Union[str, Path],
    cfg: Optional[StepwiseConfig] = None,
    scorer: Optional[ScoreFn] = None,
) -> Dict:
    """CLI entry point: read a JSON file of records and analyze it."""
    return analyze_records(load_data(filepath), cfg, scorer)


def analyze_data(
    data: List[dict],
    cfg: Optional[StepwiseConfig] = None,
    scorer: Optional[ScoreFn] = None,
) -> Dict:
    """
    Backend / UI integration entry point.

    Accepts list-of-dict JSON data directly.
    No file system usage.
    """
    return analyze_records(parse_records(data), cfg, scorer)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def _format_delta(delta: int) -> str:
    return f"+{delta}" if delta > 0 else str(delta)


def generate_report(result: Dict) -> str:
    """Format the analysis result as a human-readable text report."""
    w = result["windows"]
    risk = result["risk"]
    weekly = result["weekly"]
    trend = result["trend"]

    lines = [
        "STEPWISE BURNOUT REPORT",
        "=" * 58,
        "",
    ]

    if risk is None:
        lines += [
            "  Risk Score          : —/100 (NO DATA)",
            "  Status              : Awaiting sync",
        ]
    else:
        lines += [
            f"  Risk Score          : {risk['score']}/100",
            f"  Risk Level          : {risk['label'].upper()}",
            f"  Confidence          : {risk['confidence']}%",
            f"  Total Steps         : {risk['total_steps']}",
        ]

    lines += ["", "  This Week:"]
    if result["weekly_sufficient"]:
        lines += [
            f"    Avg risk          : {weekly['average_score']}",
            f"    Trend             : {weekly['delta_text']}",
            f"    Data              : {weekly['scored_days']}/{w['weekly']}",
            f"    {weekly['narrative']}",
        ]
    else:
        lines += [
            "    Not enough data yet.",
            f"    A weekly summary needs at least {w['min_scored_days']} days of activity data.",
        ]

    latest = trend["latest"]
    lines += ["", "  Trends:"]
    if latest is None:
        lines.append("    Latest            : No scored day yet")
    else:
        lines += [
            f"    Latest            : {latest['label']} ({latest['score']}/100)",
            f"    Avg ({w['chart']}d)          : {trend['average']}",
            f"    Δ ({w['chart']}d)            : {_format_delta(trend['delta'])}",
        ]

    if result["recent"]:
        lines += ["", "  Recent Days:"]
        for point in reversed(result["recent"]):
            if point["score"] is None:
                status = "No data (missing)"
            else:
                status = f"{point['score']}/100 {point['label']}"
            lines.append(f"    {point['day']}  steps: {point['steps']:>6}  {status}")

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)


def generate_share_text(result: Dict) -> str:
    """Short activity message for sharing."""
    activity = result["activity"]
    return (
        f"🚶 Total Steps: {activity['total_steps']}\n"
        f"🏃 Distance: {activity['distance_km']:.1f} km\n"
        f"🔥 Calories: {activity['calories']} kcal\n"
        "________________\n"
        "Sent with Stepwise"
    )

