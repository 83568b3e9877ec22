"""
STEPWISE v1.0 — Step-Driven Burnout Risk Engine

Turns raw daily step records into a burnout risk estimate, a rolling
weekly summary, and a daily risk series for charting. Fully stateless and
safe for backend/API usage.

Public API:
    analyze(filepath)          → CLI mode
    analyze_data(data)         → UI / backend mode
    analyze_records(records)   → pure core over StepRecord objects
    generate_report(result)    → formatted report
"""

from stepwise.config import StepwiseConfig
from stepwise.models import StepRecord
from stepwise.pipeline import analyze, analyze_data, analyze_records, generate_report

__version__ = "1.0.0"

__all__ = [
    "StepRecord",
    "StepwiseConfig",
    "analyze",
    "analyze_data",
    "analyze_records",
    "generate_report",
]
