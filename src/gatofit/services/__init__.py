"""Services for gatofit."""

from .entry_store import EntryStore
from .series import (
    DerivedMetrics,
    RecordTrend,
    TrendDirection,
    chart_bounds,
    compute_metrics,
    history,
    normalize,
    project,
)
from .trend_advisor import AssessmentSlot, TrendAdvisor

__all__ = [
    "AssessmentSlot",
    "chart_bounds",
    "compute_metrics",
    "DerivedMetrics",
    "EntryStore",
    "history",
    "normalize",
    "project",
    "RecordTrend",
    "TrendAdvisor",
    "TrendDirection",
]
