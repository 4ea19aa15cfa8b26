"""Data models for gatofit."""

from .analysis import (
    ANALYSIS_UNAVAILABLE,
    INSUFFICIENT_DATA,
    AnalysisResult,
    AnalysisStatus,
)
from .weight import NewWeightRecord, TimeWindow, WeightRecord, parse_date

__all__ = [
    "ANALYSIS_UNAVAILABLE",
    "AnalysisResult",
    "AnalysisStatus",
    "INSUFFICIENT_DATA",
    "NewWeightRecord",
    "parse_date",
    "TimeWindow",
    "WeightRecord",
]
