"""Trend assessment model."""

from dataclasses import dataclass
from enum import Enum


class AnalysisStatus(str, Enum):
    """Overall classification of a weight trend."""

    HEALTHY = "healthy"
    WARNING = "warning"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AnalysisResult:
    """Assessment returned by the trend advisor."""

    status: AnalysisStatus
    message: str
    recommendation: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "message": self.message,
            "recommendation": self.recommendation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        """Create from a reply dictionary.

        Raises:
            ValueError: if a field is missing or the status is not recognized
        """
        missing = [k for k in ("status", "message", "recommendation") if not data.get(k)]
        if missing:
            raise ValueError(f"Missing fields in assessment: {', '.join(missing)}")
        return cls(
            status=AnalysisStatus(data["status"]),
            message=str(data["message"]),
            recommendation=str(data["recommendation"]),
        )


INSUFFICIENT_DATA = AnalysisResult(
    status=AnalysisStatus.UNKNOWN,
    message="Not enough data to analyse.",
    recommendation="Add at least two weight records to receive insights.",
)

ANALYSIS_UNAVAILABLE = AnalysisResult(
    status=AnalysisStatus.UNKNOWN,
    message="The data could not be analysed right now.",
    recommendation="Check your connection or try again later.",
)
