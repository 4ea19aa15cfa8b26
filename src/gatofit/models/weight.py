"""Weight record and time window models."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import uuid4

from dateutil.relativedelta import relativedelta


def parse_date(value: str | date) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


@dataclass(frozen=True)
class NewWeightRecord:
    """A measurement as submitted by the user, before it gets an id.

    Weight must be positive. This is the only place the rule is checked;
    records loaded from storage are trusted as-is.
    """

    date: date
    weight: float
    note: str | None = None

    def __post_init__(self):
        if self.weight is None:
            raise ValueError("Weight is required")
        if not math.isfinite(self.weight):
            raise ValueError(f"Weight must be a finite number, got {self.weight}")
        if not self.weight > 0:
            raise ValueError(f"Weight must be greater than zero, got {self.weight}")

    @classmethod
    def from_input(
        cls, date_value: str | date, weight_value: str | float | None, note: str | None = None
    ) -> "NewWeightRecord":
        """Build from raw form/CLI values.

        Raises:
            ValueError: if the date or weight cannot be parsed, or weight <= 0
        """
        if weight_value is None or str(weight_value).strip() == "":
            raise ValueError("Weight is required")
        try:
            weight = float(weight_value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid weight: {weight_value!r}")

        try:
            parsed_date = parse_date(date_value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid date: {date_value!r} (expected YYYY-MM-DD)")

        note = note.strip() if note else None
        return cls(date=parsed_date, weight=weight, note=note or None)


@dataclass(frozen=True)
class WeightRecord:
    """One stored weight measurement."""

    id: str
    date: date
    weight: float  # kg
    note: str | None = None

    @classmethod
    def create(cls, entry: NewWeightRecord) -> "WeightRecord":
        """Assign a fresh id to a new entry."""
        return cls(id=str(uuid4()), date=entry.date, weight=entry.weight, note=entry.note)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "id": self.id,
            "date": self.date.isoformat(),
            "weight": self.weight,
        }
        if self.note:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WeightRecord":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            date=parse_date(data["date"]),
            weight=float(data["weight"]),
            note=data.get("note") or None,
        )


class TimeWindow(str, Enum):
    """Named chart window, relative to the moment of evaluation."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    def cutoff(self, now: datetime) -> datetime | None:
        """Get the instant records must be strictly after, or None for ALL."""
        offsets = {
            TimeWindow.ONE_MONTH: relativedelta(months=1),
            TimeWindow.THREE_MONTHS: relativedelta(months=3),
            TimeWindow.SIX_MONTHS: relativedelta(months=6),
            TimeWindow.ONE_YEAR: relativedelta(years=1),
        }
        offset = offsets.get(self)
        if offset is None:
            return None
        return now - offset

    def get_display(self) -> str:
        """Get a human-readable label."""
        labels = {
            TimeWindow.ONE_MONTH: "Last month",
            TimeWindow.THREE_MONTHS: "Last 3 months",
            TimeWindow.SIX_MONTHS: "Last 6 months",
            TimeWindow.ONE_YEAR: "Last year",
            TimeWindow.ALL: "All time",
        }
        return labels[self]
