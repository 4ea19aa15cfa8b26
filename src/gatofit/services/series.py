"""Weight series derivations: ordering, metrics and windowed projection.

Everything here is a pure function of the record collection (and, for
projection, of the evaluation instant). Nothing is cached; callers recompute
on every read.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Iterable, Sequence

from ..models.weight import TimeWindow, WeightRecord


class TrendDirection(str, Enum):
    """Direction of change from the previous record."""

    INCREASE = "increase"
    DECREASE = "decrease"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class RecordTrend:
    """Change between a record and its chronological predecessor."""

    record: WeightRecord
    delta: float

    @property
    def direction(self) -> TrendDirection:
        # Exact comparison, no tolerance
        if self.delta > 0:
            return TrendDirection.INCREASE
        if self.delta < 0:
            return TrendDirection.DECREASE
        return TrendDirection.UNCHANGED

    @property
    def magnitude(self) -> float:
        return abs(self.delta)

    def to_dict(self) -> dict:
        return {
            "id": self.record.id,
            "delta": self.delta,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class DerivedMetrics:
    """Summary values for an ordered series.

    ``current_value``, ``starting_value``, ``min_weight`` and ``max_weight``
    are None for an empty series.
    """

    current_value: float | None = None
    starting_value: float | None = None
    net_change: float = 0.0
    min_weight: float | None = None
    max_weight: float | None = None
    trends: list[RecordTrend] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.current_value is None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "current_value": self.current_value,
            "starting_value": self.starting_value,
            "net_change": self.net_change,
            "min_weight": self.min_weight,
            "max_weight": self.max_weight,
            "trends": [t.to_dict() for t in self.trends],
        }


def normalize(records: Iterable[WeightRecord]) -> list[WeightRecord]:
    """Order records ascending by date.

    The sort is stable, so records sharing a date keep their input order.
    """
    return sorted(records, key=lambda r: r.date)


def compute_trends(ordered: Sequence[WeightRecord]) -> list[RecordTrend]:
    """Get the change of each record from the one before it.

    The earliest record has no predecessor and is not included.
    """
    return [
        RecordTrend(record=ordered[i], delta=ordered[i].weight - ordered[i - 1].weight)
        for i in range(1, len(ordered))
    ]


def compute_metrics(ordered: Sequence[WeightRecord]) -> DerivedMetrics:
    """Derive current/starting values, net change, trends and min/max.

    Args:
        ordered: Records in ascending date order (see normalize)

    Returns:
        DerivedMetrics, with sentinel values if ``ordered`` is empty
    """
    if not ordered:
        return DerivedMetrics()

    starting = ordered[0].weight
    current = ordered[-1].weight
    weights = [r.weight for r in ordered]

    return DerivedMetrics(
        current_value=current,
        starting_value=starting,
        net_change=current - starting,
        min_weight=min(weights),
        max_weight=max(weights),
        trends=compute_trends(ordered),
    )


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def project(
    ordered: Sequence[WeightRecord],
    window: TimeWindow | str,
    now: date | datetime,
) -> list[WeightRecord]:
    """Filter an ordered series to a time window ending at ``now``.

    A record is kept when its date, taken at midnight, is strictly after
    ``now`` minus the window. The input is never modified.

    Args:
        ordered: Records in ascending date order
        window: Window to keep (``ALL`` keeps everything)
        now: Evaluation instant the window is anchored to

    Returns:
        A new list with the records inside the window
    """
    window = TimeWindow(window)
    cutoff = window.cutoff(_as_datetime(now))
    if cutoff is None:
        return list(ordered)

    return [r for r in ordered if _as_datetime(r.date) > cutoff]


def history(ordered: Sequence[WeightRecord]) -> list[tuple[WeightRecord, RecordTrend | None]]:
    """Get newest-first (record, trend) pairs for a history listing.

    Each trend compares a record with its chronological predecessor; the
    earliest record gets None.
    """
    pairs: list[tuple[WeightRecord, RecordTrend | None]] = [(ordered[0], None)] if ordered else []
    pairs.extend((t.record, t) for t in compute_trends(ordered))
    pairs.reverse()
    return pairs


def chart_bounds(
    records: Sequence[WeightRecord], padding: float = 0.5
) -> tuple[float, float] | None:
    """Get a y-axis domain for charting ``records``.

    Returns:
        (low, high) padded around the min/max weight, never below zero,
        or None when there is nothing to chart
    """
    metrics = compute_metrics(records)
    if metrics.is_empty:
        return None
    return (max(0.0, metrics.min_weight - padding), metrics.max_weight + padding)
