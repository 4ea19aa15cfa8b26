"""Tests for weight series derivations."""

from datetime import date, datetime, time

import pytest
from dateutil.relativedelta import relativedelta

from gatofit.models.weight import TimeWindow, WeightRecord
from gatofit.services.series import (
    TrendDirection,
    chart_bounds,
    compute_metrics,
    history,
    normalize,
    project,
)


def make_record(record_id: str, day: date, weight: float) -> WeightRecord:
    return WeightRecord(id=record_id, date=day, weight=weight)


class TestNormalize:
    """Tests for normalize."""

    def test_sorted_and_same_length(self, sample_records):
        """Test output is ascending by date and keeps every record."""
        ordered = normalize(sample_records)
        assert len(ordered) == len(sample_records)
        assert [r.id for r in ordered] == ["a", "b", "c", "d"]
        assert all(ordered[i].date <= ordered[i + 1].date for i in range(len(ordered) - 1))

    def test_idempotent(self, sample_records):
        """Test normalizing twice equals normalizing once."""
        once = normalize(sample_records)
        assert normalize(once) == once

    def test_does_not_mutate_input(self, sample_records):
        """Test the input keeps its order."""
        before = list(sample_records)
        normalize(sample_records)
        assert sample_records == before

    def test_duplicate_dates_kept_in_insertion_order(self):
        """Test two records on the same date are both retained, stably."""
        records = [
            make_record("late", date(2024, 5, 2), 4.1),
            make_record("first", date(2024, 5, 1), 4.0),
            make_record("second", date(2024, 5, 1), 4.2),
        ]
        ordered = normalize(records)
        assert [r.id for r in ordered] == ["first", "second", "late"]
        assert [r.id for r in normalize(records)] == [r.id for r in ordered]

    def test_empty(self):
        """Test empty input."""
        assert normalize([]) == []


class TestComputeMetrics:
    """Tests for compute_metrics."""

    def test_empty_gives_sentinels(self):
        """Test an empty series."""
        metrics = compute_metrics([])
        assert metrics.current_value is None
        assert metrics.starting_value is None
        assert metrics.net_change == 0
        assert metrics.min_weight is None
        assert metrics.max_weight is None
        assert metrics.trends == []
        assert metrics.is_empty

    def test_single_record(self):
        """Test both ends coincide for a single record."""
        metrics = compute_metrics([make_record("x", date(2024, 1, 1), 4.4)])
        assert metrics.current_value == 4.4
        assert metrics.starting_value == 4.4
        assert metrics.net_change == 0
        assert metrics.trends == []

    def test_start_and_current(self, sample_records):
        """Test first and last records of the ordered series."""
        ordered = normalize(sample_records)
        metrics = compute_metrics(ordered)
        assert metrics.starting_value == ordered[0].weight
        assert metrics.current_value == ordered[-1].weight
        assert metrics.min_weight == 4.5
        assert metrics.max_weight == 5.0

    def test_decrease_between_two_records(self):
        """Test a 5.0 to 4.5 drop two months apart."""
        ordered = [
            make_record("a", date(2024, 1, 1), 5.0),
            make_record("b", date(2024, 3, 1), 4.5),
        ]
        metrics = compute_metrics(ordered)
        assert metrics.net_change == pytest.approx(-0.5)
        assert len(metrics.trends) == 1
        trend = metrics.trends[0]
        assert trend.record.id == "b"
        assert trend.direction == TrendDirection.DECREASE
        assert trend.magnitude == pytest.approx(0.5)

    def test_trend_classification(self, sample_records):
        """Test increase, decrease and unchanged deltas."""
        ordered = normalize(sample_records) + [make_record("e", date(2024, 5, 1), 4.9)]
        directions = [t.direction for t in compute_metrics(ordered).trends]
        assert directions == [
            TrendDirection.DECREASE,
            TrendDirection.DECREASE,
            TrendDirection.UNCHANGED,
            TrendDirection.INCREASE,
        ]

    def test_unchanged_requires_exact_equality(self):
        """Test a tiny float difference is not treated as unchanged."""
        ordered = [
            make_record("a", date(2024, 1, 1), 0.1 + 0.2),
            make_record("b", date(2024, 1, 2), 0.3),
        ]
        assert compute_metrics(ordered).trends[0].direction != TrendDirection.UNCHANGED


class TestProject:
    """Tests for project."""

    NOW = datetime(2024, 3, 31, 12, 0)

    @pytest.fixture
    def ordered(self):
        return [
            make_record("y", date(2023, 3, 31), 4.0),
            make_record("y2", date(2023, 4, 1), 4.1),
            make_record("q", date(2023, 12, 31), 4.2),
            make_record("q2", date(2024, 1, 1), 4.3),
            make_record("m", date(2024, 2, 29), 4.4),
            make_record("m2", date(2024, 3, 1), 4.5),
            make_record("now", date(2024, 3, 31), 4.6),
        ]

    def test_all_is_identity(self, ordered):
        """Test ALL returns the whole series for any now."""
        assert project(ordered, TimeWindow.ALL, self.NOW) == ordered
        assert project(ordered, "ALL", datetime(1990, 1, 1)) == ordered

    def test_returns_new_list(self, ordered):
        """Test the input is never returned or modified."""
        before = list(ordered)
        result = project(ordered, TimeWindow.ALL, self.NOW)
        assert result is not ordered
        result.clear()
        assert ordered == before

    def test_one_month_calendar_aware(self, ordered):
        """Test one month before March 31 excludes Feb 29 (midnight is before the cutoff)."""
        ids = [r.id for r in project(ordered, TimeWindow.ONE_MONTH, self.NOW)]
        assert ids == ["m2", "now"]

    def test_year_window(self, ordered):
        """Test the record exactly one year back is excluded."""
        ids = [r.id for r in project(ordered, "1Y", self.NOW)]
        assert ids == ["y2", "q", "q2", "m", "m2", "now"]

    def test_date_now(self, ordered):
        """Test a plain date anchors the window at midnight."""
        ids = [r.id for r in project(ordered, TimeWindow.THREE_MONTHS, date(2024, 3, 31))]
        assert ids == ["q2", "m", "m2", "now"]

    @pytest.mark.parametrize("window", [w for w in TimeWindow if w != TimeWindow.ALL])
    def test_exact_membership(self, ordered, window):
        """Test kept records are exactly those after now minus the window."""
        offsets = {
            TimeWindow.ONE_MONTH: relativedelta(months=1),
            TimeWindow.THREE_MONTHS: relativedelta(months=3),
            TimeWindow.SIX_MONTHS: relativedelta(months=6),
            TimeWindow.ONE_YEAR: relativedelta(years=1),
        }
        cutoff = self.NOW - offsets[window]
        expected = [r for r in ordered if datetime.combine(r.date, time.min) > cutoff]
        assert project(ordered, window, self.NOW) == expected

    @pytest.mark.parametrize("window", list(TimeWindow))
    def test_empty(self, window):
        """Test an empty series stays empty for every window."""
        assert project([], window, self.NOW) == []

    def test_invalid_window(self, ordered):
        """Test an unknown window name is rejected."""
        with pytest.raises(ValueError):
            project(ordered, "2W", self.NOW)


class TestHistory:
    """Tests for history."""

    def test_newest_first_with_trends(self, sample_records):
        """Test history pairs each record with its change from the previous one."""
        pairs = history(normalize(sample_records))
        assert [r.id for r, _ in pairs] == ["d", "c", "b", "a"]

        latest_record, latest_trend = pairs[0]
        assert latest_trend.record is latest_record
        assert latest_trend.direction == TrendDirection.UNCHANGED

        oldest_record, oldest_trend = pairs[-1]
        assert oldest_record.id == "a"
        assert oldest_trend is None

    def test_empty(self):
        """Test empty history."""
        assert history([]) == []


class TestChartBounds:
    """Tests for chart_bounds."""

    def test_padded_bounds(self, sample_records):
        """Test bounds pad the min and max."""
        assert chart_bounds(sample_records) == pytest.approx((4.0, 5.5))

    def test_never_negative(self):
        """Test the lower bound is clamped at zero."""
        low, high = chart_bounds([make_record("k", date(2024, 1, 1), 0.2)])
        assert low == 0.0
        assert high == pytest.approx(0.7)

    def test_empty(self):
        """Test no bounds without data."""
        assert chart_bounds([]) is None
