"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from gatofit.db import init_db
from gatofit.models.analysis import AnalysisResult, AnalysisStatus
from gatofit.models.weight import WeightRecord


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def initialized_db(temp_db_path):
    """A temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def sample_records():
    """Records in insertion order, deliberately not sorted by date."""
    return [
        WeightRecord(id="c", date=date(2024, 3, 1), weight=4.5, note="New food"),
        WeightRecord(id="a", date=date(2024, 1, 1), weight=5.0),
        WeightRecord(id="d", date=date(2024, 4, 15), weight=4.5),
        WeightRecord(id="b", date=date(2024, 2, 1), weight=4.8),
    ]


class FakeAdvisor:
    """Advisor stand-in that records calls and returns a fixed result."""

    def __init__(self, result: AnalysisResult | None = None):
        self.result = result or AnalysisResult(
            status=AnalysisStatus.HEALTHY,
            message="Weight is stable.",
            recommendation="Keep monitoring.",
        )
        self.calls: list[int] = []

    async def analyze(self, records):
        self.calls.append(len(records))
        return self.result


@pytest.fixture
def fake_advisor():
    """A fake trend advisor."""
    return FakeAdvisor()
