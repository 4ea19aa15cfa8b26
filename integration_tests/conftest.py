"""Pytest configuration for the live API tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test collected here as an integration test."""
    for item in items:
        if item.path.parent.name == "integration_tests":
            item.add_marker(pytest.mark.integration)
