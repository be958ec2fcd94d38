"""Pytest configuration and shared fixtures for blueprints tests."""

from __future__ import annotations

import pytest

from blueprints.application import Director, OperationContext
from blueprints.domain.house import HouseBuilder


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def context() -> OperationContext:
    """Create an OperationContext backed by the default operation registry."""
    return OperationContext()


@pytest.fixture
def director() -> Director:
    """Create a permissive Director."""
    return Director()


class RecordingHouseBuilder(HouseBuilder):
    """Builder that records the order in which its steps are called."""

    variant = "recording"

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def foundation_spec(self) -> str:
        self.calls.append("build_foundation")
        return "Recorded Foundation"

    def structure_spec(self) -> str:
        self.calls.append("build_structure")
        return "Recorded Structure"

    def roof_spec(self) -> str:
        self.calls.append("build_roof")
        return "Recorded Roof"

    def interior_spec(self) -> str:
        self.calls.append("build_interior")
        return "Recorded Interior"


@pytest.fixture
def recording_builder() -> RecordingHouseBuilder:
    """Create a builder that records its step calls."""
    return RecordingHouseBuilder()
