"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from mcp_time_server.tools import TimeTools, TimezoneRegistry


class FixedClock:
    """Clock that returns a fixed instant."""

    def __init__(self, instant: datetime = datetime(2026, 2, 25, 10, 0, 0, tzinfo=timezone.utc)):
        self._instant = instant

    def utc_now(self) -> datetime:
        return self._instant


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry():
    return TimezoneRegistry()


@pytest.fixture
def make_clock():
    """Factory for clocks pinned to a given instant."""
    return FixedClock


@pytest.fixture
def fixed_clock(make_clock):
    return make_clock()


@pytest.fixture
def time_tools(registry, fixed_clock):
    return TimeTools(registry, clock=fixed_clock)
