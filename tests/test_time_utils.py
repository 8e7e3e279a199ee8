"""Tests for TimeTools formatting."""

import re
from datetime import datetime, timezone

import pytest
import pytz

from mcp_time_server.tools import (
    CitySortOrder,
    InvalidCityError,
    InvalidTimeZoneIdError,
    TimeTools,
    TimezoneRegistry,
)
from mcp_time_server.tools.clock import SystemClock
from mcp_time_server.tools.time_utils import format_timestamp


def test_system_clock_returns_aware_utc():
    now = SystemClock().utc_now()
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


# ---- get_current_time ----

def test_current_time_uses_injected_clock(time_tools):
    assert time_tools.get_current_time() == "2026-02-25 10:00:00"


def test_current_time_with_system_clock():
    tools = TimeTools(TimezoneRegistry())
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", tools.get_current_time())


def test_current_time_converts_offset_instant_to_utc(registry, make_clock):
    tz = pytz.timezone("Asia/Tokyo")
    clock = make_clock(tz.localize(datetime(2026, 1, 1, 9, 5, 7)))
    assert TimeTools(registry, clock=clock).get_current_time() == "2026-01-01 00:05:07"


def test_current_time_treats_naive_instant_as_utc(registry, make_clock):
    clock = make_clock(datetime(2026, 7, 4, 23, 59, 59))
    assert TimeTools(registry, clock=clock).get_current_time() == "2026-07-04 23:59:59"


def test_format_timestamp_zero_pads_small_years():
    moment = datetime(987, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "0987-03-04 05:06:07"


# ---- get_local_time ----

def test_local_time_for_known_city(time_tools):
    result = time_tools.get_local_time("Tokyo")
    assert "Tokyo:" in result
    assert "Asia/Tokyo" in result
    assert result == "Tokyo: 2026-02-25 19:00:00 (Asia/Tokyo)"


def test_local_time_applies_daylight_saving(registry, make_clock):
    clock = make_clock(datetime(2026, 7, 1, 12, 0, 0, tzinfo=timezone.utc))
    tools = TimeTools(registry, clock=clock)
    assert tools.get_local_time("london") == "london: 2026-07-01 13:00:00 (Europe/London)"
    assert tools.get_local_time("New York") == "New York: 2026-07-01 08:00:00 (America/New_York)"


def test_local_time_unknown_city(time_tools):
    assert (
        time_tools.get_local_time("Nowhereville")
        == "City 'Nowhereville' not found in timezone mapping."
    )


@pytest.mark.parametrize("city, shown", [("", ""), (None, ""), ("  ", "  ")])
def test_local_time_blank_city_is_not_found(time_tools, city, shown):
    assert time_tools.get_local_time(city) == f"City '{shown}' not found in timezone mapping."


def test_local_time_unknown_timezone_id(registry, fixed_clock):
    registry.register("Atlantis", "Ocean/Atlantis")
    tools = TimeTools(registry, clock=fixed_clock)
    assert tools.get_local_time("Atlantis") == "Timezone 'Ocean/Atlantis' not found."


def test_local_time_invalid_timezone_id(registry, fixed_clock):
    def broken_lookup(time_zone_id):
        raise ValueError(f"Bad path segment: {time_zone_id!r}")

    registry.register("Broken", "Europe/Broken")
    tools = TimeTools(registry, clock=fixed_clock, timezone_lookup=broken_lookup)
    assert tools.get_local_time("Broken") == "Timezone 'Europe/Broken' is invalid."


def test_local_time_after_registration(time_tools):
    time_tools.add_or_update_city_time_zone("Paris", "Europe/Paris")
    assert time_tools.get_local_time("Paris") == "Paris: 2026-02-25 11:00:00 (Europe/Paris)"


# ---- get_available_city_names ----

def test_available_city_names_default_alphabetical(time_tools):
    assert time_tools.get_available_city_names() == "Cancun, London, Mexico City, New York, Tokyo"


def test_available_city_names_descending(time_tools):
    assert (
        time_tools.get_available_city_names(CitySortOrder.ALPHABETICAL_DESCENDING)
        == "Tokyo, New York, Mexico City, London, Cancun"
    )


def test_available_city_names_insertion_order_from_string(time_tools):
    assert (
        time_tools.get_available_city_names("None")
        == "Cancun, Mexico City, New York, London, Tokyo"
    )


def test_available_city_names_empty(fixed_clock):
    tools = TimeTools(TimezoneRegistry(seed=()), clock=fixed_clock)
    assert tools.get_available_city_names() == "No cities configured."


def test_available_city_names_unsupported_sort_order(time_tools):
    assert time_tools.get_available_city_names("Shuffled") == (
        "Sort order 'Shuffled' is not supported. "
        "Use one of: None, Alphabetical, AlphabeticalDescending."
    )


# ---- add_or_update_city_time_zone ----

def test_add_city_propagates_invalid_timezone_id(time_tools):
    with pytest.raises(InvalidTimeZoneIdError) as exc_info:
        time_tools.add_or_update_city_time_zone("Paris", "")
    assert exc_info.value.city == "Paris"


def test_add_city_propagates_invalid_city(time_tools):
    with pytest.raises(InvalidCityError):
        time_tools.add_or_update_city_time_zone("  ", "Europe/Paris")


def test_time_tools_requires_registry():
    with pytest.raises(ValueError):
        TimeTools(None)


def test_local_time_out_of_datetime_range(registry, make_clock):
    clock = make_clock(datetime(9999, 12, 31, 23, 0, 0, tzinfo=timezone.utc))
    tools = TimeTools(registry, clock=clock)
    assert tools.get_local_time("Tokyo") == (
        "Local time for 'Tokyo' in timezone 'Asia/Tokyo' is out of range."
    )
