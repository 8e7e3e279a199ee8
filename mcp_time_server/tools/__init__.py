"""Tools package."""

from .clock import Clock, SystemClock
from .errors import (
    CityNotFoundError,
    InvalidCityError,
    InvalidTimeZoneIdError,
    TimeZoneError,
    UnsupportedSortOrderError,
)
from .registry import CitySortOrder, TimezoneRegistry, timezone_registry
from .time_utils import TimeTools, time_tools

__all__ = [
    "Clock",
    "SystemClock",
    "CityNotFoundError",
    "InvalidCityError",
    "InvalidTimeZoneIdError",
    "TimeZoneError",
    "UnsupportedSortOrderError",
    "CitySortOrder",
    "TimezoneRegistry",
    "timezone_registry",
    "TimeTools",
    "time_tools",
]
