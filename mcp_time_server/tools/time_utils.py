"""Time utility tools for MCP server."""

import logging
import struct
from datetime import datetime, timezone
from typing import Callable, Optional

import pytz

from .clock import Clock, SystemClock
from .errors import UnsupportedSortOrderError
from .registry import CitySortOrder, TimezoneRegistry, timezone_registry

logger = logging.getLogger(__name__)

# Raised by pytz for identifiers it knows but cannot load (bad path segments,
# unreadable or truncated zone files).
INVALID_TIMEZONE_ERRORS = (ValueError, OSError, struct.error)


def format_timestamp(moment: datetime) -> str:
    """Format as YYYY-MM-DD HH:MM:SS without going through the locale."""
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


class TimeTools:
    """Turns registry lookups and the current instant into user-facing text."""

    def __init__(
        self,
        registry: TimezoneRegistry,
        clock: Optional[Clock] = None,
        timezone_lookup: Callable[[str], object] = pytz.timezone,
    ):
        if registry is None:
            raise ValueError("registry is required")
        self._registry = registry
        self._clock = clock or SystemClock()
        self._timezone_lookup = timezone_lookup

    def _utc_now(self) -> datetime:
        now = self._clock.utc_now()
        if now.tzinfo is None:
            return now.replace(tzinfo=timezone.utc)
        return now.astimezone(timezone.utc)

    def get_current_time(self) -> str:
        """Get the current UTC time as YYYY-MM-DD HH:MM:SS."""
        return format_timestamp(self._utc_now())

    def get_local_time(self, city: str) -> str:
        """
        Get local time for a registered city.

        Args:
            city: City name, matched case-insensitively

        Returns:
            "<city>: <time> (<timezone id>)", or an error message if the city
            or its timezone cannot be resolved
        """
        found, time_zone_id = self._registry.try_resolve(city)
        if not found or time_zone_id is None:
            return f"City '{'' if city is None else city}' not found in timezone mapping."

        try:
            tz = self._timezone_lookup(time_zone_id)
            local_time = self._utc_now().astimezone(tz)
        except pytz.exceptions.UnknownTimeZoneError:
            logger.warning("Timezone %r for city %r not found", time_zone_id, city)
            return f"Timezone '{time_zone_id}' not found."
        except INVALID_TIMEZONE_ERRORS as e:
            logger.warning("Timezone %r for city %r is invalid: %s", time_zone_id, city, e)
            return f"Timezone '{time_zone_id}' is invalid."
        except OverflowError:
            logger.warning("Local time for %r in %r is outside the datetime range", city, time_zone_id)
            return f"Local time for '{city}' in timezone '{time_zone_id}' is out of range."

        return f"{city}: {format_timestamp(local_time)} ({time_zone_id})"

    def get_available_city_names(self, sort_order=CitySortOrder.ALPHABETICAL) -> str:
        """Comma-separated city names, or a message when none are configured."""
        try:
            cities = self._registry.list_cities(sort_order)
        except UnsupportedSortOrderError as e:
            allowed = ", ".join(member.value for member in CitySortOrder)
            return f"Sort order '{e.sort_order}' is not supported. Use one of: {allowed}."

        if not cities:
            return "No cities configured."
        return ", ".join(cities)

    def add_or_update_city_time_zone(self, city: str, time_zone_id: str) -> None:
        """
        Add or update a city mapping.

        Registry errors propagate unchanged; this is for administrative callers.
        """
        self._registry.register(city, time_zone_id)


# Global instance
time_tools = TimeTools(timezone_registry)
