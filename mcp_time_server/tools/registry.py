"""City to timezone registry for MCP server."""

import logging
import threading
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import (
    CityNotFoundError,
    InvalidCityError,
    InvalidTimeZoneIdError,
    UnsupportedSortOrderError,
)

logger = logging.getLogger(__name__)


class CitySortOrder(str, Enum):
    """Sort order for city listings."""

    NONE = "None"
    ALPHABETICAL = "Alphabetical"
    ALPHABETICAL_DESCENDING = "AlphabeticalDescending"

    @classmethod
    def parse(cls, value) -> "CitySortOrder":
        """
        Validate a sort order coming from outside the process.

        Accepts a member, its string value (any case) or its ordinal.
        Anything else raises UnsupportedSortOrderError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        elif isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        raise UnsupportedSortOrderError(value)


DEFAULT_CITY_TIME_ZONES: Tuple[Tuple[str, str], ...] = (
    ("Cancun", "America/Cancun"),
    ("Mexico City", "America/Mexico_City"),
    ("New York", "America/New_York"),
    ("London", "Europe/London"),
    ("Tokyo", "Asia/Tokyo"),
)


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


class TimezoneRegistry:
    """Manages the in-memory city to timezone mapping."""

    def __init__(self, seed: Iterable[Tuple[str, str]] = DEFAULT_CITY_TIME_ZONES):
        # case-folded city -> (name as first registered, timezone id)
        self._cities: Dict[str, Tuple[str, str]] = {}
        self._lock = threading.Lock()
        for city, time_zone_id in seed:
            self.register(city, time_zone_id)

    def try_resolve(self, city: Optional[str]) -> Tuple[bool, Optional[str]]:
        """Look up a city without raising. Returns (found, timezone id)."""
        if not isinstance(city, str) or not city:
            return False, None
        with self._lock:
            entry = self._cities.get(city.casefold())
        if entry is None:
            return False, None
        return True, entry[1]

    def resolve(self, city: Optional[str]) -> str:
        """
        Get the timezone ID for a city.

        Raises:
            InvalidCityError: city is None, empty or whitespace-only
            CityNotFoundError: city is not registered
        """
        if _is_blank(city):
            raise InvalidCityError(city if isinstance(city, str) else None)

        available: List[str] = []
        with self._lock:
            entry = self._cities.get(city.casefold())
            if entry is None:
                available = self._sorted_names(CitySortOrder.ALPHABETICAL)
        if entry is None:
            logger.debug("City %r not found in timezone mapping", city)
            raise CityNotFoundError(city, available)
        return entry[1]

    def list_cities(self, sort_order=CitySortOrder.ALPHABETICAL) -> List[str]:
        """
        List registered city names.

        Args:
            sort_order: CitySortOrder member, its string value or its ordinal

        Returns:
            A new list; later registrations do not affect it
        """
        order = CitySortOrder.parse(sort_order)
        with self._lock:
            return self._sorted_names(order)

    def register(self, city: str, time_zone_id: str) -> None:
        """
        Add a city or replace its timezone ID.

        The city is validated before the timezone ID.

        Raises:
            InvalidCityError: city is None, empty or whitespace-only
            InvalidTimeZoneIdError: time_zone_id is None, empty or whitespace-only
        """
        if _is_blank(city):
            raise InvalidCityError(
                city if isinstance(city, str) else None,
                "City cannot be null or empty.",
            )
        if _is_blank(time_zone_id):
            raise InvalidTimeZoneIdError(
                time_zone_id if isinstance(time_zone_id, str) else None, city
            )

        key = city.casefold()
        with self._lock:
            existing = self._cities.get(key)
            name = existing[0] if existing else city
            self._cities[key] = (name, time_zone_id)

        if existing:
            logger.info("Updated city '%s': %s -> %s", name, existing[1], time_zone_id)
        else:
            logger.info("Registered city '%s' -> %s", name, time_zone_id)

    def _sorted_names(self, order: CitySortOrder) -> List[str]:
        # caller holds self._lock
        names = [name for name, _ in self._cities.values()]
        if order is CitySortOrder.ALPHABETICAL:
            names.sort()
        elif order is CitySortOrder.ALPHABETICAL_DESCENDING:
            names.sort(reverse=True)
        return names


# Global instance
timezone_registry = TimezoneRegistry()
