"""Exception hierarchy for city and timezone lookups."""

from typing import Iterable, Optional


class TimeZoneError(Exception):
    """Base exception for timezone-related errors."""

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": str(self)}


class InvalidCityError(TimeZoneError):
    """City name is missing, empty or whitespace-only."""

    def __init__(self, city: Optional[str], message: Optional[str] = None):
        self.city = "" if city is None else city
        super().__init__(message or f"City '{self.city}' is invalid or empty.")

    def to_dict(self) -> dict:
        return {**super().to_dict(), "city": self.city}


class InvalidTimeZoneIdError(TimeZoneError):
    """Timezone identifier is missing, empty or whitespace-only."""

    def __init__(self, time_zone_id: Optional[str], city: Optional[str] = None):
        self.time_zone_id = "" if time_zone_id is None else time_zone_id
        self.city = city
        if city is None:
            message = f"Timezone ID '{self.time_zone_id}' is invalid or empty."
        else:
            message = f"Timezone ID '{self.time_zone_id}' for city '{city}' is invalid or empty."
        super().__init__(message)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "time_zone_id": self.time_zone_id, "city": self.city}


class CityNotFoundError(TimeZoneError):
    """City is well-formed but has no timezone mapping.

    Carries the cities that *are* registered so callers can suggest one.
    """

    def __init__(self, city: str, available_cities: Iterable[str] = ()):
        self.city = city
        self.available_cities = tuple(available_cities)
        message = f"City '{city}' not found in timezone mapping."
        if self.available_cities:
            message += f" Available cities: {', '.join(self.available_cities)}"
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "city": self.city,
            "available_cities": list(self.available_cities),
        }


class UnsupportedSortOrderError(ValueError):
    """Sort order outside None / Alphabetical / AlphabeticalDescending.

    A request-shape error, so it sits outside the TimeZoneError family.
    """

    def __init__(self, sort_order):
        self.sort_order = sort_order
        super().__init__(f"Invalid sort order '{sort_order}' specified.")

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": str(self), "sort_order": str(self.sort_order)}
