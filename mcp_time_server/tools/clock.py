"""Clock abstraction for injectable time source."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def utc_now(self) -> datetime: ...


class SystemClock:
    """Default implementation: system UTC clock."""

    def utc_now(self) -> datetime:
        return datetime.now(timezone.utc)
