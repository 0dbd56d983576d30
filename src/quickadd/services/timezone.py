"""Timezone handling for quick-entry parsing.

Every relative date ("morgen", "freitag", "+30") is resolved against the
current time in the user's configured timezone. The clock is injectable so
that parsing is deterministic under test.
"""

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

import pytz

from quickadd.config import settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TimezoneService:
    """Resolves the user's timezone and hands out the current time.

    Features:
    - User-configured default timezone from settings
    - UTC fallback for unknown timezone names
    - Optional clock override for tests and replays
    """

    def __init__(self, default_timezone: str | None = None, clock: Clock | None = None):
        """Initialize timezone service.

        Args:
            default_timezone: IANA timezone name. Defaults to settings.user_timezone.
            clock: Callable returning "now". Defaults to the wall clock.
        """
        self._default_tz_name = default_timezone or settings.user_timezone
        try:
            self._default_tz = pytz.timezone(self._default_tz_name)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone {self._default_tz_name!r}, falling back to UTC")
            self._default_tz_name = "UTC"
            self._default_tz = pytz.utc
        self._clock = clock

    @property
    def default_timezone(self) -> str:
        """Get the default timezone name."""
        return self._default_tz_name

    @property
    def tz(self) -> tzinfo:
        return self._default_tz

    def now(self) -> datetime:
        """Get current time in user's timezone."""
        if self._clock is not None:
            return self._clock()
        return datetime.now(self._default_tz)


# Module-level singleton
_timezone_service: TimezoneService | None = None


def get_timezone_service(default_timezone: str | None = None) -> TimezoneService:
    """Get the singleton TimezoneService instance.

    Args:
        default_timezone: Optional timezone to use. Only used on first call.
    """
    global _timezone_service
    if _timezone_service is None:
        _timezone_service = TimezoneService(default_timezone)
    return _timezone_service


def reset_timezone_service() -> None:
    """Reset the singleton (useful for testing)."""
    global _timezone_service
    _timezone_service = None


def now() -> datetime:
    """Get current time in user's timezone."""
    return get_timezone_service().now()
