"""Date arithmetic shared by the quick-entry parsers.

All helpers take the reference "now" explicitly and keep its tzinfo.
Day arithmetic happens on wall-clock time and is localized afterwards, so
"tomorrow" across a DST switch still lands on the same clock time.
"""

from datetime import datetime, timedelta, tzinfo


def localize(naive: datetime, tz: tzinfo | None) -> datetime:
    """Attach ``tz`` to a naive wall-clock datetime."""
    if tz is None:
        return naive
    if hasattr(tz, "localize"):
        # pytz zones must pick the offset valid at that wall-clock time
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def shift_days(now: datetime, days: int) -> datetime:
    wall = now.replace(tzinfo=None) + timedelta(days=days)
    return localize(wall, now.tzinfo)


def add_minutes(now: datetime, minutes: int) -> datetime:
    result = now + timedelta(minutes=minutes)
    if hasattr(now.tzinfo, "normalize"):
        return now.tzinfo.normalize(result)
    return result


def next_weekday(now: datetime, target: int) -> datetime:
    """Next occurrence of weekday ``target`` strictly after today.

    Naming today's weekday always means the same day next week.
    """
    days_ahead = target - now.weekday()
    if days_ahead <= 0:
        days_ahead += 7
    return shift_days(now, days_ahead)


def at_time(value: datetime, hour: int, minute: int) -> datetime:
    wall = value.replace(tzinfo=None, hour=hour, minute=minute, second=0, microsecond=0)
    return localize(wall, value.tzinfo)


def calendar_date(now: datetime, day: int, month: int, year: str | None) -> datetime:
    """Midnight of a typed calendar date.

    Two-digit years are read as 20YY. Without a year, a date before today
    rolls over to next year; a 29 February that rolls into a common year
    becomes 1 March.

    Raises:
        ValueError: if the date does not exist.
    """
    full_year = now.year if year is None else int(year)
    if full_year < 100:
        full_year += 2000

    result = datetime(full_year, month, day)
    if year is None and result.date() < now.date():
        try:
            result = result.replace(year=full_year + 1)
        except ValueError:
            result = datetime(full_year + 1, 3, 1)
    return localize(result, now.tzinfo)


def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"
