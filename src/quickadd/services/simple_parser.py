"""Lightweight parser behind the plain quick-add field.

Recognizes only a due date, an optional ``at <time>``, a ``$`` stake and
a category keyword. Unlike the full quick-entry parser every pattern is
matched against the original input, and the category keyword is found in
the input as typed.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from quickadd.schemas import TaskCategory
from quickadd.services.dates import at_time, calendar_date, next_weekday, shift_days
from quickadd.services.lexicon import SIMPLE_CATEGORY_KEYWORDS, weekday_names
from quickadd.services.timezone import now as current_time

WHITESPACE = re.compile(r"\s+")


@dataclass
class QuickTaskData:
    title: str
    due_date: datetime | None = None
    category: TaskCategory | None = None
    stake: float | None = None


def _day_first_date(match: re.Match, now: datetime) -> datetime:
    return calendar_date(now, day=int(match.group(1)), month=int(match.group(2)), year=None)


DATE_PATTERNS = [
    (re.compile(r"\b(?:today|heute)\b", re.IGNORECASE), lambda match, now: now),
    (re.compile(r"\b(?:tomorrow|morgen)\b", re.IGNORECASE), lambda match, now: shift_days(now, 1)),
    *(
        (
            re.compile(rf"\b(?:{english}|{german})\b", re.IGNORECASE),
            lambda match, now, target=index: next_weekday(now, target),
        )
        for index, (english, german) in weekday_names()
    ),
    (
        re.compile(r"\bin (\d+) days?\b", re.IGNORECASE),
        lambda match, now: shift_days(now, int(match.group(1))),
    ),
    (re.compile(r"\bnext week\b", re.IGNORECASE), lambda match, now: shift_days(now, 7)),
    (re.compile(r"\b(\d{1,2})/(\d{1,2})\b"), _day_first_date),
]


def _meridiem(match: re.Match) -> tuple[int, int]:
    hour = int(match.group(1))
    if match.group(2).lower() == "pm" and hour != 12:
        hour += 12
    elif match.group(2).lower() == "am" and hour == 12:
        hour = 0
    return hour, 0


TIME_PATTERNS = [
    (
        re.compile(r"\bat (\d{1,2}):(\d{2})\b", re.IGNORECASE),
        lambda match: (int(match.group(1)), int(match.group(2))),
    ),
    (re.compile(r"\bat (\d{1,2})(am|pm)\b", re.IGNORECASE), _meridiem),
]

STAKE_PATTERN = re.compile(r"\$(\d+(?:\.\d{2})?)")


def parse_simple(text: str, now: datetime | None = None) -> QuickTaskData:
    """Parse the plain quick-add field.

    Args:
        text: Current value of the quick-add field
        now: Reference time. Defaults to now in the user's timezone.

    Returns:
        QuickTaskData with the remaining words as title
    """
    now = now or current_time()
    title = text
    due_date = None
    category = None
    stake = None

    for pattern, resolve in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        try:
            due_date = resolve(match, now)
        except (ValueError, OverflowError):
            continue
        title = pattern.sub("", title, count=1).strip()
        break

    if due_date is not None:
        for pattern, resolve in TIME_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue
            hour, minute = resolve(match)
            if 0 <= hour < 24 and 0 <= minute < 60:
                due_date = at_time(due_date, hour, minute)
                title = pattern.sub("", title, count=1).strip()
                break

    stake_match = STAKE_PATTERN.search(text)
    if stake_match:
        stake = float(stake_match.group(1))
        title = STAKE_PATTERN.sub("", title, count=1).strip()

    lowered = text.lower()
    for candidate, keywords in SIMPLE_CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            category = candidate
            break

    return QuickTaskData(
        title=WHITESPACE.sub(" ", title).strip(),
        due_date=due_date,
        category=category,
        stake=stake,
    )
