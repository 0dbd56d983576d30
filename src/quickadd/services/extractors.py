"""Token extractors for the quick-entry parser.

Each extractor takes the residual text (whatever earlier stages left over)
and returns an ``Extraction``: the recognized value or ``None``, the text
with the matched span cut out, and the preview labels for that span.
Extractors never raise; a token that fails validation simply stays in the
text for a later stage or for the title.

The stages run in the order of ``EXTRACTOR_CHAIN``. The order matters:
distinctive tokens (``/work``, ``#tag``, ``p1``) are claimed before the
broad date and time patterns see the text.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from quickadd.schemas import Recurrence, TaskCategory, TaskPriority, VideoCallProvider
from quickadd.services.dates import (
    add_minutes,
    calendar_date,
    format_clock,
    next_weekday,
    shift_days,
)
from quickadd.services.lexicon import (
    ALL_DAY_WORDS,
    CATEGORY_KEYWORDS,
    RECURRENCE_WORDS,
    RELATIVE_DAYS,
    TODO_WORDS,
    date_words,
    weekday_names,
)


@dataclass(frozen=True)
class Extraction:
    """Outcome of running one extractor over the residual text."""

    value: Any
    residual: str
    labels: tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class Stage:
    """One named step of the extractor chain."""

    name: str
    extract: Callable[..., Extraction]
    uses_clock: bool = False
    removes_text: bool = True

    def run(self, text: str, now: datetime) -> Extraction:
        if self.uses_clock:
            return self.extract(text, now)
        return self.extract(text)


def _no_match(text: str) -> Extraction:
    return Extraction(value=None, residual=text)


def _cut(text: str, match: re.Match) -> str:
    return (text[: match.start()] + " " + text[match.end() :]).strip()


def _words(words: tuple[str, ...]) -> str:
    # Multi-word phrases tolerate any run of whitespace between the words
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(r"\s+".join(re.escape(part) for part in word.split()) for word in ordered)


# === Span boundaries for attendees and locations ===

_CLOCK = r"\d{1,2}(?:[:.]|\s*(?:uhr|am|pm)\b)"
_DATE_WORDS = _words(date_words())


def _span_boundary(*keywords: str) -> str:
    """Lookahead ending a free-text span at the next keyword or end of input."""
    return (
        r"(?=\s+(?:(?:" + "|".join(keywords) + r")\b|p[123]\b|#|€|" + _CLOCK
        + r"|(?:" + _DATE_WORDS + r")\b)|\s*$)"
    )


# === 1. To-do marker ===

TODO_PREFIX_PATTERN = re.compile(r"^(?:todo|√)\s+", re.IGNORECASE)
TODO_WORD_PATTERN = re.compile(
    r"\b(?:" + _words(TODO_WORDS) + r")\b|(?<!\S)√(?!\S)", re.IGNORECASE
)


def extract_todo(text: str) -> Extraction:
    """A leading ``todo``/``√`` or a to-do word anywhere marks a task.

    The prefix is cut first, then one to-do word from what is left, so
    ``todo task Einkaufen`` leaves ``Einkaufen``.
    """
    residual = text
    matched = False
    for pattern in (TODO_PREFIX_PATTERN, TODO_WORD_PATTERN):
        match = pattern.search(residual)
        if match:
            residual = _cut(residual, match)
            matched = True
    if matched:
        return Extraction(value=True, residual=residual, labels=("todo",))
    return _no_match(text)


# === 2. Video call provider ===

VIDEO_CALL_PATTERNS: list[tuple[re.Pattern, VideoCallProvider]] = [
    (re.compile(r"\bzoom\b", re.IGNORECASE), VideoCallProvider.ZOOM),
    (re.compile(r"\b(?:google\s*meet|meet)\b", re.IGNORECASE), VideoCallProvider.MEET),
    (re.compile(r"\b(?:microsoft\s*teams|teams)\b", re.IGNORECASE), VideoCallProvider.TEAMS),
]


def extract_video_call(text: str) -> Extraction:
    for pattern, provider in VIDEO_CALL_PATTERNS:
        match = pattern.search(text)
        if match:
            return Extraction(value=provider, residual=_cut(text, match), labels=(provider.value,))
    return _no_match(text)


# === 3. Calendar key ===

CALENDAR_PATTERN = re.compile(r"/([a-zäöüß]+)", re.IGNORECASE)


def extract_calendar(text: str) -> Extraction:
    match = CALENDAR_PATTERN.search(text)
    if match:
        key = match.group(1).lower()
        return Extraction(value=key, residual=_cut(text, match), labels=(f"/{key}",))
    return _no_match(text)


# === 4. Attendees ===

ATTENDEES_PATTERN = re.compile(
    r"\b(?:with|mit)\s+(?!" + _CLOCK + r")([a-zäöüß\s,&]+?)"
    + _span_boundary("at", "bei", "reminder", "erinnerung"),
    re.IGNORECASE,
)
ATTENDEE_SEPARATOR = re.compile(r"\s*(?:,|&|\bund\b|\band\b)\s*", re.IGNORECASE)
ATTENDEE_CONNECTOR = re.compile(r"(?:,|&|und|and)", re.IGNORECASE)


def extract_attendees(text: str) -> Extraction:
    """``with Max, Anna und Tom`` becomes ``["Max", "Anna", "Tom"]``."""
    match = ATTENDEES_PATTERN.search(text)
    if not match:
        return _no_match(text)

    names = [
        name.strip()
        for name in ATTENDEE_SEPARATOR.split(match.group(1).strip())
        if name.strip() and not ATTENDEE_CONNECTOR.fullmatch(name.strip())
    ]
    if not names:
        return _no_match(text)

    return Extraction(
        value=names,
        residual=_cut(text, match),
        labels=tuple(f"with {name}" for name in names),
    )


# === 5. Location ===

LOCATION_PATTERN = re.compile(
    r"\b(?:at|bei)\s+(?!" + _CLOCK + r")([a-zäöüß0-9\s]+?)"
    + _span_boundary("with", "mit", "reminder", "erinnerung"),
    re.IGNORECASE,
)


def extract_location(text: str) -> Extraction:
    match = LOCATION_PATTERN.search(text)
    if match:
        location = match.group(1).strip()
        if location:
            return Extraction(value=location, residual=_cut(text, match), labels=(f"at {location}",))
    return _no_match(text)


# === 6. Reminder ===

REMINDER_PATTERN = re.compile(
    r"\b(?:reminder|erinnerung)\s+(\d+)\s*(?:minuten|minutes?|min)?\b", re.IGNORECASE
)


def extract_reminder(text: str) -> Extraction:
    match = REMINDER_PATTERN.search(text)
    if match:
        minutes = int(match.group(1))
        if minutes > 0:
            return Extraction(value=minutes, residual=_cut(text, match), labels=(f"reminder {minutes}min",))
    return _no_match(text)


# === 7. Priority ===

PRIORITY_PATTERN = re.compile(r"\bp([123])\b", re.IGNORECASE)
PRIORITY_LEVELS: dict[str, TaskPriority] = {
    "1": TaskPriority.HIGH,
    "2": TaskPriority.MEDIUM,
    "3": TaskPriority.LOW,
}


def extract_priority(text: str) -> Extraction:
    match = PRIORITY_PATTERN.search(text)
    if match:
        level = match.group(1)
        return Extraction(value=PRIORITY_LEVELS[level], residual=_cut(text, match), labels=(f"p{level}",))
    return _no_match(text)


# === 8. Tags ===

TAG_PATTERN = re.compile(r"#([a-zäöüß0-9]+)", re.IGNORECASE)


def extract_tags(text: str) -> Extraction:
    """Collect every ``#tag`` in order of appearance."""
    tags = [match.group(1) for match in TAG_PATTERN.finditer(text)]
    if not tags:
        return _no_match(text)
    return Extraction(
        value=tags,
        residual=TAG_PATTERN.sub(" ", text).strip(),
        labels=tuple(f"#{tag}" for tag in tags),
    )


# === 9. Stake ===

STAKE_PATTERNS: list[re.Pattern] = [
    re.compile(r"€(\d+(?:[.,]\d{1,2})?)\b"),
    re.compile(r"\b(\d+(?:[.,]\d{1,2})?)\s*€"),
    re.compile(r"\b(\d+(?:[.,]\d{1,2})?)\s*(?:euro|eur)\b", re.IGNORECASE),
]


def format_amount(amount: float) -> str:
    """Shortest readable form: ``10``, ``10.5``, ``10.25``."""
    return f"{amount:.2f}".rstrip("0").rstrip(".")


def extract_stake(text: str) -> Extraction:
    for pattern in STAKE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        try:
            amount = round(float(match.group(1).replace(",", ".")), 2)
        except ValueError:
            continue
        if amount >= 0:
            return Extraction(value=amount, residual=_cut(text, match), labels=(f"€{format_amount(amount)}",))
    return _no_match(text)


# === 10. Recurrence ===

RECURRENCE_PATTERNS: list[tuple[re.Pattern, Recurrence]] = [
    (re.compile(r"\b(?:" + _words(words) + r")\b", re.IGNORECASE), Recurrence(kind))
    for kind, words in RECURRENCE_WORDS.items()
]


def extract_recurrence(text: str) -> Extraction:
    for pattern, recurrence in RECURRENCE_PATTERNS:
        match = pattern.search(text)
        if match:
            return Extraction(value=recurrence, residual=_cut(text, match), labels=(recurrence.value,))
    return _no_match(text)


# === 11. All-day flag ===

ALL_DAY_PATTERN = re.compile(r"\b(?:" + _words(ALL_DAY_WORDS) + r")\b", re.IGNORECASE)


def extract_all_day(text: str) -> Extraction:
    match = ALL_DAY_PATTERN.search(text)
    if match:
        return Extraction(value=True, residual=_cut(text, match), labels=("ganztags",))
    return _no_match(text)


# === 12. Date ===

DateResolver = Callable[[re.Match, datetime], datetime]


def _relative_day(offset: int) -> DateResolver:
    return lambda match, now: shift_days(now, offset) if offset else now


def _weekday(target: int) -> DateResolver:
    return lambda match, now: next_weekday(now, target)


def _in_minutes(match: re.Match, now: datetime) -> datetime:
    return add_minutes(now, int(match.group(1)))


def _european_date(match: re.Match, now: datetime) -> datetime:
    return calendar_date(now, day=int(match.group(1)), month=int(match.group(2)), year=match.group(3))


def _us_date(match: re.Match, now: datetime) -> datetime:
    return calendar_date(now, day=int(match.group(2)), month=int(match.group(1)), year=match.group(3))


DATE_PATTERNS: list[tuple[re.Pattern, DateResolver]] = [
    *(
        (re.compile(r"\b(?:" + _words(words) + r")\b", re.IGNORECASE), _relative_day(offset))
        for words, offset in RELATIVE_DAYS
    ),
    *(
        (re.compile(r"\b(?:" + _words(names) + r")\b", re.IGNORECASE), _weekday(index))
        for index, names in weekday_names()
    ),
    (re.compile(r"\bin\s+(\d+)\s+(?:minuten|minutes?|min)\b", re.IGNORECASE), _in_minutes),
    (re.compile(r"\+(\d+)\b"), _in_minutes),
    (re.compile(r"\b(\d{1,2})\.(\d{1,2})(?:\.(\d{4}|\d{2}))?\b\.?"), _european_date),
    (re.compile(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{4}|\d{2}))?\b"), _us_date),
]


def extract_date(text: str, now: datetime) -> Extraction:
    """First matching date pattern wins; impossible dates fall through."""
    for pattern, resolve in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        try:
            value = resolve(match, now)
        except (ValueError, OverflowError):
            continue
        return Extraction(value=value, residual=_cut(text, match), labels=(match.group(0),))
    return _no_match(text)


# === 13. Time ===

TimeResolver = Callable[[re.Match], tuple[int, int]]


def _meridiem_hour(match: re.Match) -> tuple[int, int]:
    hour = int(match.group(1))
    meridiem = match.group(2).lower()
    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    return hour, 0


# A preposition directly before the clock time is part of the token
_TIME_PREPOSITION = r"(?:\b(?:at|bei|um)\s+)?"

TIME_PATTERNS: list[tuple[re.Pattern, TimeResolver]] = [
    (
        re.compile(_TIME_PREPOSITION + r"\b(\d{1,2}):(\d{2})(?:\s*uhr)?\b", re.IGNORECASE),
        lambda match: (int(match.group(1)), int(match.group(2))),
    ),
    (
        re.compile(_TIME_PREPOSITION + r"\b(\d{1,2})\s*uhr\b", re.IGNORECASE),
        lambda match: (int(match.group(1)), 0),
    ),
    (re.compile(_TIME_PREPOSITION + r"\b(\d{1,2})\s*(am|pm)\b", re.IGNORECASE), _meridiem_hour),
]


def extract_time(text: str) -> Extraction:
    """Clock time as an ``(hour, minute)`` pair; out-of-range values are skipped."""
    for pattern, resolve in TIME_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        hour, minute = resolve(match)
        if 0 <= hour < 24 and 0 <= minute < 60:
            return Extraction(
                value=(hour, minute),
                residual=_cut(text, match),
                labels=(format_clock(hour, minute),),
            )
    return _no_match(text)


# === 14. Category ===


def extract_category(text: str) -> Extraction:
    """Keyword lookup only; the keyword stays in the text."""
    lowered = text.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return Extraction(value=category, residual=text)
    return _no_match(text)


EXTRACTOR_CHAIN: tuple[Stage, ...] = (
    Stage("todo", extract_todo),
    Stage("video_call", extract_video_call),
    Stage("calendar", extract_calendar),
    Stage("attendees", extract_attendees),
    Stage("location", extract_location),
    Stage("reminder", extract_reminder),
    Stage("priority", extract_priority),
    Stage("tags", extract_tags),
    Stage("stake", extract_stake),
    Stage("recurrence", extract_recurrence),
    Stage("all_day", extract_all_day),
    Stage("date", extract_date, uses_clock=True),
    Stage("time", extract_time),
    Stage("category", extract_category, removes_text=False),
)
