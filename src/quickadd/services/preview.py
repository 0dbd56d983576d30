"""Preview badges for the quick-add field.

Turns a ParsedResult into the ordered list of badges shown under the input
while the user types. Labels are German, matching the rest of the app.
"""

from dataclasses import dataclass
from datetime import datetime

from quickadd.schemas import Recurrence, TaskPriority, VideoCallProvider
from quickadd.services.dates import shift_days
from quickadd.services.lexicon import MONTH_ABBREVIATIONS_DE, WEEKDAY_LABELS_DE
from quickadd.services.parser import ParsedResult
from quickadd.services.timezone import now as current_time

VIDEO_CALL_LABELS: dict[VideoCallProvider, str] = {
    VideoCallProvider.ZOOM: "Zoom",
    VideoCallProvider.MEET: "Google Meet",
    VideoCallProvider.TEAMS: "Microsoft Teams",
}

PRIORITY_LABELS: dict[TaskPriority, str] = {
    TaskPriority.HIGH: "Hoch",
    TaskPriority.MEDIUM: "Mittel",
    TaskPriority.LOW: "Niedrig",
}

RECURRENCE_LABELS: dict[Recurrence, str] = {
    Recurrence.DAILY: "Täglich",
    Recurrence.WEEKLY: "Wöchentlich",
    Recurrence.MONTHLY: "Monatlich",
}

CATEGORY_LABELS: dict[str, str] = {
    "Household": "Haushalt",
    "Finance": "Finanzen",
    "Work": "Arbeit",
    "Leisure": "Freizeit",
}


@dataclass(frozen=True)
class PreviewBadge:
    icon: str
    label: str
    value: str


def format_preview_date(result: ParsedResult, now: datetime) -> str:
    """``Heute``, ``Morgen`` or ``Freitag, 7. Juni · 14:30``."""
    value = result.date
    if value.date() == now.date():
        return "Heute"
    if value.date() == shift_days(now, 1).date():
        return "Morgen"

    text = (
        f"{WEEKDAY_LABELS_DE[value.weekday()]}, "
        f"{value.day}. {MONTH_ABBREVIATIONS_DE[value.month - 1]}"
    )
    if result.time and not result.all_day:
        text = f"{text} · {result.time}"
    return text


def build_preview(result: ParsedResult, now: datetime | None = None) -> list[PreviewBadge]:
    """Build the badges for every populated field, in display order.

    Args:
        result: Output of the quick-entry parser
        now: Reference time for "Heute"/"Morgen". Defaults to now.

    Returns:
        List of PreviewBadge, empty when nothing was recognized
    """
    now = now or current_time()
    badges: list[PreviewBadge] = []

    if result.is_todo:
        badges.append(PreviewBadge("check", "Task", "Aufgabe"))

    if result.date:
        label = "Ganztags" if result.all_day else "Termin"
        badges.append(PreviewBadge("calendar", label, format_preview_date(result, now)))

    if result.calendar_key:
        badges.append(PreviewBadge("folder", "Kalender", result.calendar_key))

    if result.attendees:
        badges.append(PreviewBadge("users", "Mit", ", ".join(result.attendees)))

    if result.location:
        badges.append(PreviewBadge("map-pin", "Ort", result.location))

    if result.video_call:
        badges.append(PreviewBadge("video", "Video", VIDEO_CALL_LABELS[result.video_call]))

    if result.reminder_minutes is not None:
        badges.append(PreviewBadge("bell", "Erinnerung", f"{result.reminder_minutes} Min vorher"))

    if result.priority:
        badges.append(PreviewBadge("flag", "Priorität", PRIORITY_LABELS[result.priority]))

    if result.stake is not None:
        badges.append(PreviewBadge("euro", "Einsatz", f"€{result.stake:.2f}"))

    if result.recurrence:
        badges.append(PreviewBadge("repeat", "Wiederholen", RECURRENCE_LABELS[result.recurrence]))

    if result.tags:
        badges.append(PreviewBadge("tag", "Tags", " ".join(f"#{tag}" for tag in result.tags)))

    if result.category:
        badges.append(PreviewBadge("category", "Kategorie", CATEGORY_LABELS[result.category.value]))

    return badges
