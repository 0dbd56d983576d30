"""Mapping of parse results onto task creation payloads.

This is where an empty title is finally rejected: the parsers always
return a result, but ``TaskDraft`` refuses a blank title with a
``pydantic.ValidationError``.
"""

from datetime import datetime, timedelta

from quickadd.config import settings
from quickadd.schemas import RecurrenceType, ReminderType, TaskCategory, TaskDraft, TaskPriority
from quickadd.services.parser import ParsedResult
from quickadd.services.simple_parser import QuickTaskData
from quickadd.services.timezone import now as current_time


def _default_start(now: datetime) -> datetime:
    return now + timedelta(minutes=settings.default_start_offset_minutes)


def _end_of(start: datetime) -> datetime:
    return start + timedelta(minutes=settings.default_duration_minutes)


def build_task_draft(result: ParsedResult, now: datetime | None = None) -> TaskDraft:
    """Build the task creation payload for a quick-entry parse.

    Args:
        result: Output of the quick-entry parser
        now: Reference time for the default start. Defaults to now.

    Raises:
        pydantic.ValidationError: if the title is blank
    """
    start_at = result.date or _default_start(now or current_time())
    reminder = ReminderType.CUSTOM if result.reminder_minutes else ReminderType.NONE

    return TaskDraft(
        title=result.title,
        category=result.category or TaskCategory(settings.default_category),
        start_at=start_at,
        end_at=_end_of(start_at),
        all_day=result.all_day,
        stake=result.stake if result.stake is not None else settings.default_stake,
        priority=result.priority or TaskPriority.MEDIUM,
        reminder=reminder,
        custom_reminder_minutes=result.reminder_minutes or settings.default_reminder_minutes,
        recurrence=RecurrenceType(result.recurrence.value) if result.recurrence else RecurrenceType.NONE,
        tags=list(result.tags),
        location=result.location,
        attendees=list(result.attendees),
        calendar_key=result.calendar_key,
        is_todo=result.is_todo,
        video_call=result.video_call,
    )


def build_quick_task_draft(data: QuickTaskData, now: datetime | None = None) -> TaskDraft:
    """Build the task creation payload for the plain quick-add field."""
    start_at = data.due_date or _default_start(now or current_time())

    return TaskDraft(
        title=data.title,
        category=data.category or TaskCategory(settings.default_category),
        start_at=start_at,
        end_at=_end_of(start_at),
        stake=data.stake if data.stake else settings.default_stake,
        custom_reminder_minutes=settings.default_reminder_minutes,
    )
