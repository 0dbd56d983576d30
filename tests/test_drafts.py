"""Tests for mapping parse results onto task drafts."""

from datetime import datetime, timedelta

import pytest
import pytz
from pydantic import ValidationError

from quickadd.schemas import (
    RecurrenceType,
    ReminderType,
    TaskCategory,
    TaskPriority,
    VideoCallProvider,
)
from quickadd.services.drafts import build_quick_task_draft, build_task_draft
from quickadd.services.parser import ParsedResult, QuickEntryParser
from quickadd.services.simple_parser import QuickTaskData

TZ = pytz.timezone("Europe/Berlin")
NOW = TZ.localize(datetime(2024, 6, 3, 9, 0))


class TestBuildTaskDraft:
    def setup_method(self):
        self.parser = QuickEntryParser(timezone="Europe/Berlin", clock=lambda: NOW)

    def test_parsed_fields_are_carried_over(self):
        result = self.parser.parse("todo Einkaufen heute 18 uhr p1 €10 reminder 15 wöchentlich")
        draft = build_task_draft(result, now=NOW)
        assert draft.title == "Einkaufen"
        assert draft.category == TaskCategory.HOUSEHOLD
        assert draft.priority == TaskPriority.HIGH
        assert draft.stake == 10.0
        assert draft.start_at == result.date
        assert draft.end_at - draft.start_at == timedelta(minutes=120)
        assert draft.reminder == ReminderType.CUSTOM
        assert draft.custom_reminder_minutes == 15
        assert draft.recurrence == RecurrenceType.WEEKLY
        assert draft.is_todo is True

    def test_defaults_without_tokens(self):
        draft = build_task_draft(ParsedResult(title="Zahnarzt"), now=NOW)
        assert draft.category == TaskCategory.HOUSEHOLD
        assert draft.priority == TaskPriority.MEDIUM
        assert draft.start_at == NOW + timedelta(minutes=60)
        assert draft.reminder == ReminderType.NONE
        assert draft.custom_reminder_minutes == 30
        assert draft.recurrence == RecurrenceType.NONE
        assert draft.stake == 0.0

    def test_event_fields(self):
        result = self.parser.parse("Sync zoom with Max at Office /work #team")
        draft = build_task_draft(result, now=NOW)
        assert draft.video_call == VideoCallProvider.ZOOM
        assert draft.attendees == ["Max"]
        assert draft.location == "Office"
        assert draft.calendar_key == "work"
        assert draft.tags == ["team"]

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            build_task_draft(ParsedResult(title="   "), now=NOW)


class TestBuildQuickTaskDraft:
    def test_maps_quick_task_data(self):
        due = TZ.localize(datetime(2024, 6, 4, 17, 0))
        draft = build_quick_task_draft(
            QuickTaskData(title="Pay rent", due_date=due, category=TaskCategory.FINANCE, stake=20.0),
            now=NOW,
        )
        assert draft.start_at == due
        assert draft.category == TaskCategory.FINANCE
        assert draft.stake == 20.0
        assert draft.all_day is False

    def test_default_start(self):
        draft = build_quick_task_draft(QuickTaskData(title="Something"), now=NOW)
        assert draft.start_at == NOW + timedelta(minutes=60)
        assert draft.end_at == NOW + timedelta(minutes=180)
