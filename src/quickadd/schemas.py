from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskCategory(str, Enum):
    HOUSEHOLD = "Household"
    FINANCE = "Finance"
    WORK = "Work"
    LEISURE = "Leisure"


class TaskPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recurrence(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class VideoCallProvider(str, Enum):
    ZOOM = "zoom"
    MEET = "meet"
    TEAMS = "teams"


class ReminderType(str, Enum):
    NONE = "none"
    AT_DUE = "at_due"
    THIRTY_MIN = "30_min"
    CUSTOM = "custom"


class RecurrenceType(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TaskDraft(BaseModel):
    """Task creation payload built from a quick-entry parse."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: str = ""
    category: TaskCategory = TaskCategory.HOUSEHOLD
    start_at: datetime
    end_at: datetime
    all_day: bool = False
    stake: float = Field(default=0.0, ge=0)
    priority: TaskPriority = TaskPriority.MEDIUM
    reminder: ReminderType = ReminderType.NONE
    custom_reminder_minutes: int = Field(default=30, gt=0)
    recurrence: RecurrenceType = RecurrenceType.NONE
    tags: list[str] = Field(default_factory=list)
    location: str | None = None
    attendees: list[str] = Field(default_factory=list)
    calendar_key: str | None = None
    is_todo: bool = False
    video_call: VideoCallProvider | None = None
