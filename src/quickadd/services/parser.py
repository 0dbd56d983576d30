import logging
import re
from dataclasses import dataclass, field
from datetime import datetime

from quickadd.schemas import Recurrence, TaskCategory, TaskPriority, VideoCallProvider
from quickadd.services.dates import at_time, format_clock
from quickadd.services.extractors import EXTRACTOR_CHAIN, Stage
from quickadd.services.shortcuts import expand_shortcuts
from quickadd.services.timezone import Clock, TimezoneService

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")


@dataclass
class ParsedResult:
    title: str
    date: datetime | None = None
    time: str | None = None
    all_day: bool = False
    category: TaskCategory | None = None
    priority: TaskPriority | None = None
    stake: float | None = None
    reminder_minutes: int | None = None
    location: str | None = None
    attendees: list[str] = field(default_factory=list)
    recurrence: Recurrence | None = None
    tags: list[str] = field(default_factory=list)
    calendar_key: str | None = None
    is_todo: bool = False
    video_call: VideoCallProvider | None = None
    matched_tokens: list[str] = field(default_factory=list)


def resolve_title(residual: str, raw: str) -> str:
    """Collapse leftover whitespace; fall back to the raw input if nothing is left."""
    title = WHITESPACE.sub(" ", residual).strip()
    return title or raw.strip()


class QuickEntryParser:
    """Turns one quick-add line into a ParsedResult.

    The input is shortcut-expanded once, then threaded through the
    extractor stages in order. Each stage sees only what the previous
    stages left; whatever remains at the end becomes the title.
    """

    def __init__(
        self,
        timezone: str | None = None,
        clock: Clock | None = None,
        stages: tuple[Stage, ...] = EXTRACTOR_CHAIN,
    ):
        self._tz_service = TimezoneService(timezone, clock=clock)
        self.stages = stages

    @property
    def timezone(self) -> str:
        return self._tz_service.default_timezone

    def parse(self, text: str, now: datetime | None = None) -> ParsedResult:
        logger.debug(f"Parsing input: {text!r}")

        raw = text.strip()
        if not raw:
            return ParsedResult(title="")

        now = now or self._tz_service.now()
        values, labels, residual = self.run_stages(expand_shortcuts(raw), now)

        date = values.get("date")
        time = None
        if "time" in values:
            hour, minute = values["time"]
            time = format_clock(hour, minute)
            date = at_time(date or now, hour, minute)

        result = ParsedResult(
            title=resolve_title(residual, text),
            date=date,
            time=time,
            all_day=values.get("all_day", False),
            category=values.get("category"),
            priority=values.get("priority"),
            stake=values.get("stake"),
            reminder_minutes=values.get("reminder"),
            location=values.get("location"),
            attendees=values.get("attendees", []),
            recurrence=values.get("recurrence"),
            tags=values.get("tags", []),
            calendar_key=values.get("calendar"),
            is_todo=values.get("todo", False),
            video_call=values.get("video_call"),
            matched_tokens=[label for label in labels if label],
        )
        logger.debug(f"Parsed result: {result}")
        return result

    def run_stages(self, text: str, now: datetime) -> tuple[dict, list[str], str]:
        """Thread the residual text through every stage.

        Returns:
            (values keyed by stage name, preview labels, final residual text)
        """
        values: dict = {}
        labels: list[str] = []
        residual = text
        for stage in self.stages:
            extraction = stage.run(residual, now)
            residual = extraction.residual
            if extraction.matched:
                values[stage.name] = extraction.value
                labels.extend(extraction.labels)
        return values, labels, residual


# Module-level singleton
_parser: QuickEntryParser | None = None


def get_parser() -> QuickEntryParser:
    global _parser
    if _parser is None:
        _parser = QuickEntryParser()
    return _parser


def reset_parser() -> None:
    """Reset the singleton (useful for testing)."""
    global _parser
    _parser = None


def parse(text: str, now: datetime | None = None) -> ParsedResult:
    """Parse a quick-add line with the default parser."""
    return get_parser().parse(text, now)
