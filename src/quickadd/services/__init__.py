"""Quick-entry services module.

This module exposes the parsers, the preview builder and the task draft
mapping. Imports are lazy so that importing one service does not pull in
the others.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Quick-entry parser
    "ParsedResult": ("quickadd.services.parser", "ParsedResult"),
    "QuickEntryParser": ("quickadd.services.parser", "QuickEntryParser"),
    "get_parser": ("quickadd.services.parser", "get_parser"),
    "parse": ("quickadd.services.parser", "parse"),
    "resolve_title": ("quickadd.services.parser", "resolve_title"),
    # Extractors
    "EXTRACTOR_CHAIN": ("quickadd.services.extractors", "EXTRACTOR_CHAIN"),
    "Extraction": ("quickadd.services.extractors", "Extraction"),
    "Stage": ("quickadd.services.extractors", "Stage"),
    # Shortcuts
    "expand_shortcuts": ("quickadd.services.shortcuts", "expand_shortcuts"),
    # Simple quick-add parser
    "QuickTaskData": ("quickadd.services.simple_parser", "QuickTaskData"),
    "parse_simple": ("quickadd.services.simple_parser", "parse_simple"),
    # Preview
    "PreviewBadge": ("quickadd.services.preview", "PreviewBadge"),
    "build_preview": ("quickadd.services.preview", "build_preview"),
    # Task drafts
    "build_quick_task_draft": ("quickadd.services.drafts", "build_quick_task_draft"),
    "build_task_draft": ("quickadd.services.drafts", "build_task_draft"),
    # Cheat sheet
    "get_cheat_sheet": ("quickadd.services.cheatsheet", "get_cheat_sheet"),
    # Timezone
    "TimezoneService": ("quickadd.services.timezone", "TimezoneService"),
    "get_timezone_service": ("quickadd.services.timezone", "get_timezone_service"),
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr = _EXPORTS[name]
    value = getattr(import_module(module_name), attr)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
