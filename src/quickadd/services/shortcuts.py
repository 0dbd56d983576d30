"""Shorthand expansion for quick-entry input.

``h`` becomes ``today``, ``mo`` becomes ``monday`` and so on. Only whole
words are rewritten, case-insensitively. A shorthand that happens to be a
real word ("do", "so", a lone "m") is expanded anyway; short input matters
more than those collisions.
"""

import re

from quickadd.services.lexicon import SHORTCUTS

# Longest keys first so "mo" is tried before "m"
SHORTCUT_PATTERN = re.compile(
    r"\b("
    + "|".join(re.escape(key) for key in sorted(SHORTCUTS, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)


def expand_shortcuts(text: str) -> str:
    """Replace every whole-word shorthand token with its canonical word."""
    return SHORTCUT_PATTERN.sub(
        lambda match: SHORTCUTS.get(match.group(1).casefold(), match.group(0)), text
    )
