"""Bilingual (German/English) vocabulary for the quick-entry parsers.

Keeping the word lists here, away from the extractors, lets them be
extended and tested on their own. Weekday numbers follow ``datetime.weekday()``
(Monday is 0).
"""

from quickadd.schemas import TaskCategory

# Whole-word shorthand expanded before any extraction runs
SHORTCUTS: dict[str, str] = {
    "h": "today",
    "m": "tomorrow",
    "ü": "overmorrow",
    "f": "friday",
    "mo": "monday",
    "di": "tuesday",
    "mi": "wednesday",
    "do": "thursday",
    "fr": "friday",
    "sa": "saturday",
    "so": "sunday",
    "w": "weekly",
}

WEEKDAYS_EN: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

WEEKDAYS_DE: tuple[str, ...] = (
    "montag",
    "dienstag",
    "mittwoch",
    "donnerstag",
    "freitag",
    "samstag",
    "sonntag",
)

# Day offsets for the literal relative words, in matching order
RELATIVE_DAYS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("heute", "today"), 0),
    (("morgen", "tomorrow"), 1),
    (("übermorgen", "overmorrow"), 2),
)

ALL_DAY_WORDS: tuple[str, ...] = ("ganztags", "ganztägig", "all day", "allday")

TODO_WORDS: tuple[str, ...] = ("todo", "task", "aufgabe")

RECURRENCE_WORDS: dict[str, tuple[str, ...]] = {
    "daily": ("täglich", "daily", "jeden tag", "every day"),
    "weekly": ("wöchentlich", "weekly", "jede woche", "every week"),
    "monthly": ("monatlich", "monthly", "jeden monat", "every month"),
}

CATEGORY_KEYWORDS: dict[TaskCategory, tuple[str, ...]] = {
    TaskCategory.HOUSEHOLD: (
        "haushalt",
        "putzen",
        "waschen",
        "kochen",
        "einkaufen",
        "clean",
        "wash",
        "cook",
    ),
    TaskCategory.FINANCE: (
        "bezahlen",
        "rechnung",
        "geld",
        "bank",
        "überweisung",
        "pay",
        "bill",
        "money",
        "transfer",
    ),
    TaskCategory.WORK: (
        "meeting",
        "call",
        "email",
        "projekt",
        "deadline",
        "arbeit",
        "work",
        "besprechung",
        "termin",
    ),
    TaskCategory.LEISURE: (
        "gym",
        "sport",
        "joggen",
        "lesen",
        "entspannen",
        "hobby",
        "relax",
        "exercise",
    ),
}

# The secondary quick-add surface ships its own English-only table
SIMPLE_CATEGORY_KEYWORDS: dict[TaskCategory, tuple[str, ...]] = {
    TaskCategory.HOUSEHOLD: (
        "clean",
        "cook",
        "laundry",
        "wash",
        "dishes",
        "vacuum",
        "tidy",
        "organize",
        "home",
    ),
    TaskCategory.FINANCE: (
        "pay",
        "bill",
        "invoice",
        "budget",
        "expense",
        "money",
        "bank",
        "transfer",
        "buy",
    ),
    TaskCategory.WORK: (
        "meeting",
        "call",
        "email",
        "report",
        "project",
        "deadline",
        "task",
        "client",
        "presentation",
    ),
    TaskCategory.LEISURE: (
        "gym",
        "exercise",
        "workout",
        "run",
        "read",
        "watch",
        "play",
        "hobby",
        "relax",
    ),
}

# Display names used by the preview badges
WEEKDAY_LABELS_DE: tuple[str, ...] = (
    "Montag",
    "Dienstag",
    "Mittwoch",
    "Donnerstag",
    "Freitag",
    "Samstag",
    "Sonntag",
)

MONTH_ABBREVIATIONS_DE: tuple[str, ...] = (
    "Jan.",
    "Feb.",
    "März",
    "Apr.",
    "Mai",
    "Juni",
    "Juli",
    "Aug.",
    "Sept.",
    "Okt.",
    "Nov.",
    "Dez.",
)


def weekday_names() -> list[tuple[int, tuple[str, str]]]:
    """Pair each weekday number with its English and German name."""
    return [(index, names) for index, names in enumerate(zip(WEEKDAYS_EN, WEEKDAYS_DE))]


def date_words() -> tuple[str, ...]:
    """Every word that on its own marks a date or an all-day span."""
    words: list[str] = []
    for relative_words, _ in RELATIVE_DAYS:
        words.extend(relative_words)
    words.extend(WEEKDAYS_EN)
    words.extend(WEEKDAYS_DE)
    words.extend(ALL_DAY_WORDS)
    return tuple(words)
