"""In-app help for the quick-add field.

Static text, maintained by hand: when the grammar in ``extractors`` or the
shortcut table in ``lexicon`` changes, update these lines too.
"""

CHEAT_SHEET: tuple[str, ...] = (
    "h = heute, m = morgen, ü = übermorgen",
    "mo di mi do f sa so = Wochentage",
    "+30 = in 30 Minuten",
    "10:30 oder 10 uhr",
    "25.12 oder 25.12.24",
    "ganztags = All-Day Event",
    "/work /privat = Kalender",
    "with Max, at Café = Teilnehmer, Ort",
    "reminder 10 = Erinnerung 10 Min vorher",
    "p1 p2 p3 = Priorität",
    "todo oder √ = Task statt Event",
    "#privat = Tag",
    "€10 = Einsatz",
    "zoom/meet/teams = Video-Link",
    "täglich/wöchentlich = Wiederholung",
)


def get_cheat_sheet() -> list[str]:
    return list(CHEAT_SHEET)
