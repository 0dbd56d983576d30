"""Tests for the preview badge builder."""

from datetime import datetime

import pytz

from quickadd.services.parser import ParsedResult, QuickEntryParser
from quickadd.services.preview import build_preview, format_preview_date

TZ = pytz.timezone("Europe/Berlin")
NOW = TZ.localize(datetime(2024, 6, 3, 9, 0))


class TestBuildPreview:
    def setup_method(self):
        self.parser = QuickEntryParser(timezone="Europe/Berlin", clock=lambda: NOW)

    def test_badges_in_display_order(self):
        result = self.parser.parse("todo Einkaufen heute 18 uhr p1 €10 /privat")
        badges = build_preview(result, now=NOW)
        assert [badge.label for badge in badges] == [
            "Task",
            "Termin",
            "Kalender",
            "Priorität",
            "Einsatz",
            "Kategorie",
        ]
        values = {badge.label: badge.value for badge in badges}
        assert values["Termin"] == "Heute"
        assert values["Priorität"] == "Hoch"
        assert values["Einsatz"] == "€10.00"
        assert values["Kategorie"] == "Haushalt"

    def test_attendees_location_and_video(self):
        result = self.parser.parse("Sync teams with Max und Anna at Büro")
        values = {badge.label: badge.value for badge in build_preview(result, now=NOW)}
        assert values["Mit"] == "Max, Anna"
        assert values["Ort"] == "Büro"
        assert values["Video"] == "Microsoft Teams"

    def test_reminder_recurrence_and_tags(self):
        result = self.parser.parse("Lesen täglich reminder 10 #buch #abend")
        values = {badge.label: badge.value for badge in build_preview(result, now=NOW)}
        assert values["Erinnerung"] == "10 Min vorher"
        assert values["Wiederholen"] == "Täglich"
        assert values["Tags"] == "#buch #abend"

    def test_all_day_label(self):
        result = self.parser.parse("Urlaub ganztags freitag")
        badges = build_preview(result, now=NOW)
        assert badges[0].label == "Ganztags"
        assert badges[0].value == "Freitag, 7. Juni"

    def test_empty_result(self):
        assert build_preview(ParsedResult(title="Zahnarzt"), now=NOW) == []


class TestFormatPreviewDate:
    def test_tomorrow(self):
        result = ParsedResult(title="x", date=TZ.localize(datetime(2024, 6, 4, 9, 0)))
        assert format_preview_date(result, NOW) == "Morgen"

    def test_weekday_with_time(self):
        result = ParsedResult(title="x", date=TZ.localize(datetime(2024, 6, 7, 14, 30)), time="14:30")
        assert format_preview_date(result, NOW) == "Freitag, 7. Juni · 14:30"

    def test_month_abbreviation(self):
        result = ParsedResult(title="x", date=TZ.localize(datetime(2024, 12, 25)))
        assert format_preview_date(result, NOW) == "Mittwoch, 25. Dez."
