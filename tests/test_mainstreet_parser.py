"""Tests for the MainStreet class listing parser."""

from datetime import datetime

import pytest

from app.jobs.mainstreet_parser import (
    parse_mainstreet_html, parse_schedule, parse_start_date, weeks_from_duration,
    session_end_date, make_mainstreet_id, find_session_name, diagnose_page,
    RawRow, SoupRowExtractor,
)
from conftest import build_page

NOW = datetime(2026, 1, 15, 12, 30)
BASE_URL = "https://app.mainstreetsites.com/dmn2417/"


class TestParseFixturePage:

    def test_valid_rows_in_order(self, mainstreet_html):
        result = parse_mainstreet_html(mainstreet_html, now=NOW)
        assert [s.location_name for s in result.sessions] == [
            "Washington Park", "Sloan's Lake & Park", "Cheesman Park",
        ]
        assert result.discarded == 1

    def test_first_row_fields(self, mainstreet_html):
        session = parse_mainstreet_html(mainstreet_html, now=NOW).sessions[0]
        assert session.session_name == "Spring 2026"
        assert session.day_of_week == "Tuesday"
        assert session.time == "10:00 AM"
        assert session.start_date == datetime(2026, 3, 3)
        assert session.duration == "10 weeks"
        assert session.instructor == "Hank Williams"
        assert session.mainstreet_id == "cls-4821"
        assert session.mainstreet_url == BASE_URL + "register.aspx?cls=4821"

    def test_entities_and_blank_instructor(self, mainstreet_html):
        session = parse_mainstreet_html(mainstreet_html, now=NOW).sessions[1]
        assert session.location_name == "Sloan's Lake & Park"
        assert session.day_of_week == "Saturday"
        assert session.time == "9:30 AM"
        assert session.start_date == datetime(2026, 4, 4)
        assert session.instructor == "TBD"

    def test_row_without_register_link_gets_slug_id(self, mainstreet_html):
        session = parse_mainstreet_html(mainstreet_html, now=NOW).sessions[2]
        assert session.mainstreet_id == "cheesman-park-thursday-4-00-pm"
        assert session.mainstreet_url == BASE_URL
        assert session.instructor == "June Carter"
        assert session.start_date == datetime(2026, 3, 5)


class TestRowValidity:

    def test_rows_missing_required_fields_are_dropped(self):
        html = build_page(
            (["Washington Park", "Tuesday 10:00 AM", "Mar 03, 2026", "10 weeks", "Hank"], "register.aspx?cls=1"),
            (["", "Tuesday 11:00 AM", "Mar 03, 2026", "10 weeks", "Hank"], "register.aspx?cls=2"),
            (["Congress Park", "Wednesday", "Mar 04, 2026", "10 weeks", "Hank"], "register.aspx?cls=3"),
            (["City Park", "11:00 AM", "Mar 04, 2026", "10 weeks", "Hank"], "register.aspx?cls=4"),
            (["Sloan Lake", "Friday 9:00 AM", "Mar 06, 2026", "10 weeks", "Hank"], "register.aspx?cls=5"),
        )
        result = parse_mainstreet_html(html, now=NOW)
        assert [s.mainstreet_id for s in result.sessions] == ["cls-1", "cls-5"]
        assert result.discarded == 3

    def test_rows_with_too_few_cells_are_dropped(self):
        html = build_page((["Washington Park", "Tuesday 10:00 AM", "Mar 03, 2026", "10 weeks"], None))
        result = parse_mainstreet_html(html, now=NOW)
        assert result.sessions == []
        assert result.discarded == 1

    def test_duplicate_rows_are_not_merged(self):
        row = (["Washington Park", "Tuesday 10:00 AM", "Mar 03, 2026", "10 weeks", "Hank"], "register.aspx?cls=7")
        result = parse_mainstreet_html(build_page(row, row), now=NOW)
        assert [s.mainstreet_id for s in result.sessions] == ["cls-7", "cls-7"]

    def test_page_without_rows(self):
        result = parse_mainstreet_html("<html><body><p>Closed for winter</p></body></html>", now=NOW)
        assert result.sessions == []
        assert result.discarded == 0


class TestSessionName:

    def test_first_season_token_wins(self):
        assert find_session_name("<h1>Fall 2025</h1><p>winter 2026</p>") == "Fall 2025"

    def test_default_when_missing(self):
        assert find_session_name("<h1>Classes</h1>") == "Spring 2026"

    def test_attached_to_every_record(self):
        html = build_page(
            (["A Park", "Monday 9:00 AM", "Jun 01, 2026", "6 weeks", "X"], "register.aspx?cls=1"),
            (["B Park", "Monday 10:00 AM", "Jun 01, 2026", "6 weeks", "Y"], "register.aspx?cls=2"),
            season="Summer 2026",
        )
        sessions = parse_mainstreet_html(html, now=NOW).sessions
        assert {s.session_name for s in sessions} == {"Summer 2026"}


class TestFieldParsing:

    @pytest.mark.parametrize("schedule,expected", [
        ("Tuesday 10:00 AM - 10:45 AM", ("Tuesday", "10:00 AM")),
        ("Saturday 9:30am", ("Saturday", "9:30am")),
        ("Wednesday", ("", "")),
        ("", ("", "")),
    ])
    def test_parse_schedule(self, schedule, expected):
        assert parse_schedule(schedule) == expected

    def test_parse_start_date(self):
        parsed = parse_start_date("Mar 03, 2026", NOW)
        assert (parsed.year, parsed.month, parsed.day) == (2026, 3, 3)

    def test_parse_start_date_without_comma(self):
        assert parse_start_date("September 14 2026", NOW) == datetime(2026, 9, 14)

    def test_unparseable_date_falls_back_to_now(self):
        assert parse_start_date("Starts soon", NOW) == NOW

    @pytest.mark.parametrize("text,expected", [
        ("Feb 30, 2026", datetime(2026, 3, 2)),
        ("Mar 00, 2026", datetime(2026, 2, 28)),
        ("Dec 32, 2026", datetime(2027, 1, 1)),
    ])
    def test_day_overflow_rolls_over(self, text, expected):
        assert parse_start_date(text, NOW) == expected

    def test_out_of_range_year_falls_back_to_now(self):
        assert parse_start_date("Mar 03, 0000", NOW) == NOW

    def test_unknown_month_maps_to_january(self):
        assert parse_start_date("Foo 12, 2026", NOW) == datetime(2026, 1, 12)

    @pytest.mark.parametrize("duration,weeks", [
        ("10 weeks", 10),
        ("1 week", 1),
        ("6 Weeks", 6),
        ("ongoing", 10),
        ("", 10),
        (None, 10),
    ])
    def test_weeks_from_duration(self, duration, weeks):
        assert weeks_from_duration(duration) == weeks

    def test_session_end_date(self):
        assert session_end_date(datetime(2026, 3, 3), "10 weeks") == datetime(2026, 5, 12)
        assert session_end_date(datetime(2026, 3, 3), "1 week") == datetime(2026, 3, 10)


class TestMainstreetId:

    def test_from_register_link(self):
        assert make_mainstreet_id("register.aspx?cls=4821", "Washington Park", "Tuesday", "10:00 AM") == "cls-4821"

    def test_slug_without_link(self):
        assert make_mainstreet_id("", "Washington Park", "Tuesday", "10:00 AM") == "washington-park-tuesday-10-00-am"

    def test_slug_is_stable(self):
        first = make_mainstreet_id("", "Sloan's Lake", "Saturday", "9:30 AM")
        assert first == make_mainstreet_id("", "Sloan's Lake", "Saturday", "9:30 AM")
        assert first == "sloan-s-lake-saturday-9-30-am"


class TestRowExtractor:

    def test_soup_extractor_cells_and_link(self):
        html = build_page((["<b>Washington</b>&nbsp;Park", "Tuesday  10:00 AM", "x", "y", "z"], "register.aspx?cls=9"))
        rows = SoupRowExtractor().extract_rows(html)
        assert len(rows) == 1
        assert rows[0].cells[:2] == ["Washington Park", "Tuesday 10:00 AM"]
        assert rows[0].register_link == "register.aspx?cls=9"

    def test_ignores_rows_without_marker(self):
        html = '<table><tr class="classTableHeaderTR"><td class="classTableItemTD">x</td></tr></table>'
        assert SoupRowExtractor().extract_rows(html) == []

    def test_custom_extractor(self):
        class FixedRows:
            def extract_rows(self, html):
                return [RawRow(cells=["Park", "Monday 9:00 AM", "Jan 05, 2026", "4 weeks", ""])]

        result = parse_mainstreet_html("", now=NOW, extractor=FixedRows(), base_url="https://example.test/")
        assert len(result.sessions) == 1
        assert result.sessions[0].mainstreet_id == "park-monday-9-00-am"
        assert result.sessions[0].mainstreet_url == "https://example.test/"


class TestDiagnosePage:

    def test_markers_present(self, mainstreet_html):
        debug = diagnose_page(mainstreet_html)
        assert debug["has_table"] is True
        assert debug["has_item_rows"] is True
        assert debug["has_item_cells"] is True
        assert debug["row_match_count"] == 4
        assert debug["html_length"] == len(mainstreet_html)
        assert debug["table_sample"].startswith('id="ctl04_ctl00_phClassesClassTable"')

    def test_markers_missing(self):
        debug = diagnose_page("<html><body>Maintenance</body></html>")
        assert debug["row_match_count"] == 0
        assert debug["has_item_rows"] is False
        assert debug["table_sample"] == "table not found"
