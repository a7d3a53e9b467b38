import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Protocol
from bs4 import BeautifulSoup
from app.config import config
from app.schemas.sessions import ParsedSession

logger = logging.getLogger(__name__)

# Markers used by the MainStreet class listing table
TABLE_MARKER = "classTable"
ROW_MARKER = "classTableItemTR"
CELL_MARKER = "classTableItemTD"
TABLE_SECTION_MARKER = 'id="ctl04_ctl00_phClassesClassTable"'

SEASON_PATTERN = re.compile(r"(?:Spring|Summer|Fall|Winter)\s+\d{4}", re.IGNORECASE)
SCHEDULE_PATTERN = re.compile(r"(\w+)\s+(\d{1,2}:\d{2}\s*(?:AM|PM))", re.IGNORECASE)
DATE_PATTERN = re.compile(r"(\w+)\s+(\d{1,2}),?\s*(\d{4})")
WEEKS_PATTERN = re.compile(r"(\d+)\s*weeks?", re.IGNORECASE)
REGISTER_LINK_PATTERN = re.compile(r"register\.aspx\?cls=(\d+)", re.IGNORECASE)
ROW_TAG_PATTERN = re.compile(r"<tr[^>]*classTableItemTR[^>]*>", re.IGNORECASE)

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}
DEFAULT_WEEKS = 10
MIN_CELLS = 5


@dataclass(frozen=True)
class RawRow:
    cells: list[str]
    register_link: str = ""


@dataclass(frozen=True)
class ParseResult:
    sessions: list[ParsedSession] = field(default_factory=list)
    discarded: int = 0


class RowExtractor(Protocol):
    def extract_rows(self, html: str) -> list[RawRow]:
        ...


def _has_marker(marker: str):
    return lambda value: value is not None and marker in value


class SoupRowExtractor:
    """
    Locates class listing rows and their cells with BeautifulSoup.
    Cell text comes back with markup stripped, entities decoded and whitespace collapsed.
    """

    def extract_rows(self, html: str) -> list[RawRow]:
        soup = BeautifulSoup(html, "html.parser")
        rows = []
        for tr in soup.find_all("tr", class_=_has_marker(ROW_MARKER)):
            cells = [
                " ".join(td.get_text(" ").split())
                for td in tr.find_all("td", class_=_has_marker(CELL_MARKER))
            ]
            link = tr.find("a", href=REGISTER_LINK_PATTERN)
            register_link = REGISTER_LINK_PATTERN.search(link["href"]).group(0) if link else ""
            rows.append(RawRow(cells=cells, register_link=register_link))
        return rows


def find_session_name(html: str) -> str:
    match = SEASON_PATTERN.search(html)
    return match.group(0) if match else config.DEFAULT_SESSION_NAME


def parse_schedule(schedule: str) -> tuple[str, str]:
    """'Tuesday 10:00 AM - 10:45 AM' -> ('Tuesday', '10:00 AM')"""
    match = SCHEDULE_PATTERN.search(schedule)
    if not match:
        return "", ""
    return match.group(1), match.group(2)


def parse_start_date(text: str, now: datetime) -> datetime:
    """
    Parses 'Mar 03, 2026'. Anything unparseable falls back to `now`.
    Unknown month names resolve to January; day overflow rolls into the
    next month ('Feb 30' -> Mar 2, day 0 -> last day of the previous month).
    """
    match = DATE_PATTERN.search(text)
    if not match:
        logger.warning(f"Unparseable start date '{text}', falling back to {now:%Y-%m-%d}")
        return now

    month = MONTHS.get(match.group(1).lower()[:3], 1)
    try:
        return datetime(int(match.group(3)), month, 1) + timedelta(days=int(match.group(2)) - 1)
    except (ValueError, OverflowError):
        logger.warning(f"Invalid start date '{text}', falling back to {now:%Y-%m-%d}")
        return now


def weeks_from_duration(duration: Optional[str]) -> int:
    match = WEEKS_PATTERN.search(duration or "")
    return int(match.group(1)) if match else DEFAULT_WEEKS


def session_end_date(start_date: datetime, duration: Optional[str]) -> datetime:
    return start_date + timedelta(days=weeks_from_duration(duration) * 7)


def make_mainstreet_id(register_link: str, location_name: str, day_of_week: str, time: str) -> str:
    """
    Stable external key: the class id from the registration link, or a slug of
    location/day/time when the row has no link.
    """
    match = REGISTER_LINK_PATTERN.search(register_link or "")
    if match:
        return f"cls-{match.group(1)}"
    return re.sub(r"[^a-z0-9]+", "-", f"{location_name}-{day_of_week}-{time}".lower())


def parse_mainstreet_html(
    html: str,
    now: Optional[datetime] = None,
    extractor: Optional[RowExtractor] = None,
    base_url: Optional[str] = None,
) -> ParseResult:
    """
    Extracts class sessions from the MainStreet classes page.

    Columns: location, schedule, start date, duration, instructor, register link.
    Rows without a location, day or time are dropped and counted as discarded.
    """
    now = now or datetime.now()
    extractor = extractor or SoupRowExtractor()
    base_url = base_url if base_url is not None else config.MAINSTREET_BASE_URL
    session_name = find_session_name(html)

    sessions = []
    discarded = 0
    for row in extractor.extract_rows(html):
        if len(row.cells) < MIN_CELLS:
            discarded += 1
            continue

        location_name, schedule, start_date_str, duration, instructor = row.cells[:MIN_CELLS]
        day_of_week, time = parse_schedule(schedule)

        if not (location_name and day_of_week and time):
            discarded += 1
            continue

        sessions.append(ParsedSession(
            session_name=session_name,
            location_name=location_name,
            day_of_week=day_of_week,
            time=time,
            start_date=parse_start_date(start_date_str, now),
            duration=duration,
            instructor=instructor or "TBD",
            mainstreet_url=f"{base_url}{row.register_link}",
            mainstreet_id=make_mainstreet_id(row.register_link, location_name, day_of_week, time),
        ))

    if discarded:
        logger.info(f"Discarded {discarded} incomplete class rows.")
    return ParseResult(sessions=sessions, discarded=discarded)


def diagnose_page(html: str, discarded: int = 0) -> dict:
    """Marker counts and a table excerpt for a page that yielded no sessions."""
    table_start = html.find(TABLE_SECTION_MARKER)
    return {
        "has_table": TABLE_MARKER in html,
        "has_item_rows": ROW_MARKER in html,
        "has_item_cells": CELL_MARKER in html,
        "row_match_count": len(ROW_TAG_PATTERN.findall(html)),
        "discarded_rows": discarded,
        "html_length": len(html),
        "table_sample": html[table_start:table_start + 3000] if table_start > -1 else "table not found",
    }
