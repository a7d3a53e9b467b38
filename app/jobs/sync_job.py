import logging
import httpx
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from functools import reduce
from typing import Optional
from sqlalchemy.orm import Session
from app.config import config
from app.models.sessions import ClassSession
from app.schemas.sessions import ParsedSession
from app.schemas.sync import SyncReport
from app.jobs.mainstreet_parser import (
    parse_mainstreet_html, diagnose_page, session_end_date,
    ROW_TAG_PATTERN, ROW_MARKER, TABLE_MARKER,
)


logger = logging.getLogger(__name__)


class SyncFetchError(Exception):
    """The MainStreet page could not be retrieved."""


class NoSessionsFoundError(Exception):
    """The page was fetched but no class rows could be parsed from it."""

    def __init__(self, debug: dict):
        super().__init__("No sessions found on MainStreet page")
        self.debug = debug


@dataclass(frozen=True)
class SyncTally:
    synced: int = 0
    total: int = 0
    errors: tuple[str, ...] = ()

    def record_success(self) -> "SyncTally":
        return replace(self, synced=self.synced + 1)

    def record_failure(self, error: str) -> "SyncTally":
        return replace(self, errors=self.errors + (error,))


async def _fetch_schedule_page(client: httpx.AsyncClient, url: str) -> httpx.Response:
    logger.info(f"Fetching MainStreet classes page: {url}")
    return await client.get(url, headers=config.BROWSER_HEADERS)


def upsert_session(db: Session, parsed: ParsedSession, now: datetime) -> ClassSession:
    """
    Inserts or updates the session keyed by `mainstreet_id`.
    Only sync-owned fields are written; status and class/location links are left alone.
    """
    end_date = session_end_date(parsed.start_date, parsed.duration)
    existing = db.query(ClassSession).filter(ClassSession.mainstreet_id == parsed.mainstreet_id).first()

    if existing:
        existing.location_name = parsed.location_name
        existing.day_of_week = parsed.day_of_week
        existing.time = parsed.time
        existing.instructor = parsed.instructor
        existing.start_date = parsed.start_date
        existing.end_date = end_date
        existing.session_name = parsed.session_name
        existing.duration = parsed.duration
        existing.mainstreet_url = parsed.mainstreet_url
        existing.synced_at = now
        return existing

    new_session = ClassSession(
        location_name=parsed.location_name,
        day_of_week=parsed.day_of_week,
        time=parsed.time,
        instructor=parsed.instructor,
        status="Open",
        start_date=parsed.start_date,
        end_date=end_date,
        session_name=parsed.session_name,
        duration=parsed.duration,
        mainstreet_url=parsed.mainstreet_url,
        mainstreet_id=parsed.mainstreet_id,
        synced_at=now,
    )
    db.add(new_session)
    return new_session


def _sync_sessions_to_db(db: Session, sessions: list[ParsedSession], now: datetime) -> SyncTally:
    """
    Upserts each parsed session in its own transaction.
    A failing record is rolled back and reported; the rest still go through.
    """
    def apply(tally: SyncTally, parsed: ParsedSession) -> SyncTally:
        try:
            upsert_session(db, parsed, now)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to sync {parsed.mainstreet_id}: {str(e)}")
            return tally.record_failure(f"Failed to sync {parsed.mainstreet_id}: {e}")
        return tally.record_success()

    return reduce(apply, sessions, SyncTally(total=len(sessions)))


async def run_sync_job(
    client: httpx.AsyncClient,
    db: Session,
    url: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SyncReport:
    """
    MainStreet schedule synchronization: fetch, parse, upsert.
    Raises SyncFetchError or NoSessionsFoundError when nothing can be synced.
    """
    url = url or config.MAINSTREET_URL
    now = now or datetime.utcnow()
    logger.info("Starting MainStreet sync...")

    response = await _fetch_schedule_page(client, url)
    if not response.is_success:
        raise SyncFetchError(f"Failed to fetch MainStreet page: {response.status_code} {response.reason_phrase}")

    html = response.text
    result = parse_mainstreet_html(html, now=now)
    logger.info(f"Parsed {len(result.sessions)} sessions from MainStreet page ({len(html)} bytes).")

    if not result.sessions:
        raise NoSessionsFoundError(diagnose_page(html, discarded=result.discarded))

    tally = _sync_sessions_to_db(db, result.sessions, now)
    logger.info(f"Sync processed. Synced: {tally.synced}/{tally.total}, Errors: {len(tally.errors)}.")

    return SyncReport(
        success=True,
        synced=tally.synced,
        total=tally.total,
        discarded=result.discarded,
        errors=list(tally.errors) or None,
        timestamp=now if now.tzinfo else now.replace(tzinfo=timezone.utc),
    )


async def fetch_debug_info(client: httpx.AsyncClient, url: Optional[str] = None) -> dict:
    """Raw look at the MainStreet page, for checking what the scraper sees."""
    response = await client.get(url or config.MAINSTREET_URL, headers=config.BROWSER_HEADERS)
    html = response.text
    row_matches = ROW_TAG_PATTERN.findall(html)
    return {
        "status": response.status_code,
        "content_type": response.headers.get("content-type"),
        "html_length": len(html),
        "has_table": TABLE_MARKER in html,
        "has_item_rows": ROW_MARKER in html,
        "row_match_count": len(row_matches),
        "first_rows": row_matches[:2],
        "html_sample": html[:1000],
    }
