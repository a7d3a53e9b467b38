import logging
import httpx
from sqlalchemy.orm import Session
from app.jobs.sync_job import run_sync_job, SyncFetchError, NoSessionsFoundError
from app.schemas.sync import SyncReport, SyncDebugInfo, SyncStatusResponse
from app.services.session_service import session_service
from app.services.slack_service import slack_service

logger = logging.getLogger(__name__)


class SyncService:
    async def execute_sync(self, client: httpx.AsyncClient, db: Session, triggered_by: str = "admin") -> tuple[int, SyncReport]:
        """
        Runs one MainStreet sync and returns (HTTP status, report).
        Upstream failures map to 500, an unparseable page to 400.
        """
        try:
            report = await run_sync_job(client, db)
            status_code = 200
        except SyncFetchError as e:
            logger.error(str(e))
            report = SyncReport(success=False, error=str(e))
            status_code = 500
        except NoSessionsFoundError as e:
            logger.warning(f"{e} (rows matched: {e.debug['row_match_count']})")
            report = SyncReport(success=False, error=str(e), debug=SyncDebugInfo(**e.debug))
            status_code = 400
        except Exception as e:
            logger.error(f"Error during MainStreet sync: {str(e)}")
            report = SyncReport(success=False, error=f"Sync failed: {e}")
            status_code = 500

        try:
            slack_service.send_sync_report(report, triggered_by)
        except Exception as e:
            logger.error(f"Failed to send sync report to Slack: {str(e)}")
        return status_code, report

    def get_status(self, db: Session) -> SyncStatusResponse:
        last_sync = session_service.last_synced_at(db)
        return SyncStatusResponse(last_sync=last_sync, has_synced_data=last_sync is not None)

sync_service = SyncService()
