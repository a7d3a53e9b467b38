import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.api.deps import get_http_client
from app.database import get_db
from app.jobs.sync_job import fetch_debug_info
from app.schemas.sync import SyncReport, SyncStatusResponse, MainStreetDebugResponse
from app.services.sync_service import sync_service

router = APIRouter()
admin_router = APIRouter()

@admin_router.post("/sync-mainstreet", response_model=SyncReport, response_model_exclude_none=True)
async def trigger_sync(client: httpx.AsyncClient = Depends(get_http_client), db: Session = Depends(get_db)):
    """Pulls the MainStreet class listing into the local schedule."""
    status_code, report = await sync_service.execute_sync(client, db, triggered_by="admin")
    return JSONResponse(
        status_code=status_code,
        content=report.model_dump(mode="json", by_alias=True, exclude_none=True),
    )

@admin_router.get("/debug-mainstreet", response_model=MainStreetDebugResponse)
async def debug_mainstreet(client: httpx.AsyncClient = Depends(get_http_client)):
    try:
        return MainStreetDebugResponse(**await fetch_debug_info(client))
    except httpx.HTTPError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})

@router.get("/sync-status", response_model=SyncStatusResponse)
def get_sync_status(db: Session = Depends(get_db)):
    return sync_service.get_status(db)
