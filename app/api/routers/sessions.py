from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.api.crud import build_crud_router
from app.database import get_db
from app.schemas.sessions import SessionCreate, SessionResponse, PublicSessionResponse
from app.services.session_service import session_service

router = APIRouter()

@router.get("/sessions", response_model=list[PublicSessionResponse])
def list_sessions(location_id: Optional[int] = Query(None, alias="locationId"), db: Session = Depends(get_db)):
    """Schedule with the linked class and location, when there is one."""
    sessions = session_service.list_with_relations(db, location_id=location_id)
    return [session_service.to_public(s) for s in sessions]


admin_router = build_crud_router(session_service, SessionResponse, SessionCreate)
