import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.api.crud import build_crud_router
from app.database import get_db
from app.schemas.submissions import (
    RegistrationCreate, RegistrationResponse, ContactCreate, ContactResponse,
    NewsletterCreate, NewsletterResponse,
)
from app.services.crud_service import registration_service, contact_service, newsletter_service
from app.services.session_service import session_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/registrations", response_model=RegistrationResponse, status_code=201)
def create_registration(body: RegistrationCreate, db: Session = Depends(get_db)):
    if not session_service.get(db, body.session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    registration = registration_service.create(db, body.model_dump())
    logger.info(f"New registration {registration.id} for session {registration.session_id}")
    return registration

@router.post("/contact", response_model=ContactResponse, status_code=201)
def create_contact(body: ContactCreate, db: Session = Depends(get_db)):
    return contact_service.create(db, body.model_dump())

@router.post("/newsletter", response_model=NewsletterResponse, status_code=201)
def subscribe(body: NewsletterCreate, db: Session = Depends(get_db)):
    email = (body.email or "").strip()
    if "@" not in email:
        raise HTTPException(status_code=400, detail="Valid email is required")

    if newsletter_service.get_by(db, email=email):
        return JSONResponse(
            status_code=409,
            content={"error": "Email already subscribed", "alreadySubscribed": True},
        )

    return newsletter_service.create(db, {"email": email})


# Submissions are read and cleaned up by the admin, never edited
list_delete = ("list", "delete")
admin_router = APIRouter()
admin_router.include_router(
    build_crud_router(registration_service, RegistrationResponse, operations=list_delete),
    prefix="/registrations",
)
admin_router.include_router(
    build_crud_router(contact_service, ContactResponse, operations=list_delete),
    prefix="/contact",
)
admin_router.include_router(
    build_crud_router(newsletter_service, NewsletterResponse, operations=list_delete),
    prefix="/newsletter",
)
