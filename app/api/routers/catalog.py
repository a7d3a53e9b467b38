from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.api.crud import build_crud_router
from app.database import get_db
from app.schemas.catalog import (
    ClassCreate, ClassResponse, LocationCreate, LocationResponse,
    TeacherCreate, TeacherResponse, TestimonialCreate, TestimonialResponse,
    PageContentCreate, PageContentResponse, PhotoCreate, PhotoResponse,
)
from app.services.crud_service import (
    class_service, location_service, teacher_service, testimonial_service,
    content_service, photo_service,
)

router = APIRouter()

@router.get("/classes", response_model=list[ClassResponse])
def list_classes(db: Session = Depends(get_db)):
    return class_service.list(db)

@router.get("/locations", response_model=list[LocationResponse])
def list_locations(db: Session = Depends(get_db)):
    return location_service.list(db)

@router.get("/teachers", response_model=list[TeacherResponse])
def list_teachers(db: Session = Depends(get_db)):
    return teacher_service.list(db)

@router.get("/testimonials", response_model=list[TestimonialResponse])
def list_testimonials(category: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return testimonial_service.list(db, category=category)

@router.get("/content", response_model=list[PageContentResponse])
def list_content(db: Session = Depends(get_db)):
    return content_service.list(db)

@router.get("/content/{slug}", response_model=PageContentResponse)
def get_content(slug: str, db: Session = Depends(get_db)):
    content = content_service.get_by(db, slug=slug)
    if not content:
        raise HTTPException(status_code=404, detail="Not found")
    return content

@router.get("/photos", response_model=list[PhotoResponse])
def list_photos(db: Session = Depends(get_db)):
    """Only active photos are public."""
    return photo_service.list(db, active=True)


def _touch_updated_at(data: dict) -> dict:
    return {**data, "updated_at": datetime.utcnow()}

# Mounted under /admin with the admin guard
admin_router = APIRouter()
admin_router.include_router(build_crud_router(class_service, ClassResponse, ClassCreate), prefix="/classes")
admin_router.include_router(build_crud_router(location_service, LocationResponse, LocationCreate), prefix="/locations")
admin_router.include_router(build_crud_router(teacher_service, TeacherResponse, TeacherCreate), prefix="/teachers")
admin_router.include_router(build_crud_router(testimonial_service, TestimonialResponse, TestimonialCreate), prefix="/testimonials")
admin_router.include_router(
    build_crud_router(content_service, PageContentResponse, PageContentCreate, prepare=_touch_updated_at),
    prefix="/content",
)
admin_router.include_router(build_crud_router(photo_service, PhotoResponse, PhotoCreate), prefix="/photos")
