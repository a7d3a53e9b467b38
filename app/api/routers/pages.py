from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.pages import (
    HomePage, ClassesPage, TeachersPage, LocationsPage, TestimonialsPage,
    GalleryPage, AboutPage, CalendarDay, AdminDashboard,
)
from app.services.page_service import page_service, ALL_CATEGORIES

router = APIRouter()

@router.get("/home", response_model=HomePage)
def home(db: Session = Depends(get_db)):
    return page_service.home(db)

@router.get("/classes", response_model=ClassesPage)
def classes(location: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return page_service.classes(db, location_id=location)

@router.get("/teachers", response_model=TeachersPage)
def teachers(db: Session = Depends(get_db)):
    return page_service.teachers(db)

@router.get("/locations", response_model=LocationsPage)
def locations(db: Session = Depends(get_db)):
    return page_service.locations(db)

@router.get("/testimonials", response_model=TestimonialsPage)
def testimonials(db: Session = Depends(get_db)):
    return page_service.testimonials(db)

@router.get("/gallery", response_model=GalleryPage)
def gallery(category: str = Query(ALL_CATEGORIES), db: Session = Depends(get_db)):
    return page_service.gallery(db, category=category)

@router.get("/about", response_model=AboutPage)
def about(db: Session = Depends(get_db)):
    return page_service.about(db)

@router.get("/calendar", response_model=CalendarDay)
def calendar(day: date = Query(..., alias="date"), db: Session = Depends(get_db)):
    """Sessions meeting on the given day, for the class calendar."""
    return page_service.calendar_day(db, day)


admin_router = APIRouter()

@admin_router.get("/dashboard", response_model=AdminDashboard)
def dashboard(db: Session = Depends(get_db)):
    return page_service.admin_dashboard(db)
