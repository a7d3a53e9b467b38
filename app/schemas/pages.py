from datetime import date, datetime
from typing import Optional
from app.schemas.common import ApiModel
from app.schemas.catalog import (
    ClassResponse, LocationResponse, TeacherResponse, TestimonialResponse,
    PageContentResponse, PhotoResponse,
)
from app.schemas.sessions import PublicSessionResponse


class HomePage(ApiModel):
    featured_sessions: list[PublicSessionResponse]
    testimonials: list[TestimonialResponse]


class ClassWithSessions(ClassResponse):
    sessions: list[PublicSessionResponse]

class ClassesPage(ApiModel):
    location_id: Optional[int] = None
    classes: list[ClassWithSessions]
    # Synced sessions carry no class link, so they are listed on their own
    other_sessions: list[PublicSessionResponse]
    locations: list[LocationResponse]


class TeachersPage(ApiModel):
    teachers: list[TeacherResponse]

class LocationsPage(ApiModel):
    locations: list[LocationResponse]

class TestimonialsPage(ApiModel):
    testimonials: list[TestimonialResponse]


class GalleryPage(ApiModel):
    category: str
    categories: list[str]
    photos: list[PhotoResponse]


class AboutPage(ApiModel):
    content: Optional[PageContentResponse] = None


class CalendarDay(ApiModel):
    day: date
    sessions: list[PublicSessionResponse]
    locations: list[str]


class AdminDashboard(ApiModel):
    counts: dict[str, int]
    last_sync: Optional[datetime] = None
