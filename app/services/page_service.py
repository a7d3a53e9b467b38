from datetime import date, datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.schemas.catalog import (
    ClassResponse, LocationResponse, TeacherResponse, TestimonialResponse,
    PageContentResponse, PhotoResponse, PHOTO_CATEGORIES,
)
from app.schemas.pages import (
    HomePage, ClassesPage, ClassWithSessions, TeachersPage, LocationsPage,
    TestimonialsPage, GalleryPage, AboutPage, CalendarDay, AdminDashboard,
)
from app.services.crud_service import (
    class_service, location_service, teacher_service, testimonial_service,
    content_service, photo_service, registration_service, contact_service,
    newsletter_service,
)
from app.services.session_service import session_service

HOME_FEATURED_COUNT = 3
ALL_CATEGORIES = "All"
ABOUT_SLUG = "our-story"


class PageService:
    """Builds the view model behind each public page from CRUD reads."""

    def home(self, db: Session, now: Optional[datetime] = None) -> HomePage:
        now = now or datetime.utcnow()
        sessions = session_service.list_upcoming(db, now, limit=HOME_FEATURED_COUNT)
        testimonials = testimonial_service.list(db, active=True)[:HOME_FEATURED_COUNT]
        return HomePage(
            featured_sessions=[session_service.to_public(s) for s in sessions],
            testimonials=[TestimonialResponse.model_validate(t) for t in testimonials],
        )

    def classes(self, db: Session, location_id: Optional[int] = None) -> ClassesPage:
        sessions = [session_service.to_public(s) for s in session_service.list_with_relations(db, location_id)]
        classes = [
            ClassWithSessions(
                **ClassResponse.model_validate(c).model_dump(),
                sessions=[s for s in sessions if s.class_id == c.id],
            )
            for c in class_service.list(db)
        ]
        # With a location filter, synced sessions (no location link) can't match it
        return ClassesPage(
            location_id=location_id,
            classes=classes,
            other_sessions=[s for s in sessions if s.class_id is None],
            locations=[LocationResponse.model_validate(l) for l in location_service.list(db)],
        )

    def teachers(self, db: Session) -> TeachersPage:
        return TeachersPage(teachers=[TeacherResponse.model_validate(t) for t in teacher_service.list(db, active=True)])

    def locations(self, db: Session) -> LocationsPage:
        return LocationsPage(locations=[LocationResponse.model_validate(l) for l in location_service.list(db)])

    def testimonials(self, db: Session) -> TestimonialsPage:
        return TestimonialsPage(
            testimonials=[TestimonialResponse.model_validate(t) for t in testimonial_service.list(db, active=True)]
        )

    def gallery(self, db: Session, category: str = ALL_CATEGORIES) -> GalleryPage:
        photos = photo_service.list(db, active=True)
        if category != ALL_CATEGORIES:
            photos = [p for p in photos if p.category == category]
        return GalleryPage(
            category=category,
            categories=[ALL_CATEGORIES, *PHOTO_CATEGORIES],
            photos=[PhotoResponse.model_validate(p) for p in photos],
        )

    def about(self, db: Session) -> AboutPage:
        content = content_service.get_by(db, slug=ABOUT_SLUG)
        return AboutPage(content=PageContentResponse.model_validate(content) if content else None)

    def calendar_day(self, db: Session, day: date) -> CalendarDay:
        sessions = [session_service.to_public(s) for s in session_service.list_for_day(db, day)]
        locations = []
        for s in sessions:
            name = s.location_name or (s.location.name if s.location else "")
            if name and name not in locations:
                locations.append(name)
        return CalendarDay(day=day, sessions=sessions, locations=locations)

    def admin_dashboard(self, db: Session) -> AdminDashboard:
        services = {
            "classes": class_service,
            "sessions": session_service,
            "locations": location_service,
            "teachers": teacher_service,
            "testimonials": testimonial_service,
            "pages": content_service,
            "photos": photo_service,
            "registrations": registration_service,
            "contactSubmissions": contact_service,
            "newsletterSubscribers": newsletter_service,
        }
        return AdminDashboard(
            counts={name: service.count(db) for name, service in services.items()},
            last_sync=session_service.last_synced_at(db),
        )

page_service = PageService()
