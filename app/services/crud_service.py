from typing import Optional
from sqlalchemy.orm import Session
from app.database import Base
from app.models.catalog import MusicClass, Location, Teacher, Testimonial, PageContent, Photo
from app.models.submissions import Registration, ContactSubmission, NewsletterSubscriber


class CrudService:
    """Create/read/update/delete for a single table, keyed by numeric id."""

    def __init__(self, model: type[Base], order_by=None):
        self.model = model
        self.order_by = order_by

    def list(self, db: Session, **filters):
        query = db.query(self.model)
        for name, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, name) == value)
        if self.order_by is not None:
            query = query.order_by(self.order_by, self.model.id)
        else:
            query = query.order_by(self.model.id)
        return query.all()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def get(self, db: Session, item_id: int):
        return db.get(self.model, item_id)

    def get_by(self, db: Session, **filters):
        return db.query(self.model).filter_by(**filters).first()

    def create(self, db: Session, data: dict):
        item = self.model(**data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update(self, db: Session, item_id: int, data: dict) -> Optional[Base]:
        item = self.get(db, item_id)
        if not item:
            return None
        for key, value in data.items():
            setattr(item, key, value)
        db.commit()
        db.refresh(item)
        return item

    def delete(self, db: Session, item_id: int) -> bool:
        item = self.get(db, item_id)
        if not item:
            return False
        db.delete(item)
        db.commit()
        return True


class_service = CrudService(MusicClass)
location_service = CrudService(Location)
teacher_service = CrudService(Teacher, order_by=Teacher.display_order)
testimonial_service = CrudService(Testimonial)
content_service = CrudService(PageContent)
photo_service = CrudService(Photo, order_by=Photo.display_order)
registration_service = CrudService(Registration, order_by=Registration.created_at.desc())
contact_service = CrudService(ContactSubmission, order_by=ContactSubmission.created_at.desc())
newsletter_service = CrudService(NewsletterSubscriber, order_by=NewsletterSubscriber.created_at.desc())
