from datetime import date, datetime
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from app.models.sessions import ClassSession
from app.schemas.sessions import PublicSessionResponse, SessionClassInfo, SessionLocationInfo
from app.services.crud_service import CrudService

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class SessionService(CrudService):
    def __init__(self):
        super().__init__(ClassSession, order_by=ClassSession.start_date)

    def list_with_relations(self, db: Session, location_id: Optional[int] = None):
        query = db.query(ClassSession).options(
            joinedload(ClassSession.music_class),
            joinedload(ClassSession.location),
        )
        if location_id is not None:
            query = query.filter(ClassSession.location_id == location_id)
        return query.order_by(ClassSession.start_date, ClassSession.id).all()

    def list_upcoming(self, db: Session, now: datetime, limit: int = 3):
        query = db.query(ClassSession).options(
            joinedload(ClassSession.music_class),
            joinedload(ClassSession.location),
        ).filter(ClassSession.end_date >= now)
        return query.order_by(ClassSession.start_date, ClassSession.id).limit(limit).all()

    def list_for_day(self, db: Session, day: date):
        """Sessions meeting on `day`: matching weekday and within the start/end range."""
        weekday = DAYS_OF_WEEK[day.weekday()]
        day_start = datetime.combine(day, datetime.min.time())
        day_end = datetime.combine(day, datetime.max.time())
        return [
            s for s in self.list_with_relations(db)
            if s.day_of_week.strip().lower() == weekday.lower()
            and s.start_date <= day_end and s.end_date >= day_start
        ]

    def last_synced_at(self, db: Session) -> Optional[datetime]:
        return db.query(func.max(ClassSession.synced_at)).scalar()

    def to_public(self, session: ClassSession) -> PublicSessionResponse:
        response = PublicSessionResponse.model_validate(session)
        if session.music_class:
            response.class_info = SessionClassInfo(id=session.music_class.id, title=session.music_class.title)
        if session.location:
            response.location = SessionLocationInfo(
                id=session.location.id,
                name=session.location.name,
                address=session.location.address,
            )
        return response

session_service = SessionService()
