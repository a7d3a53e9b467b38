from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.catalog import MusicClass, Location


class ClassSession(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Admin-created sessions link a class and location; synced ones only carry names
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True)
    location_name = Column(String, nullable=True)
    session_name = Column(String, nullable=True) # e.g. "Spring 2026"
    day_of_week = Column(String, nullable=False)
    time = Column(String, nullable=False)
    instructor = Column(String, nullable=False, default="TBD")
    status = Column(String, nullable=False, default="Open") # Open, Few Spots Left, Full, Waitlist
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    duration = Column(String, nullable=True) # e.g. "10 weeks"
    mainstreet_url = Column(String, nullable=True)
    mainstreet_id = Column(String, unique=True, index=True, nullable=True)
    synced_at = Column(DateTime, nullable=True)

    music_class = relationship(MusicClass)
    location = relationship(Location)
