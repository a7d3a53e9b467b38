from sqlalchemy import Column, String, Text, DateTime, Integer, Float, Boolean
from app.database import Base
from datetime import datetime


class MusicClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    age_range = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    price = Column(Integer, nullable=False) # cents
    image_url = Column(String, nullable=True)


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    bio = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    active = Column(Boolean, default=True)
    display_order = Column(Integer, default=0)


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    quote = Column(Text, nullable=False)
    author = Column(String, nullable=False)
    source = Column(String, nullable=True) # e.g. "Google", "Yelp"
    stars = Column(Integer, default=5)
    category = Column(String, nullable=True, index=True)
    active = Column(Boolean, default=True)


class PageContent(Base):
    __tablename__ = "page_content"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    slug = Column(String, unique=True, nullable=False, index=True) # e.g. "our-story"
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, nullable=False) # Classes, Parties, Events
    description = Column(Text, nullable=True)
    display_order = Column(Integer, default=0)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
