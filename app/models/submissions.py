from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from app.database import Base
from datetime import datetime


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    session_id = Column(Integer, ForeignKey("sessions.id"), nullable=False)
    parent_name = Column(String, nullable=False)
    parent_email = Column(String, nullable=False)
    student_name = Column(String, nullable=False)
    student_age = Column(Integer, nullable=False)
    payment_status = Column(String, nullable=False, default="Pending")
    created_at = Column(DateTime, default=datetime.utcnow)


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    inquiry_type = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class NewsletterSubscriber(Base):
    __tablename__ = "newsletter_subscribers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
