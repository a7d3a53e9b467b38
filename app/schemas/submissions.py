from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.common import ApiModel


class RegistrationCreate(ApiModel):
    session_id: int
    parent_name: str
    parent_email: str
    student_name: str
    student_age: int = Field(ge=0)

class RegistrationResponse(RegistrationCreate):
    id: int
    payment_status: str
    created_at: Optional[datetime] = None


class ContactCreate(ApiModel):
    name: str
    email: str
    phone: Optional[str] = None
    inquiry_type: str
    message: str

class ContactResponse(ContactCreate):
    id: int
    created_at: Optional[datetime] = None


class NewsletterCreate(ApiModel):
    email: Optional[str] = None

class NewsletterResponse(ApiModel):
    id: int
    email: str
    created_at: Optional[datetime] = None
