from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.common import ApiModel


class ClassCreate(ApiModel):
    title: str
    description: str
    age_range: str
    duration: str
    price: int = Field(ge=0) # cents
    image_url: Optional[str] = None

class ClassResponse(ClassCreate):
    id: int


class LocationCreate(ApiModel):
    name: str
    address: str
    lat: Optional[float] = None
    lng: Optional[float] = None

class LocationResponse(LocationCreate):
    id: int


class TeacherCreate(ApiModel):
    name: str
    bio: str
    image_url: Optional[str] = None
    active: bool = True
    display_order: int = 0

class TeacherResponse(TeacherCreate):
    id: int


class TestimonialCreate(ApiModel):
    quote: str
    author: str
    source: Optional[str] = None
    stars: int = Field(default=5, ge=1, le=5)
    category: Optional[str] = None
    active: bool = True

class TestimonialResponse(TestimonialCreate):
    id: int


class PageContentCreate(ApiModel):
    slug: str
    title: str
    content: str

class PageContentResponse(PageContentCreate):
    id: int
    updated_at: Optional[datetime] = None


PHOTO_CATEGORIES = ("Classes", "Parties", "Events")

class PhotoCreate(ApiModel):
    title: str
    image_url: str
    category: str
    description: Optional[str] = None
    display_order: int = 0
    active: bool = True

class PhotoResponse(PhotoCreate):
    id: int
    created_at: Optional[datetime] = None
