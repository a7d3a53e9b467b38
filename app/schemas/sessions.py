from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field
from app.schemas.common import ApiModel

SessionStatus = Literal["Open", "Few Spots Left", "Full", "Waitlist"]


class ParsedSession(BaseModel):
    """One class listing row scraped from the MainStreet calendar."""
    session_name: str
    location_name: str
    day_of_week: str
    time: str
    start_date: datetime
    duration: str
    instructor: str
    mainstreet_url: str
    mainstreet_id: str


class SessionCreate(ApiModel):
    class_id: Optional[int] = None
    location_id: Optional[int] = None
    location_name: Optional[str] = None
    session_name: Optional[str] = None
    day_of_week: str
    time: str
    instructor: str = "TBD"
    status: SessionStatus = "Open"
    start_date: datetime
    end_date: datetime
    duration: Optional[str] = None
    mainstreet_url: Optional[str] = None


class SessionResponse(SessionCreate):
    id: int
    mainstreet_id: Optional[str] = None
    synced_at: Optional[datetime] = None


class SessionClassInfo(ApiModel):
    id: int
    title: str

class SessionLocationInfo(ApiModel):
    id: int
    name: str
    address: str

class PublicSessionResponse(SessionResponse):
    class_info: Optional[SessionClassInfo] = Field(default=None, alias="class")
    location: Optional[SessionLocationInfo] = None
