from pydantic import BaseModel, EmailStr, Field
from typing import List
from datetime import date, datetime
from enum import Enum

class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"

class ContactInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    
    class Config:
        str_strip_whitespace = True
    
    def is_complete(self) -> bool:
        return bool(self.name and self.email and self.phone)

class BookingCreate(BaseModel):
    date: date
    time: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    
    class Config:
        str_strip_whitespace = True

class BookingResponse(BaseModel):
    id: str
    date: datetime
    time: str
    name: str
    email: str
    phone: str
    barberEmail: str
    status: BookingStatus
    createdAt: datetime
    
    class Config:
        populate_by_name = True
        json_encoders = {
            datetime: lambda dt: dt.isoformat()
        }

class SlotAvailability(BaseModel):
    time: str
    available: bool

class DayAvailability(BaseModel):
    date: date
    slots: List[SlotAvailability]
    bookedSlots: List[str]
