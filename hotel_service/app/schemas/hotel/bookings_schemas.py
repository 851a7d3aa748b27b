import datetime as dt
from datetime import datetime, date
from typing import Optional
from pydantic import BaseModel, Field
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ----------------- Create -----------------
class BookingCreate(EmptyStringModel):
    guest_name: str = Field(..., max_length=100)
    guest_phone: str = Field(..., max_length=15)
    room_type_id: int
    check_in_date: date
    check_out_date: date
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    booking_source: Optional[str] = "website"


# ----------------- Update -----------------
class BookingUpdate(EmptyStringModel):
    guest_name: Optional[str] = Field(None, max_length=100)
    guest_phone: Optional[str] = Field(None, max_length=15)
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    adults: Optional[int] = Field(None, ge=1)
    children: Optional[int] = Field(None, ge=0)


# ----------------- Out -----------------
class BookingOut(BaseModel):
    id: int
    booking_code: str
    guest_id: int
    guest_name: Optional[str] = None
    guest_phone: Optional[str] = None
    room_id: int
    room_number: Optional[str] = None
    check_in_date: date
    check_out_date: date
    actual_check_in: Optional[datetime] = None
    actual_check_out: Optional[datetime] = None
    adults: int
    children: int
    total_amount: Optional[float] = None
    status: str
    booking_source: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ----------------- Request -----------------
class BookingRequest(CommonQueryParams):
    status: Optional[str] = None
    # matches check-in or check-out date
    date: Optional[dt.date] = None
