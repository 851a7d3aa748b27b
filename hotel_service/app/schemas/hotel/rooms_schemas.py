from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ----------------- Room Types -----------------
class RoomTypeBase(EmptyStringModel):
    name: str = Field(..., max_length=50)
    base_price: Decimal = Field(..., gt=0)
    capacity: int = Field(..., ge=1)
    description: Optional[str] = None


class RoomTypeCreate(RoomTypeBase):
    pass


class RoomTypeUpdate(RoomTypeBase):
    pass


class RoomTypeOut(BaseModel):
    id: int
    name: str
    base_price: float
    capacity: int
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ----------------- Rooms -----------------
class RoomCreate(EmptyStringModel):
    room_number: str = Field(..., max_length=10)
    room_type_id: int
    floor: Optional[int] = None
    description: Optional[str] = None


class RoomStatusUpdate(EmptyStringModel):
    status: str


class RoomOut(BaseModel):
    id: int
    room_number: str
    room_type_id: int
    room_type_name: Optional[str] = None
    base_price: Optional[float] = None
    capacity: Optional[int] = None
    status: str
    floor: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ----------------- Request -----------------
class RoomRequest(CommonQueryParams):
    pass


class AvailableRoomRequest(EmptyStringModel):
    # Dates are accepted for API compatibility; availability is the live status
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    room_type_id: Optional[int] = None
