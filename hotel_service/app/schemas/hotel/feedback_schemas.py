from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class FeedbackCreate(EmptyStringModel):
    guest_id: int
    room_booking_id: Optional[int] = None
    room_rating: Optional[int] = None
    service_rating: Optional[int] = None
    overall_rating: Optional[int] = None
    comments: Optional[str] = None
    feedback_type: Optional[str] = "checkout"


class FeedbackOut(BaseModel):
    id: int
    guest_id: int
    room_booking_id: Optional[int] = None
    room_rating: Optional[int] = None
    service_rating: Optional[int] = None
    overall_rating: Optional[int] = None
    comments: Optional[str] = None
    feedback_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
