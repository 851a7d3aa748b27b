from typing import List, Optional
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import invalid_input, not_found
from ...enum.hotel_enum import FeedbackType, parse_enum
from ...models.hotel.feedback import Feedback
from ...models.hotel.room_bookings import RoomBooking
from ...schemas.hotel.feedback_schemas import FeedbackCreate, FeedbackOut
from . import guests_crud


def validate_rating(value: Optional[int], label: str):
    if value is not None and not 1 <= value <= 5:
        return invalid_input(f"{label} must be between 1 and 5")


def create_feedback(db: Session, request: FeedbackCreate) -> FeedbackOut:
    guests_crud.get_guest_row(db, request.guest_id)

    if request.room_booking_id is not None:
        booking = db.query(RoomBooking).filter(
            RoomBooking.id == request.room_booking_id
        ).first()
        if not booking:
            return not_found("Booking")

    validate_rating(request.room_rating, "Room rating")
    validate_rating(request.service_rating, "Service rating")
    validate_rating(request.overall_rating, "Overall rating")

    feedback_type = parse_enum(FeedbackType, request.feedback_type or FeedbackType.checkout.value)
    if feedback_type is None:
        return invalid_input(f"Invalid feedback type: {request.feedback_type}")

    feedback = Feedback(
        **request.model_dump(exclude={"feedback_type"}),
        feedback_type=feedback_type.value
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return FeedbackOut.model_validate(feedback)


def get_all_feedback(db: Session) -> List[FeedbackOut]:
    rows = db.query(Feedback).order_by(Feedback.id.asc()).all()
    return [FeedbackOut.model_validate(row) for row in rows]


def get_feedback(db: Session, feedback_id: int) -> FeedbackOut:
    feedback = db.query(Feedback).filter(Feedback.id == feedback_id).first()
    if not feedback:
        return not_found("Feedback")
    return FeedbackOut.model_validate(feedback)
