from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from shared.core.database import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=False)
    room_booking_id = Column(Integer, ForeignKey("room_bookings.id"))
    room_rating = Column(Integer)
    service_rating = Column(Integer)
    overall_rating = Column(Integer)
    comments = Column(Text)
    feedback_type = Column(String(20), nullable=False, default="checkout")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
