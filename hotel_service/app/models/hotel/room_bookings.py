from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class RoomBooking(Base):
    __tablename__ = "room_bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    booking_code = Column(String(20), unique=True, nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    check_in_date = Column(Date, nullable=False, index=True)
    check_out_date = Column(Date, nullable=False, index=True)
    actual_check_in = Column(DateTime(timezone=True))
    actual_check_out = Column(DateTime(timezone=True))
    adults = Column(Integer, nullable=False, default=1)
    children = Column(Integer, nullable=False, default=0)
    total_amount = Column(Numeric(10, 2))
    status = Column(String(20), nullable=False, default="confirmed", index=True)
    booking_source = Column(String(20), nullable=False, default="website")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    guest = relationship("Guest", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")
