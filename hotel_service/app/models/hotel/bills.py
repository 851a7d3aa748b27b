from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_number = Column(String(20), unique=True, nullable=False)
    room_booking_id = Column(Integer, ForeignKey("room_bookings.id"), nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=False)
    room_charges = Column(Numeric(10, 2), nullable=False, default=0)
    food_charges = Column(Numeric(10, 2), nullable=False, default=0)
    other_charges = Column(Numeric(10, 2), nullable=False, default=0)
    tax_amount = Column(Numeric(10, 2), nullable=False, default=0)
    total_amount = Column(Numeric(10, 2), nullable=False)
    payment_status = Column(String(20), nullable=False, default="pending")
    payment_method = Column(String(20))
    transaction_id = Column(String(50))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    items = relationship(
        "BillItem", back_populates="bill", cascade="all, delete-orphan", order_by="BillItem.id")
