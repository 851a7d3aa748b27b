from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ----------------- Bill -----------------
class BillCreate(EmptyStringModel):
    booking_id: int
    room_charges: Decimal = Field(..., ge=0)
    food_charges: Decimal = Field(Decimal("0"), ge=0)
    other_charges: Decimal = Field(Decimal("0"), ge=0)
    tax_amount: Decimal = Field(Decimal("0"), ge=0)


class PaymentUpdate(EmptyStringModel):
    payment_status: str
    payment_method: Optional[str] = Field(None, max_length=20)
    transaction_id: Optional[str] = Field(None, max_length=50)


# ----------------- Bill Items -----------------
class BillItemCreate(EmptyStringModel):
    description: str = Field(..., max_length=200)
    # the front desk UI posts the unit price as "amount"
    unit_price: Decimal = Field(..., gt=0, validation_alias=AliasChoices("unit_price", "amount"))
    quantity: int = Field(1, ge=1)
    item_type: Optional[str] = "other"


class BillItemUpdate(BillItemCreate):
    pass


class BillItemOut(BaseModel):
    id: int
    bill_id: int
    item_type: str
    description: str
    quantity: int
    unit_price: float
    total_price: float
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BillOut(BaseModel):
    id: int
    bill_number: str
    room_booking_id: int
    guest_id: int
    room_charges: float
    food_charges: float
    other_charges: float
    tax_amount: float
    total_amount: float
    payment_status: str
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[BillItemOut] = []

    model_config = {"from_attributes": True}
