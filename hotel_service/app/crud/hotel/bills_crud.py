import logging
from decimal import Decimal
from typing import List

from sqlalchemy import Integer, cast, func
from sqlalchemy.orm import Session, selectinload

from shared.core.database import unit_of_work
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import invalid_input, not_found
from ...enum.hotel_enum import BillItemType, PaymentStatus, parse_enum
from ...models.hotel.bills import Bill
from ...models.hotel.bill_items import BillItem
from ...models.hotel.room_bookings import RoomBooking
from ...schemas.hotel.bills_schemas import (
    BillCreate, BillItemCreate, BillItemOut, BillItemUpdate, BillOut, PaymentUpdate
)
from . import guests_crud

logger = logging.getLogger(__name__)


def generate_bill_number(db: Session) -> str:
    last_number = (
        db.query(
            func.max(cast(func.replace(Bill.bill_number, "BILL-", ""), Integer))
        )
        .scalar()
    )

    next_number = (last_number or 0) + 1
    return f"BILL-{next_number:04d}"


def _get_bill_row(db: Session, bill_id: int) -> Bill:
    bill = db.query(Bill).filter(Bill.id == bill_id).first()
    if not bill:
        return not_found("Bill")
    return bill


def _get_item_row(db: Session, bill_id: int, item_id: int) -> BillItem:
    item = db.query(BillItem).filter(BillItem.id == item_id).first()
    if not item:
        return not_found("Bill item")
    if item.bill_id != bill_id:
        return invalid_input("Bill item does not belong to this bill")
    return item


def _parse_item_type(value) -> str:
    item_type = parse_enum(BillItemType, value or BillItemType.other.value)
    if item_type is None:
        return invalid_input(f"Invalid bill item type: {value}")
    return item_type.value


def get_bill_items(db: Session, bill_id: int) -> List[BillItem]:
    return (
        db.query(BillItem)
        .filter(BillItem.bill_id == bill_id)
        .order_by(BillItem.id.asc())
        .all()
    )


def recalculate_bill_total(db: Session, bill: Bill) -> Decimal:
    """Fixed charges plus every line total; flushed, not committed."""
    db.flush()

    items_total = sum(
        (Decimal(item.unit_price) * item.quantity for item in get_bill_items(db, bill.id)),
        Decimal("0")
    )

    bill.total_amount = (
        Decimal(bill.room_charges or 0)
        + Decimal(bill.food_charges or 0)
        + Decimal(bill.other_charges or 0)
        + Decimal(bill.tax_amount or 0)
        + items_total
    )
    return bill.total_amount


def _bill_out(db: Session, bill_id: int) -> BillOut:
    bill = (
        db.query(Bill)
        .options(selectinload(Bill.items))
        .filter(Bill.id == bill_id)
        .first()
    )
    if not bill:
        return not_found("Bill")
    return BillOut.model_validate(bill)


# ----------------- Get Bills -----------------
def get_bills(db: Session) -> List[BillOut]:
    bills = (
        db.query(Bill)
        .options(selectinload(Bill.items))
        .order_by(Bill.id.asc())
        .all()
    )
    return [BillOut.model_validate(bill) for bill in bills]


def get_bill(db: Session, bill_id: int) -> BillOut:
    return _bill_out(db, bill_id)


def get_bills_by_booking(db: Session, booking_id: int) -> List[BillOut]:
    bills = (
        db.query(Bill)
        .options(selectinload(Bill.items))
        .filter(Bill.room_booking_id == booking_id)
        .order_by(Bill.id.asc())
        .all()
    )
    return [BillOut.model_validate(bill) for bill in bills]


def get_bills_by_guest(db: Session, guest_id: int) -> List[BillOut]:
    guests_crud.get_guest_row(db, guest_id)
    bills = (
        db.query(Bill)
        .options(selectinload(Bill.items))
        .filter(Bill.guest_id == guest_id)
        .order_by(Bill.id.asc())
        .all()
    )
    return [BillOut.model_validate(bill) for bill in bills]


# ----------------- Create Bill -----------------
def create_bill(db: Session, request: BillCreate) -> BillOut:
    booking = db.query(RoomBooking).filter(RoomBooking.id == request.booking_id).first()
    if not booking:
        return not_found("Booking")

    with unit_of_work(db):
        bill = Bill(
            bill_number=generate_bill_number(db),
            room_booking_id=booking.id,
            guest_id=booking.guest_id,
            room_charges=request.room_charges,
            food_charges=request.food_charges,
            other_charges=request.other_charges,
            tax_amount=request.tax_amount,
            total_amount=(
                request.room_charges + request.food_charges
                + request.other_charges + request.tax_amount
            ),
            payment_status=PaymentStatus.pending.value,
        )
        db.add(bill)
        db.flush()
        bill_id = bill.id

    logger.info("Bill %s created for booking %s", bill_id, booking.id)
    return _bill_out(db, bill_id)


# ----------------- Payment -----------------
def update_payment_status(db: Session, bill_id: int, request: PaymentUpdate) -> BillOut:
    bill = _get_bill_row(db, bill_id)

    payment_status = parse_enum(PaymentStatus, request.payment_status)
    if payment_status is None:
        return invalid_input(f"Invalid payment status: {request.payment_status}")

    bill.payment_status = payment_status.value
    if request.payment_method is not None:
        bill.payment_method = request.payment_method
    if request.transaction_id is not None:
        bill.transaction_id = request.transaction_id

    db.commit()
    return _bill_out(db, bill_id)


# ----------------- Bill Items -----------------
def add_bill_item(db: Session, bill_id: int, request: BillItemCreate) -> BillItemOut:
    with unit_of_work(db):
        bill = _get_bill_row(db, bill_id)

        item = BillItem(
            bill_id=bill.id,
            item_type=_parse_item_type(request.item_type),
            description=request.description,
            quantity=request.quantity,
            unit_price=request.unit_price,
            total_price=request.unit_price * request.quantity,
        )
        db.add(item)
        recalculate_bill_total(db, bill)
        item_id = item.id

    return BillItemOut.model_validate(db.get(BillItem, item_id))


def update_bill_item(db: Session, bill_id: int, item_id: int, request: BillItemUpdate) -> BillItemOut:
    with unit_of_work(db):
        bill = _get_bill_row(db, bill_id)
        item = _get_item_row(db, bill_id, item_id)

        item.item_type = _parse_item_type(request.item_type)
        item.description = request.description
        item.quantity = request.quantity
        item.unit_price = request.unit_price
        item.total_price = request.unit_price * request.quantity

        recalculate_bill_total(db, bill)

    return BillItemOut.model_validate(db.get(BillItem, item_id))


def delete_bill_item(db: Session, bill_id: int, item_id: int) -> BillOut:
    with unit_of_work(db):
        bill = _get_bill_row(db, bill_id)
        item = _get_item_row(db, bill_id, item_id)

        db.delete(item)
        recalculate_bill_total(db, bill)

    return _bill_out(db, bill_id)


# --------------------Payment status lookup(hardcode) by Enum -----------
def payment_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.capitalize())
        for status in PaymentStatus
    ]
