from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from shared.core.schemas import Lookup
from ...crud.hotel import bills_crud as crud
from ...schemas.hotel.bills_schemas import (
    BillCreate, BillItemCreate, BillItemOut, BillItemUpdate, BillOut, PaymentUpdate
)

router = APIRouter(prefix="/api/bills", tags=["Bills"],
                   dependencies=[Depends(validate_current_token)])


@router.get("/", response_model=List[BillOut])
def get_bills(db: Session = Depends(get_db)):
    return crud.get_bills(db)


@router.post("/", response_model=BillOut, status_code=201)
def create_bill(
    request: BillCreate,
    db: Session = Depends(get_db)
):
    return crud.create_bill(db, request)


@router.get("/payment-status-lookup", response_model=List[Lookup])
def payment_status_lookup():
    return crud.payment_status_lookup()


@router.get("/booking/{booking_id}", response_model=List[BillOut])
def get_bills_by_booking(booking_id: int, db: Session = Depends(get_db)):
    return crud.get_bills_by_booking(db, booking_id)


@router.get("/guest/{guest_id}", response_model=List[BillOut])
def get_bills_by_guest(guest_id: int, db: Session = Depends(get_db)):
    return crud.get_bills_by_guest(db, guest_id)


@router.get("/{bill_id}", response_model=BillOut)
def get_bill(bill_id: int, db: Session = Depends(get_db)):
    return crud.get_bill(db, bill_id)


@router.put("/{bill_id}/payment", response_model=BillOut)
def update_payment_status(
    bill_id: int,
    request: PaymentUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_payment_status(db, bill_id, request)


# ---------------- Bill Items ----------------
@router.post("/{bill_id}/items", response_model=BillItemOut, status_code=201)
def add_bill_item(
    bill_id: int,
    request: BillItemCreate,
    db: Session = Depends(get_db)
):
    return crud.add_bill_item(db, bill_id, request)


@router.put("/{bill_id}/items/{item_id}", response_model=BillItemOut)
def update_bill_item(
    bill_id: int,
    item_id: int,
    request: BillItemUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_bill_item(db, bill_id, item_id, request)


@router.delete("/{bill_id}/items/{item_id}", response_model=BillOut)
def delete_bill_item(bill_id: int, item_id: int, db: Session = Depends(get_db)):
    return crud.delete_bill_item(db, bill_id, item_id)
