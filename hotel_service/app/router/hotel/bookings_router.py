from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ...crud.hotel import bookings_crud as crud
from ...schemas.hotel.bookings_schemas import (
    BookingCreate, BookingOut, BookingRequest, BookingUpdate
)

router = APIRouter(prefix="/api/bookings", tags=["Bookings Management"],
                   dependencies=[Depends(validate_current_token)])


# ---------------- List Bookings ----------------
@router.get("/", response_model=List[BookingOut])
def get_bookings(
    params: BookingRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_bookings(db, params)


@router.get("/today/arrivals", response_model=List[BookingOut])
def get_today_arrivals(db: Session = Depends(get_db)):
    return crud.get_today_arrivals(db)


@router.get("/today/departures", response_model=List[BookingOut])
def get_today_departures(db: Session = Depends(get_db)):
    return crud.get_today_departures(db)


# ----------------Lookups ----------------
@router.get("/status-lookup", response_model=List[Lookup])
def booking_status_lookup():
    return crud.booking_status_lookup()


@router.get("/source-lookup", response_model=List[Lookup])
def booking_source_lookup():
    return crud.booking_source_lookup()


# ----------------- Create Booking -----------------
@router.post("/", response_model=BookingOut, status_code=201)
def create_booking(
    request: BookingCreate,
    db: Session = Depends(get_db)
):
    return crud.create_booking(db, request)


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    return crud.get_booking(db, booking_id)


# ----------------- Update Booking -----------------
@router.put("/{booking_id}", response_model=BookingOut)
def update_booking(
    booking_id: int,
    request: BookingUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_booking(db, booking_id, request)


# ----------------- Check-in / Check-out -----------------
@router.put("/{booking_id}/checkin", response_model=BookingOut)
def check_in(booking_id: int, db: Session = Depends(get_db)):
    return crud.check_in(db, booking_id)


@router.put("/{booking_id}/checkout", response_model=BookingOut)
def check_out(booking_id: int, db: Session = Depends(get_db)):
    return crud.check_out(db, booking_id)


# ---------------- Cancel Booking ----------------
@router.delete("/{booking_id}")
def cancel_booking(booking_id: int, db: Session = Depends(get_db)):
    booking = crud.cancel_booking(db, booking_id)
    return success_response(
        data=booking,
        message="Booking cancelled successfully",
        status_code=AppStatusCode.OPERATION_SUCCESSFUL
    )
