from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from ...crud.hotel import bookings_crud, guests_crud as crud
from ...schemas.hotel.bookings_schemas import BookingOut
from ...schemas.hotel.guests_schemas import GuestCreate, GuestOut, GuestRequest

router = APIRouter(prefix="/api/guests", tags=["Guests"],
                   dependencies=[Depends(validate_current_token)])


@router.get("/", response_model=List[GuestOut])
def get_guests(
    params: GuestRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_guests(db, params)


@router.post("/", response_model=GuestOut, status_code=201)
def create_guest(
    request: GuestCreate,
    db: Session = Depends(get_db)
):
    return crud.create_guest(db, request)


@router.get("/{guest_id}", response_model=GuestOut)
def get_guest(guest_id: int, db: Session = Depends(get_db)):
    return crud.get_guest(db, guest_id)


@router.get("/{guest_id}/bookings", response_model=List[BookingOut])
def get_guest_bookings(guest_id: int, db: Session = Depends(get_db)):
    return bookings_crud.get_guest_bookings(db, guest_id)
