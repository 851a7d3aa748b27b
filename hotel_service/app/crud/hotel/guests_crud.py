from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response, not_found
from shared.utils.app_status_code import AppStatusCode
from ...models.hotel.guests import Guest
from ...schemas.hotel.guests_schemas import GuestCreate, GuestOut, GuestRequest


def get_guest_by_phone(db: Session, phone: str) -> Optional[Guest]:
    return db.query(Guest).filter(Guest.phone == phone).first()


def get_guest_row(db: Session, guest_id: int) -> Guest:
    guest = db.query(Guest).filter(Guest.id == guest_id).first()
    if not guest:
        return not_found("Guest")
    return guest


def get_or_create_guest(db: Session, name: str, phone: str) -> Guest:
    """Phone is the natural key; the caller owns the transaction."""
    guest = get_guest_by_phone(db, phone)
    if guest:
        return guest

    guest = Guest(name=name, phone=phone)
    db.add(guest)
    db.flush()
    return guest


# ----------------- Get All Guests -----------------
def get_guests(db: Session, params: GuestRequest) -> List[GuestOut]:
    query = db.query(Guest)

    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(
            or_(
                Guest.name.ilike(search_term),
                Guest.phone.ilike(search_term),
                Guest.email.ilike(search_term),
            )
        )

    query = query.order_by(Guest.id.asc()).offset(params.skip or 0)
    if params.limit:
        query = query.limit(params.limit)

    return [GuestOut.model_validate(guest) for guest in query.all()]


def get_guest(db: Session, guest_id: int) -> GuestOut:
    return GuestOut.model_validate(get_guest_row(db, guest_id))


# ----------------- Create Guest -----------------
def create_guest(db: Session, request: GuestCreate) -> GuestOut:
    if get_guest_by_phone(db, request.phone):
        return error_response(
            message="Guest with phone number already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        )

    guest = Guest(**request.model_dump())
    db.add(guest)
    db.commit()
    db.refresh(guest)
    return GuestOut.model_validate(guest)
