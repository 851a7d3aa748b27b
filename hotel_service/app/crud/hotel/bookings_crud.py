import logging
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List

from fastapi import HTTPException
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.database import unit_of_work
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, invalid_input, invalid_state, not_found
from shared.helpers.model_helper import to_dict
from shared.utils.app_status_code import AppStatusCode
from ...enum.hotel_enum import (
    BOOKING_TRANSITIONS, BookingSource, BookingStatus, RoomStatus, can_transition, parse_enum
)
from ...models.hotel.guests import Guest
from ...models.hotel.rooms import Room
from ...models.hotel.room_bookings import RoomBooking
from ...schemas.hotel.bookings_schemas import BookingCreate, BookingOut, BookingRequest, BookingUpdate
from . import guests_crud, rooms_crud

logger = logging.getLogger(__name__)


def generate_booking_code() -> str:
    return f"BK{uuid.uuid4().hex[:8].upper()}"


def _booking_query(db: Session):
    return (
        db.query(RoomBooking, Guest, Room)
        .join(Guest, RoomBooking.guest_id == Guest.id)
        .join(Room, RoomBooking.room_id == Room.id)
    )


def _to_out(booking: RoomBooking, guest: Guest, room: Room) -> BookingOut:
    return BookingOut.model_validate({
        **to_dict(booking),
        "guest_name": guest.name,
        "guest_phone": guest.phone,
        "room_number": room.room_number,
    })


def _get_booking_row(db: Session, booking_id: int) -> RoomBooking:
    booking = db.query(RoomBooking).filter(RoomBooking.id == booking_id).first()
    if not booking:
        return not_found("Booking")
    return booking


def _guard_transition(booking: RoomBooking, target: BookingStatus, message: str):
    current = parse_enum(BookingStatus, booking.status)
    if not can_transition(BOOKING_TRANSITIONS, current, target):
        return invalid_state(message)


def _error_message(exc: HTTPException) -> str:
    if isinstance(exc.detail, dict):
        return exc.detail.get("message", "")
    return str(exc.detail)


# ----------------- Get All Bookings -----------------
def get_bookings(db: Session, params: BookingRequest) -> List[BookingOut]:
    query = _booking_query(db)

    if params.status and params.status.lower() != "all":
        query = query.filter(func.lower(RoomBooking.status) == params.status.lower())

    if params.date:
        query = query.filter(
            or_(
                RoomBooking.check_in_date == params.date,
                RoomBooking.check_out_date == params.date,
            )
        )

    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(
            or_(
                RoomBooking.booking_code.ilike(search_term),
                Guest.name.ilike(search_term),
                Guest.phone.ilike(search_term),
            )
        )

    query = query.order_by(RoomBooking.id.asc()).offset(params.skip or 0)
    if params.limit and params.limit > 0:
        query = query.limit(params.limit)

    return [_to_out(*row) for row in query.all()]


# ----------------- Get Single Booking -----------------
def get_booking(db: Session, booking_id: int) -> BookingOut:
    row = _booking_query(db).filter(RoomBooking.id == booking_id).first()
    if not row:
        return not_found("Booking")
    return _to_out(*row)


def get_guest_bookings(db: Session, guest_id: int) -> List[BookingOut]:
    guests_crud.get_guest_row(db, guest_id)
    rows = (
        _booking_query(db)
        .filter(RoomBooking.guest_id == guest_id)
        .order_by(RoomBooking.id.asc())
        .all()
    )
    return [_to_out(*row) for row in rows]


def get_today_arrivals(db: Session) -> List[BookingOut]:
    rows = (
        _booking_query(db)
        .filter(
            RoomBooking.check_in_date == date.today(),
            RoomBooking.status == BookingStatus.confirmed.value
        )
        .order_by(RoomBooking.id.asc())
        .all()
    )
    return [_to_out(*row) for row in rows]


def get_today_departures(db: Session) -> List[BookingOut]:
    rows = (
        _booking_query(db)
        .filter(
            RoomBooking.check_out_date == date.today(),
            RoomBooking.status == BookingStatus.checked_in.value
        )
        .order_by(RoomBooking.id.asc())
        .all()
    )
    return [_to_out(*row) for row in rows]


# ----------------- Create Booking -----------------
def create_booking(db: Session, request: BookingCreate) -> BookingOut:
    if request.check_out_date <= request.check_in_date:
        return invalid_input("Check-out date must be after check-in date")

    room_type = rooms_crud.get_room_type_row(db, request.room_type_id)

    total_guests = request.adults + (request.children or 0)
    if total_guests > room_type.capacity:
        return invalid_input("Total guests exceed room capacity")

    booking_source = parse_enum(BookingSource, request.booking_source or BookingSource.website.value)
    if booking_source is None:
        return invalid_input(f"Invalid booking source: {request.booking_source}")

    nights = (request.check_out_date - request.check_in_date).days
    total_amount = Decimal(room_type.base_price) * nights

    with unit_of_work(db):
        guest = guests_crud.get_or_create_guest(db, request.guest_name, request.guest_phone)

        room = rooms_crud.claim_available_room(db, room_type.id)
        if room is None:
            error_response(
                message="No available rooms of this type",
                status_code=AppStatusCode.CONFLICT,
                http_status=409
            )

        booking = RoomBooking(
            booking_code=generate_booking_code(),
            guest_id=guest.id,
            room_id=room.id,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            adults=request.adults,
            children=request.children or 0,
            total_amount=total_amount,
            status=BookingStatus.confirmed.value,
            booking_source=booking_source.value,
        )
        db.add(booking)
        db.flush()
        booking_id = booking.id

    logger.info("Booking %s created for room %s", booking_id, room.room_number)
    return get_booking(db, booking_id)


# ----------------- Check-in / Check-out -----------------
def check_in(db: Session, booking_id: int) -> BookingOut:
    try:
        with unit_of_work(db):
            booking = _get_booking_row(db, booking_id)
            _guard_transition(booking, BookingStatus.checked_in,
                              "Booking must be confirmed to check-in")

            if date.today() < booking.check_in_date:
                invalid_state("Cannot check-in before scheduled date")

            booking.status = BookingStatus.checked_in.value
            booking.actual_check_in = datetime.now()

            room = rooms_crud.get_room_row(db, booking.room_id)
            rooms_crud.set_room_status(room, RoomStatus.occupied)
    except HTTPException as exc:
        logger.warning("Check-in failed for booking ID: %s - %s", booking_id, _error_message(exc))
        raise

    logger.info("Check-in successful for booking ID: %s", booking_id)
    return get_booking(db, booking_id)


def check_out(db: Session, booking_id: int) -> BookingOut:
    try:
        with unit_of_work(db):
            booking = _get_booking_row(db, booking_id)
            _guard_transition(booking, BookingStatus.checked_out,
                              "Guest must be checked-in to check-out")

            booking.status = BookingStatus.checked_out.value
            booking.actual_check_out = datetime.now()

            room = rooms_crud.get_room_row(db, booking.room_id)
            rooms_crud.set_room_status(room, RoomStatus.dirty)
    except HTTPException as exc:
        logger.warning("Check-out failed for booking ID: %s - %s", booking_id, _error_message(exc))
        raise

    logger.info("Check-out successful for booking ID: %s", booking_id)
    return get_booking(db, booking_id)


# ----------------- Update Booking -----------------
def update_booking(db: Session, booking_id: int, request: BookingUpdate) -> BookingOut:
    """Partial update of guest contact, dates and occupancy.

    Capacity is not re-validated and the room is kept as allocated when
    dates or occupancy change; the stored total is left untouched too.
    """
    with unit_of_work(db):
        booking = _get_booking_row(db, booking_id)

        if booking.status in (BookingStatus.checked_in.value, BookingStatus.checked_out.value):
            invalid_state("Cannot update booking after check-in")

        update_data = request.model_dump(exclude_unset=True, exclude_none=True)

        guest = guests_crud.get_guest_row(db, booking.guest_id)
        if "guest_name" in update_data:
            guest.name = update_data.pop("guest_name")
        if "guest_phone" in update_data:
            phone = update_data.pop("guest_phone")
            existing = guests_crud.get_guest_by_phone(db, phone)
            if existing and existing.id != guest.id:
                error_response(
                    message="Guest with phone number already exists",
                    status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
                )
            guest.phone = phone

        for key, value in update_data.items():
            setattr(booking, key, value)

    return get_booking(db, booking_id)


# ----------------- Cancel Booking -----------------
def cancel_booking(db: Session, booking_id: int) -> BookingOut:
    with unit_of_work(db):
        booking = _get_booking_row(db, booking_id)

        if booking.status == BookingStatus.checked_in.value:
            invalid_state("Cannot cancel booking after check-in")
        _guard_transition(booking, BookingStatus.cancelled,
                          f"Cannot cancel a booking that is {booking.status}")

        booking.status = BookingStatus.cancelled.value

        # Free up the room if it was reserved
        room = rooms_crud.get_room_row(db, booking.room_id)
        if room.status == RoomStatus.reserved.value:
            rooms_crud.set_room_status(room, RoomStatus.available)

    logger.info("Booking %s cancelled", booking_id)
    return get_booking(db, booking_id)


# --------------------Booking lookups(hardcode) by Enum -----------
def booking_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").capitalize())
        for status in BookingStatus
    ]


def booking_source_lookup() -> List[Lookup]:
    return [
        Lookup(id=source.value, name=source.name.replace("_", " ").capitalize())
        for source in BookingSource
    ]
