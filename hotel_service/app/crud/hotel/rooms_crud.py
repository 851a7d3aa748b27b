from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, invalid_input, not_found
from shared.helpers.model_helper import to_dict
from shared.utils.app_status_code import AppStatusCode
from ...enum.hotel_enum import RoomStatus, parse_enum
from ...models.hotel.rooms import Room
from ...models.hotel.room_types import RoomType
from ...schemas.hotel.rooms_schemas import (
    AvailableRoomRequest, RoomCreate, RoomOut, RoomRequest,
    RoomTypeCreate, RoomTypeOut, RoomTypeUpdate
)


# ----------------- Room Types -----------------
def get_room_type_row(db: Session, room_type_id: int) -> RoomType:
    room_type = db.query(RoomType).filter(RoomType.id == room_type_id).first()
    if not room_type:
        return not_found("Room type")
    return room_type


def get_room_types(db: Session) -> List[RoomTypeOut]:
    room_types = db.query(RoomType).order_by(RoomType.id.asc()).all()
    return [RoomTypeOut.model_validate(room_type) for room_type in room_types]


def get_room_type(db: Session, room_type_id: int) -> RoomTypeOut:
    return RoomTypeOut.model_validate(get_room_type_row(db, room_type_id))


def create_room_type(db: Session, request: RoomTypeCreate) -> RoomTypeOut:
    existing = db.query(RoomType).filter(RoomType.name == request.name).first()
    if existing:
        return error_response(
            message="Room type with this name already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        )

    room_type = RoomType(**request.model_dump())
    db.add(room_type)
    db.commit()
    db.refresh(room_type)
    return RoomTypeOut.model_validate(room_type)


def update_room_type(db: Session, room_type_id: int, request: RoomTypeUpdate) -> RoomTypeOut:
    room_type = get_room_type_row(db, room_type_id)

    duplicate = db.query(RoomType).filter(
        RoomType.name == request.name,
        RoomType.id != room_type_id
    ).first()
    if duplicate:
        return error_response(
            message="Room type with this name already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        )

    for key, value in request.model_dump().items():
        setattr(room_type, key, value)

    db.commit()
    db.refresh(room_type)
    return RoomTypeOut.model_validate(room_type)


# ----------------- Rooms -----------------
def _room_query(db: Session):
    return db.query(Room, RoomType).join(RoomType, Room.room_type_id == RoomType.id)


def _to_out(room: Room, room_type: RoomType) -> RoomOut:
    return RoomOut.model_validate({
        **to_dict(room),
        "room_type_name": room_type.name,
        "base_price": room_type.base_price,
        "capacity": room_type.capacity,
    })


def _ordered(query):
    # Lowest room number first: shorter numbers sort ahead, so "9" comes before "10"
    return query.order_by(
        func.length(Room.room_number).asc(),
        Room.room_number.asc(),
        Room.id.asc()
    )


def get_room_row(db: Session, room_id: int) -> Room:
    room = db.query(Room).filter(Room.id == room_id).first()
    if not room:
        return not_found("Room")
    return room


def get_rooms(db: Session, params: RoomRequest) -> List[RoomOut]:
    query = _room_query(db)

    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(
            or_(
                Room.room_number.ilike(search_term),
                RoomType.name.ilike(search_term),
            )
        )

    query = _ordered(query).offset(params.skip or 0)
    if params.limit:
        query = query.limit(params.limit)

    return [_to_out(room, room_type) for room, room_type in query.all()]


def get_room(db: Session, room_id: int) -> RoomOut:
    row = _room_query(db).filter(Room.id == room_id).first()
    if not row:
        return not_found("Room")
    return _to_out(*row)


def create_room(db: Session, request: RoomCreate) -> RoomOut:
    if db.query(Room).filter(Room.room_number == request.room_number).first():
        return error_response(
            message="Room number already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        )

    get_room_type_row(db, request.room_type_id)

    room = Room(
        **request.model_dump(),
        status=RoomStatus.available.value
    )
    db.add(room)
    db.commit()
    db.refresh(room)
    return get_room(db, room.id)


def get_available_rooms(db: Session, params: AvailableRoomRequest) -> List[RoomOut]:
    query = _room_query(db).filter(Room.status == RoomStatus.available.value)

    if params.room_type_id:
        query = query.filter(Room.room_type_id == params.room_type_id)

    return [_to_out(room, room_type) for room, room_type in _ordered(query).all()]


def get_rooms_by_status(db: Session, status: str) -> List[RoomOut]:
    room_status = parse_enum(RoomStatus, status)
    if room_status is None:
        return invalid_input(f"Invalid room status: {status}")

    query = _room_query(db).filter(Room.status == room_status.value)
    return [_to_out(room, room_type) for room, room_type in _ordered(query).all()]


def update_room_status(db: Session, room_id: int, status: str) -> RoomOut:
    room = get_room_row(db, room_id)

    room_status = parse_enum(RoomStatus, status)
    if room_status is None:
        return invalid_input(f"Invalid room status: {status}")

    room.status = room_status.value
    db.commit()
    return get_room(db, room_id)


# ----------------- Booking lifecycle helpers -----------------
def claim_available_room(db: Session, room_type_id: int) -> Optional[Room]:
    """Reserve the first free room of the type, or return None.

    Each claim is a single conditional UPDATE, so a room another request
    reserved in the meantime matches zero rows and the next candidate is
    tried instead.
    """
    candidates = _ordered(
        db.query(Room.id).filter(
            Room.room_type_id == room_type_id,
            Room.status == RoomStatus.available.value
        )
    ).all()

    for (room_id,) in candidates:
        claimed = db.query(Room).filter(
            Room.id == room_id,
            Room.status == RoomStatus.available.value
        ).update({Room.status: RoomStatus.reserved.value})

        if claimed == 1:
            return db.get(Room, room_id)

    return None


def set_room_status(room: Room, target: RoomStatus):
    """Room side of a booking move; the booking state is the only guard."""
    room.status = target.value


# --------------------Room status lookup(hardcode) by Enum -----------
def room_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.capitalize())
        for status in RoomStatus
    ]
