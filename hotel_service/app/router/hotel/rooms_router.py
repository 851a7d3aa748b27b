from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin, validate_current_token
from shared.core.database import get_hotel_db as get_db
from shared.core.schemas import Lookup
from ...crud.hotel import rooms_crud as crud
from ...schemas.hotel.rooms_schemas import (
    AvailableRoomRequest, RoomCreate, RoomOut, RoomRequest, RoomStatusUpdate,
    RoomTypeCreate, RoomTypeOut, RoomTypeUpdate
)

router = APIRouter(prefix="/api/rooms", tags=["Rooms"],
                   dependencies=[Depends(validate_current_token)])

room_types_router = APIRouter(prefix="/api/room-types", tags=["Room Types"],
                              dependencies=[Depends(validate_current_token)])


# ---------------- Rooms ----------------
@router.get("/", response_model=List[RoomOut])
def get_rooms(
    params: RoomRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_rooms(db, params)


@router.post("/", response_model=RoomOut, status_code=201)
def create_room(
    request: RoomCreate,
    db: Session = Depends(get_db)
):
    return crud.create_room(db, request)


@router.get("/available", response_model=List[RoomOut])
def get_available_rooms(
    params: AvailableRoomRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_available_rooms(db, params)


@router.get("/status-lookup", response_model=List[Lookup])
def room_status_lookup():
    return crud.room_status_lookup()


@router.get("/status/{status}", response_model=List[RoomOut])
def get_rooms_by_status(status: str, db: Session = Depends(get_db)):
    return crud.get_rooms_by_status(db, status)


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: int, db: Session = Depends(get_db)):
    return crud.get_room(db, room_id)


@router.put("/{room_id}/status", response_model=RoomOut)
def update_room_status(
    room_id: int,
    request: RoomStatusUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_room_status(db, room_id, request.status)


# ---------------- Room Types ----------------
@room_types_router.get("/", response_model=List[RoomTypeOut])
def get_room_types(db: Session = Depends(get_db)):
    return crud.get_room_types(db)


@room_types_router.post("/", response_model=RoomTypeOut, status_code=201,
                        dependencies=[Depends(allow_admin)])
def create_room_type(
    request: RoomTypeCreate,
    db: Session = Depends(get_db)
):
    return crud.create_room_type(db, request)


@room_types_router.get("/{room_type_id}", response_model=RoomTypeOut)
def get_room_type(room_type_id: int, db: Session = Depends(get_db)):
    return crud.get_room_type(db, room_type_id)


@room_types_router.put("/{room_type_id}", response_model=RoomTypeOut,
                       dependencies=[Depends(allow_admin)])
def update_room_type(
    room_type_id: int,
    request: RoomTypeUpdate,
    db: Session = Depends(get_db)
):
    return crud.update_room_type(db, room_type_id, request)
