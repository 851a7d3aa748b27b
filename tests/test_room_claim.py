from decimal import Decimal

from hotel_service.app.crud.hotel import rooms_crud
from hotel_service.app.models.hotel import Room, RoomType


def _seed(db, numbers):
    room_type = RoomType(name="Standard", base_price=Decimal("1500"), capacity=2)
    db.add(room_type)
    db.flush()
    for number in numbers:
        db.add(Room(room_number=number, room_type_id=room_type.id, status="available"))
    db.commit()
    return room_type


def test_claim_takes_lowest_available_room(db):
    room_type = _seed(db, ["12", "11"])

    room = rooms_crud.claim_available_room(db, room_type.id)

    assert room.room_number == "11"
    assert room.status == "reserved"


def test_two_claims_never_share_a_room(session_factory):
    setup = session_factory()
    room_type_id = _seed(setup, ["21"]).id
    setup.close()

    first, second = session_factory(), session_factory()
    try:
        won = rooms_crud.claim_available_room(first, room_type_id)
        first.commit()
        lost = rooms_crud.claim_available_room(second, room_type_id)
    finally:
        first.close()
        second.close()

    assert won is not None
    assert lost is None


def test_claim_skips_room_taken_after_listing(db, monkeypatch):
    room_type = _seed(db, ["31", "32"])
    listed = [(room.id,) for room in db.query(Room).order_by(Room.room_number.asc())]

    # another desk reserves 31 after the candidates were read
    db.query(Room).filter(Room.room_number == "31").update({Room.status: "reserved"})
    db.commit()

    class StaleCandidates:
        def all(self):
            return listed

    monkeypatch.setattr(rooms_crud, "_ordered", lambda query: StaleCandidates())

    room = rooms_crud.claim_available_room(db, room_type.id)

    assert room.room_number == "32"


def test_claim_returns_none_when_type_is_full(db):
    room_type = _seed(db, ["41"])
    rooms_crud.claim_available_room(db, room_type.id)

    assert rooms_crud.claim_available_room(db, room_type.id) is None
