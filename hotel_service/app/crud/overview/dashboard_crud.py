from sqlalchemy import func
from sqlalchemy.orm import Session

from ...enum.hotel_enum import BookingStatus, RoomStatus
from ...models.hotel.rooms import Room
from ...models.hotel.room_bookings import RoomBooking
from ...schemas.overview.dashboard_schema import DashboardStatsResponse


def get_dashboard_stats(db: Session) -> DashboardStatsResponse:
    # ------------------- Bookings -------------------
    total_bookings = db.query(func.count(RoomBooking.id)).scalar() or 0

    checked_in = db.query(func.count(RoomBooking.id))\
        .filter(RoomBooking.status == BookingStatus.checked_in.value)\
        .scalar() or 0

    # ------------------- Rooms by status -------------------
    room_counts = dict(
        db.query(Room.status, func.count(Room.id))
        .group_by(Room.status)
        .all()
    )

    available = room_counts.get(RoomStatus.available.value, 0)
    occupied = room_counts.get(RoomStatus.occupied.value, 0)
    reserved = room_counts.get(RoomStatus.reserved.value, 0)
    dirty = room_counts.get(RoomStatus.dirty.value, 0)
    maintenance = room_counts.get(RoomStatus.maintenance.value, 0)

    return DashboardStatsResponse(
        total_bookings=total_bookings,
        checked_in=checked_in,
        pending_checkout=checked_in,
        available_rooms=available,
        occupied_rooms=occupied,
        reserved_rooms=reserved,
        dirty_rooms=dirty,
        maintenance_rooms=maintenance,
        unavailable_rooms=dirty + maintenance + reserved,
    )
