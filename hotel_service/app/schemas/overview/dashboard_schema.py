from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    total_bookings: int
    checked_in: int
    pending_checkout: int
    available_rooms: int
    occupied_rooms: int
    reserved_rooms: int
    dirty_rooms: int
    maintenance_rooms: int
    # dirty + maintenance + reserved
    unavailable_rooms: int
