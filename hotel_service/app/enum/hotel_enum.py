from enum import Enum


class RoomStatus(str, Enum):

    available = "available"
    occupied = "occupied"
    reserved = "reserved"
    maintenance = "maintenance"
    dirty = "dirty"


class BookingStatus(str, Enum):

    confirmed = "confirmed"
    checked_in = "checked_in"
    checked_out = "checked_out"
    cancelled = "cancelled"


class BookingSource(str, Enum):

    website = "website"
    phone = "phone"
    walk_in = "walk_in"
    chatbot = "chatbot"


class PaymentStatus(str, Enum):

    pending = "pending"
    paid = "paid"
    partial = "partial"


class BillItemType(str, Enum):

    room = "room"
    food = "food"
    service = "service"
    other = "other"


class FeedbackType(str, Enum):

    checkout = "checkout"
    general = "general"


# Allowed booking edges; checked_out and cancelled are terminal
BOOKING_TRANSITIONS = {
    BookingStatus.confirmed: {BookingStatus.checked_in, BookingStatus.cancelled},
    BookingStatus.checked_in: {BookingStatus.checked_out},
    BookingStatus.checked_out: set(),
    BookingStatus.cancelled: set(),
}


def can_transition(transitions: dict, current: Enum, target: Enum) -> bool:
    return target in transitions.get(current, set())


def parse_enum(enum_cls, value: str):
    """Case-insensitive lookup by value; None when the value is unknown."""
    if value is None:
        return None
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None
