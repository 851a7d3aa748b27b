from .guests import Guest
from .room_types import RoomType
from .rooms import Room
from .room_bookings import RoomBooking

from .bills import Bill
from .bill_items import BillItem

from .feedback import Feedback
from .gallery_images import GalleryImage
