from models.room import Room, RoomStatus
from models.inventory import Inventory
from models.booking import BookingFailure, BookingResult
from models.audit import AuditEntry
