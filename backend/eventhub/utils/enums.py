from enum import Enum

class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class SessionStatus(str, Enum):
    BOOKED = "booked"
    CANCELLED = "cancelled"
