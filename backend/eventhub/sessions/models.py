"""Session documents."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bson import ObjectId

from eventhub.utils.enums import SessionStatus


@dataclass
class Session:
    title: str
    date: datetime
    user_id: str
    duration: Optional[float] = None
    notes: Optional[str] = None
    event_id: Optional[ObjectId] = None
    status: SessionStatus = SessionStatus.BOOKED
    booked_at: datetime = field(default_factory=datetime.utcnow)

    def to_document(self):
        doc = {
            "title": self.title,
            "date": self.date,
            "duration": self.duration,
            "notes": self.notes,
            "eventId": self.event_id,
            "userId": self.user_id,
            "status": self.status.value,
            "bookedAt": self.booked_at,
        }
        return {key: value for key, value in doc.items() if value is not None}
