"""Event and participant documents."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bson import ObjectId

from eventhub.utils.enums import EventStatus


@dataclass
class Event:
    title: str
    location: str
    date: datetime
    organizer_id: str
    description: Optional[str] = None
    type: Optional[str] = None
    prize_pool: Optional[float] = None
    registration_fee: Optional[float] = None
    status: EventStatus = EventStatus.UPCOMING
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_document(self):
        doc = {
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "location": self.location,
            "prizePool": self.prize_pool,
            "registrationFee": self.registration_fee,
            "date": self.date,
            "organizerId": self.organizer_id,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.created_at,
        }
        # Optional fields that were not provided are left off the document
        return {key: value for key, value in doc.items() if value is not None}


@dataclass
class Participant:
    event_id: ObjectId
    user_id: str
    registered_at: datetime = field(default_factory=datetime.utcnow)

    def to_document(self):
        return {
            "eventId": self.event_id,
            "userId": self.user_id,
            "registeredAt": self.registered_at,
        }
