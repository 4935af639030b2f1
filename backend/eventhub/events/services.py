"""
Event Service - events and their registrations.

Responsibilities:
- Create, read, update and delete events
- Register / unregister the calling identity for an event
- List participants of an event

Every method performs at most two store operations and raises an
``eventhub.errors`` exception when the request cannot be honoured.
"""
from datetime import datetime
from typing import Any, Dict, List

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from eventhub.errors import ConflictError, ForbiddenError, NotFoundError
from eventhub.extensions import db as mongo
from eventhub.utils.permissions import is_organizer
from eventhub.utils.validators import safe_object_id

from .models import Event, Participant
from .schemas import CreateEventRequest, UpdateEventRequest


class EventService:
    """Service for event CRUD and registration."""

    @classmethod
    def create_event(cls, organizer_id: str, data: CreateEventRequest) -> Dict[str, Any]:
        event = Event(
            title=data.title,
            description=data.description,
            type=data.type,
            location=data.location,
            prize_pool=data.prizePool,
            registration_fee=data.registrationFee,
            date=data.date,
            organizer_id=organizer_id,
        )
        doc = event.to_document()
        result = mongo.events.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    @classmethod
    def list_events(cls) -> List[Dict[str, Any]]:
        return list(mongo.events.find({}))

    @classmethod
    def get_event(cls, event_id: str, not_found_status: int = 404) -> Dict[str, Any]:
        """
        Fetch an event by id.

        Raises:
            NotFoundError: unknown or malformed id, with ``not_found_status``.
        """
        event_oid = safe_object_id(event_id)
        event = mongo.events.find_one({"_id": event_oid}) if event_oid else None
        if not event:
            message = "event not found" if not_found_status == 400 else "Event not found"
            raise NotFoundError(message, status_code=not_found_status)
        return event

    @classmethod
    def update_event(
        cls,
        user_id: str,
        data: UpdateEventRequest,
        organizer_only: bool = True,
    ) -> Dict[str, Any]:
        """
        Apply a partial update to an event.

        With ``organizer_only`` the event is read first so a non-organizer gets
        a 403 rather than a silent no-op.
        """
        event_oid = safe_object_id(data.eventId)
        if not event_oid:
            raise NotFoundError("Event not found")

        if organizer_only:
            event = mongo.events.find_one({"_id": event_oid}, {"organizerId": 1})
            if not event:
                raise NotFoundError("Event not found")
            if not is_organizer(user_id, event):
                raise ForbiddenError("Only the event organizer can update this event")

        changes = data.changes()
        changes["updatedAt"] = datetime.utcnow()

        updated = mongo.events.find_one_and_update(
            {"_id": event_oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise NotFoundError("Event not found")
        return updated

    @classmethod
    def delete_event(cls, user_id: str, event_id: str) -> Dict[str, Any]:
        """
        Delete an event owned by ``user_id``.

        Not-found and not-owned both report ``deletedCount == 0``.
        """
        event_oid = safe_object_id(event_id)
        if not event_oid:
            return {"acknowledged": True, "deletedCount": 0}

        result = mongo.events.delete_one({"_id": event_oid, "organizerId": user_id})
        if result.deleted_count:
            mongo.participants.delete_many({"eventId": event_oid})

        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}

    @classmethod
    def register(cls, user_id: str, event_id: str) -> Dict[str, Any]:
        event = cls.get_event(event_id)

        if mongo.participants.find_one({"eventId": event["_id"], "userId": user_id}):
            raise ConflictError("Already registered")

        doc = Participant(event_id=event["_id"], user_id=user_id).to_document()
        try:
            result = mongo.participants.insert_one(doc)
        except DuplicateKeyError:
            # A concurrent request registered between the check and the insert
            raise ConflictError("Already registered") from None
        doc["_id"] = result.inserted_id
        return doc

    @classmethod
    def unregister(cls, user_id: str, event_id: str) -> Dict[str, Any]:
        event = cls.get_event(event_id)
        result = mongo.participants.delete_one({"eventId": event["_id"], "userId": user_id})
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}

    @classmethod
    def list_participants(cls, event_id: str) -> List[Dict[str, Any]]:
        event_oid = safe_object_id(event_id)
        if not event_oid:
            return []
        return list(mongo.participants.find({"eventId": event_oid}))
