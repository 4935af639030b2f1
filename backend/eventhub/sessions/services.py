"""
Session Service - bookable sessions owned by a single identity.

Same shape as the event service: existence and ownership checks first, then
one write.
"""
from datetime import datetime
from typing import Any, Dict, List

from pymongo import ReturnDocument

from eventhub.errors import ConflictError, ForbiddenError, NotFoundError
from eventhub.extensions import db as mongo
from eventhub.utils.enums import SessionStatus
from eventhub.utils.permissions import is_owner
from eventhub.utils.validators import safe_object_id

from .models import Session
from .schemas import BookSessionRequest


class SessionService:
    """Service for booking and cancelling sessions."""

    @classmethod
    def book(cls, user_id: str, data: BookSessionRequest) -> Dict[str, Any]:
        """
        Book a session for ``user_id``.

        Raises:
            NotFoundError: ``eventId`` was given and does not resolve.
            ConflictError: the user already holds a booked session at that date.
        """
        event_oid = None
        if data.eventId is not None:
            event_oid = safe_object_id(data.eventId)
            if not event_oid or not mongo.events.find_one({"_id": event_oid}, {"_id": 1}):
                raise NotFoundError("Event not found")

        # Check-then-insert; two concurrent bookings for the same slot can both pass
        clash = mongo.sessions.find_one({
            "userId": user_id,
            "date": data.date,
            "status": SessionStatus.BOOKED.value,
        })
        if clash:
            raise ConflictError("Session already booked")

        session = Session(
            title=data.title,
            date=data.date,
            user_id=user_id,
            duration=data.duration,
            notes=data.notes,
            event_id=event_oid,
        )
        doc = session.to_document()
        result = mongo.sessions.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    @classmethod
    def cancel(cls, user_id: str, session_id: str) -> Dict[str, Any]:
        session = cls._find(session_id)

        if not is_owner(user_id, session):
            raise ForbiddenError("Only the booking user can cancel this session")
        if session["status"] == SessionStatus.CANCELLED.value:
            raise ConflictError("Session already cancelled")

        return mongo.sessions.find_one_and_update(
            {"_id": session["_id"]},
            {"$set": {
                "status": SessionStatus.CANCELLED.value,
                "cancelledAt": datetime.utcnow(),
            }},
            return_document=ReturnDocument.AFTER,
        )

    @classmethod
    def list_sessions(cls, user_id: str) -> List[Dict[str, Any]]:
        return list(mongo.sessions.find({"userId": user_id}).sort("date", 1))

    @classmethod
    def get_session(cls, user_id: str, session_id: str) -> Dict[str, Any]:
        session = cls._find(session_id)
        # Someone else's booking is reported the same as a missing one
        if not is_owner(user_id, session):
            raise NotFoundError("Session not found")
        return session

    @staticmethod
    def _find(session_id: str) -> Dict[str, Any]:
        session_oid = safe_object_id(session_id)
        session = mongo.sessions.find_one({"_id": session_oid}) if session_oid else None
        if not session:
            raise NotFoundError("Session not found")
        return session
