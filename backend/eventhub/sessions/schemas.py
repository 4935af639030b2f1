"""Request bodies accepted by the session routes."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from eventhub.utils.validators import RequestSchema, parse_date, reject_null


class BookSessionRequest(RequestSchema):
    title: str
    date: datetime
    duration: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None
    eventId: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date(value)

    @field_validator("duration", "notes", "eventId", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class CancelSessionRequest(RequestSchema):
    sessionId: str
