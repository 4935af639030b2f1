"""Request bodies accepted by the event routes."""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from eventhub.utils.validators import RequestSchema, parse_date, reject_null

# Older clients send the misspelled key; both land on registrationFee
_FEE_ALIASES = AliasChoices("registrationFee", "registerationFee")

_OPTIONAL_FIELDS = ("description", "type", "prizePool", "registrationFee")


class CreateEventRequest(RequestSchema):
    title: str
    description: Optional[str] = None
    type: Optional[str] = None
    location: str
    prizePool: Optional[float] = None
    registrationFee: Optional[float] = Field(default=None, validation_alias=_FEE_ALIASES)
    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date(value)

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class UpdateEventRequest(RequestSchema):
    eventId: str
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    prizePool: Optional[float] = None
    registrationFee: Optional[float] = Field(default=None, validation_alias=_FEE_ALIASES)
    date: Optional[datetime] = None

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date(value)

    @field_validator("title", "location", *_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)

    def changes(self):
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True, exclude={"eventId"})


class EventIdRequest(RequestSchema):
    """Body shared by delete, register, unregister and participants."""

    eventId: str
