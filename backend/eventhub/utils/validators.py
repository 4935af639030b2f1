"""Request validators.

Every mutating route validates its body against a pydantic model before
touching the store. Failures become a ``ValidationError`` carrying one entry
per offending field.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId, errors
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from eventhub.errors import ValidationError


class RequestSchema(BaseModel):
    """Base for request bodies: no type coercion, unknown keys dropped."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)


def parse_date(value: Any) -> datetime:
    """Parse an ISO-8601 date or date-time string into a naive UTC datetime."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("Expected a date string")
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValueError("Invalid date format") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def reject_null(value: Any) -> Any:
    """Optional fields may be omitted, but not sent as null."""
    if value is None:
        raise ValueError("Field may not be null")
    return value


def format_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    formatted = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        message = err["msg"]
        # "Value error, Invalid date format" -> "Invalid date format"
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append({"field": field, "message": message})
    return formatted


def validate_payload(schema, payload, message: str = "Invalid input"):
    """Validate ``payload`` against ``schema`` or raise ``ValidationError``."""
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError(message, errors=[{"field": "body", "message": "Expected a JSON object"}])
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(message, errors=format_errors(exc)) from exc


def safe_object_id(value) -> Optional[ObjectId]:
    # ObjectId(None) mints a fresh id
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        return None
