"""Convert Mongo documents into JSON-safe dicts."""
from datetime import datetime

from bson import ObjectId


def to_iso(value: datetime) -> str:
    # Mongo hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        return value.isoformat() + "Z"
    return value.isoformat()


def serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, dict):
        return serialize_doc(value)
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def serialize_doc(doc):
    if doc is None:
        return None
    return {key: serialize_value(value) for key, value in doc.items()}


def serialize_docs(docs):
    return [serialize_doc(doc) for doc in docs]
