from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException


def parse_object_id(item_id: str) -> ObjectId:
    """Converts a path id to an ObjectId, raising a 400 for malformed ids."""
    try:
        return ObjectId(item_id)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail="Invalid id")


def _convert(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _convert(inner) for key, inner in value.items()}
    if isinstance(value, list):
        return [_convert(inner) for inner in value]
    return value


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Returns a copy of a MongoDB document with every ObjectId turned into a string,
    so it can be fed straight into the response models.
    """
    if doc is None:
        return None
    return _convert(dict(doc))
