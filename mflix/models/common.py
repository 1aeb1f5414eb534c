"""ObjectId handling shared by the document models."""
from typing import Annotated

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BeforeValidator


def _stringify(value):
    if isinstance(value, ObjectId):
        return str(value)
    return value


# ObjectId in the database, hex string in Python
ObjectIdStr = Annotated[str, BeforeValidator(_stringify)]


def to_object_id(value) -> ObjectId | None:
    """Parse a hex id; None when it is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
