from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# A string that must contain something other than whitespace.
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """
    Base for every API model. Fields are snake_case in Python and camelCase on
    the wire and in MongoDB, which is the shape the browser client sends.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentEntry(CamelModel):
    """
    Server-generated identity and timestamps shared by every stored entity.
    `_id` is the stringified MongoDB ObjectId.
    """
    id: Optional[str] = Field(alias="_id", default=None)
    created_at: Optional[datetime] = None


def reject_null(value, info):
    """Shared `before` validator for partial updates: null cannot clear a required field."""
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value
