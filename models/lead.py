from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, Field, field_validator

from models.base import CamelModel, DocumentEntry, RequiredStr


class LeadFollowUp(CamelModel):
    """A follow-up note kept inside the lead document itself."""
    date: RequiredStr
    time: str = "00:00"
    remark: RequiredStr

    @field_validator("time", mode="before")
    @classmethod
    def default_time(cls, value):
        return value or "00:00"


class LeadCreate(CamelModel):
    """
    Fields a user provides when adding a lead.
    Contact fields are mandatory; duplicate emails are allowed.
    """
    name: RequiredStr
    email: RequiredStr
    phone: RequiredStr
    address: RequiredStr
    state: RequiredStr
    source: Optional[str] = Field(default=None, validation_alias=AliasChoices("source", "Source"))
    status: str = "New"
    follow_ups: List[LeadFollowUp] = []
    custom_fields: Dict[str, Any] = {}


class LeadEntry(DocumentEntry, LeadCreate):
    pass
