from datetime import datetime
from typing import Literal, Optional
from pydantic import field_validator

from models.base import CamelModel, DocumentEntry, RequiredStr, reject_null

RelatedType = Literal["Lead", "Quotation"]
FollowUpStatus = Literal["Pending", "Completed"]


class FollowUpCreate(CamelModel):
    related_type: RelatedType
    related_id: RequiredStr
    follow_up_date: datetime
    notes: Optional[str] = None
    status: FollowUpStatus = "Pending"


class FollowUpUpdate(CamelModel):
    """Explicit edits only; follow-ups never change status on their own."""
    follow_up_date: Optional[datetime] = None
    notes: Optional[str] = None
    status: Optional[FollowUpStatus] = None

    check_required = field_validator("follow_up_date", "status", mode="before")(reject_null)


class FollowUpEntry(DocumentEntry, FollowUpCreate):
    pass
