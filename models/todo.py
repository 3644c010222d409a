from typing import Literal, Optional
from pydantic import field_validator

from models.base import CamelModel, DocumentEntry, RequiredStr, reject_null

Priority = Literal["low", "medium", "high"]


class TodoCreate(CamelModel):
    text: RequiredStr
    category: str = "personal"
    priority: Priority = "medium"
    due_date: Optional[str] = None


class TodoUpdate(CamelModel):
    text: Optional[RequiredStr] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[str] = None
    completed: Optional[bool] = None

    check_required = field_validator("text", "category", "priority", "completed", mode="before")(reject_null)


class TodoEntry(DocumentEntry, TodoCreate):
    user_id: Optional[str] = None
    completed: bool = False


class TodoStats(CamelModel):
    total: int
    completed: int
    pending: int
