from typing import Any, List
from pydantic import BaseModel

from models.base import RequiredStr


class SettingValues(BaseModel):
    """Dropdown option strings, or field-definition objects for schemas."""
    values: List[Any]


class SettingEntry(SettingValues):
    type: str


class SettingOption(BaseModel):
    name: RequiredStr
