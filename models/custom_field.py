from enum import Enum
from typing import Any, List, Optional, Union
from pydantic import BaseModel, field_validator, model_validator

from models.base import CamelModel


class FieldKind(str, Enum):
    """Every input kind the field renderer knows how to draw."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    PHONE = "phone"
    URL = "url"
    NUMBER = "number"
    CURRENCY = "currency"
    DATE = "date"
    TEXTAREA = "textarea"
    DROPDOWN = "dropdown"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"


CHOICE_KINDS = {FieldKind.DROPDOWN, FieldKind.SELECT, FieldKind.RADIO}


class OptionItem(BaseModel):
    """A choice given as a pair; the value falls back to the label."""
    value: Optional[str] = None
    label: Optional[str] = None

    @model_validator(mode="after")
    def fill_missing(self):
        if self.value is None and self.label is None:
            raise ValueError("Option needs a value or a label")
        if self.value is None:
            self.value = self.label
        if self.label is None:
            self.label = self.value
        return self


def normalize_options(raw: Any) -> List[Any]:
    """
    Turns a comma separated string into a list of trimmed, non-empty options.
    Lists are kept, minus blank strings. Anything else yields an empty list.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return [option.strip() for option in raw.split(",") if option.strip()]
    if isinstance(raw, list):
        return [
            option.strip() if isinstance(option, str) else option
            for option in raw
            if not (isinstance(option, str) and not option.strip())
        ]
    return []


class FieldDefinition(CamelModel):
    """
    A custom field as stored. `type` stays a plain string so that stored
    configuration with a kind this version does not know still loads and
    renders as a placeholder.
    """
    id: Optional[str] = None
    label: str = ""
    name: Optional[str] = None
    type: str = FieldKind.TEXT.value
    options: List[Union[str, OptionItem]] = []
    required: bool = False
    placeholder: Optional[str] = None
    rows: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None

    @field_validator("options", mode="before")
    @classmethod
    def split_options(cls, value):
        return normalize_options(value)

    @property
    def kind(self) -> Optional[FieldKind]:
        try:
            return FieldKind(self.type)
        except ValueError:
            return None


class FieldDefinitionIn(CamelModel):
    """Body of add/update requests. Only known kinds may be configured."""
    label: str = ""
    name: Optional[str] = None
    type: FieldKind = FieldKind.TEXT
    options: Union[str, List[Union[str, OptionItem]], None] = None
    required: bool = False
    placeholder: Optional[str] = None
    rows: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None
