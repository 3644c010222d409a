from typing import Any, Dict, Optional

from models.base import CamelModel, DocumentEntry, RequiredStr


class CustomerCreate(CamelModel):
    name: RequiredStr
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    custom_fields: Dict[str, Any] = {}


class CustomerEntry(DocumentEntry, CustomerCreate):
    pass
