from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, Field, field_validator

from models.base import CamelModel, DocumentEntry, RequiredStr, reject_null
from models.line_item import LineItem, LineItemIn


class QuotationCreate(CamelModel):
    """
    Customer snapshot plus line items. `total_amount` is optional; when the
    client sends one it must agree with the server's own computation.
    """
    customer_name: RequiredStr = Field(validation_alias=AliasChoices("customerName", "customer_name", "name"))
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    items: List[LineItemIn] = Field(min_length=1)
    total_amount: Optional[float] = None
    status: str = "Draft"
    custom_fields: Dict[str, Any] = {}


class QuotationUpdate(CamelModel):
    customer_name: Optional[RequiredStr] = Field(
        default=None, validation_alias=AliasChoices("customerName", "customer_name", "name")
    )
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    items: Optional[List[LineItemIn]] = Field(default=None, min_length=1)
    total_amount: Optional[float] = None
    status: Optional[str] = None
    custom_fields: Optional[Dict[str, Any]] = None

    check_required = field_validator("customer_name", "items", "status", "custom_fields", mode="before")(reject_null)


class QuotationEntry(DocumentEntry):
    quotation_id: Optional[int] = None
    quotation_number: Optional[str] = None
    customer_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    items: List[LineItem] = []
    total_amount: float = 0
    status: str = "Draft"
    custom_fields: Dict[str, Any] = {}
    updated_at: Optional[datetime] = None
