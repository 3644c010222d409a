import re
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, Field, field_validator, model_validator

from models.base import CamelModel, DocumentEntry, RequiredStr
from models.line_item import LineItem, LineItemIn

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s-]{10,}$")


class OrderCreate(CamelModel):
    """
    An order is either a list of line items or the older flat single-item
    shape (item, quantity, price, tax, discounts), which is folded into one
    line item during validation.
    """
    name: RequiredStr = Field(validation_alias=AliasChoices("name", "customerName", "customer_name"))
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    customer_id: Optional[str] = None
    items: List[LineItemIn] = []
    item: Optional[str] = None
    quantity: Optional[float] = None
    price: Optional[float] = None
    tax: Optional[float] = None
    discount_percent: Optional[float] = None
    discount_amount: Optional[float] = None
    total_amount: Optional[float] = None
    status: str = "New"
    custom_fields: Dict[str, Any] = {}

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        if value and not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email format")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value):
        if value and not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone number format")
        return value

    @model_validator(mode="after")
    def fold_flat_item(self):
        if not self.items and self.item:
            self.items = [LineItemIn(
                item_name=self.item,
                quantity=self.quantity or 1,
                unit_price=self.price or 0,
                tax_percent=self.tax or 0,
                discount_percent=self.discount_percent or 0,
                discount_amount=self.discount_amount or 0,
            )]
        if not self.items:
            raise ValueError("At least one item is required")
        return self


class OrderEntry(DocumentEntry):
    order_id: Optional[int] = None
    order_number: Optional[str] = None
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    customer_id: Optional[str] = None
    items: List[LineItem] = []
    total_amount: float = 0
    status: str = "New"
    custom_fields: Dict[str, Any] = {}
