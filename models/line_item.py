from typing import Optional
from pydantic import AliasChoices, Field

from models.base import CamelModel, RequiredStr


class LineItemIn(CamelModel):
    """
    One purchasable row of a quotation or order as submitted by the client.
    Accepts both the long names and the short ones older clients send
    (qty, price, discount, tax). Any `subtotal` sent along is ignored and
    recomputed on the server.
    """
    item_name: RequiredStr = Field(validation_alias=AliasChoices("itemName", "item_name", "item"))
    quantity: float = Field(default=1, gt=0, validation_alias=AliasChoices("quantity", "qty"))
    unit: Optional[str] = None
    unit_price: float = Field(ge=0, validation_alias=AliasChoices("unitPrice", "unit_price", "price"))
    discount_percent: float = Field(
        default=0, ge=0, le=100,
        validation_alias=AliasChoices("discountPercent", "discount_percent", "discount"),
    )
    discount_amount: float = Field(
        default=0, ge=0,
        validation_alias=AliasChoices("discountAmount", "discount_amount"),
    )
    tax_percent: float = Field(
        default=0, ge=0,
        validation_alias=AliasChoices("taxPercent", "tax_percent", "tax"),
    )
    subtotal: Optional[float] = None


class LineItem(LineItemIn):
    """A priced line item as stored."""
    subtotal: float
