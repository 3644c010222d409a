import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

from models.line_item import LineItemIn

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


class TotalMismatchError(ValueError):
    """The total sent by the client disagrees with the recomputed one."""


def _dec(value: Any) -> Decimal:
    return Decimal(str(value or 0))


def line_subtotal(
    quantity: float,
    unit_price: float,
    discount_percent: float = 0,
    tax_percent: float = 0,
    discount_amount: float = 0,
) -> float:
    """
    price x quantity, minus the percentage and fixed discounts, plus tax on
    the discounted amount. Rounded half-up to cents.

    >>> line_subtotal(2, 100, discount_percent=10, tax_percent=5)
    189.0
    """
    gross = _dec(quantity) * _dec(unit_price)
    discounted = gross - gross * _dec(discount_percent) / HUNDRED - _dec(discount_amount)
    if discounted < 0:
        discounted = Decimal(0)
    taxed = discounted + discounted * _dec(tax_percent) / HUNDRED
    return float(taxed.quantize(CENT, rounding=ROUND_HALF_UP))


def price_items(items: List[LineItemIn]) -> Tuple[List[Dict[str, Any]], float]:
    """Returns the stored form of each item with its subtotal, and the grand total."""
    priced = []
    total = Decimal(0)
    for item in items:
        subtotal = line_subtotal(
            item.quantity,
            item.unit_price,
            discount_percent=item.discount_percent,
            tax_percent=item.tax_percent,
            discount_amount=item.discount_amount,
        )
        row = item.model_dump(by_alias=True)
        row["subtotal"] = subtotal
        priced.append(row)
        total += _dec(subtotal)
    return priced, float(total.quantize(CENT, rounding=ROUND_HALF_UP))


def check_total(submitted: Optional[float], computed: float, tolerance: float) -> None:
    """Raises TotalMismatchError when a submitted total is off by more than `tolerance`."""
    if submitted is None:
        return
    if abs(_dec(submitted) - _dec(computed)) > _dec(tolerance):
        logger.warning(f"Rejected total {submitted}; recomputed {computed}")
        raise TotalMismatchError(
            f"Total amount {submitted} does not match computed total {computed:.2f}"
        )
