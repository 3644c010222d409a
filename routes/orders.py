from fastapi import APIRouter, HTTPException, status
from typing import List
import logging

from config import settings
from database import CUSTOMERS, ORDERS
from models.order import OrderCreate, OrderEntry
from services import counter_service, mongo_service, pricing_service
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api/orders", tags=["Orders"])
logger = logging.getLogger(__name__)

# Flat single-item keys folded into `items` during validation
FLAT_ITEM_FIELDS = {"item", "quantity", "price", "tax", "discount_percent", "discount_amount"}


@router.post("", response_model=OrderEntry, status_code=status.HTTP_201_CREATED, summary="Create an order")
async def create_order(order: OrderCreate):
    """
    Customer contact details are copied onto the order. `customerId`, when
    given, must point at an existing customer and is kept as a reference.
    """
    if order.customer_id and not await mongo_service.document_exists(CUSTOMERS, parse_object_id(order.customer_id)):
        raise HTTPException(status_code=404, detail="Customer not found")

    items, total = pricing_service.price_items(order.items)
    try:
        pricing_service.check_total(order.total_amount, total, settings.TOTAL_TOLERANCE)
    except pricing_service.TotalMismatchError as e:
        raise HTTPException(status_code=400, detail=str(e))

    order_data = order.model_dump(by_alias=True, exclude=FLAT_ITEM_FIELDS)
    order_data["items"] = items
    order_data["totalAmount"] = total

    sequence = await counter_service.next_sequence(counter_service.ORDER_SEQUENCE)
    order_data["orderId"] = sequence
    order_data["orderNumber"] = counter_service.format_sequence("O", sequence)

    created = await mongo_service.create_document(ORDERS, order_data)
    logger.info(f"Order {created['orderNumber']} saved for '{order.name}', total {total:.2f}")
    return created


@router.get("", response_model=List[OrderEntry], summary="List all orders, newest first")
async def list_orders():
    return await mongo_service.list_documents(ORDERS)
