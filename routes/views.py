from fastapi import APIRouter, HTTPException, Query
from datetime import date
from typing import Literal, Optional
import logging

from config import settings
from database import CUSTOMERS, FOLLOWUPS, LEADS, ORDERS, QUOTATIONS
from models.listing import Page
from services import listing_service, mongo_service

router = APIRouter(prefix="/api/views", tags=["List Views"])
logger = logging.getLogger(__name__)

# collection -> (date field used by the range filter, empty-list message)
VIEWS = {
    "leads": (LEADS, "createdAt", "No leads found."),
    "customers": (CUSTOMERS, "createdAt", "No customers found."),
    "quotations": (QUOTATIONS, "createdAt", "No quotations found."),
    "orders": (ORDERS, "createdAt", "No orders found."),
    "followups": (FOLLOWUPS, "followUpDate", "No follow-ups found."),
}


@router.get("/{collection}", response_model=Page, response_model_by_alias=True, summary="One filtered, sorted page of a list")
async def list_view(
    collection: str,
    q: Optional[str] = None,
    status: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    page: int = 1,
    page_size: Optional[int] = Query(default=None, alias="pageSize", ge=1, le=500),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    order: Literal["asc", "desc"] = "desc",
):
    if collection not in VIEWS:
        raise HTTPException(status_code=404, detail=f"Unknown list: {collection}")
    collection_name, date_field, placeholder = VIEWS[collection]

    records = await mongo_service.list_documents(collection_name)
    filtered = listing_service.filter_records(records, search=q, status=status, start=start, end=end, date_field=date_field)
    if sort_by:
        filtered = listing_service.sort_records(filtered, sort_by, descending=order == "desc")

    result = listing_service.paginate(filtered, page, page_size or settings.LIST_PAGE_SIZE)
    if not result["items"]:
        result["placeholder"] = placeholder
    return result
