from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response
from typing import List
from datetime import datetime
import logging

from config import settings
from database import QUOTATIONS
from models.quotation import QuotationCreate, QuotationEntry, QuotationUpdate
from services import counter_service, mongo_service, pdf_service, pricing_service
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api/quotations", tags=["Quotations"])
logger = logging.getLogger(__name__)


@router.post("", response_model=QuotationEntry, status_code=status.HTTP_201_CREATED, summary="Create a quotation")
async def create_quotation(quotation: QuotationCreate):
    """
    Prices every line item on the server, checks the client's total against
    it, then mints the next quotation number.
    """
    items, total = pricing_service.price_items(quotation.items)
    try:
        pricing_service.check_total(quotation.total_amount, total, settings.TOTAL_TOLERANCE)
    except pricing_service.TotalMismatchError as e:
        raise HTTPException(status_code=400, detail=str(e))

    quotation_data = quotation.model_dump(by_alias=True)
    quotation_data["items"] = items
    quotation_data["totalAmount"] = total

    sequence = await counter_service.next_sequence(counter_service.QUOTATION_SEQUENCE)
    quotation_data["quotationId"] = sequence
    quotation_data["quotationNumber"] = counter_service.format_sequence("Q", sequence)

    created = await mongo_service.create_document(QUOTATIONS, quotation_data)
    logger.info(f"Quotation {created['quotationNumber']} saved for '{quotation.customer_name}', total {total:.2f}")
    return created


@router.get("", response_model=List[QuotationEntry], summary="List all quotations, newest first")
async def list_quotations():
    return await mongo_service.list_documents(QUOTATIONS)


@router.get("/{quotation_id}", response_model=QuotationEntry, summary="Get a quotation")
async def get_quotation(quotation_id: str):
    quotation = await mongo_service.get_document(QUOTATIONS, parse_object_id(quotation_id))
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return quotation


@router.put("/{quotation_id}", response_model=QuotationEntry, summary="Update a quotation")
async def update_quotation(quotation_id: str, changes: QuotationUpdate):
    """
    Partial update. New items are re-priced; the quotation number never changes.
    """
    object_id = parse_object_id(quotation_id)
    existing = await mongo_service.get_document(QUOTATIONS, object_id)
    if not existing:
        raise HTTPException(status_code=404, detail="Quotation not found")

    update_data = changes.model_dump(by_alias=True, exclude_unset=True, exclude={"items", "total_amount"})
    if changes.items is not None:
        items, total = pricing_service.price_items(changes.items)
        update_data["items"] = items
        update_data["totalAmount"] = total
    else:
        total = existing.get("totalAmount", 0)

    try:
        pricing_service.check_total(changes.total_amount, total, settings.TOTAL_TOLERANCE)
    except pricing_service.TotalMismatchError as e:
        raise HTTPException(status_code=400, detail=str(e))

    update_data["updatedAt"] = datetime.utcnow()
    updated = await mongo_service.update_document(QUOTATIONS, object_id, update_data)
    if not updated:
        raise HTTPException(status_code=404, detail="Quotation not found")
    logger.info(f"Quotation {updated.get('quotationNumber')} updated")
    return updated


@router.get("/{quotation_id}/export", summary="Download a quotation as PDF")
async def export_quotation(quotation_id: str):
    quotation = await mongo_service.get_document(QUOTATIONS, parse_object_id(quotation_id))
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")

    pdf_bytes = pdf_service.build_quotation_pdf(quotation)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=quotation-{quotation_id}.pdf"},
    )
