from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional
import logging

from database import FOLLOWUPS, LEADS, QUOTATIONS
from models.followup import FollowUpCreate, FollowUpEntry, FollowUpStatus, FollowUpUpdate, RelatedType
from services import mongo_service
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api/followups", tags=["Follow-ups"])
logger = logging.getLogger(__name__)

RELATED_COLLECTIONS = {"Lead": LEADS, "Quotation": QUOTATIONS}
SOONEST_FIRST = [("followUpDate", 1)]


@router.get("", response_model=List[FollowUpEntry], summary="List follow-ups, soonest first")
async def list_followups(
    related_type: Optional[RelatedType] = Query(default=None, alias="relatedType"),
    related_id: Optional[str] = Query(default=None, alias="relatedId"),
    status: Optional[FollowUpStatus] = None,
):
    query = {}
    if related_type:
        query["relatedType"] = related_type
    if related_id:
        query["relatedId"] = parse_object_id(related_id)
    if status:
        query["status"] = status
    return await mongo_service.list_documents(FOLLOWUPS, query, sort=SOONEST_FIRST)


@router.post("", response_model=FollowUpEntry, status_code=201, summary="Schedule a follow-up for a lead or quotation")
async def create_followup(follow_up: FollowUpCreate):
    related_id = parse_object_id(follow_up.related_id)
    if not await mongo_service.document_exists(RELATED_COLLECTIONS[follow_up.related_type], related_id):
        raise HTTPException(status_code=404, detail=f"{follow_up.related_type} not found")

    follow_up_data = follow_up.model_dump(by_alias=True)
    follow_up_data["relatedId"] = related_id
    created = await mongo_service.create_document(FOLLOWUPS, follow_up_data)
    logger.info(f"Follow-up {created['_id']} scheduled for {follow_up.related_type} {follow_up.related_id}")
    return created


@router.patch("/{followup_id}", response_model=FollowUpEntry, summary="Update a follow-up's status, date or notes")
async def update_followup(followup_id: str, changes: FollowUpUpdate):
    update_data = changes.model_dump(by_alias=True, exclude_unset=True)
    updated = await mongo_service.update_document(FOLLOWUPS, parse_object_id(followup_id), update_data)
    if not updated:
        raise HTTPException(status_code=404, detail="Follow-up not found")
    return updated
