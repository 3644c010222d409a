from fastapi import APIRouter, HTTPException, status
from typing import List
import logging

from database import LEADS
from models.lead import LeadCreate, LeadEntry, LeadFollowUp
from services import mongo_service
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api/leads", tags=["Leads"])
logger = logging.getLogger(__name__)


@router.post("", response_model=LeadEntry, status_code=status.HTTP_201_CREATED, summary="Add a lead")
async def create_lead(lead: LeadCreate):
    lead_data = lead.model_dump(by_alias=True)
    created = await mongo_service.create_document(LEADS, lead_data)
    logger.info(f"Lead '{lead.name}' saved with ID: {created['_id']}")
    return created


@router.get("", response_model=List[LeadEntry], summary="List all leads, newest first")
async def list_leads():
    return await mongo_service.list_documents(LEADS)


@router.post("/{lead_id}/followups", response_model=LeadEntry, summary="Append a follow-up note to a lead")
async def add_lead_followup(lead_id: str, follow_up: LeadFollowUp):
    updated = await mongo_service.push_to_array(
        LEADS, parse_object_id(lead_id), "followUps", follow_up.model_dump(by_alias=True)
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Lead not found")
    return updated
