from fastapi import APIRouter, status
from typing import List
import logging

from database import CUSTOMERS
from models.customer import CustomerCreate, CustomerEntry
from services import mongo_service

router = APIRouter(prefix="/api/customers", tags=["Customers"])
logger = logging.getLogger(__name__)


@router.post("", response_model=CustomerEntry, status_code=status.HTTP_201_CREATED, summary="Add a customer")
async def create_customer(customer: CustomerCreate):
    created = await mongo_service.create_document(CUSTOMERS, customer.model_dump(by_alias=True))
    logger.info(f"Customer '{customer.name}' saved with ID: {created['_id']}")
    return created


@router.get("", response_model=List[CustomerEntry], summary="List all customers, newest first")
async def list_customers():
    return await mongo_service.list_documents(CUSTOMERS)
