from fastapi import APIRouter

from database import CUSTOMERS, FOLLOWUPS, LEADS, ORDERS, QUOTATIONS
from services import mongo_service

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/counts", summary="Record counts for the home page tiles")
async def dashboard_counts():
    return {
        "leads": await mongo_service.count_documents(LEADS),
        "customers": await mongo_service.count_documents(CUSTOMERS),
        "quotations": await mongo_service.count_documents(QUOTATIONS),
        "orders": await mongo_service.count_documents(ORDERS),
        "pendingFollowUps": await mongo_service.count_documents(FOLLOWUPS, {"status": "Pending"}),
    }
