from fastapi import APIRouter
import logging

from database import get_database

router = APIRouter(prefix="/health", tags=["Health Check"])
logger = logging.getLogger(__name__)


@router.get("/db", summary="Check if MongoDB is reachable")
async def check_database():
    try:
        await get_database().command("ping")
        return {"status": "online", "message": "MongoDB connection is active"}
    except Exception as e:
        logger.error(f"MongoDB health check failed: {e}")
        return {"status": "offline", "message": "MongoDB is not reachable"}
