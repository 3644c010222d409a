import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure
from config import settings
from typing import Optional

logger = logging.getLogger(__name__)

# Global client and database instances
client: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None

# Collection names, one per entity type
LEADS = "leads"
CUSTOMERS = "customers"
QUOTATIONS = "quotations"
ORDERS = "orders"
FOLLOWUPS = "followups"
TODOS = "todos"
SETTINGS = "settings"
COUNTERS = "counters"
USERS = "users"

async def connect_to_mongo():
    """
    Establishes an asynchronous connection to MongoDB using Motor.
    """
    global client, db
    try:
        client = AsyncIOMotorClient(settings.MONGO_DB_URL)
        db = client[settings.MONGO_DB_NAME]
        # The ping command is cheap and does not require auth, useful for connection test
        await client.admin.command('ping')
        logger.info(f"MongoDB connected successfully to database '{settings.MONGO_DB_NAME}'")
    except ConnectionFailure as e:
        logger.error(f"MongoDB connection failed: {e}")
        client = None
        db = None
        raise

async def close_mongo_connection():
    """
    Closes the MongoDB connection.
    """
    global client, db
    if client:
        client.close()
        logger.info("MongoDB connection closed.")
    client = None
    db = None

def get_database() -> AsyncIOMotorDatabase:
    """
    Returns the MongoDB database instance. Raises an error if not connected.
    """
    if db is None:
        raise ConnectionFailure("MongoDB connection not established. Call connect_to_mongo() first.")
    return db

def get_collection(name: str):
    """
    Returns a collection from the connected database.
    """
    return get_database()[name]

async def ensure_indexes():
    database = get_database()
    for name in (LEADS, CUSTOMERS, QUOTATIONS, ORDERS):
        await database[name].create_index("createdAt")
    await database[QUOTATIONS].create_index("quotationId", unique=True)
    await database[ORDERS].create_index("orderId", unique=True)
    await database[FOLLOWUPS].create_index("followUpDate")
    await database[SETTINGS].create_index("type", unique=True)
    await database[USERS].create_index("email", unique=True)
    await database[TODOS].create_index("userId")
    logger.info("MongoDB indexes ensured.")
