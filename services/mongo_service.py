import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple
from bson import ObjectId

from database import get_collection
from utils.serializers import serialize_doc

logger = logging.getLogger(__name__)

NEWEST_FIRST = [("createdAt", -1), ("_id", -1)]


async def create_document(collection_name: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Stamps `createdAt`, inserts the document and returns it as stored.
    The document is read back from the DB to ensure consistency.
    """
    collection = get_collection(collection_name)
    data.setdefault("createdAt", datetime.utcnow())
    result = await collection.insert_one(data)
    created_document = await collection.find_one({"_id": result.inserted_id})
    logger.info(f"Created {collection_name} document {result.inserted_id}")
    return serialize_doc(created_document)


async def list_documents(
    collection_name: str,
    query: Optional[Dict[str, Any]] = None,
    sort: Optional[Sequence[Tuple[str, int]]] = None,
) -> List[Dict[str, Any]]:
    """Returns every matching document; newest first unless told otherwise."""
    collection = get_collection(collection_name)
    cursor = collection.find(query or {}, sort=list(sort or NEWEST_FIRST))
    documents = await cursor.to_list(length=None)
    return [serialize_doc(document) for document in documents]


async def get_document(collection_name: str, object_id: ObjectId, query: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    collection = get_collection(collection_name)
    document = await collection.find_one({"_id": object_id, **(query or {})})
    return serialize_doc(document)


async def update_document(
    collection_name: str,
    object_id: ObjectId,
    update_data: Dict[str, Any],
    query: Optional[Dict[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """Applies a `$set` and returns the updated document, or None if it does not exist."""
    collection = get_collection(collection_name)
    selector = {"_id": object_id, **(query or {})}
    if update_data:
        result = await collection.update_one(selector, {"$set": update_data})
        if result.matched_count == 0:
            return None
    updated_document = await collection.find_one(selector)
    return serialize_doc(updated_document)


async def push_to_array(collection_name: str, object_id: ObjectId, field: str, value: Any) -> Optional[Dict[str, Any]]:
    collection = get_collection(collection_name)
    result = await collection.update_one({"_id": object_id}, {"$push": {field: value}})
    if result.matched_count == 0:
        return None
    return serialize_doc(await collection.find_one({"_id": object_id}))


async def delete_document(collection_name: str, object_id: ObjectId, query: Optional[Dict[str, Any]] = None) -> bool:
    collection = get_collection(collection_name)
    result = await collection.delete_one({"_id": object_id, **(query or {})})
    return result.deleted_count > 0


async def count_documents(collection_name: str, query: Optional[Dict[str, Any]] = None) -> int:
    collection = get_collection(collection_name)
    return await collection.count_documents(query or {})


async def document_exists(collection_name: str, object_id: ObjectId) -> bool:
    return await count_documents(collection_name, {"_id": object_id}) > 0
