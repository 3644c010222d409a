import logging
from pymongo import ReturnDocument

from database import COUNTERS, get_collection

logger = logging.getLogger(__name__)

QUOTATION_SEQUENCE = "quotationId"
ORDER_SEQUENCE = "orderId"


async def next_sequence(sequence_name: str) -> int:
    """
    Hands out the next integer of a named sequence.

    The increment is a single find-and-modify with upsert, so concurrent
    callers never receive the same number and a missing counter starts at 1.
    A value issued to a caller whose save later fails is not given back, so
    sequences are unique and increasing but may have gaps.
    """
    counters = get_collection(COUNTERS)
    counter = await counters.find_one_and_update(
        {"_id": sequence_name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    logger.debug(f"Issued {sequence_name} #{counter['seq']}")
    return counter["seq"]


def format_sequence(prefix: str, value: int, width: int = 5) -> str:
    """format_sequence("Q", 7) -> "Q-00007"."""
    return f"{prefix}-{value:0{width}d}"
