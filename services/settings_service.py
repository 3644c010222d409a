import logging
from typing import Any, Dict, List

from database import SETTINGS, get_collection

logger = logging.getLogger(__name__)

# Returned for these setting types until somebody saves their own list.
DEFAULT_VALUES: Dict[str, List[str]] = {
    "lead_sources": ["Friend", "Walk In", "Social Media", "Other"],
}


class DuplicateValueError(ValueError):
    pass


async def get_values(setting_type: str) -> List[Any]:
    """Stored values for a setting type, the built-in default, or an empty list."""
    setting = await get_collection(SETTINGS).find_one({"type": setting_type})
    if setting is None:
        return list(DEFAULT_VALUES.get(setting_type, []))
    return setting.get("values", [])


async def save_values(setting_type: str, values: List[Any]) -> Dict[str, Any]:
    """Replaces the whole list for a setting type (last write wins)."""
    await get_collection(SETTINGS).update_one(
        {"type": setting_type},
        {"$set": {"values": values}},
        upsert=True,
    )
    logger.info(f"Saved setting '{setting_type}' ({len(values)} values)")
    return {"type": setting_type, "values": values}


async def delete_setting(setting_type: str) -> bool:
    result = await get_collection(SETTINGS).delete_one({"type": setting_type})
    return result.deleted_count > 0


async def add_value(setting_type: str, name: str) -> Dict[str, Any]:
    values = await get_values(setting_type)
    if name in values:
        raise DuplicateValueError(f"'{name}' already exists")
    values.append(name)
    return await save_values(setting_type, values)


async def remove_value(setting_type: str, name: str) -> Dict[str, Any]:
    values = [value for value in await get_values(setting_type) if value != name]
    return await save_values(setting_type, values)
