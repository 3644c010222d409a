from fastapi import APIRouter, HTTPException
import logging

from models.setting import SettingEntry, SettingOption, SettingValues
from services import settings_service
from services.form_schema_service import form_schema_store

router = APIRouter(prefix="/api/settings", tags=["Settings"])
logger = logging.getLogger(__name__)


def _drop_schema_cache(setting_type: str) -> None:
    # Schemas written through this generic route must not be served stale.
    if setting_type.endswith(".customFields"):
        form_schema_store.invalidate()


@router.get("/{setting_type}", response_model=SettingEntry, summary="Get the values of a setting type")
async def get_setting(setting_type: str):
    return {"type": setting_type, "values": await settings_service.get_values(setting_type)}


@router.post("/{setting_type}", response_model=SettingEntry, summary="Create or replace a setting")
async def save_setting(setting_type: str, body: SettingValues):
    saved = await settings_service.save_values(setting_type, body.values)
    _drop_schema_cache(setting_type)
    return saved


@router.delete("/{setting_type}", summary="Delete a setting")
async def delete_setting(setting_type: str):
    if not await settings_service.delete_setting(setting_type):
        raise HTTPException(status_code=404, detail="Setting not found")
    _drop_schema_cache(setting_type)
    logger.info(f"Setting '{setting_type}' deleted")
    return {"message": "Setting deleted", "type": setting_type}


@router.post("/{setting_type}/values", response_model=SettingEntry, summary="Add one option to a setting")
async def add_setting_value(setting_type: str, option: SettingOption):
    try:
        saved = await settings_service.add_value(setting_type, option.name)
    except settings_service.DuplicateValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    _drop_schema_cache(setting_type)
    return saved


@router.delete("/{setting_type}/values/{name}", response_model=SettingEntry, summary="Remove one option from a setting")
async def remove_setting_value(setting_type: str, name: str):
    saved = await settings_service.remove_value(setting_type, name)
    _drop_schema_cache(setting_type)
    return saved
