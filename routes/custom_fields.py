from fastapi import APIRouter, HTTPException, status
from typing import List
import logging

from models.custom_field import FieldDefinition, FieldDefinitionIn
from services.form_schema_service import (
    FieldSchemaError,
    UnknownEntityError,
    UnknownFieldError,
    form_schema_store,
)

router = APIRouter(prefix="/api/custom-fields", tags=["Custom Fields"])
logger = logging.getLogger(__name__)


@router.get("/{entity_type}", response_model=List[FieldDefinition], summary="List the custom fields of an entity form")
async def list_fields(entity_type: str):
    try:
        return await form_schema_store.get_fields(entity_type, refresh=True)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{entity_type}", response_model=FieldDefinition, status_code=status.HTTP_201_CREATED, summary="Add a custom field")
async def add_field(entity_type: str, definition: FieldDefinitionIn):
    try:
        return await form_schema_store.add_field(entity_type, definition)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FieldSchemaError as e:
        logger.warning(f"Rejected custom field for {entity_type}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{entity_type}/{field_id}", response_model=FieldDefinition, summary="Replace a custom field")
async def update_field(entity_type: str, field_id: str, definition: FieldDefinitionIn):
    try:
        return await form_schema_store.update_field(entity_type, field_id, definition)
    except (UnknownEntityError, UnknownFieldError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FieldSchemaError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{entity_type}/{field_id}", response_model=List[FieldDefinition], summary="Remove a custom field")
async def remove_field(entity_type: str, field_id: str):
    try:
        return await form_schema_store.remove_field(entity_type, field_id)
    except (UnknownEntityError, UnknownFieldError) as e:
        raise HTTPException(status_code=404, detail=str(e))
