"""
Custom field schemas per entity type.

The settings collection is the only place schemas are written. Each process
keeps a read-through copy per entity that expires after
SCHEMA_CACHE_TTL_SECONDS and is dropped on every local write, so another
instance's edits show up within the TTL.
"""
import logging
import re
import time
import uuid
from typing import Dict, List, Optional, Tuple

from config import settings
from models.custom_field import CHOICE_KINDS, FieldDefinition, FieldDefinitionIn, normalize_options
from services import settings_service

logger = logging.getLogger(__name__)

ENTITY_TYPES = {
    "lead": "Lead",
    "customer": "Customer",
    "order": "Order",
    "quotation": "Quotation",
}


class FieldSchemaError(ValueError):
    """Rejected schema edit (blank label, duplicate name, ...)."""


class UnknownEntityError(LookupError):
    pass


class UnknownFieldError(LookupError):
    pass


def entity_key(entity_type: str) -> str:
    """'Lead', 'lead' and 'leads' all resolve to 'lead'."""
    key = entity_type.strip().lower()
    if key not in ENTITY_TYPES and key.endswith("s"):
        key = key[:-1]
    if key not in ENTITY_TYPES:
        raise UnknownEntityError(f"Unknown entity type: {entity_type}")
    return key


def setting_type_for(entity_type: str) -> str:
    return f"{entity_key(entity_type)}.customFields"


def generate_field_name(label: str) -> str:
    """'Preferred Contact Time!' -> 'preferred_contact_time'."""
    cleaned = re.sub(r"[^a-z0-9 ]", "", label.lower())
    return re.sub(r"\s+", "_", cleaned.strip())


def _build_definition(field_id: str, data: FieldDefinitionIn) -> FieldDefinition:
    name = generate_field_name(data.name if data.name and data.name.strip() else data.label)
    options = normalize_options(data.options) if data.type in CHOICE_KINDS else []
    return FieldDefinition(
        id=field_id,
        label=data.label.strip(),
        name=name,
        type=data.type.value,
        options=options,
        required=data.required,
        placeholder=data.placeholder,
        rows=data.rows,
        min=data.min,
        max=data.max,
    )


class FormSchemaStore:
    def __init__(self, ttl_seconds: Optional[float] = None):
        self.ttl_seconds = settings.SCHEMA_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._cache: Dict[str, Tuple[float, List[FieldDefinition]]] = {}

    def invalidate(self, entity_type: Optional[str] = None) -> None:
        if entity_type is None:
            self._cache.clear()
        else:
            self._cache.pop(entity_key(entity_type), None)

    async def get_fields(self, entity_type: str, refresh: bool = False) -> List[FieldDefinition]:
        key = entity_key(entity_type)
        cached = self._cache.get(key)
        if cached and not refresh and time.monotonic() - cached[0] < self.ttl_seconds:
            return list(cached[1])

        raw_fields = await settings_service.get_values(setting_type_for(key))
        fields = []
        for raw in raw_fields:
            try:
                fields.append(FieldDefinition.model_validate(raw))
            except ValueError as e:
                logger.warning(f"Skipping malformed {key} field definition {raw!r}: {e}")
        self._cache[key] = (time.monotonic(), fields)
        return list(fields)

    async def _persist(self, key: str, fields: List[FieldDefinition]) -> None:
        self._cache.pop(key, None)
        await settings_service.save_values(
            setting_type_for(key),
            [field.model_dump(by_alias=True, exclude_none=True) for field in fields],
        )

    async def add_field(self, entity_type: str, data: FieldDefinitionIn) -> FieldDefinition:
        key = entity_key(entity_type)
        if not data.label.strip():
            raise FieldSchemaError("Enter field label")

        fields = await self.get_fields(key, refresh=True)
        field = _build_definition(uuid.uuid4().hex, data)
        if not field.name:
            raise FieldSchemaError("Field label must contain letters or digits")
        if any(existing.name and existing.name.lower() == field.name.lower() for existing in fields):
            raise FieldSchemaError(f"Duplicate field name: {field.name}")

        fields.append(field)
        await self._persist(key, fields)
        logger.info(f"Added {ENTITY_TYPES[key]} custom field '{field.label}' ({field.type})")
        return field

    async def update_field(self, entity_type: str, field_id: str, data: FieldDefinitionIn) -> FieldDefinition:
        key = entity_key(entity_type)
        if not data.label.strip():
            raise FieldSchemaError("Enter field label")

        fields = await self.get_fields(key, refresh=True)
        index = next((i for i, field in enumerate(fields) if field.id == field_id), None)
        if index is None:
            raise UnknownFieldError(f"Field {field_id} not found")

        updated = _build_definition(field_id, data)
        if any(
            i != index and field.name and field.name.lower() == updated.name.lower()
            for i, field in enumerate(fields)
        ):
            raise FieldSchemaError(f"Duplicate field name: {updated.name}")

        fields[index] = updated
        await self._persist(key, fields)
        logger.info(f"Updated {ENTITY_TYPES[key]} custom field {field_id}")
        return updated

    async def remove_field(self, entity_type: str, field_id: str) -> List[FieldDefinition]:
        key = entity_key(entity_type)
        fields = await self.get_fields(key, refresh=True)
        remaining = [field for field in fields if field.id != field_id]
        if len(remaining) == len(fields):
            raise UnknownFieldError(f"Field {field_id} not found")
        await self._persist(key, remaining)
        logger.info(f"Removed {ENTITY_TYPES[key]} custom field {field_id}")
        return remaining


form_schema_store = FormSchemaStore()
