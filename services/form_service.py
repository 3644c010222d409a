import logging
from typing import Any, Dict, List, Optional

from markupsafe import Markup

from models.custom_field import FieldDefinition
from services import settings_service
from services.field_renderer import env, render_fields
from services.form_schema_service import ENTITY_TYPES, entity_key, form_schema_store

logger = logging.getLogger(__name__)

# Where each add-form posts to
FORM_ACTIONS = {
    "lead": "/api/leads",
    "customer": "/api/customers",
    "quotation": "/api/quotations",
    "order": "/api/orders",
}


def _fixed(name: str, label: str, type_: str = "text", required: bool = False, **extra) -> FieldDefinition:
    return FieldDefinition(id=name, name=name, label=label, type=type_, required=required, **extra)


def _contact_fields(name_field: str, name_label: str, all_required: bool) -> List[FieldDefinition]:
    return [
        _fixed(name_field, name_label, required=True),
        _fixed("email", "Email", "email", required=all_required),
        _fixed("phone", "Phone", "tel", required=all_required),
        _fixed("address", "Address", "textarea", required=all_required, rows=3),
        _fixed("state", "State", required=all_required),
    ]


async def fixed_fields(entity_type: str) -> List[FieldDefinition]:
    """Built-in inputs of each add-form, before any custom fields."""
    key = entity_key(entity_type)
    if key == "lead":
        sources = await settings_service.get_values("lead_sources")
        return _contact_fields("name", "Name", all_required=True) + [
            _fixed("source", "Source", "dropdown", options=[s for s in sources if isinstance(s, str)]),
        ]
    if key == "customer":
        return _contact_fields("name", "Name", all_required=False)
    if key == "quotation":
        return _contact_fields("customerName", "Customer Name", all_required=False)
    return _contact_fields("name", "Customer Name", all_required=False)


_FORM_TEMPLATE = env.from_string(
    '<form class="add-form" data-entity="{{ entity }}" method="post" action="{{ action }}">'
    '<h2>Add {{ title }}</h2>'
    '{{ fixed }}'
    '{% if custom %}<fieldset class="custom-fields"><legend>Additional Information</legend>{{ custom }}</fieldset>{% endif %}'
    '<button type="submit" class="submit-button">Save {{ title }}</button>'
    '</form>'
)


async def render_entity_form(
    entity_type: str,
    values: Optional[Dict[str, Any]] = None,
    on_change: Optional[str] = None,
) -> Markup:
    """Fixed fields followed by the entity's configured custom fields."""
    key = entity_key(entity_type)
    values = values or {}
    custom_values = values.get("customFields") or values
    custom_fields = await form_schema_store.get_fields(key)
    logger.debug(f"Rendering {key} form with {len(custom_fields)} custom fields")
    return Markup(_FORM_TEMPLATE.render(
        entity=key,
        title=ENTITY_TYPES[key],
        action=FORM_ACTIONS[key],
        fixed=render_fields(await fixed_fields(key), values, on_change),
        custom=render_fields(custom_fields, custom_values, on_change),
    ))
