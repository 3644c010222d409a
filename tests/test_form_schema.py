"""Custom field schema store."""
import pytest

from models.custom_field import FieldDefinitionIn, normalize_options
from services import settings_service
from services.form_schema_service import (
    FieldSchemaError,
    FormSchemaStore,
    UnknownEntityError,
    UnknownFieldError,
    entity_key,
    generate_field_name,
)


@pytest.fixture
def store(mongo_db):
    return FormSchemaStore(ttl_seconds=60)


def test_normalize_options_from_comma_string():
    assert normalize_options("A, B ,,C") == ["A", "B", "C"]
    assert normalize_options(["A", " ", "B"]) == ["A", "B"]
    assert normalize_options(None) == []


def test_generate_field_name():
    assert generate_field_name("Preferred Contact Time!") == "preferred_contact_time"
    assert generate_field_name("  GST  No. ") == "gst_no"


def test_entity_key_is_case_insensitive():
    assert entity_key("Lead") == "lead"
    assert entity_key("quotations") == "quotation"
    with pytest.raises(UnknownEntityError):
        entity_key("invoice")


async def test_add_field_derives_name_and_persists(store):
    field = await store.add_field("Lead", FieldDefinitionIn(label="Budget Range", type="dropdown", options="Low, Mid ,,High"))

    assert field.name == "budget_range"
    assert field.options == ["Low", "Mid", "High"]
    stored = await settings_service.get_values("lead.customFields")
    assert stored[0]["label"] == "Budget Range"
    assert stored[0]["id"] == field.id


async def test_options_are_dropped_for_non_choice_fields(store):
    field = await store.add_field("lead", FieldDefinitionIn(label="Notes", type="textarea", options="a,b"))
    assert field.options == []


async def test_blank_label_is_rejected(store):
    with pytest.raises(FieldSchemaError):
        await store.add_field("lead", FieldDefinitionIn(label="   "))


async def test_duplicate_name_is_rejected_case_insensitively(store):
    await store.add_field("lead", FieldDefinitionIn(label="GST Number"))
    with pytest.raises(FieldSchemaError):
        await store.add_field("lead", FieldDefinitionIn(label="gst number"))
    # Same name on another entity is fine
    await store.add_field("customer", FieldDefinitionIn(label="GST Number"))


async def test_update_field_replaces_definition(store):
    field = await store.add_field("order", FieldDefinitionIn(label="Channel"))
    updated = await store.update_field("order", field.id, FieldDefinitionIn(label="Channel", type="dropdown", options="A, B ,,C"))

    assert updated.id == field.id
    assert updated.options == ["A", "B", "C"]
    assert [f.type for f in await store.get_fields("order")] == ["dropdown"]


async def test_update_unknown_field(store):
    with pytest.raises(UnknownFieldError):
        await store.update_field("order", "missing", FieldDefinitionIn(label="X"))


async def test_remove_field_keeps_the_others(store):
    first = await store.add_field("lead", FieldDefinitionIn(label="First"))
    second = await store.add_field("lead", FieldDefinitionIn(label="Second"))
    third = await store.add_field("lead", FieldDefinitionIn(label="Third"))

    remaining = await store.remove_field("lead", second.id)

    assert [f.id for f in remaining] == [first.id, third.id]
    assert [f.id for f in await store.get_fields("lead", refresh=True)] == [first.id, third.id]


async def test_cached_copy_is_refreshed_after_external_write(store):
    await store.add_field("lead", FieldDefinitionIn(label="Budget"))
    assert len(await store.get_fields("lead")) == 1

    await settings_service.save_values("lead.customFields", [])
    assert len(await store.get_fields("lead")) == 1  # still cached
    store.invalidate("lead")
    assert await store.get_fields("lead") == []


async def test_malformed_stored_definition_is_skipped(store):
    await settings_service.save_values("lead.customFields", [{"label": "Ok"}, "not-a-field"])
    fields = await store.get_fields("lead")
    assert [f.label for f in fields] == ["Ok"]
