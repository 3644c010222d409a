"""HTML controls produced for custom field definitions."""
from models.custom_field import FieldDefinition, FieldKind
from services.field_renderer import _CONTROLS, render_field, render_fields


def make(**kwargs):
    kwargs.setdefault("id", "f1")
    kwargs.setdefault("name", "f1")
    kwargs.setdefault("label", "Field")
    return FieldDefinition(**kwargs)


def test_every_kind_has_a_control():
    assert set(_CONTROLS) == set(FieldKind)


def test_text_input_passes_through_placeholder_and_required():
    html = str(render_field(make(type="email", placeholder="you@example.com", required=True), "a@b.co"))
    assert 'type="email"' in html
    assert 'placeholder="you@example.com"' in html
    assert " required" in html
    assert 'value="a@b.co"' in html
    assert "Field *" in html


def test_number_input_carries_bounds():
    html = str(render_field(make(type="number", min=1, max=5)))
    assert 'min="1.0"' in html
    assert 'max="5.0"' in html


def test_textarea_defaults_to_four_rows():
    assert 'rows="4"' in str(render_field(make(type="textarea"), "hello"))
    assert 'rows="8"' in str(render_field(make(type="textarea", rows=8)))


def test_dropdown_has_blank_option_then_each_option():
    html = str(render_field(make(type="dropdown", options="Low, High"), "High"))
    assert html.index('<option value="">') < html.index('value="Low"') < html.index('value="High"')
    assert '<option value="High" selected>High</option>' in html


def test_select_accepts_value_label_pairs():
    html = str(render_field(make(type="select", options=[{"value": "in", "label": "India"}, {"label": "Nepal"}])))
    assert '<option value="in">India</option>' in html
    assert '<option value="Nepal">Nepal</option>' in html


def test_checkbox_coerces_string_true():
    assert " checked" in str(render_field(make(type="checkbox"), "true"))
    assert " checked" in str(render_field(make(type="checkbox"), True))
    assert " checked" not in str(render_field(make(type="checkbox"), "false"))


def test_radio_options_share_the_field_name():
    html = str(render_field(make(type="radio", name="size", options="S,M,L"), "M"))
    assert html.count('name="size"') == 3
    assert 'value="M" checked' in html


def test_unknown_type_renders_placeholder():
    html = str(render_field(make(type="signature")))
    assert "Unsupported field type: signature" in html


def test_labels_and_values_are_escaped():
    html = str(render_field(make(label="<b>Bold</b>"), '"><script>'))
    assert "<b>" not in html
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "<script>" not in html


def test_on_change_handler_is_emitted():
    assert 'onchange="track(this)"' in str(render_field(make(), on_change="track(this)"))


def test_render_fields_looks_up_values_by_name_or_label():
    fields = [make(id="a", name="budget", label="Budget"), make(id="b", name="region", label="Region")]
    html = str(render_fields(fields, {"budget": "5000", "Region": "South"}))
    assert 'value="5000"' in html
    assert 'value="South"' in html
