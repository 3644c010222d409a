"""
Turns a custom field definition and its current value into an HTML control.

Every FieldKind maps to exactly one template; the module refuses to import if
a kind is left without one. Definitions whose type is not a FieldKind render
a visible placeholder instead of failing, so bad configuration never breaks
a whole form.
"""
from typing import Any, List, Optional, Union

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from models.custom_field import FieldDefinition, FieldKind, OptionItem

_LABEL = '<label for="{{ field_id }}">{{ field.label }}{% if field.required %} *{% endif %}</label>'

_TEMPLATES = {
    "input.html": (
        '<div class="form-group">' + _LABEL +
        '<input type="{{ input_type }}" id="{{ field_id }}" name="{{ field_name }}" value="{{ value }}"'
        '{% if field.placeholder %} placeholder="{{ field.placeholder }}"{% endif %}'
        '{% if field.required %} required{% endif %}'
        '{% if numeric and field.min is not none %} min="{{ field.min }}"{% endif %}'
        '{% if numeric and field.max is not none %} max="{{ field.max }}"{% endif %}'
        '{% if on_change %} onchange="{{ on_change }}"{% endif %}'
        ' class="form-control"></div>'
    ),
    "textarea.html": (
        '<div class="form-group">' + _LABEL +
        '<textarea id="{{ field_id }}" name="{{ field_name }}" rows="{{ field.rows or 4 }}"'
        '{% if field.placeholder %} placeholder="{{ field.placeholder }}"{% endif %}'
        '{% if field.required %} required{% endif %}'
        '{% if on_change %} onchange="{{ on_change }}"{% endif %}'
        ' class="form-control">{{ value }}</textarea></div>'
    ),
    "select.html": (
        '<div class="form-group">' + _LABEL +
        '<select id="{{ field_id }}" name="{{ field_name }}"'
        '{% if field.required %} required{% endif %}'
        '{% if on_change %} onchange="{{ on_change }}"{% endif %}'
        ' class="form-control">'
        '<option value="">{{ field.placeholder or "-- Select --" }}</option>'
        '{% for option in options %}'
        '<option value="{{ option.value }}"{% if option.value == value %} selected{% endif %}>{{ option.label }}</option>'
        '{% endfor %}</select></div>'
    ),
    "radio.html": (
        '<div class="form-group"><label>{{ field.label }}{% if field.required %} *{% endif %}</label>'
        '<div class="radio-group">{% for option in options %}'
        '<label class="radio-label"><input type="radio" name="{{ field_name }}" value="{{ option.value }}"'
        '{% if option.value == value %} checked{% endif %}'
        '{% if field.required %} required{% endif %}'
        '{% if on_change %} onchange="{{ on_change }}"{% endif %}>'
        '{{ option.label }}</label>'
        '{% endfor %}</div></div>'
    ),
    "checkbox.html": (
        '<div class="form-group"><label class="checkbox-label">'
        '<input type="checkbox" id="{{ field_id }}" name="{{ field_name }}" value="true"'
        '{% if checked %} checked{% endif %}'
        '{% if field.required %} required{% endif %}'
        '{% if on_change %} onchange="{{ on_change }}"{% endif %}>'
        '{{ field.label }}{% if field.required %} *{% endif %}</label></div>'
    ),
    "unsupported.html": (
        '<div class="form-group"><label>Unsupported field type: {{ field.type }}</label></div>'
    ),
}

env = Environment(loader=DictLoader(_TEMPLATES), autoescape=select_autoescape(default=True))

# kind -> (template, native input type)
_CONTROLS = {
    FieldKind.TEXT: ("input.html", "text"),
    FieldKind.EMAIL: ("input.html", "email"),
    FieldKind.TEL: ("input.html", "tel"),
    FieldKind.PHONE: ("input.html", "tel"),
    FieldKind.URL: ("input.html", "url"),
    FieldKind.NUMBER: ("input.html", "number"),
    FieldKind.CURRENCY: ("input.html", "number"),
    FieldKind.DATE: ("input.html", "date"),
    FieldKind.TEXTAREA: ("textarea.html", None),
    FieldKind.DROPDOWN: ("select.html", None),
    FieldKind.SELECT: ("select.html", None),
    FieldKind.RADIO: ("radio.html", None),
    FieldKind.CHECKBOX: ("checkbox.html", None),
}

_missing = set(FieldKind) - set(_CONTROLS)
if _missing:
    raise RuntimeError(f"No control registered for field kinds: {sorted(k.value for k in _missing)}")


def option_pairs(options: List[Union[str, OptionItem]]) -> List[OptionItem]:
    """Plain strings become pairs whose value and label are the same text."""
    return [
        option if isinstance(option, OptionItem) else OptionItem(value=str(option), label=str(option))
        for option in options
    ]


def is_checked(value: Any) -> bool:
    return value is True or value == "true"


def render_field(field: FieldDefinition, value: Any = None, on_change: Optional[str] = None) -> Markup:
    """
    Renders one control. `on_change`, when given, is emitted as the control's
    onchange handler so the page script can track edits.
    """
    kind = field.kind
    if kind is None:
        return Markup(env.get_template("unsupported.html").render(field=field))

    template_name, input_type = _CONTROLS[kind]
    context = {
        "field": field,
        "field_id": field.id or field.name,
        "field_name": field.name or field.id,
        "value": "" if value is None else value,
        "input_type": input_type,
        "numeric": input_type == "number",
        "options": option_pairs(field.options),
        "checked": is_checked(value),
        "on_change": on_change,
    }
    if kind is not FieldKind.CHECKBOX and value is not None:
        context["value"] = str(value)
    return Markup(env.get_template(template_name).render(**context))


def render_fields(fields: List[FieldDefinition], values: Optional[dict] = None, on_change: Optional[str] = None) -> Markup:
    values = values or {}
    return Markup("").join(
        render_field(field, values.get(field.name, values.get(field.label)), on_change) for field in fields
    )
