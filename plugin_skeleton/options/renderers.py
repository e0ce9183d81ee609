from __future__ import annotations

from markupsafe import Markup

from plugin_skeleton.options.sanitizers import sanitize_key
from plugin_skeleton.options.schema import FieldDescriptor, OptionValue

_NBSP = Markup("&nbsp;")


def _required(field: FieldDescriptor) -> Markup:
    return Markup(" required") if field.required else Markup("")


def _as_text(value: OptionValue | None) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


def render_text(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    return Markup('<input type="text" id="{id}" name="{name}" value="{value}"{required} />').format(
        id=field.name,
        name=field.name,
        value=_as_text(value),
        required=_required(field),
    )


def render_email(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    return Markup('<input type="email" id="{id}" name="{name}" value="{value}"{required} />').format(
        id=field.name,
        name=field.name,
        value=_as_text(value),
        required=_required(field),
    )


def render_textarea(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    return Markup('<textarea id="{id}" name="{name}" rows="5" cols="50"{required}>{value}</textarea>').format(
        id=field.name,
        name=field.name,
        value=_as_text(value),
        required=_required(field),
    )


def render_checkbox(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    checked = Markup(" checked") if value is True else Markup("")
    html = Markup('<input type="checkbox" id="{id}" name="{name}" value="1"{checked}{required} />').format(
        id=field.name,
        name=field.name,
        checked=checked,
        required=_required(field),
    )
    if field.description:
        html += _NBSP + Markup('<label for="{id}">{text}</label>').format(id=field.name, text=field.description)
    return html


def render_radio(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    current = _as_text(value)
    parts = []
    for choice in field.choices:
        input_id = f"{field.name}_{sanitize_key(choice.value)}"
        checked = Markup(" checked") if choice.value == current else Markup("")
        parts.append(
            Markup('<input type="radio" id="{id}" name="{name}" value="{value}"{checked} />').format(
                id=input_id, name=field.name, value=choice.value, checked=checked
            )
            + _NBSP
            + Markup('<label for="{id}">{label}</label>').format(id=input_id, label=choice.label)
        )
    return _NBSP.join(parts)


def render_select(field: FieldDescriptor, value: OptionValue | None) -> Markup:
    current = _as_text(value)
    options = Markup("").join(
        Markup('<option value="{value}"{selected}>{label}</option>').format(
            value=choice.value,
            label=choice.label,
            selected=Markup(" selected") if choice.value == current else Markup(""),
        )
        for choice in field.choices
    )
    return Markup('<select id="{id}" name="{name}"{required}>{options}</select>').format(
        id=field.name,
        name=field.name,
        required=_required(field),
        options=options,
    )
