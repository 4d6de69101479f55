"""Field rendering: turn a :class:`FieldSpec` into a textual input widget.

Widgets are named ``field-<index>`` so the owning panel can map a change event
back to the field's position in the schema. The widgets never touch the
editor's buffer themselves.
"""

from __future__ import annotations

from textual.widgets import Input, Select

from cv_builder.models.fields import FieldKind, FieldSpec

__all__ = [
    "DATE_PLACEHOLDER",
    "field_index_from_name",
    "field_widget_name",
    "render_field",
    "select_value",
]

DATE_PLACEHOLDER = "YYYY-MM-DD"
_DATE_CHARS = r"[0-9-]*"
_FIELD_PREFIX = "field-"


def field_widget_name(index: int) -> str:
    return f"{_FIELD_PREFIX}{index}"


def field_index_from_name(name: str | None) -> int | None:
    """Recover the schema position from a widget name, or None if it is not a field."""
    if not name or not name.startswith(_FIELD_PREFIX):
        return None
    suffix = name[len(_FIELD_PREFIX) :]
    return int(suffix) if suffix.isdigit() else None


def select_value(value: object) -> str:
    """Map a ``Select`` value to a field value; no selection becomes ``""``."""
    return value if isinstance(value, str) else ""


def render_field(spec: FieldSpec, value: str, index: int) -> Input | Select[str]:
    """Build the input widget for *spec* showing *value*."""
    name = field_widget_name(index)

    if spec.kind is FieldKind.SINGLE_SELECT:
        options = [(option, option) for option in spec.options]
        prompt = f"Select {spec.label}"
        if value in spec.options:
            return Select(options, prompt=prompt, value=value, name=name)
        return Select(options, prompt=prompt, name=name)

    if spec.kind is FieldKind.DATE:
        return Input(
            value=value,
            placeholder=spec.placeholder or DATE_PLACEHOLDER,
            restrict=_DATE_CHARS,
            name=name,
        )

    return Input(value=value, placeholder=spec.placeholder, name=name)
