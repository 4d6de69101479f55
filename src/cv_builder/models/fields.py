"""Field schema and transient field buffer used by slot editors."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)

__all__ = [
    "FieldBuffer",
    "FieldEntry",
    "FieldKind",
    "FieldSpec",
    "InvalidSchemaError",
    "validate_schema",
]


class InvalidSchemaError(ValueError):
    """Raised when a slot schema has duplicate labels or malformed select fields."""


class FieldKind(StrEnum):
    """Input affordance used to render a field."""

    TEXT = "text"
    EMAIL = "email"
    DATE = "date"
    SINGLE_SELECT = "single-select"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Shape of one field of a record.

    Attributes:
        label: Field name, unique within a schema. Also the record key.
        kind: Input affordance.
        options: Choices for single-select fields, in display order.
        placeholder: Hint shown while the field is empty.
    """

    label: str
    kind: FieldKind = FieldKind.TEXT
    options: tuple[str, ...] = ()
    placeholder: str = ""


@dataclass(slots=True)
class FieldEntry:
    """A field spec paired with the value currently being composed."""

    spec: FieldSpec
    value: str = ""


def validate_schema(schema: Sequence[FieldSpec]) -> tuple[FieldSpec, ...]:
    """Check label uniqueness and select options, returning the schema as a tuple.

    Raises:
        InvalidSchemaError: If a label repeats, a select field has no options,
            or a non-select field declares options.
    """
    seen: set[str] = set()
    for spec in schema:
        if spec.label in seen:
            msg = f"Duplicate field label {spec.label!r}"
            raise InvalidSchemaError(msg)
        seen.add(spec.label)

        if spec.kind is FieldKind.SINGLE_SELECT and not spec.options:
            msg = f"Select field {spec.label!r} needs at least one option"
            raise InvalidSchemaError(msg)
        if spec.kind is not FieldKind.SINGLE_SELECT and spec.options:
            msg = f"Only select fields take options (got {spec.label!r})"
            raise InvalidSchemaError(msg)
    return tuple(schema)


class FieldBuffer:
    """Editor-local staging area for one record's values.

    Always holds exactly one entry per schema field, in schema order.
    """

    def __init__(self, schema: Sequence[FieldSpec]) -> None:
        self._schema = validate_schema(schema)
        self._entries: list[FieldEntry] = [FieldEntry(spec) for spec in self._schema]

    @property
    def schema(self) -> tuple[FieldSpec, ...]:
        return self._schema

    @property
    def values(self) -> list[str]:
        return [entry.value for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FieldEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> FieldEntry:
        return self._entries[index]

    def reset(self) -> None:
        """Clear every value back to the empty string."""
        self._entries = [FieldEntry(spec) for spec in self._schema]

    def populate(self, record: Mapping[str, str]) -> None:
        """Fill each entry from the matching label of *record* (missing → "")."""
        self._entries = [FieldEntry(spec, record.get(spec.label) or "") for spec in self._schema]

    def set_value(self, index: int, value: str) -> bool:
        """Replace the value at *index*.

        Returns:
            False (and changes nothing) when *index* is out of range.
        """
        if not 0 <= index < len(self._entries):
            logger.debug("Ignoring edit of field %d (buffer has %d)", index, len(self._entries))
            return False
        self._entries[index] = FieldEntry(self._entries[index].spec, value or "")
        return True

    def materialize(self) -> dict[str, str]:
        """Return one ``label -> value`` pair per schema field."""
        return {entry.spec.label: entry.value or "" for entry in self._entries}
