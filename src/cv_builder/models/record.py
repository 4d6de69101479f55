"""Durable record stored in a resume slot."""

from __future__ import annotations

import uuid
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

__all__ = ["Record", "new_record_id"]


def new_record_id() -> str:
    """Generate a stable identifier for a freshly created record."""
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True, eq=False)
class Record(Mapping[str, str]):
    """Field values keyed by label, plus an identifier assigned at creation.

    Behaves as a read-only ``Mapping``: ``record[label]`` raises ``KeyError``
    for a label that was never set, while ``record.get(label)`` yields ``""``.
    Equality compares field values only, so a record equals a dict with the
    same content; ``record_id`` is identity, not content.
    """

    fields: dict[str, str] = field(default_factory=dict)
    record_id: str = field(default_factory=new_record_id)

    @classmethod
    def from_values(cls, values: Mapping[str, str]) -> Record:
        return cls(fields={str(k): str(v or "") for k, v in values.items()})

    def replace_values(self, values: Mapping[str, str]) -> Record:
        """Return a record with new values and the same identifier."""
        return Record(
            fields={str(k): str(v or "") for k, v in values.items()},
            record_id=self.record_id,
        )

    def get(self, label: str, default: str = "") -> str:  # type: ignore[override]
        return self.fields.get(label) or default

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields)

    def is_blank(self) -> bool:
        """True when no field holds a non-empty value."""
        return not any(self.fields.values())

    def __getitem__(self, label: str) -> str:
        return self.fields[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))
