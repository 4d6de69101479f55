"""Pydantic schema for the JSON export of the resume."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from cv_builder.store import ResumeStore


class RecordSnapshot(BaseModel):
    """One stored record: its identifier and field values."""

    id: str = Field(description="Identifier assigned when the record was created")
    fields: dict[str, str] = Field(default_factory=dict, description="Label to value")


class ResumeSnapshot(BaseModel):
    """Every slot of the resume at a single point in time."""

    exported_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    personal_info: dict[str, str] = Field(default_factory=dict)
    education: list[RecordSnapshot] = Field(default_factory=list)
    skills: list[RecordSnapshot] = Field(default_factory=list)
    projects: list[RecordSnapshot] = Field(default_factory=list)
    experience: list[RecordSnapshot] = Field(default_factory=list)

    @classmethod
    def from_store(cls, store: ResumeStore) -> ResumeSnapshot:
        def rows(records: list) -> list[RecordSnapshot]:
            return [RecordSnapshot(id=r.record_id, fields=r.as_dict()) for r in records]

        return cls(
            personal_info=store.personal_info.as_dict(),
            education=rows(store.education),
            skills=rows(store.skills),
            projects=rows(store.projects),
            experience=rows(store.experience),
        )
