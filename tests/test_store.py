"""Tests for the aggregate resume store."""

from __future__ import annotations

import pytest

from cv_builder.constants.sections import SlotName
from cv_builder.models.record import Record
from cv_builder.store import ResumeStore


def test_starts_empty(store: ResumeStore) -> None:
    assert store.personal_info.is_blank()
    for slot in (SlotName.EDUCATION, SlotName.SKILLS, SlotName.PROJECTS, SlotName.EXPERIENCE):
        assert store.get(slot) == []


def test_get_returns_a_copy(store: ResumeStore) -> None:
    store.set(SlotName.SKILLS, [Record.from_values({"Skill": "Go"})])
    items = store.get(SlotName.SKILLS)
    items.clear()
    assert len(store.skills) == 1


def test_set_accepts_slot_key_strings(store: ResumeStore) -> None:
    record = Record.from_values({"Skill": "Rust"})
    store.set("skills", [record])
    assert store.skills == [record]


def test_unknown_slot_rejected(store: ResumeStore) -> None:
    with pytest.raises(ValueError):
        store.get("hobbies")


def test_scalar_slot_requires_record(store: ResumeStore) -> None:
    with pytest.raises(TypeError):
        store.set(SlotName.PERSONAL_INFO, [Record()])


@pytest.mark.parametrize("value", [Record(), "text", [{"Skill": "Go"}]])
def test_list_slot_requires_records(store: ResumeStore, value: object) -> None:
    with pytest.raises(TypeError):
        store.set(SlotName.SKILLS, value)  # type: ignore[arg-type]


def test_accessor_reads_and_writes_its_slot(store: ResumeStore) -> None:
    accessor = store.accessor(SlotName.EDUCATION)
    record = Record.from_values({"College": "MIT"})
    accessor.set([record])
    assert accessor.get() == [record]
    assert store.education == [record]
    assert store.skills == []


def test_subscribers_notified_with_slot(store: ResumeStore) -> None:
    seen: list[SlotName] = []
    unsubscribe = store.subscribe(seen.append)

    store.set(SlotName.PERSONAL_INFO, Record.from_values({"Name": "Ada"}))
    unsubscribe()
    store.set(SlotName.SKILLS, [])

    assert seen == [SlotName.PERSONAL_INFO]


def test_clear_resets_every_slot_and_notifies(store: ResumeStore) -> None:
    store.set(SlotName.PERSONAL_INFO, Record.from_values({"Name": "Ada"}))
    store.set(SlotName.EDUCATION, [Record.from_values({"College": "MIT"})])
    store.set(SlotName.PROJECTS, [Record.from_values({"Project Name": "CV"})])
    seen: list[SlotName] = []
    store.subscribe(seen.append)

    store.clear()

    assert store.personal_info.is_blank()
    assert store.education == []
    assert store.projects == []
    assert set(seen) == set(SlotName)
