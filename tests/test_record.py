from __future__ import annotations

import pytest

from cv_builder.models.record import Record


def test_missing_label_reads_as_empty() -> None:
    record = Record.from_values({"Name": "Ada"})
    assert record.get("Name") == "Ada"
    assert record.get("Email") == ""


def test_from_values_assigns_distinct_ids() -> None:
    first = Record.from_values({"Skill": "Go"})
    second = Record.from_values({"Skill": "Go"})
    assert first.record_id != second.record_id
    assert first.as_dict() == second.as_dict()


def test_replace_values_keeps_identifier() -> None:
    original = Record.from_values({"Degree": "MS"})
    updated = original.replace_values({"Degree": "PhD"})
    assert updated.record_id == original.record_id
    assert updated["Degree"] == "PhD"
    assert original["Degree"] == "MS"


def test_none_values_are_stored_as_empty_strings() -> None:
    record = Record.from_values({"Level": None})  # type: ignore[dict-item]
    assert record.as_dict() == {"Level": ""}


def test_is_blank() -> None:
    assert Record().is_blank()
    assert Record.from_values({"Name": "", "Email": ""}).is_blank()
    assert not Record.from_values({"Name": "Ada"}).is_blank()


def test_behaves_as_mapping() -> None:
    record = Record.from_values({"A": "1", "B": "2"})
    assert list(record) == ["A", "B"]
    assert len(record) == 2
    assert dict(record) == {"A": "1", "B": "2"}


def test_values_is_the_mapping_view() -> None:
    record = Record.from_values({"Skill": "Go", "Level": "Expert"})
    assert list(record.values()) == ["Go", "Expert"]
    assert list(record.items()) == [("Skill", "Go"), ("Level", "Expert")]


def test_subscript_of_unset_label_raises_key_error() -> None:
    record = Record.from_values({"Skill": "Go"})
    with pytest.raises(KeyError):
        record["Level"]
    assert "Level" not in record
    assert record.get("Level") == ""


def test_equality_compares_content() -> None:
    values = {"Skill": "Go", "Level": "Expert"}
    record = Record.from_values(values)
    assert record == values
    assert record == Record.from_values(values)
    assert record != {"Skill": "Go"}
    assert record == record.replace_values(values)


def test_hash_follows_content() -> None:
    first = Record.from_values({"Skill": "Go"})
    second = Record.from_values({"Skill": "Go"})
    assert hash(first) == hash(second)
    assert len({first, second, Record.from_values({"Skill": "Rust"})}) == 2
