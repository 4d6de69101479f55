"""Slot editors: the add/edit/delete controllers behind each resume section.

An editor owns only transient state (whether it is open, what it is composing
and the :class:`FieldBuffer` being typed into). The slot data itself lives in
the :class:`~cv_builder.store.ResumeStore`; the editor reads it through an
injected getter and writes it back through an injected setter, always with a
complete replacement value.

Two variants share one interface:

* :class:`LiveSlotEditor` for the scalar personal-info slot. Every field edit
  is pushed to the store immediately; there is no list view and no save step.
* :class:`BufferedSlotEditor` for list slots. Edits are staged in the buffer
  and only reach the store on :meth:`~BufferedSlotEditor.commit` or
  :meth:`~BufferedSlotEditor.delete_item`.

List items are tracked by ``record_id`` rather than position, so deleting an
item while another one is being edited cannot redirect the pending update to
a different record.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Generic, TypeVar

from cv_builder.constants.sections import SUMMARY_LABELS, SUMMARY_SEPARATOR, SectionSpec
from cv_builder.models.fields import FieldBuffer, FieldSpec
from cv_builder.models.record import Record
from cv_builder.store import ResumeStore

logger = logging.getLogger(__name__)

__all__ = [
    "NEW",
    "BufferedSlotEditor",
    "ComposeTarget",
    "EditorMode",
    "LiveSlotEditor",
    "SlotEditor",
    "create_editor",
    "preview_label",
]

T = TypeVar("T")


class EditorMode(Enum):
    """States of the edit-session state machine."""

    CLOSED = "closed"
    LIST = "list"
    COMPOSE = "compose"


class ComposeTarget(Enum):
    """Sentinel target meaning "compose a brand new item"."""

    NEW = "new"


NEW = ComposeTarget.NEW


def preview_label(
    record: Mapping[str, str],
    schema: Sequence[FieldSpec],
    summary_labels: frozenset[str] = SUMMARY_LABELS,
    separator: str = SUMMARY_SEPARATOR,
) -> str:
    """Summarise *record* on one line.

    Picks, in schema order, the non-empty values whose label is in
    *summary_labels* and joins them with *separator*.
    """
    values = [
        record.get(spec.label) or ""
        for spec in schema
        if spec.label in summary_labels
    ]
    return separator.join(value for value in values if value)


class SlotEditor(ABC, Generic[T]):
    """Common state machine shared by live and buffered editors.

    Args:
        title: Section title shown on the editor header.
        schema: Ordered field specs describing one record.
        read: Returns the slot's current value from the store.
        write: Replaces the slot's value in the store.
    """

    def __init__(
        self,
        title: str,
        schema: Sequence[FieldSpec],
        read: Callable[[], T],
        write: Callable[[T], None],
    ) -> None:
        self.title = title
        self._read = read
        self._write = write
        self._buffer = FieldBuffer(schema)
        self._mode = EditorMode.CLOSED
        self._edit_target: str | ComposeTarget | None = None

    @property
    def schema(self) -> tuple[FieldSpec, ...]:
        return self._buffer.schema

    @property
    def buffer(self) -> FieldBuffer:
        return self._buffer

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._mode is not EditorMode.CLOSED

    @property
    def is_composing(self) -> bool:
        return self._mode is EditorMode.COMPOSE

    @property
    def edit_target(self) -> str | ComposeTarget | None:
        """Record id being edited, :data:`NEW`, or None when not composing."""
        return self._edit_target

    @property
    @abstractmethod
    def is_live(self) -> bool:
        """Whether field edits reach the store without an explicit commit."""

    def toggle(self) -> EditorMode:
        """Open a closed editor, or close an open one discarding unsaved input."""
        if self.is_open:
            self._buffer.reset()
            self._mode = EditorMode.CLOSED
            self._edit_target = None
            logger.debug("%s editor closed", self.title)
        else:
            self._open()
            logger.debug("%s editor opened in %s mode", self.title, self._mode.value)
        return self._mode

    def close(self) -> None:
        if self.is_open:
            self.toggle()

    def edit_field(self, field_index: int, value: str) -> bool:
        """Stage *value* for the field at *field_index*.

        Returns:
            False when the edit was ignored (wrong state or bad index).
        """
        if not self._accepts_edits():
            logger.debug("%s editor ignored edit while %s", self.title, self._mode.value)
            return False
        if not self._buffer.set_value(field_index, value):
            return False
        self._after_edit()
        return True

    @abstractmethod
    def commit(self) -> bool:
        """Push the buffer into the store; returns whether anything was written."""

    @abstractmethod
    def _open(self) -> None: ...

    @abstractmethod
    def _accepts_edits(self) -> bool: ...

    def _after_edit(self) -> None:
        return None


class LiveSlotEditor(SlotEditor[Record]):
    """Editor for a scalar slot: every keystroke is written through."""

    @property
    def is_live(self) -> bool:
        return True

    def commit(self) -> bool:
        current = self._read()
        values = self._buffer.materialize()
        if isinstance(current, Record):
            self._write(current.replace_values(values))
        else:
            self._write(Record.from_values(values))
        return True

    def _open(self) -> None:
        # Start from what the store holds so the first keystroke cannot blank
        # the other fields.
        current = self._read()
        if isinstance(current, Mapping):
            self._buffer.populate(current)
        else:
            self._buffer.reset()
        self._mode = EditorMode.COMPOSE

    def _accepts_edits(self) -> bool:
        return True

    def _after_edit(self) -> None:
        self.commit()


class BufferedSlotEditor(SlotEditor[list[Record]]):
    """Editor for a list slot: compose in the buffer, then commit or discard."""

    @property
    def is_live(self) -> bool:
        return False

    @property
    def items(self) -> list[Record]:
        """The slot's current collection, read fresh from the store."""
        return list(self._read())

    @property
    def editing_existing(self) -> bool:
        return isinstance(self._edit_target, str)

    def preview_labels(self) -> list[str]:
        """One-line summary of every current item, in list order."""
        return [preview_label(item, self.schema) for item in self.items]

    def locate(self, record_id: str) -> int | None:
        """Return the current index of *record_id*, or None if it is gone."""
        for index, item in enumerate(self.items):
            if item.record_id == record_id:
                return index
        return None

    def start_compose(self, target: int | ComposeTarget) -> bool:
        """Begin composing a new item (:data:`NEW`) or editing the item at an index.

        Only valid from the list view.

        Returns:
            False if the editor is not showing its list or the index is out of range.
        """
        if self._mode is not EditorMode.LIST:
            logger.debug("%s editor cannot compose while %s", self.title, self._mode.value)
            return False

        if target is NEW:
            self._buffer.reset()
            self._edit_target = NEW
        else:
            items = self.items
            if not isinstance(target, int) or not 0 <= target < len(items):
                logger.debug("%s editor ignored compose for index %r", self.title, target)
                return False
            record = items[target]
            self._buffer.populate(record)
            self._edit_target = record.record_id

        self._mode = EditorMode.COMPOSE
        return True

    def cancel_compose(self) -> bool:
        """Return to the list view, discarding the buffer without writing."""
        if self._mode is not EditorMode.COMPOSE:
            return False
        self._back_to_list()
        return True

    def commit(self) -> bool:
        """Append or replace the composed item and write the whole list.

        If the item being edited was deleted in the meantime the composition is
        dropped: nothing is written and the editor returns to its list.
        """
        if self._mode is not EditorMode.COMPOSE:
            logger.debug("%s editor has nothing to commit", self.title)
            return False

        values = self._buffer.materialize()
        items = self.items

        if self._edit_target is NEW:
            updated = [*items, Record.from_values(values)]
        else:
            index = self.locate(str(self._edit_target))
            if index is None:
                logger.warning(
                    "%s item %s disappeared while being edited; discarding changes",
                    self.title,
                    self._edit_target,
                )
                self._back_to_list()
                return False
            updated = list(items)
            updated[index] = items[index].replace_values(values)

        self._write(updated)
        self._back_to_list()
        return True

    def delete_item(self, index: int) -> bool:
        """Remove the item at *index* from the store's current list.

        Leaves the editor's own mode untouched.
        """
        if not self.is_open:
            return False

        items = self.items
        if not 0 <= index < len(items):
            logger.debug("%s editor ignored delete of index %d", self.title, index)
            return False

        removed = items[index]
        self._write(items[:index] + items[index + 1 :])
        if removed.record_id == self._edit_target:
            logger.info("%s item being edited was deleted", self.title)
        return True

    def _open(self) -> None:
        self._mode = EditorMode.LIST

    def _accepts_edits(self) -> bool:
        return self._mode is EditorMode.COMPOSE

    def _back_to_list(self) -> None:
        self._buffer.reset()
        self._edit_target = None
        self._mode = EditorMode.LIST


def create_editor(section: SectionSpec, store: ResumeStore) -> SlotEditor:
    """Build the editor for *section*, wired to its slot in *store*."""
    accessor = store.accessor(section.slot)
    editor_cls = LiveSlotEditor if section.live else BufferedSlotEditor
    return editor_cls(section.title, section.schema, accessor.get, accessor.set)
