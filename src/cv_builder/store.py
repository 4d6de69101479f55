"""Aggregate store holding the five resume slots.

The store is the single source of truth for resume data. Editors never own
slot data: each one receives a :class:`SlotAccessor` for its own slot and
writes through it with a complete replacement value. Subscribers are told
which slot changed after every write so views can re-render.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import NamedTuple

from cv_builder.constants.sections import LIST_SLOTS, SlotName
from cv_builder.models.record import Record

logger = logging.getLogger(__name__)

__all__ = ["ResumeStore", "SlotAccessor", "SlotValue"]

SlotValue = Record | list[Record]
Listener = Callable[[SlotName], None]


class SlotAccessor(NamedTuple):
    """Read/write pair handed to the editor of a single slot."""

    get: Callable[[], SlotValue]
    set: Callable[[SlotValue], None]


class ResumeStore:
    """Owns personal info plus the education, skills, projects and experience lists."""

    def __init__(self) -> None:
        self._personal_info: Record = Record()
        self._lists: dict[SlotName, list[Record]] = {slot: [] for slot in LIST_SLOTS}
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------

    @property
    def personal_info(self) -> Record:
        return self._personal_info

    @property
    def education(self) -> list[Record]:
        return list(self._lists[SlotName.EDUCATION])

    @property
    def skills(self) -> list[Record]:
        return list(self._lists[SlotName.SKILLS])

    @property
    def projects(self) -> list[Record]:
        return list(self._lists[SlotName.PROJECTS])

    @property
    def experience(self) -> list[Record]:
        return list(self._lists[SlotName.EXPERIENCE])

    def get(self, slot: SlotName | str) -> SlotValue:
        """Return the current value of *slot*.

        Lists are returned as fresh copies so callers cannot mutate the store.
        """
        key = SlotName(slot)
        if key is SlotName.PERSONAL_INFO:
            return self._personal_info
        return list(self._lists[key])

    # ------------------------------------------------------------------
    # writes
    # ------------------------------------------------------------------

    def set(self, slot: SlotName | str, value: SlotValue) -> None:
        """Replace the whole value of *slot*.

        Raises:
            TypeError: If a list is given for the scalar slot, or a non-list
                (or a list containing non-records) for a list slot.
        """
        key = SlotName(slot)
        if key is SlotName.PERSONAL_INFO:
            if not isinstance(value, Record):
                msg = f"{key} expects a Record, got {type(value).__name__}"
                raise TypeError(msg)
            self._personal_info = value
        else:
            self._lists[key] = self._checked_list(key, value)

        logger.debug("Slot %s replaced", key)
        self._notify(key)

    def accessor(self, slot: SlotName | str) -> SlotAccessor:
        """Return the read/write pair bound to *slot*."""
        key = SlotName(slot)
        return SlotAccessor(
            get=lambda: self.get(key),
            set=lambda value: self.set(key, value),
        )

    def clear(self) -> None:
        """Reset every slot: personal info to an empty record, lists to empty."""
        self._personal_info = Record()
        for slot in LIST_SLOTS:
            self._lists[slot] = []
        logger.info("Resume cleared")

        self._notify(SlotName.PERSONAL_INFO)
        for slot in LIST_SLOTS:
            self._notify(slot)

    # ------------------------------------------------------------------
    # change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, slot: SlotName) -> None:
        for listener in list(self._listeners):
            listener(slot)

    @staticmethod
    def _checked_list(slot: SlotName, value: object) -> list[Record]:
        if not isinstance(value, Iterable) or isinstance(value, (Record, str)):
            msg = f"{slot} expects a list of Records, got {type(value).__name__}"
            raise TypeError(msg)
        items = list(value)
        for item in items:
            if not isinstance(item, Record):
                msg = f"{slot} items must be Records, got {type(item).__name__}"
                raise TypeError(msg)
        return items
