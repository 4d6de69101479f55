from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import pytest
from textual.app import App
from textual.pilot import Pilot

from cv_builder.constants.sections import (
    EDUCATION_SECTION,
    PERSONAL_INFO_SECTION,
    SKILLS_SECTION,
)
from cv_builder.editor import BufferedSlotEditor, LiveSlotEditor, create_editor
from cv_builder.store import ResumeStore


@pytest.fixture
def store() -> ResumeStore:
    return ResumeStore()


@pytest.fixture
def education_editor(store: ResumeStore) -> BufferedSlotEditor:
    editor = create_editor(EDUCATION_SECTION, store)
    assert isinstance(editor, BufferedSlotEditor)
    return editor


@pytest.fixture
def skills_editor(store: ResumeStore) -> BufferedSlotEditor:
    editor = create_editor(SKILLS_SECTION, store)
    assert isinstance(editor, BufferedSlotEditor)
    return editor


@pytest.fixture
def personal_editor(store: ResumeStore) -> LiveSlotEditor:
    editor = create_editor(PERSONAL_INFO_SECTION, store)
    assert isinstance(editor, LiveSlotEditor)
    return editor



@pytest.fixture
def run_app() -> Callable[..., None]:
    """Run ``check(pilot)`` while *app* (a bare ``App`` by default) runs headless."""

    def run(check: Callable[[Pilot], Awaitable[None]], app: App | None = None) -> None:
        async def main() -> None:
            async with (app or App()).run_test() as pilot:
                await check(pilot)

        asyncio.run(main())

    return run
