"""Tests for the TUI shell and its section panels."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from textual.containers import Horizontal
from textual.widgets import Button, Input, Label

from cv_builder.config import Settings
from cv_builder.constants.sections import SlotName
from cv_builder.editor import NEW, BufferedSlotEditor, LiveSlotEditor
from cv_builder.models.record import Record
from cv_builder.store import ResumeStore
from cv_builder.tui import CVBuilderTUI, SlotPanel


def _app(store: ResumeStore | None = None, **settings) -> CVBuilderTUI:
    return CVBuilderTUI(store=store, settings=Settings(**settings))


class TestCVBuilderTUI:
    def test_one_editor_per_slot(self) -> None:
        app = _app()
        assert set(app.editors) == set(SlotName)
        assert isinstance(app.editors[SlotName.PERSONAL_INFO], LiveSlotEditor)
        for slot in (SlotName.EDUCATION, SlotName.SKILLS, SlotName.PROJECTS, SlotName.EXPERIENCE):
            assert isinstance(app.editors[slot], BufferedSlotEditor)

    def test_editors_write_to_app_store(self, store: ResumeStore) -> None:
        app = _app(store)
        app.editors[SlotName.PERSONAL_INFO].edit_field(0, "Ada")
        assert store.personal_info["Name"] == "Ada"

    def test_bindings(self) -> None:
        actions = {binding[1] for binding in CVBuilderTUI.BINDINGS}
        assert {"quit", "clear_resume", "print_resume"} <= actions


class TestSlotPanelBody:
    def _panel(self, store: ResumeStore) -> SlotPanel:
        return SlotPanel(_app(store).editors[SlotName.EDUCATION])

    def test_closed_panel_is_empty(self, store: ResumeStore, run_app) -> None:
        async def check(pilot) -> None:
            assert self._panel(store)._body_widgets() == []

        run_app(check)

    def test_list_view_rows(self, store: ResumeStore, run_app) -> None:
        store.set(
            SlotName.EDUCATION,
            [
                Record.from_values({"College": "Stanford", "Degree": "MS"}),
                Record.from_values({"College": "MIT", "Degree": "BSc"}),
            ],
        )

        async def check(pilot) -> None:
            panel = self._panel(store)
            panel.editor.toggle()

            widgets = panel._body_widgets()

            assert isinstance(widgets[0], Button)
            assert widgets[0].name == "add"
            rows = widgets[1:]
            assert len(rows) == 2
            assert all(isinstance(row, Horizontal) for row in rows)

        run_app(check)

    def test_compose_view_fields(self, store: ResumeStore, run_app) -> None:
        async def check(pilot) -> None:
            panel = self._panel(store)
            panel.editor.toggle()
            panel.editor.start_compose(NEW)
            panel.editor.edit_field(0, "Stanford")

            widgets = panel._body_widgets()

            labels = [w for w in widgets if isinstance(w, Label)]
            inputs = [w for w in widgets if isinstance(w, Input)]
            assert len(labels) == 3
            assert [i.name for i in inputs] == ["field-0", "field-1", "field-2"]
            assert inputs[0].value == "Stanford"
            assert isinstance(widgets[-1], Horizontal)

        run_app(check)

    def test_personal_info_has_no_save_button(self, store: ResumeStore, run_app) -> None:
        async def check(pilot) -> None:
            panel = SlotPanel(_app(store).editors[SlotName.PERSONAL_INFO])
            panel.editor.toggle()

            widgets = panel._body_widgets()

            assert not any(isinstance(w, (Button, Horizontal)) for w in widgets)
            assert len([w for w in widgets if isinstance(w, Input)]) == 3

        run_app(check)


class TestClearResume:
    def test_clear_while_composing_closes_every_editor(
        self, store: ResumeStore, run_app
    ) -> None:
        store.set(SlotName.PERSONAL_INFO, Record.from_values({"Name": "Ada"}))
        store.set(SlotName.EDUCATION, [Record.from_values({"College": "MIT", "Degree": "BSc"})])
        app = _app(store)

        async def check(pilot) -> None:
            education = app.editors[SlotName.EDUCATION]
            education.toggle()
            education.start_compose(0)
            education.edit_field(1, "PhD")
            app.editors[SlotName.PERSONAL_INFO].toggle()
            panel = app.query_one("#panel-education", SlotPanel)
            await panel.rebuild()
            await pilot.pause()

            with patch.object(app, "set_status", wraps=app.set_status) as set_status:
                await app.action_clear_resume()
            await pilot.pause()

            assert store.personal_info.is_blank()
            assert store.education == []
            assert not any(editor.is_open for editor in app.editors.values())
            assert education.buffer.values == ["", "", ""]
            assert not panel.query(Input)
            set_status.assert_called_once_with("Resume cleared.")

            # Nothing composed before the clear can reach the store afterwards.
            assert education.commit() is False
            assert store.education == []

        run_app(check, app)


class TestPrintResume:
    def test_writes_into_export_dir(self, store: ResumeStore, run_app, tmp_path: Path) -> None:
        store.set(SlotName.PERSONAL_INFO, Record.from_values({"Name": "Ada"}))
        store.set(SlotName.SKILLS, [Record.from_values({"Skill": "Go", "Level": "Expert"})])
        app = _app(store, export_dir=tmp_path, export_format="txt")

        async def check(pilot) -> None:
            with patch.object(app, "set_status", wraps=app.set_status) as set_status:
                app.action_print_resume()

            files = list(tmp_path.iterdir())
            assert len(files) == 1
            assert files[0].name.startswith("Ada_")
            assert files[0].suffix == ".txt"
            assert "Go: Expert" in files[0].read_text(encoding="utf-8")
            set_status.assert_called_once_with(f"Saved {files[0].name}")

        run_app(check, app)

    def test_cancelled_dialog(self, store: ResumeStore, run_app) -> None:
        app = _app(store)

        async def check(pilot) -> None:
            with (
                patch(
                    "cv_builder.utils.export.prompt_export_location", return_value=None
                ) as prompt,
                patch.object(app, "set_status", wraps=app.set_status) as set_status,
            ):
                app.action_print_resume()

            prompt.assert_called_once()
            set_status.assert_called_once_with("Export cancelled.")

        run_app(check, app)

    def test_failure_is_reported(self, store: ResumeStore, run_app, tmp_path: Path) -> None:
        app = _app(store, export_dir=tmp_path, export_format="docx")

        async def check(pilot) -> None:
            with patch.object(app, "set_status", wraps=app.set_status) as set_status:
                app.action_print_resume()

            (message,) = set_status.call_args.args
            assert message.startswith("Export failed: Unknown export format")
            assert list(tmp_path.iterdir()) == []

        run_app(check, app)
