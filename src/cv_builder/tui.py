from __future__ import annotations

import logging
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Markdown,
    Select,
    Static,
)

from cv_builder.config import Settings, get_settings
from cv_builder.constants.sections import SECTIONS, SlotName
from cv_builder.editor import NEW, BufferedSlotEditor, EditorMode, SlotEditor, create_editor
from cv_builder.preview import preview_from_store
from cv_builder.preview_rendering import render_preview_markdown
from cv_builder.store import ResumeStore
from cv_builder.utils.export import export_resume
from cv_builder.widgets import field_index_from_name, render_field, select_value

logger = logging.getLogger(__name__)


class SlotPanel(Vertical):
    """Collapsible form section driving one slot editor."""

    DEFAULT_CSS = """
    SlotPanel {
        height: auto;
        border: round $primary;
        margin-bottom: 1;
    }

    SlotPanel .slot-header {
        width: 100%;
    }

    SlotPanel .slot-body {
        height: auto;
        padding: 0 1;
    }

    SlotPanel .list-item {
        height: auto;
    }

    SlotPanel .item-text {
        width: 1fr;
        padding: 1 1;
    }

    SlotPanel .input-label {
        margin-top: 1;
    }
    """

    class Status(Message):
        """Posted when the panel has something to show in the status bar."""

        def __init__(self, text: str) -> None:
            self.text = text
            super().__init__()

    def __init__(self, editor: SlotEditor, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.editor = editor

    def compose(self) -> ComposeResult:
        yield Button(self._header_label(), name="toggle", classes="slot-header")
        yield Vertical(classes="slot-body")

    def _header_label(self) -> str:
        return f"{self.editor.title} {'▲' if self.editor.is_open else '▼'}"

    async def rebuild(self) -> None:
        """Re-create the panel body from the editor's current state."""
        self.query_one(".slot-header", Button).label = self._header_label()
        body = self.query_one(".slot-body", Vertical)
        await body.remove_children()
        widgets = self._body_widgets()
        if widgets:
            await body.mount_all(widgets)

    def _body_widgets(self) -> list[Widget]:
        editor = self.editor
        if editor.mode is EditorMode.CLOSED:
            return []

        if editor.mode is EditorMode.COMPOSE:
            widgets: list[Widget] = []
            for index, entry in enumerate(editor.buffer):
                widgets.append(Label(entry.spec.label, classes="input-label"))
                widgets.append(render_field(entry.spec, entry.value, index))
            if isinstance(editor, BufferedSlotEditor):
                save_label = "Update Item" if editor.editing_existing else "Save"
                widgets.append(
                    Horizontal(
                        Button(save_label, name="commit", variant="success"),
                        Button("Cancel", name="cancel", variant="default"),
                        classes="list-item",
                    )
                )
            return widgets

        if not isinstance(editor, BufferedSlotEditor):
            return []
        widgets = [Button(f"+ Add {editor.title}", name="add", variant="primary")]
        for index, label in enumerate(editor.preview_labels()):
            widgets.append(
                Horizontal(
                    Static(label or "(empty)", classes="item-text"),
                    Button("Edit", name=f"edit-{index}"),
                    Button("Delete", name=f"delete-{index}", variant="error"),
                    classes="list-item",
                )
            )
        return widgets

    # ---------------------------------------------------------------------
    # EVENTS
    # ---------------------------------------------------------------------

    @on(Button.Pressed)
    async def handle_button(self, event: Button.Pressed) -> None:
        event.stop()
        name = event.button.name or ""
        editor = self.editor

        if name == "toggle":
            editor.toggle()
        elif isinstance(editor, BufferedSlotEditor):
            self._handle_list_action(editor, name)

        await self.rebuild()

    def _handle_list_action(self, editor: BufferedSlotEditor, name: str) -> None:
        action, _, suffix = name.partition("-")
        if action == "add":
            editor.start_compose(NEW)
        elif action == "edit" and suffix.isdigit():
            editor.start_compose(int(suffix))
        elif action == "delete" and suffix.isdigit():
            if editor.delete_item(int(suffix)):
                self.post_message(self.Status(f"{editor.title} item deleted."))
        elif action == "cancel":
            editor.cancel_compose()
        elif action == "commit":
            if editor.commit():
                self.post_message(self.Status(f"{editor.title} saved."))
            else:
                self.post_message(
                    self.Status(f"{editor.title} item no longer exists; changes discarded.")
                )

    @on(Input.Changed)
    def handle_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        index = field_index_from_name(event.input.name)
        if index is not None:
            self.editor.edit_field(index, event.value)

    @on(Select.Changed)
    def handle_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        index = field_index_from_name(event.select.name)
        if index is not None:
            self.editor.edit_field(index, select_value(event.value))


class CVBuilderTUI(App[None]):
    """Resume builder: section editors on the left, live preview on the right."""

    TITLE = "CV Builder"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+r", "clear_resume", "Clear resume"),
        ("ctrl+e", "print_resume", "Print CV"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#header-bar {
    height: auto;
    layout: horizontal;
    padding: 0 1;
    background: $panel;
}

#app-title {
    width: 1fr;
    padding: 1;
}

#header-bar Button {
    margin-left: 1;
}

#main-layout {
    height: 1fr;
    layout: horizontal;
}

#form-column {
    width: 1fr;
    padding: 1;
}

#preview-column {
    width: 1fr;
    border: heavy $primary;
    background: $surface;
    padding: 1;
}

#statusbar {
    height: auto;
    padding: 0 1;
    background: $panel;
    color: $text;
}
"""

    def __init__(
        self,
        store: ResumeStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.store = store or ResumeStore()
        self.settings = settings or get_settings()
        self.editors: dict[SlotName, SlotEditor] = {
            section.slot: create_editor(section, self.store) for section in SECTIONS
        }
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()

        yield Container(
            Static("CV Builder", id="app-title"),
            Button("Clear Resume", id="btn-clear", variant="error"),
            Button("Print CV", id="btn-print", variant="primary"),
            id="header-bar",
        )
        yield Container(
            VerticalScroll(
                *(
                    SlotPanel(self.editors[section.slot], id=f"panel-{section.slot}")
                    for section in SECTIONS
                ),
                id="form-column",
            ),
            VerticalScroll(Markdown("", id="preview"), id="preview-column"),
            id="main-layout",
        )
        yield Container(Label("Ready.", id="status"), id="statusbar")

        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self._on_slot_changed)
        self._refresh_preview()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_slot_changed(self, slot: SlotName) -> None:
        logger.debug("Refreshing preview after %s changed", slot)
        self._refresh_preview()

    def _refresh_preview(self) -> None:
        markdown = render_preview_markdown(preview_from_store(self.store))
        self.query_one("#preview", Markdown).update(markdown)

    def set_status(self, text: str) -> None:
        self.query_one("#status", Label).update(text)

    # ---------------------------------------------------------------------
    # EVENTS
    # ---------------------------------------------------------------------

    def on_slot_panel_status(self, message: SlotPanel.Status) -> None:
        self.set_status(message.text)

    @on(Button.Pressed, "#btn-clear")
    async def handle_clear_button(self) -> None:
        await self.action_clear_resume()

    @on(Button.Pressed, "#btn-print")
    def handle_print_button(self) -> None:
        self.action_print_resume()

    async def action_clear_resume(self) -> None:
        """Empty every slot and close every editor, dropping unsaved input."""
        self.store.clear()
        for editor in self.editors.values():
            editor.close()
        for panel in self.query(SlotPanel):
            await panel.rebuild()
        self.set_status("Resume cleared.")

    def action_print_resume(self) -> None:
        """Export the current resume using the configured format."""
        settings = self.settings
        try:
            path = export_resume(
                self.store,
                settings.export_format,
                template_name=settings.template,
                output_dir=settings.export_dir,
            )
        except (OSError, ValueError) as exc:
            logger.exception("Export failed")
            self.set_status(f"Export failed: {exc}")
            return

        if path is None:
            self.set_status("Export cancelled.")
            return
        self.set_status(f"Saved {Path(path).name}")


def main(settings: Settings | None = None) -> None:
    CVBuilderTUI(settings=settings).run()
