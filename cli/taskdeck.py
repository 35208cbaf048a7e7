#!/usr/bin/env python3
"""TaskDeck TUI: kanban dashboard powered by Textual."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from taskdeck import (
    Board,
    Column,
    Popup,
    Settings,
    command_from_key,
    data_root,
    date_bar,
    load_settings,
    log_path,
)
from taskdeck.keys import KEY_HINTS
from taskdeck.models import PROJECT, TAB_TITLES, Tab

logger = logging.getLogger("taskdeck.cli")


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#tab-bar {
    height: 1;
    padding: 0 1;
}

#date-bar {
    height: 3;
    border-top: solid $primary-background-lighten-2;
    border-bottom: solid $primary-background-lighten-2;
    padding: 0 4;
}

#date-bar Static {
    width: 1fr;
}

#clock-date { content-align: left middle; }
#clock-day { content-align: center middle; }
#clock-time { content-align: right middle; }

#project-name {
    height: 1;
    content-align: center middle;
    background: $accent;
    color: $text;
    text-style: bold;
}

#project-name.empty {
    background: $surface;
    color: $error;
}

#columns {
    height: 1fr;
}

.column {
    width: 1fr;
    height: 1fr;
    border: round $primary-background-lighten-2;
    border-title-align: center;
    padding: 0 1;
}

.column.focused {
    border: round $accent;
    border-title-style: bold reverse;
}

#status-bar {
    dock: bottom;
    height: 1;
    background: $primary-background;
    color: $text-muted;
    padding: 0 2;
}

#dialog {
    width: 60%;
    height: auto;
    min-height: 5;
    padding: 1 2;
    border: tall $accent;
    background: $accent 40%;
}

#dialog.item { border: tall $warning; background: $warning 30%; }
#dialog.delete { border: tall $error; background: $error 30%; }

#popup-title {
    width: 100%;
    content-align: center middle;
    text-style: bold;
}

#popup-input {
    width: 100%;
    content-align: center middle;
}
"""


# ── Popup screen ───────────────────────────────────────────────


class PopupScreen(ModalScreen[None]):
    """Centred dialog showing the popup title and its text buffer.

    Keys are not handled here; they bubble up to the app, which feeds the
    board and pushes the new buffer back through update_popup().
    """

    def __init__(self, popup: Popup, text: str) -> None:
        super().__init__()
        self.popup = popup
        self.text = text

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(id="popup-title")
            yield Static(id="popup-input")

    def on_mount(self) -> None:
        self._refresh_popup()

    def update_popup(self, popup: Popup, text: str) -> None:
        self.popup = popup
        self.text = text
        if self.is_mounted:
            self._refresh_popup()

    def _refresh_popup(self) -> None:
        dialog = self.query_one("#dialog", Vertical)
        dialog.set_class(self.popup.action == "delete", "delete")
        dialog.set_class(self.popup.action != "delete" and self.popup.target != PROJECT, "item")
        self.query_one("#popup-title", Label).update(f"  {self.popup.title}  ")
        self.query_one("#popup-input", Static).update(Text(f"|{self.text}|"))


# ── Main app ───────────────────────────────────────────────────


class TaskDeckApp(App):
    """Kanban projects in the terminal."""

    TITLE = "TaskDeck"
    CSS = CSS
    AUTO_FOCUS = None
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        board: Board,
        settings: Settings | None = None,
        startup_notice: str | None = None,
    ) -> None:
        super().__init__()
        self.board = board
        self.settings = settings or Settings()
        self.startup_notice = startup_notice
        self._popup_screen: PopupScreen | None = None
        # Widgets are kept by reference: while a popup is up, app.query_one()
        # would search the popup screen instead of the board.
        self._tab_bar = Static(id="tab-bar")
        self._clock = {
            "date": Static(id="clock-date"),
            "day": Static(id="clock-day"),
            "time": Static(id="clock-time"),
        }
        self._project_name = Static(id="project-name")
        self._columns = {
            column: Static(id=f"col-{column.key}", classes="column") for column in Column
        }

    def compose(self) -> ComposeResult:
        yield self._tab_bar
        yield Horizontal(*self._clock.values(), id="date-bar")
        yield self._project_name
        yield Horizontal(*self._columns.values(), id="columns")
        yield Static(self._hints(), id="status-bar")

    def on_mount(self) -> None:
        for column, widget in self._columns.items():
            widget.border_title = f"  {column.title}  "
        self._refresh_clock()
        self.set_interval(1.0, self._refresh_clock)
        self._redraw()
        if self.startup_notice:
            self.notify(self.startup_notice, title="Logging Off", severity="warning")

    # ── Input ──────────────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        command = command_from_key(event.key, event.character)
        if command is None:
            return
        event.stop()
        event.prevent_default()

        outcome = self.board.handle(command)
        if outcome.notice:
            self.notify(outcome.notice, title="Save Failed", severity="error")
        if outcome.quit:
            self.exit()
            return
        self._redraw()

    # ── Rendering ──────────────────────────────────────────────

    def _redraw(self) -> None:
        self._tab_bar.update(self._render_tabs())

        project = self.board.project
        if project is not None:
            self._project_name.update(Text(project.name))
            self._project_name.remove_class("empty")
        else:
            self._project_name.update("Create a new project!")
            self._project_name.add_class("empty")

        for column, widget in self._columns.items():
            widget.set_class(column is self.board.column, "focused")
            widget.update(self._render_column(column))

        self._sync_popup()

    def _render_tabs(self) -> Text:
        text = Text()
        active = self.board.focus.active_tab
        # Only the kanban tab is wired up.
        for tab in (Tab.KANBAN,):
            style = "black on green" if tab is active else ""
            text.append(f" {TAB_TITLES[tab]} ", style=style)
        return text

    def _render_column(self, column: Column) -> Text:
        project = self.board.project
        items = project.items(column) if project is not None else []
        index = self.board.selection.get(column)
        text = Text()
        for i, item in enumerate(items):
            if i:
                text.append("\n")
            if i == index:
                text.append(f" ❱ {item}", style="black on yellow")
            else:
                text.append(f"   {item}")
        return text

    def _sync_popup(self) -> None:
        popup = self.board.popup
        if popup.is_open:
            if self._popup_screen is None:
                self._popup_screen = PopupScreen(popup, self.board.modal.text)
                self.push_screen(self._popup_screen)
            else:
                self._popup_screen.update_popup(popup, self.board.modal.text)
        elif self._popup_screen is not None:
            self._popup_screen = None
            self.pop_screen()

    def _refresh_clock(self) -> None:
        day, weekday, clock = date_bar(self.settings)
        self._clock["date"].update(day)
        self._clock["day"].update(weekday)
        self._clock["time"].update(clock)

    @staticmethod
    def _hints() -> Text:
        text = Text()
        for key, label in KEY_HINTS:
            text.append(f" {key}", style="bold")
            text.append(f" {label} ")
        return text


# ── Entry point ────────────────────────────────────────────────


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(root: Path, settings: Settings) -> str | None:
    """Send log records to taskdeck.log under *root*.

    If the file cannot be opened, records are dropped and a notice for the
    user is returned instead.
    """
    path = log_path(root)
    notice = None
    try:
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        handler = logging.NullHandler()
        notice = f"Cannot write {path}: {e}"
    logging.basicConfig(
        handlers=[handler], level=settings.log_level, format=LOG_FORMAT, force=True
    )
    return notice


def main() -> None:
    root = data_root()
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Data directory not usable: {root} ({e})")
        print("Set TASKDECK_ROOT to a writable directory.")
        sys.exit(1)

    settings = load_settings(root)
    notice = configure_logging(root, settings)
    logger.info("Starting TaskDeck with data in %s", root)

    app = TaskDeckApp(Board.load(root), settings, startup_notice=notice)
    app.run()


if __name__ == "__main__":
    main()
