"""Textual front end for the interactive catalog view."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Key
from textual.message import Message
from textual.widgets import Input, Static

from catalog.errors import StartupError
from catalog.loader import load_catalog
from catalog.view import BrowserState, Command, Event, KeyInput, render, update
from config import CATALOG_URL, INPUT_CHAR_LIMIT, INPUT_PLACEHOLDER, INPUT_WIDTH

logger = logging.getLogger(__name__)


class CatalogEvent(Message):
    """Carries a loader result from the fetch worker into the app."""

    def __init__(self, event: Event) -> None:
        super().__init__()
        self.event = event


class CatalogBrowser(App):
    CSS = f"""
    #filter-input {{
        width: {INPUT_WIDTH + 4};
        border: none;
        height: 1;
        padding: 0;
        margin-bottom: 1;
    }}
    """

    # Priority bindings run before the focused Input sees the key, so Enter
    # quits instead of submitting.
    BINDINGS = [
        Binding("ctrl+c", "press_quit_key('ctrl+c')", "Quit", priority=True),
        Binding("escape", "press_quit_key('escape')", "Quit", priority=True),
        Binding("enter", "press_quit_key('enter')", "Quit", priority=True),
    ]

    def __init__(self, catalog_url: str = CATALOG_URL) -> None:
        super().__init__()
        self.catalog_url = catalog_url
        self.state = BrowserState()
        self.fetch_thread: Optional[threading.Thread] = None

    def compose(self) -> ComposeResult:
        yield Input(
            placeholder=INPUT_PLACEHOLDER,
            max_length=INPUT_CHAR_LIMIT,
            id="filter-input",
        )
        yield Static(render(self.state), id="catalog-table")

    def on_mount(self) -> None:
        self.query_one("#filter-input", Input).focus()
        self.fetch_thread = self.fetch_catalog()

    def fetch_catalog(self) -> threading.Thread:
        """Load the catalog on a daemon thread and post the result back.

        The thread is never joined, so a quit key ends the process without
        waiting for a stalled request; a late result is dropped once the app
        has closed.
        """

        def fetch() -> None:
            event = load_catalog(self.catalog_url)
            if not self.is_running:
                return
            try:
                self.post_message(CatalogEvent(event))
            except RuntimeError:
                # The event loop closed between the check and the post.
                logger.debug("Catalog arrived after the browser closed")

        thread = threading.Thread(target=fetch, name="catalog-fetch", daemon=True)
        thread.start()
        return thread

    def apply_event(self, event: Event) -> None:
        self.state, command = update(self.state, event)
        if command is Command.QUIT:
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one("#filter-input", Input).display = self.state.error is None
        self.query_one("#catalog-table", Static).update(render(self.state))

    def action_press_quit_key(self, key: str) -> None:
        self.apply_event(KeyInput(key))

    @on(Input.Changed, "#filter-input")
    def on_filter_changed(self, message: Input.Changed) -> None:
        self.apply_event(KeyInput("input", message.value))

    def on_catalog_event(self, message: CatalogEvent) -> None:
        self.apply_event(message.event)

    def on_key(self, event: Key) -> None:
        # The input is hidden once the catalog fails; keep recording typing.
        if self.state.error is None:
            return
        if event.key == "backspace":
            self.apply_event(KeyInput(event.key, self.state.filter_text[:-1]))
        elif event.is_printable and event.character:
            self.apply_event(KeyInput(event.key, self.state.filter_text + event.character))


def run_browser(catalog_url: str = CATALOG_URL) -> None:
    """Run the interactive browser until a quit key is pressed."""

    app = CatalogBrowser(catalog_url)
    try:
        app.run()
    except Exception as exc:
        logger.exception("Interactive browser failed to start")
        raise StartupError(str(exc)) from exc

    if app.return_code:
        raise StartupError(f"terminal UI exited with status {app.return_code}")
