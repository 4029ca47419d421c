"""State machine and renderer for the interactive catalog view.

The view is driven by three events: a key press, a successfully loaded
catalog and a failed load. :func:`update` folds one event into a
:class:`BrowserState` and returns the next state together with an optional
command for the host loop. :func:`render` turns a state into styled text.
Neither touches the terminal, so both can be exercised without a UI.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from rich.text import Text

from config import (
    COMPACT_URLS,
    NAME_BASE_WIDTH,
    NAME_COLOR,
    NAME_WIDTH_STEP,
    TYPE_COLOR,
    TYPE_WIDTH,
    URL_COLOR,
    VISIBLE_ITEMS,
    YEAR_COLOR,
    YEAR_WIDTH,
)

from .filtering import filter_items
from .models import ContentItem
from .utils import fit_width, shorten_middle

QUIT_KEYS = frozenset({"ctrl+c", "escape", "enter"})
LOADING_MARKER = "[Loading...]"
LOAD_MORE_MARKER = "[Load more...]"


class Status(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class Command(enum.Enum):
    QUIT = "quit"


@dataclass(frozen=True)
class KeyInput:
    """A key press; *value* is the filter text after the key was applied."""

    key: str
    value: Optional[str] = None


@dataclass(frozen=True)
class CatalogLoaded:
    items: Tuple[ContentItem, ...]


@dataclass(frozen=True)
class CatalogFailed:
    error: Exception


Event = Union[KeyInput, CatalogLoaded, CatalogFailed]


@dataclass(frozen=True)
class BrowserState:
    catalog: Tuple[ContentItem, ...] = ()
    filtered: Tuple[ContentItem, ...] = ()
    filter_text: str = ""
    char_count: int = 0
    error: Optional[Exception] = None
    loading: bool = True
    load_complete: bool = False

    @property
    def status(self) -> Status:
        if self.error is not None:
            return Status.ERROR
        if self.load_complete:
            return Status.LOADED
        return Status.LOADING


def update(state: BrowserState, event: Event) -> Tuple[BrowserState, Optional[Command]]:
    if isinstance(event, KeyInput):
        if event.key in QUIT_KEYS:
            return state, Command.QUIT
        if event.value is None:
            return state, None
        return (
            replace(
                state,
                filter_text=event.value,
                filtered=tuple(filter_items(state.catalog, event.value)),
                char_count=len(event.value),
            ),
            None,
        )

    if isinstance(event, CatalogFailed):
        return replace(state, error=event.error), None

    if isinstance(event, CatalogLoaded):
        catalog = tuple(event.items)
        return (
            replace(
                state,
                catalog=catalog,
                filtered=tuple(filter_items(catalog, state.filter_text)),
                loading=False,
                load_complete=True,
            ),
            None,
        )

    raise TypeError(f"unsupported event {event!r}")


def name_width(char_count: int) -> int:
    """The name column widens by one step for every step of typed text."""

    return NAME_BASE_WIDTH + (char_count // NAME_WIDTH_STEP) * NAME_WIDTH_STEP


def render_row(item: ContentItem, width: int, compact_urls: bool = COMPACT_URLS) -> Text:
    url = shorten_middle(item.url) if compact_urls else item.url
    row = Text()
    row.append(fit_width(item.name, width), style=f"color({NAME_COLOR})")
    row.append(" | ")
    row.append(f"{item.year:>{YEAR_WIDTH}d}", style=f"color({YEAR_COLOR})")
    row.append(" | ")
    row.append(f"{item.type:<{TYPE_WIDTH}s}", style=f"color({TYPE_COLOR})")
    row.append(" | URL: ")
    row.append(url, style=f"color({URL_COLOR})")
    return row


def render(state: BrowserState, compact_urls: bool = COMPACT_URLS) -> Text:
    """Render the table shown beneath the filter input."""

    if state.error is not None:
        return Text(f"Error: {state.error}")

    width = name_width(state.char_count)
    body = Text()
    for item in state.filtered[:VISIBLE_ITEMS]:
        body.append_text(render_row(item, width, compact_urls))
        body.append("\n")

    if not state.load_complete:
        body.append("\n")
        body.append(LOADING_MARKER if state.loading else LOAD_MORE_MARKER)

    return body
