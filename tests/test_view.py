import pytest

from catalog.errors import DecodeError
from catalog.models import ContentItem
from catalog.view import (
    LOAD_MORE_MARKER,
    LOADING_MARKER,
    BrowserState,
    CatalogFailed,
    CatalogLoaded,
    Command,
    KeyInput,
    Status,
    name_width,
    render,
    render_row,
    update,
)


def _loaded(items, text=""):
    state, _ = update(BrowserState(), CatalogLoaded(tuple(items)))
    if text:
        state, _ = update(state, KeyInput("input", text))
    return state


def test_initial_state_is_loading():
    state = BrowserState()
    assert state.status is Status.LOADING
    assert state.catalog == () and state.filter_text == ""


def test_catalog_loaded_applies_current_filter(items):
    state, _ = update(BrowserState(), KeyInput("l", "zet"))
    state, command = update(state, CatalogLoaded(tuple(items)))

    assert command is None
    assert state.status is Status.LOADED
    assert [item.name for item in state.filtered] == ["Zeta"]


def test_typing_recomputes_filter_and_char_count(items):
    state, command = update(_loaded(items), KeyInput("l", "al"))

    assert command is None
    assert state.char_count == 2
    assert [item.name for item in state.filtered] == ["alpha", "Alloy"]


def test_catalog_failure_moves_to_error_and_still_accepts_input():
    state, _ = update(BrowserState(), CatalogFailed(DecodeError("bad body")))
    assert state.status is Status.ERROR

    state, command = update(state, KeyInput("x", "x"))
    assert command is None
    assert state.filter_text == "x"
    assert state.status is Status.ERROR


@pytest.mark.parametrize("key", ["ctrl+c", "escape", "enter"])
@pytest.mark.parametrize(
    "state",
    [
        BrowserState(),
        BrowserState(loading=False, load_complete=True),
        BrowserState(error=RuntimeError("offline")),
    ],
    ids=["loading", "loaded", "error"],
)
def test_quit_keys_quit_from_every_state(state, key):
    next_state, command = update(state, KeyInput(key))
    assert command is Command.QUIT
    assert next_state is state


def test_key_without_value_leaves_state_alone(items):
    state = _loaded(items)
    assert update(state, KeyInput("left")) == (state, None)


def test_name_width_grows_in_steps_of_five():
    assert name_width(0) == 20
    assert name_width(4) == 20
    assert name_width(5) == 25
    assert name_width(12) == 30


def test_render_row_layout():
    item = ContentItem(name="alpha", year=1999, type="movie", url="https://cdn.test/alpha.mp4")
    row = render_row(item, 20)

    assert row.plain == (
        "alpha".ljust(20) + " | " + "      1999" + " | " + "movie     "
        + " | URL: https://cdn.test/alpha.mp4"
    )
    assert {span.style for span in row.spans} == {
        "color(205)",
        "color(242)",
        "color(39)",
        "color(100)",
    }


def test_render_row_truncates_long_names():
    item = ContentItem(name="A Very Long Title For A Film", year=2000, type="movie")
    assert render_row(item, 20).plain.startswith("A Very Long Title... | ")


def test_render_row_compacts_urls_when_asked():
    item = ContentItem(name="x", url="https://cdn.example.test/media/x.mp4")
    assert render_row(item, 20, compact_urls=True).plain.endswith("URL: https://cd...edia/x.mp4")


def test_render_shows_loading_marker_before_catalog_arrives():
    assert render(BrowserState()).plain == "\n" + LOADING_MARKER


def test_render_shows_load_more_when_load_did_not_complete():
    state = BrowserState(loading=False, load_complete=False)
    assert render(state).plain.endswith(LOAD_MORE_MARKER)


def test_render_limits_rows_to_visible_window():
    items = [ContentItem(name=f"item {index:02d}", year=2000 + index) for index in range(15)]
    lines = render(_loaded(items)).plain.splitlines()

    assert len(lines) == 10
    assert lines[-1].startswith("item 09")
    assert LOADING_MARKER not in render(_loaded(items)).plain


def test_render_error_shows_only_the_message(items):
    state, _ = update(_loaded(items, "al"), CatalogFailed(DecodeError("invalid catalog JSON")))
    assert render(state).plain == "Error: invalid catalog JSON"
