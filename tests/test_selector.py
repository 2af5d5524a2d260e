"""Tests for the interactive template selector."""

from pathlib import Path

import pytest

from scaffolding.errors import SelectionCancelled, TemplateNotFoundError
from scaffolding.metadata import TemplateMetadata
from scaffolding.selector import Key, SelectorState, TemplateSelector, decode_key, render_entries
from scaffolding.templates import TemplateEntry


def make_entries(*names: str) -> list[TemplateEntry]:
    return [TemplateEntry(name=name, root=Path("/templates") / name) for name in names]


class ScriptedKeys:
    """Feeds a fixed key sequence to the selector."""

    def __init__(self, *keys: Key):
        self.keys = list(keys)

    def __call__(self) -> Key:
        if not self.keys:
            pytest.fail("selector asked for more keys than scripted")
        return self.keys.pop(0)


class RecordingRenderer:
    def __init__(self):
        self.cursors: list[int] = []

    def __call__(self, entries, cursor: int) -> None:
        self.cursors.append(cursor)


@pytest.fixture
def catalog() -> list[TemplateEntry]:
    return make_entries("alpha", "beta", "gamma")


def run_selector(catalog, *keys: Key) -> tuple[str, RecordingRenderer]:
    renderer = RecordingRenderer()
    selector = TemplateSelector(catalog, read_key=ScriptedKeys(*keys), render=renderer)
    return selector.run(), renderer


class TestSelectorRun:
    """TemplateSelector.run scenarios."""

    def test_enter_selects_first_by_default(self, catalog):
        selected, _ = run_selector(catalog, Key.ENTER)

        assert selected == "alpha"

    def test_down_down_enter(self, catalog):
        selected, _ = run_selector(catalog, Key.DOWN, Key.DOWN, Key.ENTER)

        assert selected == "gamma"

    def test_down_clamps_at_bottom(self, catalog):
        selected, renderer = run_selector(catalog, Key.DOWN, Key.DOWN, Key.DOWN, Key.ENTER)

        assert selected == "gamma"
        # initial render plus one per actual move
        assert renderer.cursors == [0, 1, 2]

    def test_up_clamps_at_top(self, catalog):
        selected, renderer = run_selector(catalog, Key.UP, Key.DOWN, Key.UP, Key.UP, Key.ENTER)

        assert selected == "alpha"
        assert renderer.cursors == [0, 1, 0]

    def test_escape_cancels(self, catalog):
        with pytest.raises(SelectionCancelled):
            run_selector(catalog, Key.ESCAPE)

    def test_other_keys_are_ignored(self, catalog):
        selected, renderer = run_selector(catalog, Key.OTHER, Key.DOWN, Key.OTHER, Key.ENTER)

        assert selected == "beta"
        assert renderer.cursors == [0, 1]

    def test_empty_catalog(self):
        selector = TemplateSelector([], read_key=ScriptedKeys(), render=RecordingRenderer())

        with pytest.raises(TemplateNotFoundError):
            selector.run()


class TestSelectorHandle:
    """TemplateSelector.handle transitions."""

    def test_states(self, catalog):
        selector = TemplateSelector(catalog, read_key=ScriptedKeys(), render=RecordingRenderer())

        assert selector.handle(Key.DOWN) is SelectorState.BROWSING
        assert selector.cursor == 1
        assert selector.handle(Key.ENTER) is SelectorState.CONFIRMED

    def test_terminal_state_is_final(self, catalog):
        selector = TemplateSelector(catalog, read_key=ScriptedKeys(), render=RecordingRenderer())
        selector.handle(Key.ESCAPE)

        assert selector.handle(Key.DOWN) is SelectorState.CANCELLED
        assert selector.cursor == 0


class TestDecodeKey:
    """Raw key sequences."""

    @pytest.mark.parametrize(
        "raw, key",
        [
            ("\x1b[A", Key.UP),
            ("\x1b[B", Key.DOWN),
            ("\xe0H", Key.UP),
            ("\xe0P", Key.DOWN),
            ("k", Key.UP),
            ("j", Key.DOWN),
            ("\r", Key.ENTER),
            ("\n", Key.ENTER),
            ("\x1b", Key.ESCAPE),
            ("x", Key.OTHER),
            ("\x1b[C", Key.OTHER),
        ],
    )
    def test_decode(self, raw: str, key: Key):
        assert decode_key(raw) is key


class TestRenderEntries:
    """Default rich renderer."""

    def test_marks_cursor_row(self):
        from rich.console import Console

        console = Console(record=True, width=80)
        entries = [
            TemplateEntry("alpha", Path("/t/alpha"), TemplateMetadata("First", "ann")),
            TemplateEntry("beta", Path("/t/beta")),
        ]

        render_entries(console, entries, 1)
        text = console.export_text()

        assert "alpha: First | ann" in text
        assert "-> beta" in text
