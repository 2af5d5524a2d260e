"""Keyboard-driven template picker.

Arrow keys move the cursor, Enter confirms and Escape cancels. The cursor
stops at both ends of the list instead of wrapping around. Every move
clears the screen and redraws the whole list.
"""

from enum import Enum
from typing import Callable, Sequence

import click
from rich.console import Console

from .errors import SelectionCancelled, TemplateNotFoundError
from .templates import TemplateEntry


class Key(Enum):
    """Keys the selector reacts to."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


class SelectorState(Enum):
    """Selector state machine states."""

    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Raw sequences from click.getchar(); Windows reports arrows as \xe0 or \x00 + scan code
KEY_SEQUENCES: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1bOA": Key.UP,
    "\xe0H": Key.UP,
    "\x00H": Key.UP,
    "k": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOB": Key.DOWN,
    "\xe0P": Key.DOWN,
    "\x00P": Key.DOWN,
    "j": Key.DOWN,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x1b": Key.ESCAPE,
}


def decode_key(raw: str) -> Key:
    """Map a raw keypress to a Key."""
    return KEY_SEQUENCES.get(raw, Key.OTHER)


def read_key() -> Key:
    """Block until the next keypress and decode it."""
    return decode_key(click.getchar())


def render_entries(console: Console, entries: Sequence[TemplateEntry], cursor: int) -> None:
    """Clear the screen and draw the full list with the cursor row highlighted."""
    console.clear()
    console.print("[yellow]Select a template:[/yellow] [dim](↑/↓ to move, Enter to select, Esc to cancel)[/dim]")
    for index, entry in enumerate(entries):
        line = _format_entry(entry)
        if index == cursor:
            console.print(f"[bold green]-> {line}[/bold green]", highlight=False)
        else:
            console.print(f"   {line}", highlight=False)


def _format_entry(entry: TemplateEntry) -> str:
    if entry.metadata is None:
        return entry.name
    return f"{entry.name}: {entry.description} | {entry.author}"


class TemplateSelector:
    """Interactive single-choice menu over the template catalog.

    Usage:
        selector = TemplateSelector(list(store.entries()))
        name = selector.run()  # raises SelectionCancelled on Escape
    """

    def __init__(
        self,
        entries: Sequence[TemplateEntry],
        read_key: Callable[[], Key] = read_key,
        render: Callable[[Sequence[TemplateEntry], int], None] | None = None,
        console: Console | None = None,
    ):
        """Initialize the selector.

        Args:
            entries: Templates to choose from, in display order
            read_key: Blocking key source
            render: Draws the list for a cursor position (default: rich console)
            console: Console used by the default renderer
        """
        self.entries = list(entries)
        self.read_key = read_key
        self.console = console or Console()
        self.render = render or (lambda items, cursor: render_entries(self.console, items, cursor))
        self.cursor = 0
        self.state = SelectorState.BROWSING

    @property
    def current(self) -> TemplateEntry:
        return self.entries[self.cursor]

    def handle(self, key: Key) -> SelectorState:
        """Apply one keypress and return the resulting state."""
        if self.state is not SelectorState.BROWSING:
            return self.state

        if key is Key.UP:
            if self.cursor > 0:
                self.cursor -= 1
                self.render(self.entries, self.cursor)
        elif key is Key.DOWN:
            if self.cursor < len(self.entries) - 1:
                self.cursor += 1
                self.render(self.entries, self.cursor)
        elif key is Key.ENTER:
            self.state = SelectorState.CONFIRMED
        elif key is Key.ESCAPE:
            self.state = SelectorState.CANCELLED

        return self.state

    def run(self) -> str:
        """Run the selection loop until the user confirms or cancels.

        Returns:
            Name of the chosen template

        Raises:
            TemplateNotFoundError: If there is nothing to choose from
            SelectionCancelled: If the user pressed Escape
        """
        if not self.entries:
            raise TemplateNotFoundError("No templates available to select from")

        self.cursor = 0
        self.state = SelectorState.BROWSING
        self.render(self.entries, self.cursor)

        while self.handle(self.read_key()) is SelectorState.BROWSING:
            pass

        if self.state is SelectorState.CANCELLED:
            raise SelectionCancelled("Template selection cancelled")
        return self.current.name
