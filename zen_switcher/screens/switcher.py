"""Quick switcher for opening vault files.

A modal overlay listing files that match the typed query, with the matched
characters highlighted. A leading ">" searches commands instead.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Input, Static

from .base import ZenModalScreen
from ..models.match import AnySuggestion, CommandSuggestion, MatchType
from ..services.switcher import SwitcherService

HIGHLIGHT_STYLE = "bold underline"
PATH_STYLE = "dim"


def highlight(text: str, spans) -> Text:
    """Text with each (start, end) span styled; out-of-range spans are clipped."""
    result = Text(text)
    for start, end in spans:
        result.stylize(HIGHLIGHT_STYLE, start, end)
    return result


def render_suggestion(suggestion: AnySuggestion) -> Text:
    """One-line rendering of a suggestion with its match highlighted."""
    if isinstance(suggestion, CommandSuggestion):
        return highlight(suggestion.label, suggestion.match.spans)

    file = suggestion.file
    if suggestion.match_type == MatchType.PATH:
        return highlight(suggestion.match_text, suggestion.match.spans)

    # Spans refer to match_text (name or basename), which starts the line
    line = highlight(suggestion.match_text or file.name, suggestion.match.spans)
    if suggestion.match_type == MatchType.BASENAME and file.extension:
        line.append(f".{file.extension}")
    if file.path != file.name:
        line.append(f"  {file.path}", style=PATH_STYLE)
    return line


class SuggestionItem(Static):
    """A single entry in the switcher list."""

    DEFAULT_CSS = """
    SuggestionItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    SuggestionItem:hover {
        background: $surface-lighten-1;
    }

    SuggestionItem.selected {
        background: $surface-lighten-1;
    }
    """

    def __init__(self, suggestion: AnySuggestion, **kwargs) -> None:
        super().__init__(render_suggestion(suggestion), **kwargs)
        self.suggestion = suggestion


class SwitcherModal(ZenModalScreen[AnySuggestion | None]):
    """Searchable file switcher modal."""

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Cancel"),
        Binding("enter", "choose", "Open"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
        Binding("ctrl+r", "reload_vault", "Reload", show=False),
    ]

    DEFAULT_CSS = """
    SwitcherModal #dialog {
        border: round $primary;
    }

    SwitcherModal #switcher-input {
        width: 100%;
        margin-bottom: 1;
    }

    SwitcherModal #results {
        height: auto;
        max-height: 60vh;
        min-height: 5;
        overflow-y: auto;
    }
    """

    selected_index: reactive[int] = reactive(0)

    def __init__(self, switcher: SwitcherService, initial_query: str = "") -> None:
        super().__init__()
        self._switcher = switcher
        self._initial_query = initial_query
        self._suggestions: list[AnySuggestion] = []
        self._items: list[SuggestionItem] = []
        self._updating = False  # Guard flag for DOM updates

    def compose(self) -> ComposeResult:
        self.add_class("modal-base", "modal-lg")

        with Vertical(id="dialog"):
            yield Static("open file", classes="dialog-title")
            yield Input(
                value=self._initial_query,
                placeholder="type a name or initials, > for commands",
                id="switcher-input",
            )
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter open  ctrl+r reload  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        super().on_mount()
        self._suggestions = self._switcher.get_suggestions(self._initial_query)
        self._update_results()
        self.query_one("#switcher-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the search as the user types."""
        self._suggestions = self._switcher.get_suggestions(event.value)
        self.selected_index = 0
        self._update_results()

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            results = self.query_one("#results", Vertical)
            results.remove_children()
            self._items = []

            if not self._suggestions:
                results.mount(Static("no matching files", classes="empty-list"))
                return

            self._items = [SuggestionItem(s, classes="list-row") for s in self._suggestions]
            if 0 <= self.selected_index < len(self._items):
                self._items[self.selected_index].add_class("selected")
            results.mount_all(self._items)
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating or not self.is_mounted:
            return
        for i, item in enumerate(self._items):
            item.set_class(i == new_index, "selected")

    @property
    def selected(self) -> AnySuggestion | None:
        if 0 <= self.selected_index < len(self._suggestions):
            return self._suggestions[self.selected_index]
        return None

    def action_move_down(self) -> None:
        if self._suggestions:
            self.selected_index = min(self.selected_index + 1, len(self._suggestions) - 1)

    def action_move_up(self) -> None:
        if self._suggestions:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_reload_vault(self) -> None:
        """Rescan the vault and re-run the current query."""
        self._switcher.refresh()
        self._suggestions = self._switcher.get_suggestions(
            self.query_one("#switcher-input", Input).value
        )
        self.selected_index = 0
        self._update_results()
        self.notify("vault reloaded")

    def action_choose(self) -> None:
        """Dismiss with the selected suggestion."""
        self.dismiss(self.selected)

    def on_click(self, event) -> None:
        """Choose the clicked entry."""
        widget = event.widget
        if isinstance(widget, SuggestionItem):
            self.selected_index = self._items.index(widget)
            self.action_choose()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_choose()

