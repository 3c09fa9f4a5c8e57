"""Tests for SwitcherModal rendering helpers."""

from pathlib import Path

from zen_switcher.models.match import (
    CommandSuggestion,
    FileSuggestion,
    MatchResult,
    MatchType,
)
from zen_switcher.screens.switcher import (
    HIGHLIGHT_STYLE,
    PATH_STYLE,
    SuggestionItem,
    SwitcherModal,
    highlight,
    render_suggestion,
)
from zen_switcher.services.switcher import SwitcherService
from zen_switcher.services.vault import VaultFile


def _highlighted(text) -> list[tuple[int, int]]:
    return [(s.start, s.end) for s in text.spans if s.style == HIGHLIGHT_STYLE]


def _file_suggestion(path: str, match_type: MatchType, text: str, spans) -> FileSuggestion:
    return FileSuggestion(
        file=VaultFile.from_relative(Path(path)),
        match=MatchResult(matched=True, match_index=0, score=1.0, spans=tuple(spans)),
        match_type=match_type,
        match_text=text,
    )


class TestHighlight:
    """Tests for span highlighting."""

    def test_spans_styled(self):
        text = highlight("get_the_score.txt", [(0, 1), (4, 5), (8, 9)])
        assert text.plain == "get_the_score.txt"
        assert _highlighted(text) == [(0, 1), (4, 5), (8, 9)]

    def test_out_of_range_spans_clipped(self):
        """Approximate spans past the end never break rendering."""
        text = highlight("ab", [(0, 1), (5, 6)])
        assert _highlighted(text) == [(0, 1)]


class TestRenderSuggestion:
    """Tests for render_suggestion."""

    def test_primary_match_in_root(self):
        suggestion = _file_suggestion("abc.md", MatchType.PRIMARY, "abc.md", [(0, 3)])
        text = render_suggestion(suggestion)
        assert text.plain == "abc.md"
        assert _highlighted(text) == [(0, 3)]

    def test_primary_match_shows_path(self):
        suggestion = _file_suggestion("notes/abc.md", MatchType.PRIMARY, "abc.md", [(0, 1)])
        text = render_suggestion(suggestion)
        assert text.plain == "abc.md  notes/abc.md"
        assert any(s.style == PATH_STYLE for s in text.spans)

    def test_basename_match_appends_extension(self):
        suggestion = _file_suggestion("get-the-score.md", MatchType.BASENAME, "get-the-score", [(0, 1)])
        text = render_suggestion(suggestion)
        assert text.plain == "get-the-score.md"
        assert _highlighted(text) == [(0, 1)]

    def test_path_match_renders_path(self):
        suggestion = _file_suggestion("work-notes/plan.md", MatchType.PATH, "work-notes/plan.md", [(0, 1), (5, 6)])
        text = render_suggestion(suggestion)
        assert text.plain == "work-notes/plan.md"
        assert _highlighted(text) == [(0, 1), (5, 6)]

    def test_command(self):
        suggestion = CommandSuggestion(
            id="quit", label="Quit", match=MatchResult(matched=True, spans=((0, 1),))
        )
        text = render_suggestion(suggestion)
        assert text.plain == "Quit"
        assert _highlighted(text) == [(0, 1)]

    def test_end_to_end_acronym_rendering(self, switcher: SwitcherService):
        """Acronym spans highlight the word initials of the rendered name."""
        suggestion = switcher.acronym_search("gts")[0]
        text = render_suggestion(suggestion)
        assert text.plain.startswith("get_the_score.txt")
        assert [text.plain[start] for start, _ in _highlighted(text)] == ["g", "t", "s"]


class TestSwitcherModal:
    """Tests for SwitcherModal state."""

    def test_initial_state(self, switcher: SwitcherService):
        modal = SwitcherModal(switcher, initial_query="abc")
        assert modal._initial_query == "abc"
        assert modal._suggestions == []
        assert modal.selected is None

    def test_selected_suggestion(self, switcher: SwitcherService):
        modal = SwitcherModal(switcher)
        modal._suggestions = switcher.get_suggestions("abc")
        assert modal.selected.file.name == "abc.md"

    def test_suggestion_item_keeps_suggestion(self):
        suggestion = _file_suggestion("abc.md", MatchType.PRIMARY, "abc.md", [(0, 3)])
        item = SuggestionItem(suggestion)
        assert item.suggestion is suggestion
