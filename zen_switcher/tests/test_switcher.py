"""Tests for SwitcherService."""

from pathlib import Path

from zen_switcher.models.match import (
    CommandSuggestion,
    FileSuggestion,
    MatchResult,
    MatchType,
)
from zen_switcher.services.config import SearchSettings
from zen_switcher.services.switcher import SwitcherService
from zen_switcher.services.vault import VaultFile, VaultService


def _names(suggestions) -> list[str]:
    return [s.file.name for s in suggestions]


def _suggestion(path: str, score: float, source: str = "fuzzy") -> FileSuggestion:
    return FileSuggestion(
        file=VaultFile.from_relative(Path(path)),
        match=MatchResult(matched=True, match_index=0, score=score),
        source=source,
    )


class TestStandardSearch:
    """Tests for contiguous name/path matching."""

    def test_name_prefix(self, switcher: SwitcherService):
        results = switcher.standard_search("abc")
        assert _names(results) == ["abc.md"]
        assert results[0].match_type == MatchType.PRIMARY
        assert results[0].match.spans == ((0, 3),)

    def test_path_match(self, switcher: SwitcherService):
        """Files whose name misses are tried by path."""
        results = switcher.standard_search("notes/a")
        assert {s.file.path for s in results} == {
            "notes/abc.md",
            "notes/apple-banana-cherry.md",
        }
        assert all(s.match_type == MatchType.PATH for s in results)

    def test_no_subsequence_matches(self, switcher: SwitcherService):
        assert switcher.standard_search("mfc") == []


class TestAcronymSearch:
    """Tests for word-initials search over the vault."""

    def test_best_first(self, switcher: SwitcherService):
        results = switcher.acronym_search("abc")
        assert _names(results) == [
            "apple-banana-cherry.md",
            "zebra-apple-banana-cherry.md",
        ]
        assert all(s.source == "acronym" for s in results)
        assert results[0].score > results[1].score

    def test_records_matched_text(self, switcher: SwitcherService):
        results = switcher.acronym_search("mfc")
        assert _names(results) == ["MyFirstComponent.jsx"]
        assert results[0].match_type == MatchType.PRIMARY
        assert results[0].match_text == "MyFirstComponent.jsx"

    def test_capped(self, vault_service: VaultService, settings: SearchSettings):
        settings.max_acronym_results = 1
        switcher = SwitcherService(vault_service, settings)
        assert _names(switcher.acronym_search("abc")) == ["apple-banana-cherry.md"]

    def test_empty_query(self, switcher: SwitcherService):
        assert switcher.acronym_search("   ") == []


class TestMergeResults:
    """Tests for combining standard and acronym results."""

    def test_standard_first_and_deduplicated(self, switcher: SwitcherService):
        standard = [_suggestion("b.md", 1.0), _suggestion("a.md", 5000.0)]
        acronym = [
            _suggestion("a.md", 9.0, "acronym"),
            _suggestion("c.md", 8.0, "acronym"),
        ]
        merged = switcher.merge_results(standard, acronym)
        assert [s.file.path for s in merged] == ["b.md", "a.md", "c.md"]
        assert merged[1].source == "fuzzy"

    def test_commands_are_not_identity_keys(self, switcher: SwitcherService):
        command = CommandSuggestion(id="quit", label="Quit", match=MatchResult(matched=True))
        merged = switcher.merge_results([command], [_suggestion("a.md", 1.0, "acronym")])
        assert len(merged) == 2


class TestGetSuggestions:
    """Tests for the full suggestion pipeline."""

    def test_merges_acronym_after_standard(self, switcher: SwitcherService):
        results = switcher.get_suggestions("abc")
        assert _names(results) == [
            "abc.md",
            "apple-banana-cherry.md",
            "zebra-apple-banana-cherry.md",
        ]
        assert [s.source for s in results] == ["fuzzy", "acronym", "acronym"]

    def test_duplicates_removed(self, switcher: SwitcherService):
        """Acronym hits already found by name are not repeated."""
        results = switcher.get_suggestions("a")
        assert len(results) == 3
        assert all(s.source == "fuzzy" for s in results)

    def test_acronym_disabled(self, vault_service: VaultService, settings: SearchSettings):
        settings.enable_acronym_search = False
        switcher = SwitcherService(vault_service, settings)
        assert _names(switcher.get_suggestions("abc")) == ["abc.md"]

    def test_empty_query_lists_all(self, switcher: SwitcherService):
        results = switcher.get_suggestions("  ")
        assert len(results) == 5
        assert all(s.score == 0 for s in results)

    def test_max_results(self, vault_service: VaultService, settings: SearchSettings):
        settings.max_results = 2
        switcher = SwitcherService(vault_service, settings)
        assert len(switcher.get_suggestions("")) == 2

    def test_command_mode(self, switcher: SwitcherService):
        results = switcher.get_suggestions(">reload")
        assert isinstance(results[0], CommandSuggestion)
        assert results[0].id == "reload_vault"

    def test_command_mode_without_registry(self, vault_service: VaultService, settings: SearchSettings):
        switcher = SwitcherService(vault_service, settings)
        assert switcher.get_suggestions(">quit") == []

    def test_refresh_rescans(self, switcher: SwitcherService, vault_dir: Path):
        assert switcher.get_suggestions("new") == []
        (vault_dir / "new-idea.md").write_text("x")
        assert switcher.get_suggestions("new") == []
        switcher.refresh()
        assert _names(switcher.get_suggestions("new")) == ["new-idea.md"]
