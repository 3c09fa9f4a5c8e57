"""SwitcherService: Merge standard and acronym search over vault files."""

import logging

from ..models.match import (
    AnySuggestion,
    CommandSuggestion,
    FileSuggestion,
    MatchType,
)
from ..search.acronym import AcronymSearcher
from ..search.fuzzy import fuzzy_match, rank_items
from .command_registry import CommandRegistry
from .config import SearchSettings
from .vault import VaultFile, VaultService


logger = logging.getLogger(__name__)


class SwitcherService:
    """Produces switcher suggestions for a query.

    Standard results (contiguous name or path matches) come first. Acronym
    results for files not already listed follow, best score first.
    """

    COMMAND_PREFIX = ">"

    def __init__(
        self,
        vault: VaultService,
        settings: SearchSettings,
        registry: CommandRegistry | None = None,
    ):
        self._vault = vault
        self._settings = settings
        self._registry = registry
        self._files: list[VaultFile] | None = None

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    @settings.setter
    def settings(self, settings: SearchSettings) -> None:
        self._settings = settings

    @property
    def files(self) -> list[VaultFile]:
        if self._files is None:
            self._files = self._vault.list_files()
        return self._files

    def refresh(self) -> None:
        """Drop the cached file list; the next search rescans."""
        self._files = None

    def standard_search(self, query: str) -> list[FileSuggestion]:
        """Contiguous matches against each file's name, then its path."""
        results: list[FileSuggestion] = []
        for file in self.files:
            match = fuzzy_match(query, file.name, subsequence=False)
            if match.matched:
                results.append(FileSuggestion(
                    file=file, match=match,
                    match_type=MatchType.PRIMARY, match_text=file.name,
                ))
                continue
            match = fuzzy_match(query, file.path, subsequence=False)
            if match.matched:
                results.append(FileSuggestion(
                    file=file, match=match,
                    match_type=MatchType.PATH, match_text=file.path,
                ))

        results.sort(key=lambda s: (-s.score, s.file.name.lower(), s.file.path))
        return results

    def acronym_search(self, query: str) -> list[FileSuggestion]:
        """Word-initials matches, best first, capped at max_acronym_results."""
        searcher = AcronymSearcher(query)
        if not searcher.has_search_term:
            return []

        results: list[FileSuggestion] = []
        for file in self.files:
            match, match_type, text = searcher.search_with_source(file.name, file.segments)
            if match.matched:
                results.append(FileSuggestion(
                    file=file, match=match,
                    match_type=match_type, match_text=text,
                    source="acronym",
                ))

        # Stable sort keeps vault order among equal scores
        results.sort(key=lambda s: -s.score)
        limit = self._settings.max_acronym_results
        return results[:limit] if limit else results

    def merge_results(
        self,
        standard: list[AnySuggestion],
        acronym: list[FileSuggestion],
    ) -> list[AnySuggestion]:
        """Standard results first, then acronym results not already present.

        Files are identified by their vault-relative path.
        """
        existing = {s.file.path for s in standard if isinstance(s, FileSuggestion)}
        unique = [s for s in acronym if s.file.path not in existing]
        return [*standard, *unique]

    def command_search(self, query: str) -> list[CommandSuggestion]:
        if self._registry is None:
            return []
        return [
            CommandSuggestion(id=id_, label=label, match=match)
            for id_, label, match in rank_items(query, self._registry.searchable())
        ]

    def get_suggestions(self, query: str) -> list[AnySuggestion]:
        """Suggestions for the switcher list."""
        query = query.strip()

        if query.startswith(self.COMMAND_PREFIX):
            return self.command_search(query[len(self.COMMAND_PREFIX):].strip())

        if not query:
            suggestions: list[AnySuggestion] = [
                FileSuggestion(file=f, match=fuzzy_match("", f.name), match_text=f.name)
                for f in self.files
            ]
        else:
            suggestions = self.standard_search(query)
            if self._settings.enable_acronym_search:
                acronym = self.acronym_search(query)
                suggestions = self.merge_results(suggestions, acronym)
                logger.debug(
                    f"Query {query!r}: {len(acronym)} acronym hits, {len(suggestions)} total"
                )

        limit = self._settings.max_results
        return suggestions[:limit] if limit else suggestions
