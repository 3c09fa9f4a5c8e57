"""Match results and suggestion records for the switcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.vault import VaultFile


Span = tuple[int, int]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one query against one candidate string.

    Spans are (start, end) character offsets into the text that matched.
    """

    matched: bool
    match_index: int = -1
    score: float = 0.0
    spans: tuple[Span, ...] = ()

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(matched=False)


@dataclass(frozen=True)
class PathSegments:
    """Alternate texts to try when the primary text does not match."""

    basename: str
    path: str


class SuggestionType(Enum):
    """Kinds of entries shown in the switcher list."""

    FILE = "file"
    COMMAND = "command"


class MatchType(Enum):
    """Which text a match was found in."""

    NONE = "none"
    PRIMARY = "primary"    # File name as displayed
    BASENAME = "basename"  # Name without extension
    PATH = "path"          # Vault-relative path


@dataclass
class FileSuggestion:
    """A file entry with the match that selected it."""

    file: VaultFile
    match: MatchResult
    match_type: MatchType = MatchType.PRIMARY
    match_text: str = ""
    source: str = "fuzzy"  # "fuzzy" or "acronym"
    type: SuggestionType = SuggestionType.FILE

    @property
    def score(self) -> float:
        return self.match.score


@dataclass
class CommandSuggestion:
    """A non-file entry (e.g. an app command)."""

    id: str
    label: str
    match: MatchResult
    type: SuggestionType = SuggestionType.COMMAND

    @property
    def score(self) -> float:
        return self.match.score


AnySuggestion = FileSuggestion | CommandSuggestion
