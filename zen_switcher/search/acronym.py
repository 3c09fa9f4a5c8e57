"""Acronym matching for file names.

Matches a query against the first letters of the words in a name:
- "mfc" finds MyFirstComponent.jsx
- "gts" finds get_the_score.txt
- "f1t" finds file123test.md

Words are split on whitespace, hyphens, underscores and dots, then on
camelCase and letter/digit transitions. The final dot-segment is kept as
its own word (the extension). The query must appear as a contiguous run
of initials.
"""

from __future__ import annotations

from ..models.match import MatchResult, MatchType, PathSegments, Span

DELIMITERS = frozenset("-_.")

# Score weights
BASE_SCORE = 1.0
PREFIX_BONUS = 3.0
MULTI_LETTER_BONUS = 2.0
BASENAME_BONUS = 2.0
DENSITY_WEIGHT = 2.0
FULL_MATCH_BONUS = 2.0
LENGTH_THRESHOLD = 15
LENGTH_PENALTY = 0.02
MARKDOWN_BONUS = 0.5
POSITION_PENALTY = 0.1
MIN_SCORE = 0.1


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return _is_lower(char) or _is_upper(char)


def _is_delimiter(char: str) -> bool:
    return char.isspace() or char in DELIMITERS


def _is_boundary(prev: str, char: str) -> bool:
    """True if a new word starts at char.

    Boundaries: lower->Upper, letter->digit, digit->letter (ASCII only).
    """
    if _is_lower(prev) and _is_upper(char):
        return True
    if _is_letter(prev) and _is_digit(char):
        return True
    return _is_digit(prev) and _is_letter(char)


def _split_delimiters(text: str) -> list[str]:
    """Split on runs of delimiters, dropping empty fragments."""
    fragments: list[str] = []
    start = 0
    for i, char in enumerate(text):
        if _is_delimiter(char):
            if i > start:
                fragments.append(text[start:i])
            start = i + 1
    if start < len(text):
        fragments.append(text[start:])
    return fragments


def _split_transitions(fragment: str) -> list[str]:
    """Zero-width split of a fragment at case and digit transitions."""
    words: list[str] = []
    start = 0
    for i in range(1, len(fragment)):
        if _is_boundary(fragment[i - 1], fragment[i]):
            words.append(fragment[start:i])
            start = i
    words.append(fragment[start:])
    return words


def extract_words(text: str) -> list[str]:
    """Split a file name into words.

    The last dot-segment is treated as an extension and appended unsplit,
    so "archive.tar.gz" gives stem "archive.tar" and extension "gz".
    """
    if not isinstance(text, str) or not text:
        return []

    parts = text.split(".")
    extension = parts.pop() if len(parts) > 1 else ""
    stem = ".".join(parts)

    words: list[str] = []
    for fragment in _split_delimiters(stem):
        words.extend(_split_transitions(fragment))

    if extension:
        words.append(extension)

    return [word for word in words if word]


def build_initials(words: list[str]) -> str:
    """Lower-cased first letter of each word, one character per word."""
    # Some characters lower-case to two code points; keep the first.
    return "".join(word[0].lower()[0] for word in words)


def locate(initials: str, query: str) -> int:
    """Word index where query starts in initials, or -1."""
    return initials.find(query)


def map_spans(words: list[str], match_index: int, query_length: int) -> list[Span]:
    """Approximate highlight offsets for the matched words' first letters.

    Assumes exactly one delimiter character between consecutive words, so
    offsets drift after camelCase splits and multi-character delimiter runs.
    """
    spans: list[Span] = []
    offset = 0
    end_index = match_index + query_length

    for i, word in enumerate(words):
        if i >= end_index:
            break
        if i >= match_index:
            spans.append((offset, offset + 1))
        offset += len(word)
        if i < len(words) - 1:
            offset += 1

    return spans


class AcronymSearcher:
    """Matches a fixed query against candidate names by word initials.

    The query is normalized once; an empty or whitespace-only query never
    matches anything. Instances hold no other state and may be shared.
    """

    def __init__(self, query: str | None) -> None:
        self._query = (query or "").strip().lower()

    @property
    def query(self) -> str:
        return self._query

    @property
    def has_search_term(self) -> bool:
        """True if the query is non-empty after normalization."""
        return bool(self._query)

    def calculate_score(
        self,
        initials: str,
        match_index: int,
        text: str,
        is_basename: bool,
    ) -> float:
        """Relevance of a match; higher is better, never below MIN_SCORE.

        Favors early, dense, fully-consuming matches in short names.
        """
        query_length = len(self._query)
        total_letters = len(initials)
        score = BASE_SCORE

        if match_index == 0:
            score += PREFIX_BONUS

        if query_length > 1:
            score += MULTI_LETTER_BONUS

        if is_basename:
            score += BASENAME_BONUS

        score += query_length / max(total_letters, 1) * DENSITY_WEIGHT

        if query_length == total_letters:
            score += FULL_MATCH_BONUS

        score -= max(0, len(text) - LENGTH_THRESHOLD) * LENGTH_PENALTY

        if text.lower().endswith(".md"):
            score += MARKDOWN_BONUS

        score -= match_index * POSITION_PENALTY

        return max(MIN_SCORE, score)

    def search_text(self, text: str | None, is_basename: bool = False) -> MatchResult:
        """Match the query against a single text."""
        if not self._query or not isinstance(text, str) or not text:
            return MatchResult.no_match()

        words = extract_words(text)
        initials = build_initials(words)
        match_index = locate(initials, self._query)

        if match_index == -1:
            return MatchResult.no_match()

        return MatchResult(
            matched=True,
            match_index=match_index,
            score=self.calculate_score(initials, match_index, text, is_basename),
            spans=tuple(map_spans(words, match_index, len(self._query))),
        )

    def search_with_source(
        self,
        primary_text: str | None,
        path_segments: PathSegments | None = None,
    ) -> tuple[MatchResult, MatchType, str]:
        """Try primary text, then basename, then full path.

        Returns:
            (result, match_type, text) where text is the string the spans
            refer to. match_type is MatchType.NONE when nothing matched.
        """
        attempts: list[tuple[str | None, bool, MatchType]] = [
            (primary_text, True, MatchType.PRIMARY),
        ]
        if path_segments is not None:
            attempts.append((getattr(path_segments, "basename", None), True, MatchType.BASENAME))
            attempts.append((getattr(path_segments, "path", None), False, MatchType.PATH))

        for text, is_basename, match_type in attempts:
            result = self.search_text(text, is_basename)
            if result.matched:
                return result, match_type, text

        return MatchResult.no_match(), MatchType.NONE, ""

    def search_with_fallback(
        self,
        primary_text: str | None,
        path_segments: PathSegments | None = None,
    ) -> MatchResult:
        """First positive match across primary text, basename and path."""
        result, _, _ = self.search_with_source(primary_text, path_segments)
        return result
