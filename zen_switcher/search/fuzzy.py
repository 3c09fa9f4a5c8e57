"""Fuzzy matching for file names and commands.

The standard search the switcher runs before acronym matching:
- Exact match: highest score
- Prefix match: high score
- Word prefix match: medium-high score
- Contains match: medium score
- Fuzzy (subsequence) match: scored by gaps

Every match carries the character spans to highlight.
"""

from __future__ import annotations

from ..models.match import MatchResult, Span

EXACT_SCORE = 10000
PREFIX_SCORE = 5000
WORD_PREFIX_SCORE = 3000
CONTAINS_SCORE = 2000
SUBSEQUENCE_SCORE = 500

WORD_SEPARATORS = frozenset(" \t-_./")


def fuzzy_match(query: str, text: str, subsequence: bool = True) -> MatchResult:
    """Check if query fuzzy-matches text.

    With subsequence=False only contiguous matches count.

    Returns:
        MatchResult with a higher score for a better match. An empty query
        matches with score 0 and no spans.
    """
    if not query:
        return MatchResult(matched=True, match_index=0)
    if not text:
        return MatchResult.no_match()

    query_lower = query.lower()
    text_lower = text.lower()
    length = len(query_lower)

    # Exact match - highest priority
    if query_lower == text_lower:
        return _result(EXACT_SCORE, 0, [(0, length)])

    # Prefix match - high priority
    if text_lower.startswith(query_lower):
        return _result(PREFIX_SCORE + length, 0, [(0, length)])

    # Word boundary match - medium-high priority
    for start in _word_starts(text_lower):
        if text_lower.startswith(query_lower, start):
            return _result(WORD_PREFIX_SCORE + length, start, [(start, start + length)])

    # Contains match - earlier position = higher score
    pos = text_lower.find(query_lower)
    if pos != -1:
        return _result(CONTAINS_SCORE - pos, pos, [(pos, pos + length)])

    if not subsequence:
        return MatchResult.no_match()
    return _subsequence_match(query_lower, text_lower)


def _result(score: int, index: int, spans: list[Span]) -> MatchResult:
    return MatchResult(matched=True, match_index=index, score=float(score), spans=tuple(spans))


def _word_starts(text: str) -> list[int]:
    """Offsets where a word begins (after a separator), excluding 0."""
    return [
        i for i in range(1, len(text))
        if text[i - 1] in WORD_SEPARATORS and text[i] not in WORD_SEPARATORS
    ]


def _subsequence_match(query: str, text: str) -> MatchResult:
    """Score a fuzzy subsequence match.

    Characters must appear in order but not consecutively.
    Consecutive matches score higher.
    """
    query_idx = 0
    consecutive = 0
    score = 0
    last_match_idx = -2  # -2 so first match isn't "consecutive"
    spans: list[Span] = []

    for i, char in enumerate(text):
        if query_idx < len(query) and char == query[query_idx]:
            if i == last_match_idx + 1:
                consecutive += 1
                score += 10 * consecutive
                # Extend the previous span
                spans[-1] = (spans[-1][0], i + 1)
            else:
                consecutive = 0
                score += 1
                spans.append((i, i + 1))

            last_match_idx = i
            query_idx += 1

    # All query chars matched?
    if query_idx < len(query):
        return MatchResult.no_match()
    return _result(SUBSEQUENCE_SCORE + score, spans[0][0], spans)


def rank_items(query: str, items: list[tuple[str, str]]) -> list[tuple[str, str, MatchResult]]:
    """Rank items by fuzzy match quality.

    Args:
        query: Search string
        items: List of (id, label) tuples

    Returns:
        List of (id, label, match) sorted by score descending, then
        alphabetically. Only includes matching items; an empty query
        returns every item with a neutral match.
    """
    if not query:
        return [(id_, label, fuzzy_match("", label)) for id_, label in items]

    results: list[tuple[str, str, MatchResult]] = []
    for id_, label in items:
        match = fuzzy_match(query, label)
        if match.matched:
            results.append((id_, label, match))

    results.sort(key=lambda x: (-x[2].score, x[1].lower()))
    return results
