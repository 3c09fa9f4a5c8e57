"""Matching for the switcher.

This package contains:
- acronym.py: Word-initials matching with fallback across name, basename and path
- fuzzy.py: Standard fuzzy matching
"""

from .acronym import AcronymSearcher, extract_words, build_initials
from .fuzzy import fuzzy_match, rank_items

__all__ = ["AcronymSearcher", "extract_words", "build_initials", "fuzzy_match", "rank_items"]
