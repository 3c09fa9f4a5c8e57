"""Data models for Zen Switcher."""

from zen_switcher.models.match import (
    AnySuggestion,
    CommandSuggestion,
    FileSuggestion,
    MatchResult,
    MatchType,
    PathSegments,
    SuggestionType,
)
from zen_switcher.models.exceptions import (
    ZenError,
    ConfigError,
    ConfigValidationError,
    VaultError,
    VaultNotFoundError,
)

__all__ = [
    "AnySuggestion",
    "CommandSuggestion",
    "FileSuggestion",
    "MatchResult",
    "MatchType",
    "PathSegments",
    "SuggestionType",
    "ZenError",
    "ConfigError",
    "ConfigValidationError",
    "VaultError",
    "VaultNotFoundError",
]
