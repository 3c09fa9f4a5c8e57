"""Screens for Zen Switcher."""

from .base import ZenModalScreen
from .switcher import SwitcherModal, SuggestionItem

__all__ = ["ZenModalScreen", "SwitcherModal", "SuggestionItem"]
