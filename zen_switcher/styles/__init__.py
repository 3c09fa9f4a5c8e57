"""Shared styles for zen-switcher."""

from .base import BASE_CSS

__all__ = ["BASE_CSS"]
