"""Zen Switcher: quick file switching by name, path, or word initials."""

__version__ = "0.1.0"
