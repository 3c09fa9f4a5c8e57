"""Services for Zen Switcher."""

from zen_switcher.services.config import ConfigManager, SearchSettings
from zen_switcher.services.vault import VaultFile, VaultService
from zen_switcher.services.switcher import SwitcherService
from zen_switcher.services.command_registry import (
    Command,
    CommandRegistry,
    create_default_registry,
)

__all__ = [
    "ConfigManager",
    "SearchSettings",
    "VaultFile",
    "VaultService",
    "SwitcherService",
    "Command",
    "CommandRegistry",
    "create_default_registry",
]
