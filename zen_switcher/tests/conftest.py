"""Shared test fixtures for Zen Switcher."""

import pytest
from pathlib import Path

from zen_switcher.services.command_registry import create_default_registry
from zen_switcher.services.config import ConfigManager, SearchSettings
from zen_switcher.services.switcher import SwitcherService
from zen_switcher.services.vault import VaultService


VAULT_FILES = [
    "MyFirstComponent.jsx",
    "get_the_score.txt",
    "notes/abc.md",
    "notes/apple-banana-cherry.md",
    "notes/zebra-apple-banana-cherry.md",
    ".hidden/secret.md",
    ".env",
]


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Create a vault directory with a small set of files."""
    vault = tmp_path / "vault"
    for relative in VAULT_FILES:
        path = vault / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {relative}\n")
    return vault


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def settings() -> SearchSettings:
    """Fully resolved settings with built-in defaults."""
    return SearchSettings(
        enable_acronym_search=True,
        max_acronym_results=50,
        max_results=200,
        include_hidden=False,
    )


@pytest.fixture
def vault_service(vault_dir: Path) -> VaultService:
    return VaultService(vault_dir)


@pytest.fixture
def switcher(vault_service: VaultService, settings: SearchSettings) -> SwitcherService:
    """Create a SwitcherService over the test vault with default commands."""
    return SwitcherService(vault_service, settings, create_default_registry())
