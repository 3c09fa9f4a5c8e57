"""Configuration management for Zen Switcher.

Single-file configuration system with two tiers:
- ~/.config/zen-switcher/config.json contains both defaults and current project settings
- Unset values fall through to built-in defaults

Resolution order: project > defaults > built-in
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from ..models.exceptions import ConfigValidationError


logger = logging.getLogger(__name__)


def _atomic_write_json(path: Path, data: dict) -> None:
    """Write JSON via a temp file and rename."""
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(json.dumps(data, indent=2))
    os.replace(temp_path, path)


@dataclass
class SearchSettings:
    """Search behavior that can be set per tier.

    None means "not set at this tier".
    """

    enable_acronym_search: bool | None = None
    max_acronym_results: int | None = None  # Cap on acronym-only hits
    max_results: int | None = None  # Cap on the merged list
    include_hidden: bool | None = None  # List dotfiles and dot-directories
    extensions: list[str] | None = None  # e.g. ["md", "txt"]; None means all

    def to_dict(self) -> dict:
        result = {}
        if self.enable_acronym_search is not None:
            result["enable_acronym_search"] = self.enable_acronym_search
        if self.max_acronym_results is not None:
            result["max_acronym_results"] = self.max_acronym_results
        if self.max_results is not None:
            result["max_results"] = self.max_results
        if self.include_hidden is not None:
            result["include_hidden"] = self.include_hidden
        if self.extensions is not None:
            result["extensions"] = self.extensions
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "SearchSettings":
        extensions = data.get("extensions")
        if extensions is not None:
            extensions = [str(ext).lstrip(".").lower() for ext in extensions]
        return cls(
            enable_acronym_search=data.get("enable_acronym_search"),
            max_acronym_results=data.get("max_acronym_results"),
            max_results=data.get("max_results"),
            include_hidden=data.get("include_hidden"),
            extensions=extensions,
        )

    def merge_with(self, override: "SearchSettings") -> "SearchSettings":
        """Return new settings with override values taking precedence."""
        return SearchSettings(
            enable_acronym_search=override.enable_acronym_search if override.enable_acronym_search is not None else self.enable_acronym_search,
            max_acronym_results=override.max_acronym_results if override.max_acronym_results is not None else self.max_acronym_results,
            max_results=override.max_results if override.max_results is not None else self.max_results,
            include_hidden=override.include_hidden if override.include_hidden is not None else self.include_hidden,
            extensions=override.extensions if override.extensions is not None else self.extensions,
        )

    def validate(self) -> None:
        """Raise ConfigValidationError for out-of-range limits."""
        for name in ("max_acronym_results", "max_results"):
            value = getattr(self, name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value <= 0
            ):
                raise ConfigValidationError(
                    f"{name} must be a positive integer, got {value!r}",
                    suggestion=f"edit {name} in config.json",
                )


@dataclass
class Config:
    """Unified Zen Switcher configuration.

    Stored in ~/.config/zen-switcher/config.json
    """

    defaults: SearchSettings = field(default_factory=SearchSettings)
    project: SearchSettings = field(default_factory=SearchSettings)
    vault_dir: Path | None = None  # Directory to list; cwd when unset

    def to_dict(self) -> dict:
        result: dict = {"defaults": self.defaults.to_dict()}
        project_dict = self.project.to_dict()
        if project_dict:
            result["project"] = project_dict
        if self.vault_dir is not None:
            result["vault_dir"] = str(self.vault_dir)
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        vault_dir = Path(data["vault_dir"]).expanduser() if data.get("vault_dir") else None
        return cls(
            defaults=SearchSettings.from_dict(data.get("defaults", {})),
            project=SearchSettings.from_dict(data.get("project", {})),
            vault_dir=vault_dir,
        )


class ConfigManager:
    """Loads, saves and resolves configuration."""

    DEFAULT_ENABLE_ACRONYM_SEARCH = True
    DEFAULT_MAX_ACRONYM_RESULTS = 50
    DEFAULT_MAX_RESULTS = 200

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "zen-switcher"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: Config | None = None

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> Config:
        """Load config from disk, falling back to defaults."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                return Config.from_dict(data)
            except (json.JSONDecodeError, KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Failed to load config, using defaults: {e}")
        return Config()

    def save_config(self, config: Config) -> None:
        """Save config to disk."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _atomic_write_json(self._config_file, config.to_dict())
        self._config = config

    def update_project_settings(self, settings: SearchSettings) -> None:
        """Update project-level overrides."""
        config = self.config
        config.project = settings
        self.save_config(config)

    def clear_project(self) -> None:
        """Clear project settings (e.g., when switching vaults)."""
        config = self.config
        config.project = SearchSettings()
        self.save_config(config)

    def set_vault_dir(self, path: Path) -> None:
        """Remember the vault directory."""
        config = self.config
        config.vault_dir = path.resolve()
        self.save_config(config)

    def resolve_settings(self) -> SearchSettings:
        """Resolve settings through all tiers.

        Returns:
            Fully resolved SearchSettings with built-in defaults filled in

        Raises:
            ConfigValidationError: If a resolved limit is not positive
        """
        resolved = self.config.defaults.merge_with(self.config.project)

        if resolved.enable_acronym_search is None:
            resolved.enable_acronym_search = self.DEFAULT_ENABLE_ACRONYM_SEARCH
        if resolved.max_acronym_results is None:
            resolved.max_acronym_results = self.DEFAULT_MAX_ACRONYM_RESULTS
        if resolved.max_results is None:
            resolved.max_results = self.DEFAULT_MAX_RESULTS
        if resolved.include_hidden is None:
            resolved.include_hidden = False
        # extensions can remain None (all files)

        resolved.validate()
        return resolved

    def resolve_vault_dir(self) -> Path:
        """Vault directory from ZEN_SWITCHER_VAULT, config, or cwd."""
        env_vault = os.environ.get("ZEN_SWITCHER_VAULT")
        if env_vault:
            return Path(env_vault).expanduser()
        if self.config.vault_dir is not None:
            return self.config.vault_dir
        return Path.cwd()
