"""Zen Switcher: A quick switcher for the files of a directory.

Main Textual application. Prints the chosen file's path on exit so it can
be used as `$EDITOR "$(zen-switcher)"`.
"""

from dataclasses import dataclass
from pathlib import Path

import click
from textual.app import App
from textual.binding import Binding

from zen_switcher.models.exceptions import ZenError
from zen_switcher.models.match import CommandSuggestion, FileSuggestion
from zen_switcher.screens.switcher import SwitcherModal
from zen_switcher.services.command_registry import CommandRegistry, create_default_registry
from zen_switcher.services.config import ConfigManager, SearchSettings
from zen_switcher.services.switcher import SwitcherService
from zen_switcher.services.vault import VaultService
from zen_switcher.styles import BASE_CSS


@dataclass
class Services:
    """Application service container for dependency injection."""

    config: ConfigManager
    settings: SearchSettings
    vault: VaultService
    registry: CommandRegistry
    switcher: SwitcherService

    @classmethod
    def create(
        cls,
        vault_dir: Path | None = None,
        config: ConfigManager | None = None,
    ) -> "Services":
        """Wire up all services with proper dependencies.

        Args:
            vault_dir: Directory to list (defaults to env, config, then cwd)
            config: Config manager (defaults to ~/.config/zen-switcher)

        Raises:
            ConfigValidationError: If configured limits are invalid
        """
        config = config or ConfigManager()
        settings = config.resolve_settings()
        vault = VaultService(
            vault_dir or config.resolve_vault_dir(),
            include_hidden=bool(settings.include_hidden),
            extensions=settings.extensions,
        )
        registry = create_default_registry()
        switcher = SwitcherService(vault, settings, registry)
        return cls(
            config=config,
            settings=settings,
            vault=vault,
            registry=registry,
            switcher=switcher,
        )

    def rebuild_vault(self) -> None:
        """Recreate the vault after a settings change."""
        self.vault = VaultService(
            self.vault.root,
            include_hidden=bool(self.settings.include_hidden),
            extensions=self.settings.extensions,
        )
        self.switcher = SwitcherService(self.vault, self.settings, self.registry)


class ZenSwitcherApp(App):
    """The main Zen Switcher application."""

    TITLE = "Zen Switcher"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def __init__(self, services: Services | None = None, query: str = "", **kwargs):
        """Initialize the app with injected services.

        Args:
            services: Service container (created from config if not provided)
            query: Initial switcher query
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services or Services.create()
        self._initial_query = query

    def on_mount(self) -> None:
        self.open_switcher(self._initial_query)

    def open_switcher(self, query: str = "") -> None:
        self.push_screen(SwitcherModal(self.services.switcher, query), self._on_chosen)

    def _on_chosen(self, suggestion) -> None:
        if isinstance(suggestion, FileSuggestion):
            self.exit(str(self.services.vault.resolve(suggestion.file)))
        elif isinstance(suggestion, CommandSuggestion):
            self.execute_command(suggestion.id)
        else:
            self.exit(None)

    def execute_command(self, command_id: str) -> None:
        """Run a switcher command, then reopen the switcher unless quitting."""
        command = self.services.registry.get(command_id)
        if command is None or command.action == "quit":
            self.exit(None)
            return

        settings = self.services.settings
        if command.action == "toggle_acronym":
            settings.enable_acronym_search = not settings.enable_acronym_search
            self.services.switcher.settings = settings
            self.notify(f"acronym search {'on' if settings.enable_acronym_search else 'off'}")
        elif command.action == "toggle_hidden":
            settings.include_hidden = not settings.include_hidden
            self.services.rebuild_vault()
            self.notify(f"hidden files {'shown' if settings.include_hidden else 'hidden'}")
        elif command.action == "reload_vault":
            self.services.switcher.refresh()
            self.notify("vault reloaded")

        self.open_switcher()


@click.command()
@click.argument(
    "vault_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.argument("query", nargs=-1)
def main(vault_dir: Path | None, query: tuple[str, ...]):
    """Pick a file under VAULT_DIR and print its path.

    VAULT_DIR defaults to $ZEN_SWITCHER_VAULT, then vault_dir in config.json,
    then the current directory. QUERY pre-fills the search.
    """
    try:
        services = Services.create(vault_dir=vault_dir.expanduser() if vault_dir else None)
        files = services.switcher.files
    except ZenError as e:
        raise click.ClickException(str(e))

    if not files:
        click.echo(f"Warning: no files found under {services.vault.root}", err=True)

    result = ZenSwitcherApp(services=services, query=" ".join(query)).run()
    if result:
        click.echo(result)


if __name__ == "__main__":
    main()
