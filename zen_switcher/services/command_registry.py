"""Command registry for the switcher's command mode.

Typing ">" in the switcher searches these commands instead of files.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Command:
    """A command that can be run from the switcher."""

    id: str                              # Unique identifier (e.g., "reload_vault")
    label: str                           # Display label (e.g., "Reload vault")
    action: str                          # App action name (e.g., "reload_vault")
    keybinding: str | None = None        # Keyboard shortcut (e.g., "ctrl+r")
    description: str | None = None
    hidden: bool = False                 # Hide from the switcher


@dataclass
class CommandRegistry:
    """Registry of all available commands."""

    _commands: dict[str, Command] = field(default_factory=dict)

    def register(self, command: Command) -> None:
        self._commands[command.id] = command

    def register_all(self, commands: list[Command]) -> None:
        for command in commands:
            self.register(command)

    def get(self, command_id: str) -> Command | None:
        return self._commands.get(command_id)

    def get_all(self) -> list[Command]:
        """Get all non-hidden commands."""
        return [c for c in self._commands.values() if not c.hidden]

    def searchable(self) -> list[tuple[str, str]]:
        """(id, label) tuples for fuzzy ranking."""
        return [(c.id, c.label) for c in self.get_all()]


def create_default_registry() -> CommandRegistry:
    """Create registry with all built-in commands."""
    registry = CommandRegistry()
    registry.register_all([
        Command(
            id="reload_vault",
            label="Reload vault",
            action="reload_vault",
            keybinding="ctrl+r",
            description="Rescan the vault directory for files",
        ),
        Command(
            id="toggle_acronym",
            label="Toggle acronym search",
            action="toggle_acronym",
            description="Turn word-initials matching on or off",
        ),
        Command(
            id="toggle_hidden",
            label="Toggle hidden files",
            action="toggle_hidden",
            description="Show or hide dotfiles",
        ),
        Command(
            id="quit",
            label="Quit",
            action="quit",
            keybinding="ctrl+q",
            description="Exit zen-switcher",
        ),
    ])
    return registry
