"""Exception hierarchy for Zen Switcher.

Matching never raises; these cover the host around it.
"""


class ZenError(Exception):
    """Base exception for all Zen Switcher errors.

    Carries an optional suggestion shown alongside the message.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(ZenError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass


class VaultError(ZenError):
    """Vault directory could not be scanned."""

    pass


class VaultNotFoundError(VaultError):
    """Vault root does not exist or is not a directory."""

    pass
