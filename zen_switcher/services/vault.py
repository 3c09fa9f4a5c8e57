"""VaultService: List the files the switcher can open."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..models.exceptions import VaultNotFoundError
from ..models.match import PathSegments


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VaultFile:
    """A file inside the vault."""

    path: str  # Vault-relative, forward slashes (stable identity key)
    name: str  # File name with extension
    basename: str  # File name without its last extension
    extension: str  # Last extension, no dot, may be empty

    @classmethod
    def from_relative(cls, relative: Path) -> "VaultFile":
        return cls(
            path=relative.as_posix(),
            name=relative.name,
            basename=relative.stem,
            extension=relative.suffix.lstrip("."),
        )

    @property
    def segments(self) -> PathSegments:
        """Fallback texts for acronym matching."""
        return PathSegments(basename=self.basename, path=self.path)


class VaultService:
    """Walks a vault directory and lists its files."""

    def __init__(
        self,
        root: Path,
        include_hidden: bool = False,
        extensions: list[str] | None = None,
    ):
        """Initialize vault service.

        Args:
            root: Vault root directory
            include_hidden: List dotfiles and descend into dot-directories
            extensions: Only list these extensions (no dot); None lists all
        """
        self._root = root
        self._include_hidden = include_hidden
        self._extensions = (
            {ext.lstrip(".").lower() for ext in extensions} if extensions is not None else None
        )

    @property
    def root(self) -> Path:
        return self._root

    def _is_listed(self, name: str) -> bool:
        if not self._include_hidden and name.startswith("."):
            return False
        if self._extensions is None:
            return True
        return Path(name).suffix.lstrip(".").lower() in self._extensions

    def list_files(self) -> list[VaultFile]:
        """List vault files sorted by path.

        Raises:
            VaultNotFoundError: If the root is missing or not a directory
        """
        if not self._root.is_dir():
            raise VaultNotFoundError(
                f"Vault not found: {self._root}",
                suggestion="set ZEN_SWITCHER_VAULT or vault_dir in config.json",
            )

        def _on_error(error: OSError) -> None:
            logger.warning(f"Skipping unreadable directory: {error}")

        files: list[VaultFile] = []
        for dirpath, dirnames, filenames in os.walk(self._root, onerror=_on_error):
            if not self._include_hidden:
                dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            base = Path(dirpath)
            for filename in filenames:
                if self._is_listed(filename):
                    relative = (base / filename).relative_to(self._root)
                    files.append(VaultFile.from_relative(relative))

        files.sort(key=lambda f: f.path)
        logger.debug(f"Listed {len(files)} files under {self._root}")
        return files

    def resolve(self, file: VaultFile) -> Path:
        """Absolute path of a vault file."""
        return self._root / file.path
