"""
Installer exceptions
====================
Every fatal condition raised by the installer derives from InstallerError.
Library code raises; only the CLI turns these into an exit status of 1.
"""
from __future__ import annotations

from pathlib import Path
from typing import Sequence


class InstallerError(Exception):
    """Base class for fatal installer failures."""


class NodeNotFoundError(InstallerError):
    def __init__(self) -> None:
        super().__init__("Node.js is not installed. Please install Node.js first.")


class NotAShopifyThemeError(InstallerError):
    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(
            "This doesn't appear to be a Shopify project. "
            "Ensure 'layout/theme.liquid' exists."
        )


class CommandFailedError(InstallerError):
    """
    Raised when an external command exits non-zero or cannot be started.

    Attributes
    ----------
    command : list[str]  — the command line that was run
    returncode : int | None — None when the executable could not be found
    """

    def __init__(self, message: str, command: Sequence[str], returncode: int | None) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(message)


class ManifestError(InstallerError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot use '{path.name}': {reason}")


class TemplateAnchorMissingError(InstallerError):
    def __init__(self, path: Path, anchor: str) -> None:
        self.path = path
        self.anchor = anchor
        super().__init__(
            f"'{path.as_posix()}' has no '{anchor}' tag; cannot insert the stylesheet link."
        )


class ConfigError(InstallerError, ValueError):
    pass


class PromptAbortedError(InstallerError):
    def __init__(self) -> None:
        super().__init__("No Tailwind CSS version selected.")
