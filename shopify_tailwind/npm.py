"""
NpmRunner — the only place the installer shells out.

All subprocess calls go through subprocess.run so they can be mocked in
tests. npm output is not captured; the user sees it as it happens.
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import CommandFailedError

logger = logging.getLogger(__name__)


class NpmRunner:
    """Runs npm commands in the theme root. One failure is fatal; no retry."""

    def __init__(self, root: Path | str = ".", executable: str = "npm"):
        self.root = Path(root)
        self.executable = executable

    def run(self, *args: str) -> None:
        cmd = [self.executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, cwd=str(self.root))
        except FileNotFoundError as exc:
            raise CommandFailedError(
                f"'{self.executable}' was not found on PATH.", cmd, None
            ) from exc
        if result.returncode != 0:
            raise CommandFailedError(
                f"'{' '.join(cmd)}' exited with status {result.returncode}.",
                cmd,
                result.returncode,
            )

    def init(self) -> None:
        """npm init -y"""
        self.run("init", "-y")

    def install_dev(self, packages: Sequence[str]) -> None:
        """npm install -D <packages...>"""
        self.run("install", "-D", *packages)
