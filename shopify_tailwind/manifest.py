"""
PackageManifest — create package.json if needed and manage its scripts table.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ManifestError
from .npm import NpmRunner

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
SCRIPT_NAME = "tailwind"


class PackageManifest:
    """The theme's package.json."""

    def __init__(self, root: Path | str = "."):
        self.path = Path(root) / PACKAGE_JSON

    def exists(self) -> bool:
        return self.path.exists()

    def ensure(self, runner: NpmRunner) -> bool:
        """
        Run ``npm init -y`` when package.json is missing.

        Returns True if the manifest was created. A failing npm command
        propagates as CommandFailedError.
        """
        if self.exists():
            logger.debug("'%s' already exists.", PACKAGE_JSON)
            return False
        logger.info("Initialising npm...")
        runner.init()
        return True

    def load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestError(self.path, f"unreadable ({exc.strerror or exc})") from exc
        except UnicodeDecodeError as exc:
            raise ManifestError(self.path, f"not valid UTF-8 (byte {exc.start})") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ManifestError(self.path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
        if not isinstance(data, dict):
            raise ManifestError(self.path, "top-level value is not an object")
        return data

    def save(self, data: dict[str, Any]) -> None:
        # Key order is kept as loaded.
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def set_build_script(self, command: str, *, overwrite: bool) -> bool:
        """
        Set ``scripts.tailwind`` to *command*.

        overwrite=True replaces an existing entry; overwrite=False keeps it.
        Returns True if package.json was rewritten.
        """
        data = self.load()
        scripts = data.get("scripts")
        if scripts is not None and not isinstance(scripts, dict):
            raise ManifestError(self.path, "'scripts' is not an object")
        if scripts is None:
            scripts = {}
            data["scripts"] = scripts

        current = scripts.get(SCRIPT_NAME)
        if current is not None and not overwrite:
            logger.info("Keeping existing '%s' script: %s", SCRIPT_NAME, current)
            return False
        if current == command:
            logger.info("'%s' script is already up to date.", SCRIPT_NAME)
            return False

        scripts[SCRIPT_NAME] = command
        self.save(data)
        logger.info("Added '%s' build script to %s.", SCRIPT_NAME, PACKAGE_JSON)
        return True
