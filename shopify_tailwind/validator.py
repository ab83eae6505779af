"""Presence checks run before anything is written."""
from __future__ import annotations

import shutil
from pathlib import Path

THEME_LIQUID = Path("layout") / "theme.liquid"


def is_valid_project(root: Path | str = ".") -> bool:
    """True iff root looks like a Shopify theme (layout/theme.liquid exists)."""
    return (Path(root) / THEME_LIQUID).exists()


def node_available() -> bool:
    return shutil.which("node") is not None
