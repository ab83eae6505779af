"""
ScaffoldEngine — writes the generated Tailwind files for a profile.

Usage:
    engine = ScaffoldEngine()
    written = engine.scaffold(profile, theme_root)
    # written: dict[str, str] — relative path -> file content
"""
from __future__ import annotations

import logging
from pathlib import Path

from shopify_tailwind.models import TailwindVersion
from shopify_tailwind.profiles import TailwindProfile

from .templates import v3, v4

logger = logging.getLogger(__name__)

# Map Tailwind version -> template FILES dict
_TEMPLATE_MAP: dict[TailwindVersion, dict[str, str]] = {
    TailwindVersion.V3: v3.FILES,
    TailwindVersion.V4: v4.FILES,
}


def template_files(version: TailwindVersion) -> dict[str, str]:
    """Return the generated files for *version* (relative path -> content)."""
    return dict(_TEMPLATE_MAP[TailwindVersion(version)])


class ScaffoldEngine:
    """
    Lays down the Tailwind entry files a profile needs.

    For v3 that is tailwind.config.js plus the @tailwind directives file in
    the theme root; for v4 it is the CSS-first config under assets/. A file
    the theme already has is left as the developer wrote it, so a second
    install never clobbers a customised config.
    """

    def missing(self, profile: TailwindProfile, root: Path) -> dict[str, str]:
        """Files of *profile* not yet present under *root*."""
        root = Path(root)
        pending = {}
        for rel_path, content in template_files(profile.version).items():
            if (root / rel_path).exists():
                logger.info("'%s' already exists. Skipping creation.", rel_path)
            else:
                pending[rel_path] = content
        return pending

    def scaffold(self, profile: TailwindProfile, root: Path) -> dict[str, str]:
        """Write what missing() reports and return it (relative path -> content)."""
        pending = self.missing(profile, root)
        for rel_path, content in pending.items():
            dest = Path(root) / rel_path
            # v4 keeps its config in assets/, which a fresh theme may lack
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content, encoding="utf-8")
            logger.info("Created '%s'.", rel_path)
        return pending
