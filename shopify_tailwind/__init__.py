"""
Shopify Tailwind installer
==========================
Adds Tailwind CSS (v3 or v4) tooling to a Shopify theme: package.json and
its build script, the Tailwind config files, the stylesheet tag in
layout/theme.liquid, and .gitignore / .shopifyignore entries.

Usage:
    from shopify_tailwind import Installer, TailwindVersion

    report = Installer("path/to/theme").run(TailwindVersion.V4)
"""

from .errors import (
    InstallerError, NodeNotFoundError, NotAShopifyThemeError,
    CommandFailedError, ManifestError, TemplateAnchorMissingError,
    ConfigError, PromptAbortedError,
)
from .models import TailwindVersion, PatchResult, ReconcileResult, InstallReport
from .profiles import TailwindProfile, get_profile
from .installer import Installer
from .config import InstallerConfig, resolve_config

__version__ = "1.0.0"

__all__ = [
    "Installer", "InstallReport", "InstallerConfig", "resolve_config",
    "TailwindVersion", "PatchResult", "ReconcileResult",
    "TailwindProfile", "get_profile",
    "InstallerError", "NodeNotFoundError", "NotAShopifyThemeError",
    "CommandFailedError", "ManifestError", "TemplateAnchorMissingError",
    "ConfigError", "PromptAbortedError",
]
