"""
TailwindProfile — everything that differs between the Tailwind v3 and v4 installs.

The generated file contents live in shopify_tailwind.scaffold.templates; this
module holds the rest: npm packages, the build script, the compiled stylesheet
asset name and the ignore-file entries.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .models import TailwindVersion

GITIGNORE = ".gitignore"
SHOPIFYIGNORE = ".shopifyignore"

# Per-version defaults used by get_profile()
_VERSION_DEFAULTS: dict[TailwindVersion, dict] = {
    TailwindVersion.V3: {
        "dev_dependencies": ["tailwindcss@3.4.15", "postcss", "autoprefixer"],
        "build_script": (
            "npx tailwindcss -i ./tailwind-config.css -o ./assets/tailwind.css --watch"
        ),
        "stylesheet": "tailwind.css",
        "ignore_entries": {
            GITIGNORE: [".DS_Store", "node_modules", "package-lock.json", ".env", "/.idea"],
            SHOPIFYIGNORE: [
                "package.json",
                "package-lock.json",
                "tailwind.config.js",
                "tailwind-config.css",
                "html-ref.html",
            ],
        },
    },
    TailwindVersion.V4: {
        "dev_dependencies": ["tailwindcss", "@tailwindcss/cli"],
        "build_script": (
            "npx @tailwindcss/cli -i ./assets/tailwind-config.css "
            "-o ./assets/tailwind-output.css --watch"
        ),
        "stylesheet": "tailwind-output.css",
        "ignore_entries": {
            SHOPIFYIGNORE: ["package.json"],
        },
    },
}


@dataclass
class TailwindProfile:
    """Describes one Tailwind major version's install into a theme."""

    version: TailwindVersion
    dev_dependencies: list[str] = field(default_factory=list)
    build_script: str = ""
    stylesheet: str = ""
    ignore_entries: dict[str, list[str]] = field(default_factory=dict)

    @property
    def link_fragment(self) -> str:
        """Liquid tag that loads the compiled stylesheet from the theme assets."""
        return f"{{{{ '{self.stylesheet}' | asset_url | stylesheet_tag }}}}"


def get_profile(version: TailwindVersion | str) -> TailwindProfile:
    """Build the profile for *version* ("3" or "4"); raises ValueError otherwise."""
    version = TailwindVersion(version)
    defaults = _VERSION_DEFAULTS[version]
    return TailwindProfile(
        version=version,
        dev_dependencies=list(defaults["dev_dependencies"]),
        build_script=defaults["build_script"],
        stylesheet=defaults["stylesheet"],
        ignore_entries={name: list(lines) for name, lines in defaults["ignore_entries"].items()},
    )
