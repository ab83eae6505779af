"""
Installer configuration
=======================
Settings come from, in increasing precedence:

    1. defaults
    2. a YAML file: ``.shopify-tailwind.yml`` in the theme root, or --config
    3. environment (``.env`` is loaded by the CLI)
    4. CLI flags

YAML schema (all fields optional):

    tailwind_version: 4        # 3 or 4; omit to be asked interactively
    npm: npm                   # npm executable
    overwrite_script: true     # replace an existing "tailwind" script
    verbose: false

Environment variables:

    SHOPIFY_TAILWIND_VERSION   same as tailwind_version
    SHOPIFY_TAILWIND_NPM       same as npm
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import ConfigError
from .models import TailwindVersion

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".shopify-tailwind.yml"
ENV_VERSION = "SHOPIFY_TAILWIND_VERSION"
ENV_NPM = "SHOPIFY_TAILWIND_NPM"

_KNOWN_KEYS = frozenset({"tailwind_version", "npm", "overwrite_script", "verbose"})


@dataclass
class InstallerConfig:
    """Resolved settings for one installer run."""
    tailwind_version: Optional[TailwindVersion] = None
    npm: str = "npm"
    overwrite_script: bool = True
    verbose: bool = False


def _parse_version(value: Any, source: str) -> TailwindVersion:
    try:
        return TailwindVersion(str(value).strip())
    except ValueError:
        raise ConfigError(
            f"{source}: tailwind_version must be 3 or 4, got {value!r}"
        ) from None


def _parse_bool(value: Any, key: str, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{source}: '{key}' must be true or false, got {value!r}")
    return value


def load_config_file(path: Path | str) -> dict[str, Any]:
    """
    Parse a YAML config file into a plain dict of known keys.

    Raises
    ------
    ConfigError — file missing, invalid YAML, unknown keys or bad values
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"'{path}': invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"'{path}': expected a mapping at the top level")

    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(
            f"'{path}': unknown key(s) {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(_KNOWN_KEYS))}"
        )

    values: dict[str, Any] = {}
    if raw.get("tailwind_version") is not None:
        values["tailwind_version"] = _parse_version(raw["tailwind_version"], str(path))
    if raw.get("npm") is not None:
        npm = str(raw["npm"]).strip()
        if not npm:
            raise ConfigError(f"'{path}': 'npm' must not be empty")
        values["npm"] = npm
    for key in ("overwrite_script", "verbose"):
        if key in raw:
            values[key] = _parse_bool(raw[key], key, str(path))
    return values


def resolve_config(
    root: Path | str = ".",
    config_file: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> InstallerConfig:
    """
    Merge defaults, config file, environment and CLI overrides.

    An explicit *config_file* must exist; the default file in *root* is
    only read when present. ``None`` values in *overrides* are ignored.
    """
    env = os.environ if env is None else env
    cfg = InstallerConfig()

    if config_file is not None:
        file_values = load_config_file(config_file)
    else:
        default_path = Path(root) / DEFAULT_CONFIG_FILE
        file_values = load_config_file(default_path) if default_path.exists() else {}
    for key, value in file_values.items():
        setattr(cfg, key, value)

    if env.get(ENV_VERSION, "").strip():
        cfg.tailwind_version = _parse_version(env[ENV_VERSION], ENV_VERSION)
    if env.get(ENV_NPM, "").strip():
        cfg.npm = env[ENV_NPM].strip()

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "tailwind_version":
            value = _parse_version(value, "--tailwind-version")
        setattr(cfg, key, value)

    logger.debug("Resolved config: %s", cfg)
    return cfg
