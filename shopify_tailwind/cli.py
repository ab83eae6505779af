#!/usr/bin/env python3
"""
CLI Entry Point — install Tailwind CSS into a Shopify theme
===========================================================
Usage:
    shopify-tailwind                          # asks for the version
    shopify-tailwind --tailwind-version 4
    python -m shopify_tailwind --dir path/to/theme --verbose

Exit status is 0 on success and 1 on any fatal error.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from . import __version__
from .config import resolve_config
from .errors import InstallerError
from .installer import Installer
from .models import InstallReport, PatchResult
from .npm import NpmRunner

logger = logging.getLogger("shopify_tailwind")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s" if verbose else "%(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopify-tailwind",
        description="Add Tailwind CSS tooling to the Shopify theme in the current directory.",
    )
    parser.add_argument(
        "--tailwind-version", "-t",
        dest="tailwind_version",
        choices=["3", "4"],
        default=None,
        help="Tailwind CSS major version (default: ask interactively)",
    )
    parser.add_argument(
        "--dir", "-d",
        dest="root",
        default=".",
        help="Theme root directory (default: current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="YAML config file (default: .shopify-tailwind.yml in the theme root, if present)",
    )
    parser.add_argument(
        "--keep-script",
        dest="overwrite_script",
        action="store_const",
        const=False,
        default=None,
        help="Keep an existing 'tailwind' script in package.json instead of replacing it",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_const",
        const=True,
        default=None,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    root = Path(args.root)
    load_dotenv(root / ".env")
    setup_logging(bool(args.verbose))

    try:
        cfg = resolve_config(
            root,
            config_file=args.config,
            overrides={
                "tailwind_version": args.tailwind_version,
                "overwrite_script": args.overwrite_script,
                "verbose": args.verbose,
            },
        )
        # Re-apply logging with the file's verbose setting merged with the CLI flag
        setup_logging(cfg.verbose)

        installer = Installer(root, runner=NpmRunner(root, executable=cfg.npm))
        report = installer.run(cfg.tailwind_version, overwrite_script=cfg.overwrite_script)
    except InstallerError as exc:
        logger.error("ERROR: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.error("Aborted.")
        return 1

    _print_results(report)
    return 0


def _print_results(report: InstallReport) -> None:
    print("-" * 60)
    print(f"Tailwind CSS v{report.version.value}")
    if report.manifest_created:
        print("  package.json: created")
    for rel_path in report.files_written:
        print(f"  created: {rel_path}")
    print(f"  build script: {'updated' if report.script_changed else 'unchanged'}")
    if report.patch_result is not None:
        print(f"  theme.liquid: {report.patch_result.value.replace('_', ' ')}")
    for name, result in report.ignore_results.items():
        print(f"  {name}: {result.value}")
    print("-" * 60)
    if report.patch_result is PatchResult.FILE_MISSING:
        print("Add the stylesheet tag to your layout manually.")
    print("To build your CSS, run: npm run tailwind")


if __name__ == "__main__":
    sys.exit(main())
