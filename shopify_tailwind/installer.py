"""
Installer — adds Tailwind CSS tooling to a Shopify theme.

Stages run strictly in order:

    1. node must be on PATH
    2. layout/theme.liquid must exist
    3. package.json (npm init -y when missing)
    4. Tailwind version (argument or interactive prompt)
    5. npm install -D <profile dependencies>
    6. generated config files (only when absent)
    7. "tailwind" build script in package.json
    8. stylesheet tag in theme.liquid
    9. ignore files

Any InstallerError aborts the run; nothing is rolled back, and every stage
is safe to repeat on the next run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .errors import NodeNotFoundError, NotAShopifyThemeError
from .ignore_files import reconcile
from .manifest import PackageManifest
from .models import InstallReport, TailwindVersion
from .npm import NpmRunner
from .profiles import get_profile
from .prompt import prompt_for_version
from .scaffold import ScaffoldEngine
from .template_patcher import patch_template
from .validator import is_valid_project, node_available

logger = logging.getLogger(__name__)


class Installer:
    """
    Runs the full install against one theme directory.

    Parameters
    ----------
    root : Path
        Theme root (the directory containing layout/).
    runner : NpmRunner | None
        npm wrapper; defaults to NpmRunner(root).
    prompt : callable | None
        Zero-argument callable returning a TailwindVersion, used when run()
        is not given a version. Defaults to the interactive stdin prompt.
    """

    def __init__(
        self,
        root: Path | str = ".",
        runner: Optional[NpmRunner] = None,
        prompt: Optional[Callable[[], TailwindVersion]] = None,
    ):
        self.root = Path(root)
        self.runner = runner or NpmRunner(self.root)
        self.prompt = prompt or prompt_for_version
        self.manifest = PackageManifest(self.root)
        self.scaffolder = ScaffoldEngine()

    def check_environment(self) -> None:
        if not node_available():
            raise NodeNotFoundError()
        if not is_valid_project(self.root):
            raise NotAShopifyThemeError(self.root)

    def run(
        self,
        version: Optional[TailwindVersion] = None,
        *,
        overwrite_script: bool = True,
    ) -> InstallReport:
        self.check_environment()
        manifest_created = self.manifest.ensure(self.runner)

        version = TailwindVersion(version) if version is not None else self.prompt()
        profile = get_profile(version)
        report = InstallReport(version=version, manifest_created=manifest_created)

        logger.info("Installing Tailwind CSS v%s and its dependencies...", version.value)
        self.runner.install_dev(profile.dev_dependencies)

        logger.info("Generating Tailwind v%s config files...", version.value)
        report.files_written = sorted(self.scaffolder.scaffold(profile, self.root))

        report.script_changed = self.manifest.set_build_script(
            profile.build_script, overwrite=overwrite_script
        )
        report.patch_result = patch_template(profile.link_fragment, self.root)

        for name, lines in profile.ignore_entries.items():
            report.ignore_results[name] = reconcile(self.root / name, lines)

        logger.info("Tailwind CSS v%s has been installed and configured successfully!", version.value)
        return report
