"""
End-to-end tests for Installer.run() against a temporary theme directory.
npm is replaced by FakeNpmRunner; no subprocess is ever started.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from shopify_tailwind.errors import (
    CommandFailedError, NodeNotFoundError, NotAShopifyThemeError,
    TemplateAnchorMissingError,
)
from shopify_tailwind.installer import Installer
from shopify_tailwind.models import PatchResult, ReconcileResult, TailwindVersion
from shopify_tailwind.npm import NpmRunner

THEME = "<html>\n<head>\n<title>Shop</title>\n</head>\n<body></body>\n</html>\n"
V3_LINK = "{{ 'tailwind.css' | asset_url | stylesheet_tag }}"
V4_LINK = "{{ 'tailwind-output.css' | asset_url | stylesheet_tag }}"


class FakeNpmRunner(NpmRunner):
    """Records commands; 'init' writes a package.json like npm init -y does."""

    def __init__(self, root, fail_on: str | None = None):
        super().__init__(root)
        self.calls: list[tuple[str, ...]] = []
        self.fail_on = fail_on

    def run(self, *args: str) -> None:
        self.calls.append(args)
        if args[0] == self.fail_on:
            raise CommandFailedError("npm failed", ["npm", *args], 1)
        if args[0] == "init":
            (self.root / "package.json").write_text(
                json.dumps({"name": "theme", "version": "1.0.0"}, indent=2) + "\n",
                encoding="utf-8",
            )


@pytest.fixture(autouse=True)
def _node_on_path(monkeypatch):
    monkeypatch.setattr("shopify_tailwind.installer.node_available", lambda: True)


@pytest.fixture
def theme(tmp_path) -> Path:
    (tmp_path / "layout").mkdir()
    (tmp_path / "layout" / "theme.liquid").write_text(THEME, encoding="utf-8")
    return tmp_path


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*")) if p.is_file()
    }


# ── gating ───────────────────────────────────────────────────────────────────

def test_node_missing_is_fatal(theme, monkeypatch):
    monkeypatch.setattr("shopify_tailwind.installer.node_available", lambda: False)
    runner = FakeNpmRunner(theme)
    with pytest.raises(NodeNotFoundError):
        Installer(theme, runner=runner).run(TailwindVersion.V3)
    assert runner.calls == []


def test_not_a_theme_creates_nothing(tmp_path):
    runner = FakeNpmRunner(tmp_path)
    with pytest.raises(NotAShopifyThemeError):
        Installer(tmp_path, runner=runner).run(TailwindVersion.V3)
    assert runner.calls == []
    assert list(tmp_path.iterdir()) == []


def test_init_failure_stops_before_config_files(theme):
    runner = FakeNpmRunner(theme, fail_on="init")
    prompted = []
    installer = Installer(theme, runner=runner, prompt=lambda: prompted.append(1))
    with pytest.raises(CommandFailedError):
        installer.run()
    assert prompted == []
    assert sorted(_snapshot(theme)) == ["layout/theme.liquid"]


def test_install_failure_stops_before_config_files(theme):
    runner = FakeNpmRunner(theme, fail_on="install")
    with pytest.raises(CommandFailedError):
        Installer(theme, runner=runner).run(TailwindVersion.V4)
    assert sorted(_snapshot(theme)) == ["layout/theme.liquid", "package.json"]


def test_missing_head_close_is_fatal(theme):
    (theme / "layout" / "theme.liquid").write_text("<body></body>", encoding="utf-8")
    with pytest.raises(TemplateAnchorMissingError):
        Installer(theme, runner=FakeNpmRunner(theme)).run(TailwindVersion.V3)


# ── v3 ───────────────────────────────────────────────────────────────────────

def test_v3_install(theme):
    runner = FakeNpmRunner(theme)
    report = Installer(theme, runner=runner).run(TailwindVersion.V3)

    assert runner.calls == [
        ("init", "-y"),
        ("install", "-D", "tailwindcss@3.4.15", "postcss", "autoprefixer"),
    ]
    assert report.version is TailwindVersion.V3
    assert report.manifest_created is True
    assert report.files_written == ["tailwind-config.css", "tailwind.config.js"]
    assert report.script_changed is True
    assert report.patch_result is PatchResult.INSERTED
    assert report.ignore_results == {
        ".gitignore": ReconcileResult.CREATED,
        ".shopifyignore": ReconcileResult.CREATED,
    }

    manifest = json.loads((theme / "package.json").read_text(encoding="utf-8"))
    assert manifest["scripts"]["tailwind"].startswith("npx tailwindcss -i ./tailwind-config.css")
    theme_liquid = (theme / "layout" / "theme.liquid").read_text(encoding="utf-8")
    assert V3_LINK + "</head>" in theme_liquid
    assert "node_modules" in (theme / ".gitignore").read_text(encoding="utf-8")


def test_existing_manifest_skips_init(theme):
    (theme / "package.json").write_text('{"name": "mine", "scripts": {"dev": "x"}}', encoding="utf-8")
    runner = FakeNpmRunner(theme)
    report = Installer(theme, runner=runner).run(TailwindVersion.V3)

    assert runner.calls[0][0] == "install"
    assert report.manifest_created is False
    scripts = json.loads((theme / "package.json").read_text(encoding="utf-8"))["scripts"]
    assert list(scripts) == ["dev", "tailwind"]


def test_keep_existing_script(theme):
    (theme / "package.json").write_text('{"scripts": {"tailwind": "custom"}}', encoding="utf-8")
    report = Installer(theme, runner=FakeNpmRunner(theme)).run(
        TailwindVersion.V3, overwrite_script=False
    )
    assert report.script_changed is False
    scripts = json.loads((theme / "package.json").read_text(encoding="utf-8"))["scripts"]
    assert scripts == {"tailwind": "custom"}


# ── v4 ───────────────────────────────────────────────────────────────────────

def test_v4_install(theme):
    runner = FakeNpmRunner(theme)
    report = Installer(theme, runner=runner).run(TailwindVersion.V4)

    assert runner.calls[-1] == ("install", "-D", "tailwindcss", "@tailwindcss/cli")
    assert report.files_written == ["assets/tailwind-config.css"]
    assert report.ignore_results == {".shopifyignore": ReconcileResult.CREATED}
    assert not (theme / ".gitignore").exists()
    assert (theme / ".shopifyignore").read_text(encoding="utf-8") == "\npackage.json\n"
    assert V4_LINK in (theme / "layout" / "theme.liquid").read_text(encoding="utf-8")


def test_prompt_used_when_no_version(theme):
    report = Installer(
        theme, runner=FakeNpmRunner(theme), prompt=lambda: TailwindVersion.V4
    ).run()
    assert report.version is TailwindVersion.V4


def test_missing_theme_liquid_after_validation_is_advisory(theme, monkeypatch):
    monkeypatch.setattr("shopify_tailwind.installer.is_valid_project", lambda root: True)
    (theme / "layout" / "theme.liquid").unlink()
    report = Installer(theme, runner=FakeNpmRunner(theme)).run(TailwindVersion.V4)
    assert report.patch_result is PatchResult.FILE_MISSING
    assert (theme / ".shopifyignore").exists()


# ── idempotence ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("version", [TailwindVersion.V3, TailwindVersion.V4])
def test_second_run_changes_nothing(theme, version):
    Installer(theme, runner=FakeNpmRunner(theme)).run(version)
    before = _snapshot(theme)

    runner = FakeNpmRunner(theme)
    report = Installer(theme, runner=runner).run(version)

    assert _snapshot(theme) == before
    assert ("init", "-y") not in runner.calls
    assert report.files_written == []
    assert report.script_changed is False
    assert report.patch_result is PatchResult.ALREADY_PRESENT
    assert set(report.ignore_results.values()) == {ReconcileResult.UNCHANGED}
    link = V3_LINK if version is TailwindVersion.V3 else V4_LINK
    assert before["layout/theme.liquid"].decode("utf-8").count(link) == 1
