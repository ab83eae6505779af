"""Result types shared by the installer stages."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TailwindVersion(str, Enum):
    V3 = "3"
    V4 = "4"


class PatchResult(str, Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"
    FILE_MISSING = "file_missing"


class ReconcileResult(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass
class InstallReport:
    """Everything one Installer.run() did to the project."""
    version: TailwindVersion
    manifest_created: bool = False
    files_written: list[str] = field(default_factory=list)
    script_changed: bool = False
    patch_result: Optional[PatchResult] = None
    ignore_results: dict[str, ReconcileResult] = field(default_factory=dict)
