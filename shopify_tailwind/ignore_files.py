"""
Ignore-file reconciliation for .gitignore and .shopifyignore.

The presence check is all-or-nothing: if any required entry is missing
(as a substring) the whole block is appended again, even entries that
were already there. Existing duplicates are never cleaned up.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .models import ReconcileResult

logger = logging.getLogger(__name__)


def render_block(required_lines: Sequence[str]) -> str:
    """The text written or appended for *required_lines*: a blank line, then one entry per line."""
    return "\n" + "".join(f"{line}\n" for line in required_lines)


def reconcile(path: Path | str, required_lines: Sequence[str]) -> ReconcileResult:
    path = Path(path)
    block = render_block(required_lines)

    created = False
    if not path.exists():
        logger.info("Creating '%s' file...", path.name)
        path.write_text(block, encoding="utf-8")
        created = True
    else:
        logger.info("'%s' already exists. Ensuring correct content.", path.name)

    with open(path, encoding="utf-8", errors="surrogateescape") as f:
        content = f.read()
    if any(line not in content for line in required_lines):
        logger.info("Updating '%s'...", path.name)
        with open(path, "a", encoding="utf-8") as f:
            f.write(block)
        return ReconcileResult.UPDATED

    if created:
        return ReconcileResult.CREATED
    logger.debug("'%s' already has every required entry.", path.name)
    return ReconcileResult.UNCHANGED
