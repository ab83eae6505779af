"""
Template patcher — inserts the Tailwind stylesheet tag into layout/theme.liquid.

Only a substring check is done; the Liquid is never parsed.
"""
from __future__ import annotations

import logging
from pathlib import Path

from .errors import TemplateAnchorMissingError
from .models import PatchResult
from .validator import THEME_LIQUID

logger = logging.getLogger(__name__)

HEAD_CLOSE = "</head>"


def patch_template(link_fragment: str, root: Path | str = ".") -> PatchResult:
    """
    Insert *link_fragment* immediately before the first ``</head>``.

    Returns FILE_MISSING (non-fatal) when theme.liquid is absent and
    ALREADY_PRESENT without writing when the fragment is already there.
    Raises TemplateAnchorMissingError, leaving the file untouched, when the
    template has no ``</head>``.
    """
    path = Path(root) / THEME_LIQUID
    if not path.exists():
        logger.warning("'%s' not found.", THEME_LIQUID.as_posix())
        return PatchResult.FILE_MISSING

    content = _read(path)
    if link_fragment in content:
        logger.info("Tailwind CSS link already exists in 'theme.liquid'.")
        return PatchResult.ALREADY_PRESENT

    index = content.find(HEAD_CLOSE)
    if index == -1:
        raise TemplateAnchorMissingError(THEME_LIQUID, HEAD_CLOSE)

    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content[:index] + link_fragment + content[index:])
    logger.info("Added Tailwind CSS link reference to 'theme.liquid'.")
    return PatchResult.INSERTED


def _read(path: Path) -> str:
    # Line endings and undecodable bytes must survive the rewrite unchanged.
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()
