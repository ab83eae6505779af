"""Interactive Tailwind version selection."""
from __future__ import annotations

from typing import Callable

from .errors import PromptAbortedError
from .models import TailwindVersion

QUESTION = "Which version of Tailwind CSS would you like to install? (3/4): "
INVALID = "Invalid version. Please enter either 3 or 4."


def parse_version(answer: str) -> TailwindVersion | None:
    """Return the version for an exact "3"/"4" answer (surrounding whitespace ignored)."""
    try:
        return TailwindVersion(answer.strip())
    except ValueError:
        return None


def prompt_for_version(
    ask: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> TailwindVersion:
    """
    Ask until the answer is "3" or "4".

    Raises PromptAbortedError when input ends (EOF) before a valid answer.
    """
    while True:
        try:
            answer = ask(QUESTION)
        except EOFError as exc:
            raise PromptAbortedError() from exc
        version = parse_version(answer)
        if version is not None:
            return version
        echo(INVALID)
