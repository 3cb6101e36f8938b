from __future__ import annotations

import enum
import logging
from typing import Callable

from rich.prompt import Confirm

from .console import console

logger = logging.getLogger(__name__)


class ConflictResolution(enum.Enum):
    REUSE_EXISTING = "reuse"
    REPLACE_FRESH = "replace"


ConflictResolver = Callable[[str], ConflictResolution]


class YesNoPrompt(Confirm):
    """y/N confirmation: anything starting with y or Y is yes, all else is no."""

    def process_response(self, value: str) -> bool:
        return value.strip().lower().startswith("y")


def prompt_resolver(path: str) -> ConflictResolution:
    """Ask the operator whether an existing checkout at `path` should be replaced."""
    try:
        replace = YesNoPrompt.ask(
            "Do you want to remove it and clone fresh? (y/N)",
            default=False,
            show_default=False,
            show_choices=False,
            console=console,
        )
    except EOFError:
        # No operator on stdin: same as answering no.
        console.print()
        logger.debug("No answer for %s (stdin closed), keeping it", path)
        replace = False
    return ConflictResolution.REPLACE_FRESH if replace else ConflictResolution.REUSE_EXISTING


def fixed_resolver(resolution: ConflictResolution) -> ConflictResolver:
    """Unattended resolver: always answer `resolution`."""

    def _resolve(path: str) -> ConflictResolution:
        return resolution

    return _resolve
