from __future__ import annotations

import logging
import os
import shutil
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def remove_tree(path: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.debug("Would remove tree %s", path)
        return
    shutil.rmtree(path)


def remove_symlink(path: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.debug("Would remove symlink %s", path)
        return
    os.unlink(path)


def backup_path_for(path: str, when: datetime) -> str:
    return f"{path}.backup.{when.strftime(BACKUP_TIMESTAMP_FORMAT)}"


def move_aside(path: str, when: datetime, *, dry_run: bool = False) -> str:
    """Rename a file to a timestamped backup next to it; return the backup path."""

    backup = backup_path_for(path, when)
    if Path(backup).exists():
        raise FileExistsError(backup)
    if dry_run:
        logger.debug("Would move %s -> %s", path, backup)
        return backup
    os.rename(path, backup)
    return backup


def create_symlink(target: str, link: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.debug("Would link %s -> %s", link, target)
        return
    os.symlink(target, link)


def write_log(path: str, text: str) -> None:
    """Overwrite a transient tool log; failures here never fail the caller."""

    try:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.debug("Could not write %s: %s", path, e)
