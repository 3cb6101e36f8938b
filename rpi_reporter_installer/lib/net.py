from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def is_reachable(host: str, *, dry_run: bool = False) -> bool:
    """Single ICMP probe to a well-known host."""

    try:
        r = run_cmd(["ping", "-c", "1", "-W", "2", host], check=False, dry_run=dry_run)
    except OSError as e:
        logger.debug("ping unavailable: %s", e)
        return False
    return r.ok
