from __future__ import annotations

from typing import Literal

from .command import CmdResult, run_cmd

ServiceAction = Literal["enable", "start", "restart"]
ServiceQuery = Literal["is-enabled", "is-active"]

SERVICE_ACTIONS = ("enable", "start", "restart")
SERVICE_QUERIES = ("is-enabled", "is-active")


def daemon_reload(*, dry_run: bool = False) -> CmdResult:
    return run_cmd(["systemctl", "daemon-reload"], check=False, dry_run=dry_run)


def systemctl(action: str, unit: str, *, dry_run: bool = False) -> CmdResult:
    if action not in SERVICE_ACTIONS:
        raise ValueError(f"Unsupported systemctl action: {action}")
    return run_cmd(["systemctl", action, unit], check=False, dry_run=dry_run)


def systemctl_query(query: str, unit: str) -> bool:
    # Queries run even in dry-run mode; they never change the host.
    if query not in SERVICE_QUERIES:
        raise ValueError(f"Unsupported systemctl query: {query}")
    return run_cmd(["systemctl", query, "--quiet", unit], check=False).ok


def systemctl_status(unit: str) -> str:
    # `status` exits 3 for an inactive unit; the text is still what we want.
    r = run_cmd(["systemctl", "status", unit, "--no-pager"], check=False)
    return r.output
