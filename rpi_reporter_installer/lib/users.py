from __future__ import annotations

import grp
import pwd

from .command import CmdResult, run_cmd


def user_exists(user: str) -> bool:
    try:
        pwd.getpwnam(user)
    except KeyError:
        return False
    return True


def user_groups(user: str) -> list[str]:
    """Primary plus supplementary group names of an existing account."""
    entry = pwd.getpwnam(user)
    names = [g.gr_name for g in grp.getgrall() if user in g.gr_mem]
    try:
        primary = grp.getgrgid(entry.pw_gid).gr_name
    except KeyError:
        return names
    if primary not in names:
        names.insert(0, primary)
    return names


def add_user_to_group(user: str, group: str, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(["usermod", user, "-a", "-G", group], check=False, dry_run=dry_run)
