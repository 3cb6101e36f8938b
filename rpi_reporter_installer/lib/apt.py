from __future__ import annotations

from .command import CmdResult, run_cmd

# Keeps apt from opening debconf dialogs while the installer owns the terminal.
_APT_ENV = {"DEBIAN_FRONTEND": "noninteractive"}


def apt_update(*, dry_run: bool = False) -> CmdResult:
    return run_cmd(["apt-get", "update"], check=False, env=_APT_ENV, dry_run=dry_run)


def apt_install(package: str, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(
        ["apt-get", "install", "-y", package],
        check=False,
        env=_APT_ENV,
        dry_run=dry_run,
    )
