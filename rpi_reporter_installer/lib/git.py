from __future__ import annotations

from .command import CmdResult, run_cmd


def git_clone(url: str, dest: str, *, dry_run: bool = False) -> CmdResult:
    # Never block on a credential prompt; an auth failure is just a failed clone.
    return run_cmd(
        ["git", "clone", url, dest],
        check=False,
        env={"GIT_TERMINAL_PROMPT": "0"},
        dry_run=dry_run,
    )
