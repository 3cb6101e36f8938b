from __future__ import annotations

from pathlib import Path

from .command import CmdResult, run_cmd


def pip_install_requirements(manifest: str, *, dry_run: bool = False) -> CmdResult:
    """Install a requirements file into the system interpreter.

    Debian marks the system interpreter as externally managed (PEP 668), so the
    override flag is always passed.
    """
    p = Path(manifest)
    return run_cmd(
        ["pip3", "install", "-r", p.name, "--break-system-packages"],
        check=False,
        cwd=str(p.parent),
        dry_run=dry_run,
    )
