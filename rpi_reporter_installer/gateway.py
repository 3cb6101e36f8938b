"""Host capability interface.

Every command the installer runs against the machine goes through a
`SystemGateway`. Steps hold the check-then-act decisions; the gateway only
performs effects and answers queries, so the orchestration can run against a
fake in tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .lib import apt, git, net, pip, privileges, systemd, users
from .lib.command import CmdResult
from .lib.fsops import write_log
from .logging_utils import log_success

logger = logging.getLogger(__name__)


class GatewayError(RuntimeError):
    pass


@dataclass(frozen=True)
class PackageReport:
    installed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class SystemGateway(Protocol):
    def is_privileged(self) -> bool:
        ...

    def is_reachable(self, host: str) -> bool:
        ...

    def install_packages(self, packages: Sequence[str], log_path: str) -> PackageReport:
        ...

    def clone_repository(self, url: str, dest: str) -> CmdResult:
        ...

    def install_dependencies(self, manifest: str, log_path: str) -> CmdResult:
        ...

    def user_exists(self, user: str) -> bool:
        ...

    def user_groups(self, user: str) -> List[str]:
        ...

    def adjust_group_membership(self, user: str, group: str) -> CmdResult:
        ...

    def register_service(self) -> CmdResult:
        ...

    def control_service(self, action: str, unit: str) -> CmdResult:
        ...

    def query_service_status(self, unit: str, query: str) -> bool:
        ...

    def service_status_text(self, unit: str) -> str:
        ...


class HostGateway:
    """SystemGateway backed by apt-get, git, pip3, usermod and systemctl."""

    def __init__(self, *, dry_run: bool = False):
        self.dry_run = dry_run

    def is_privileged(self) -> bool:
        return privileges.is_root()

    def is_reachable(self, host: str) -> bool:
        return net.is_reachable(host, dry_run=self.dry_run)

    def install_packages(self, packages: Sequence[str], log_path: str) -> PackageReport:
        logger.info("Updating package list...")
        r = apt.apt_update(dry_run=self.dry_run)
        if not r.ok:
            raise GatewayError(f"apt-get update failed ({r.returncode}): {r.stderr.strip()}")
        log_success(logger, "Package list updated")

        report = PackageReport()
        for package in packages:
            logger.info("Installing %s...", package)
            r = apt.apt_install(package, dry_run=self.dry_run)
            write_log(log_path, r.output)
            if r.ok:
                log_success(logger, "Installed %s", package)
                report.installed.append(package)
            else:
                logger.error("Failed to install %s", package)
                if r.stderr.strip():
                    logger.debug("apt-get stderr for %s: %s", package, r.stderr.strip())
                report.failed.append(package)
        return report

    def clone_repository(self, url: str, dest: str) -> CmdResult:
        return git.git_clone(url, dest, dry_run=self.dry_run)

    def install_dependencies(self, manifest: str, log_path: str) -> CmdResult:
        r = pip.pip_install_requirements(manifest, dry_run=self.dry_run)
        write_log(log_path, r.output)
        return r

    def user_exists(self, user: str) -> bool:
        return users.user_exists(user)

    def user_groups(self, user: str) -> List[str]:
        return users.user_groups(user)

    def adjust_group_membership(self, user: str, group: str) -> CmdResult:
        return users.add_user_to_group(user, group, dry_run=self.dry_run)

    def register_service(self) -> CmdResult:
        return systemd.daemon_reload(dry_run=self.dry_run)

    def control_service(self, action: str, unit: str) -> CmdResult:
        return systemd.systemctl(action, unit, dry_run=self.dry_run)

    def query_service_status(self, unit: str, query: str) -> bool:
        return systemd.systemctl_query(query, unit)

    def service_status_text(self, unit: str) -> str:
        return systemd.systemctl_status(unit)
