"""
Shared test fixtures: a scripted gateway and a throwaway install layout.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from rpi_reporter_installer.conflict import ConflictResolution, fixed_resolver
from rpi_reporter_installer.context import InstallContext
from rpi_reporter_installer.gateway import GatewayError, PackageReport
from rpi_reporter_installer.install_config import InstallConfig
from rpi_reporter_installer.lib.command import CmdResult
from rpi_reporter_installer.logging_utils import configure_logging, reset_logging

FIXED_NOW = datetime(2025, 10, 31, 14, 5, 9)

UNIT_TEXT = "[Unit]\nDescription=RPi Reporter MQTT2HA Daemon\n"


def _cmd(argv: List[str], returncode: int = 0, stderr: str = "") -> CmdResult:
    return CmdResult(argv=argv, returncode=returncode, stdout="", stderr=stderr)


class FakeGateway:
    """In-memory SystemGateway. Records every call; knobs script the host."""

    def __init__(self, service_name: str = "isp-rpi-reporter.service"):
        self.calls: List[tuple] = []
        self.privileged = True
        self.reachable = True
        self.refresh_fails = False
        self.failing_packages: set = set()
        self.clone_returncode = 0
        self.clone_files: Dict[str, str] = {
            service_name: UNIT_TEXT,
            "requirements.txt": "paho-mqtt\nrequests\n",
        }
        self.pip_returncode = 0
        self.users: Dict[str, List[str]] = {"daemon": ["daemon"]}
        self.usermod_returncode = 0
        self.reload_returncode = 0
        self.enabled = False
        self.active = False
        self.action_returncodes: Dict[str, int] = {}
        self.status_text = "● isp-rpi-reporter.service - RPi Reporter\n   Active: active (running)\n"

    def called(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]

    def is_privileged(self) -> bool:
        self.calls.append(("is_privileged",))
        return self.privileged

    def is_reachable(self, host: str) -> bool:
        self.calls.append(("is_reachable", host))
        return self.reachable

    def install_packages(self, packages, log_path: str) -> PackageReport:
        self.calls.append(("install_packages", list(packages), log_path))
        if self.refresh_fails:
            raise GatewayError("apt-get update failed (100): could not resolve host")
        report = PackageReport()
        for p in packages:
            (report.failed if p in self.failing_packages else report.installed).append(p)
        return report

    def clone_repository(self, url: str, dest: str) -> CmdResult:
        self.calls.append(("clone_repository", url, dest))
        if self.clone_returncode != 0:
            return _cmd(["git", "clone", url, dest], self.clone_returncode, "fatal: repository not found")
        d = Path(dest)
        d.mkdir(parents=True)
        for name, text in self.clone_files.items():
            (d / name).write_text(text, encoding="utf-8")
        return _cmd(["git", "clone", url, dest])

    def install_dependencies(self, manifest: str, log_path: str) -> CmdResult:
        self.calls.append(("install_dependencies", manifest, log_path))
        return _cmd(["pip3", "install", "-r", manifest], self.pip_returncode)

    def user_exists(self, user: str) -> bool:
        self.calls.append(("user_exists", user))
        return user in self.users

    def user_groups(self, user: str) -> List[str]:
        self.calls.append(("user_groups", user))
        return list(self.users[user])

    def adjust_group_membership(self, user: str, group: str) -> CmdResult:
        self.calls.append(("adjust_group_membership", user, group))
        if self.usermod_returncode == 0:
            self.users[user].append(group)
        return _cmd(["usermod", user, "-a", "-G", group], self.usermod_returncode)

    def register_service(self) -> CmdResult:
        self.calls.append(("register_service",))
        return _cmd(["systemctl", "daemon-reload"], self.reload_returncode)

    def control_service(self, action: str, unit: str) -> CmdResult:
        self.calls.append(("control_service", action, unit))
        rc = self.action_returncodes.get(action, 0)
        if rc == 0:
            if action == "enable":
                self.enabled = True
            else:
                self.active = True
        return _cmd(["systemctl", action, unit], rc, "" if rc == 0 else f"Job for {unit} failed.")

    def query_service_status(self, unit: str, query: str) -> bool:
        self.calls.append(("query_service_status", unit, query))
        return self.enabled if query == "is-enabled" else self.active

    def service_status_text(self, unit: str) -> str:
        self.calls.append(("service_status_text", unit))
        return self.status_text


@pytest.fixture
def config(tmp_path: Path) -> InstallConfig:
    """Install layout rooted in tmp_path; the unit directory exists, the checkout does not."""
    systemd_dir = tmp_path / "etc" / "systemd" / "system"
    systemd_dir.mkdir(parents=True)
    return InstallConfig(
        install_dir=str(tmp_path / "opt" / "RPi-Reporter-MQTT2HA-Daemon"),
        systemd_dir=str(systemd_dir),
        apt_log_path=str(tmp_path / "apt_install.log"),
        pip_log_path=str(tmp_path / "pip_install.log"),
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def make_ctx(config: InstallConfig, gateway: FakeGateway):
    def _make(
        resolution: ConflictResolution = ConflictResolution.REUSE_EXISTING,
        cfg: Optional[InstallConfig] = None,
    ) -> InstallContext:
        return InstallContext(
            config=cfg or config,
            gateway=gateway,
            resolve_conflict=fixed_resolver(resolution),
            now=lambda: FIXED_NOW,
        )

    return _make


@pytest.fixture
def checkout(config: InstallConfig) -> Path:
    """An existing checkout containing the unit file and a requirements file."""
    d = Path(config.install_dir)
    d.mkdir(parents=True)
    (d / config.service_name).write_text(UNIT_TEXT, encoding="utf-8")
    (d / "requirements.txt").write_text("paho-mqtt\n", encoding="utf-8")
    return d


@pytest.fixture
def clean_logging():
    yield
    reset_logging()


@pytest.fixture
def installer_logging(tmp_path: Path, clean_logging) -> str:
    """Console + file logging as the CLI sets it up, file kept in tmp_path."""
    return configure_logging(log_path=str(tmp_path / "installer.log"))
