from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_PACKAGES: Tuple[str, ...] = (
    "git",
    "python3",
    "python3-pip",
    "python3-tzlocal",
    "python3-sdnotify",
    "python3-colorama",
    "python3-unidecode",
    "python3-apt",
    "python3-paho-mqtt",
    "python3-requests",
)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class InstallConfig:
    repo_url: str = "https://github.com/xorguy/RPi-Reporter-MQTT2HA-Daemon.git"
    install_dir: str = "/opt/RPi-Reporter-MQTT2HA-Daemon"
    service_name: str = "isp-rpi-reporter.service"
    systemd_dir: str = "/etc/systemd/system"
    packages: Tuple[str, ...] = field(default=DEFAULT_PACKAGES)
    requirements_file: str = "requirements.txt"
    daemon_user: str = "daemon"
    daemon_group: str = "video"
    probe_host: str = "google.com"
    apt_log_path: str = "/tmp/apt_install.log"
    pip_log_path: str = "/tmp/pip_install.log"

    @property
    def service_source(self) -> str:
        return str(Path(self.install_dir) / self.service_name)

    @property
    def service_target(self) -> str:
        return str(Path(self.systemd_dir) / self.service_name)

    @property
    def requirements_path(self) -> str:
        return str(Path(self.install_dir) / self.requirements_file)

    def as_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["packages"] = list(self.packages)
        return out


def default_config() -> InstallConfig:
    return InstallConfig()


def _coerce(raw: Dict[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(InstallConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key == "packages":
            if not isinstance(value, list) or not all(isinstance(p, str) and p.strip() for p in value):
                raise ConfigError("packages must be a list of non-empty strings")
            values[key] = tuple(p.strip() for p in value)
        else:
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{key} must be a non-empty string")
            values[key] = value.strip()
    return values


def config_with(config: InstallConfig, **overrides: Optional[str]) -> InstallConfig:
    """Apply CLI overrides; None means 'not given'."""
    given = {k: v for k, v in overrides.items() if v is not None}
    if not given:
        return config
    return replace(config, **_coerce(given))


def load_install_config(path: Optional[str]) -> InstallConfig:
    if path is None:
        return default_config()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("install config must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError("install config must contain a mapping/object")

    return replace(default_config(), **_coerce(raw))
