"""
Tests for install settings and their YAML loader.
"""

import pytest

from rpi_reporter_installer.install_config import (
    DEFAULT_PACKAGES,
    ConfigError,
    InstallConfig,
    config_with,
    default_config,
    load_install_config,
)


class TestDefaults:
    def test_paths(self):
        cfg = default_config()
        assert cfg.service_source == "/opt/RPi-Reporter-MQTT2HA-Daemon/isp-rpi-reporter.service"
        assert cfg.service_target == "/etc/systemd/system/isp-rpi-reporter.service"
        assert cfg.requirements_path == "/opt/RPi-Reporter-MQTT2HA-Daemon/requirements.txt"

    def test_package_list(self):
        assert default_config().packages == DEFAULT_PACKAGES
        assert len(DEFAULT_PACKAGES) == 10
        assert DEFAULT_PACKAGES[0] == "git"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            default_config().install_dir = "/tmp/x"  # type: ignore[misc]


class TestLoad:
    def test_none_means_defaults(self):
        assert load_install_config(None) == InstallConfig()

    def test_partial_override(self, tmp_path):
        p = tmp_path / "cfg.yaml"
        p.write_text("daemon_group: gpio\npackages: [git, python3]\n", encoding="utf-8")
        cfg = load_install_config(str(p))
        assert cfg.daemon_group == "gpio"
        assert cfg.packages == ("git", "python3")
        assert cfg.daemon_user == "daemon"

    def test_empty_file(self, tmp_path):
        p = tmp_path / "cfg.yml"
        p.write_text("", encoding="utf-8")
        assert load_install_config(str(p)) == InstallConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_install_config(str(tmp_path / "nope.yaml"))

    def test_not_yaml_suffix(self, tmp_path):
        p = tmp_path / "cfg.json"
        p.write_text("{}", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be YAML"):
            load_install_config(str(p))

    @pytest.mark.parametrize(
        "text,match",
        [
            ("- a\n- b\n", "mapping"),
            ("install_dir: ''\n", "non-empty string"),
            ("packages: git\n", "list of non-empty strings"),
            ("packages: [git, '']\n", "list of non-empty strings"),
            ("repo: x\n", "Unknown config keys: repo"),
            ("install_dir: [unclosed\n", "Invalid YAML"),
        ],
    )
    def test_invalid(self, tmp_path, text, match):
        p = tmp_path / "cfg.yaml"
        p.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError, match=match):
            load_install_config(str(p))


class TestOverrides:
    def test_none_is_ignored(self):
        cfg = default_config()
        assert config_with(cfg, repo_url=None, install_dir=None) is cfg

    def test_given_values_replace(self):
        cfg = config_with(default_config(), install_dir="/srv/reporter", service_name="reporter.service")
        assert cfg.service_source == "/srv/reporter/reporter.service"
