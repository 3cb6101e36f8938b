"""
Tests for the per-step run report.
"""

from datetime import datetime, timezone

import pytest

from rpi_reporter_installer.install_config import default_config
from rpi_reporter_installer.pipeline import Outcome, PipelineResult, StepResult
from rpi_reporter_installer.report_store import build_report, load_report, save_report

FINISHED = datetime(2025, 10, 31, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def result():
    return PipelineResult(
        results=[
            StepResult("01_check_root", "Check root privileges", Outcome.SUCCESS),
            StepResult(
                "07_setup_systemd_service",
                "Set up systemd service",
                Outcome.SUCCESS,
                details={"backup": "/etc/systemd/system/x.service.backup.20251031_120000"},
            ),
            StepResult("10_check_service_status", "Check service status", Outcome.FAILURE, "service inactive"),
        ]
    )


def test_build_report(result):
    report = build_report(result, default_config(), finished_at=FINISHED)
    assert report["finished_at"] == "2025-10-31T12:00:00+00:00"
    assert report["failed_count"] == 1
    assert report["exit_code"] == 1
    assert [s["outcome"] for s in report["steps"]] == ["success", "success", "failure"]
    assert report["steps"][1]["details"]["backup"].endswith(".backup.20251031_120000")
    assert report["config"]["packages"][0] == "git"


@pytest.mark.parametrize("name", ["run.json", "run.yaml", "run.report"])
def test_save_and_load(tmp_path, result, name):
    report = build_report(result, default_config(), finished_at=FINISHED)
    path = tmp_path / "nested" / name
    save_report(str(path), report)
    assert load_report(str(path)) == report


def test_load_rejects_non_mapping(tmp_path):
    p = tmp_path / "run.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_report(str(p))
