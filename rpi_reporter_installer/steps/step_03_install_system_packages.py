from __future__ import annotations

import logging

from ..context import InstallContext
from ..gateway import GatewayError
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class InstallSystemPackagesStep:
    step_id = "03_install_system_packages"
    name = "Install system packages"

    def run(self, ctx: InstallContext) -> StepResult:
        cfg = ctx.config
        logger.info("Installing required system packages...")

        try:
            report = ctx.gateway.install_packages(cfg.packages, cfg.apt_log_path)
        except GatewayError as e:
            logger.error("Failed to update package list")
            return StepResult.fail(self, str(e))

        if report.ok:
            log_success(logger, "All system packages installed successfully")
            return StepResult.ok(self, installed=list(report.installed))

        logger.error("Failed to install packages: %s", " ".join(report.failed))
        return StepResult.fail(
            self,
            f"{len(report.failed)} package(s) failed",
            installed=list(report.installed),
            failed=list(report.failed),
        )
