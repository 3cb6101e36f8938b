from __future__ import annotations

import logging
import os

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class InstallPythonRequirementsStep:
    step_id = "05_install_python_requirements"
    name = "Install Python requirements"

    def run(self, ctx: InstallContext) -> StepResult:
        cfg = ctx.config
        logger.info("Installing Python requirements...")

        manifest = cfg.requirements_path
        if not os.path.isfile(manifest):
            logger.warning("%s not found, skipping pip install", cfg.requirements_file)
            return StepResult.warn(self, "no dependency manifest", manifest=manifest)

        logger.info("Installing pip requirements from %s...", cfg.requirements_file)
        r = ctx.gateway.install_dependencies(manifest, cfg.pip_log_path)
        if not r.ok:
            logger.error("Failed to install Python requirements")
            return StepResult.fail(self, f"pip exited {r.returncode}", log=cfg.pip_log_path)

        log_success(logger, "Python requirements installed successfully")
        return StepResult.ok(self, manifest=manifest)
