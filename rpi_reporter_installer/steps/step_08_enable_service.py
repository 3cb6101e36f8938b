from __future__ import annotations

import logging

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class EnableServiceStep:
    step_id = "08_enable_service"
    name = "Enable service"

    def run(self, ctx: InstallContext) -> StepResult:
        unit = ctx.config.service_name
        logger.info("Enabling %s to start on boot...", unit)

        if ctx.gateway.query_service_status(unit, "is-enabled"):
            logger.warning("Service is already enabled")
            return StepResult.warn(self, "already enabled", unit=unit)

        r = ctx.gateway.control_service("enable", unit)
        if not r.ok:
            logger.error("Failed to enable service")
            return StepResult.fail(self, r.stderr.strip() or f"enable exited {r.returncode}", unit=unit)

        log_success(logger, "Service enabled successfully")
        return StepResult.ok(self, unit=unit)
