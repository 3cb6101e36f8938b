from __future__ import annotations

import logging

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class StartServiceStep:
    step_id = "09_start_service"
    name = "Start service"

    def run(self, ctx: InstallContext) -> StepResult:
        unit = ctx.config.service_name
        gw = ctx.gateway
        logger.info("Starting %s...", unit)

        if gw.query_service_status(unit, "is-active"):
            logger.warning("Service is already running")
            logger.info("Restarting service...")
            r = gw.control_service("restart", unit)
            if not r.ok:
                logger.error("Failed to restart service")
                return StepResult.fail(self, r.stderr.strip() or f"restart exited {r.returncode}", unit=unit)
            log_success(logger, "Service restarted successfully")
            return StepResult.ok(self, unit=unit, action="restart")

        r = gw.control_service("start", unit)
        if not r.ok:
            logger.error("Failed to start service")
            return StepResult.fail(self, r.stderr.strip() or f"start exited {r.returncode}", unit=unit)

        log_success(logger, "Service started successfully")
        return StepResult.ok(self, unit=unit, action="start")
