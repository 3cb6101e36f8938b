from __future__ import annotations

import logging

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CheckInternetStep:
    step_id = "02_check_internet"
    name = "Check internet connectivity"

    def run(self, ctx: InstallContext) -> StepResult:
        host = ctx.config.probe_host
        logger.info("Checking internet connectivity...")
        if ctx.gateway.is_reachable(host):
            log_success(logger, "Internet connection is available")
            return StepResult.ok(self, host=host)

        logger.error("No internet connection detected")
        return StepResult.fail(self, f"{host} unreachable", host=host)
