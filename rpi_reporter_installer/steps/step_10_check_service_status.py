from __future__ import annotations

import logging

from ..console import print_rule, print_verbatim
from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CheckServiceStatusStep:
    step_id = "10_check_service_status"
    name = "Check service status"

    def run(self, ctx: InstallContext) -> StepResult:
        unit = ctx.config.service_name
        logger.info("Checking service status...")

        print_rule("-", 40)
        print_verbatim(ctx.gateway.service_status_text(unit))
        print_rule("-", 40)

        if ctx.gateway.query_service_status(unit, "is-active"):
            log_success(logger, "Service is running")
            return StepResult.ok(self, unit=unit)

        logger.error("Service is not running")
        return StepResult.fail(self, "service inactive", unit=unit)
