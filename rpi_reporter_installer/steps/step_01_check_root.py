from __future__ import annotations

import logging

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CheckRootStep:
    step_id = "01_check_root"
    name = "Check root privileges"

    def run(self, ctx: InstallContext) -> StepResult:
        logger.info("Checking if script is running with sudo privileges...")
        if not ctx.gateway.is_privileged():
            # Advisory only: each later step is guarded on its own.
            logger.error("This script must be run with sudo privileges")
            return StepResult.fail(self, "not running as root")

        log_success(logger, "Running with sudo privileges")
        return StepResult.ok(self)
