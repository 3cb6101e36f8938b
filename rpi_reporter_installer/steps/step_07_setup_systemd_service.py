from __future__ import annotations

import logging
import os

from ..context import InstallContext
from ..lib.fsops import create_symlink, move_aside, remove_symlink
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class SetupSystemdServiceStep:
    """Link the repository's unit file into the systemd unit directory.

    A previous symlink is replaced; a regular file in the way is renamed to
    `<target>.backup.<timestamp>` first. Any failed sub-action ends the step.
    """

    step_id = "07_setup_systemd_service"
    name = "Set up systemd service"

    def run(self, ctx: InstallContext) -> StepResult:
        cfg = ctx.config
        source = cfg.service_source
        target = cfg.service_target
        details = {"source": source, "target": target}

        logger.info("Setting up systemd service...")

        if not os.path.isfile(source):
            logger.error("Service file not found: %s", source)
            return StepResult.fail(self, "service file missing", **details)

        try:
            if os.path.islink(target):
                logger.warning("Service symlink already exists")
                logger.info("Removing existing symlink...")
                remove_symlink(target, dry_run=ctx.dry_run)
            elif os.path.isfile(target):
                logger.warning("Service file (not symlink) already exists")
                logger.info("Backing up existing service file...")
                details["backup"] = move_aside(target, ctx.now(), dry_run=ctx.dry_run)
                logger.info("Existing service file saved as %s", details["backup"])
        except OSError as e:
            logger.error("Failed to clear %s: %s", target, e)
            return StepResult.fail(self, str(e), **details)

        logger.info("Creating service symlink...")
        try:
            create_symlink(source, target, dry_run=ctx.dry_run)
        except OSError as e:
            logger.error("Failed to create service symlink")
            return StepResult.fail(self, str(e), **details)
        log_success(logger, "Service symlink created")

        logger.info("Reloading systemd daemon...")
        r = ctx.gateway.register_service()
        if not r.ok:
            logger.error("Failed to reload systemd daemon")
            return StepResult.fail(self, f"daemon-reload exited {r.returncode}", **details)
        log_success(logger, "Systemd daemon reloaded")

        return StepResult.ok(self, **details)
