from __future__ import annotations

import logging

from ..context import InstallContext
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class AddUserToGroupStep:
    step_id = "06_add_user_to_group"
    name = "Add daemon user to group"

    def run(self, ctx: InstallContext) -> StepResult:
        user = ctx.config.daemon_user
        group = ctx.config.daemon_group
        gw = ctx.gateway

        logger.info("Checking if %s user exists...", user)
        if not gw.user_exists(user):
            logger.error("User '%s' does not exist", user)
            return StepResult.fail(self, f"no such user: {user}")

        logger.info("Checking if %s user is in %s group...", user, group)
        if group in gw.user_groups(user):
            logger.warning("User '%s' is already in %s group", user, group)
            return StepResult.warn(self, "already a member", user=user, group=group)

        logger.info("Adding %s user to %s group...", user, group)
        r = gw.adjust_group_membership(user, group)
        if not r.ok:
            logger.error("Failed to add %s user to %s group", user, group)
            return StepResult.fail(self, r.stderr.strip() or f"usermod exited {r.returncode}")

        log_success(logger, "User '%s' added to %s group", user, group)
        return StepResult.ok(self, user=user, group=group)
