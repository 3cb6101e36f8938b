from __future__ import annotations

import logging
import os

from ..conflict import ConflictResolution
from ..context import InstallContext
from ..lib.fsops import remove_tree
from ..logging_utils import log_success
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CloneRepositoryStep:
    """Ensure a working copy of the daemon repository exists at install_dir.

    An existing directory is handed to the context's conflict resolver:
    reuse leaves it untouched (a warning, not a failure), replace removes it
    and clones fresh.
    """

    step_id = "04_clone_repository"
    name = "Clone repository"

    def run(self, ctx: InstallContext) -> StepResult:
        cfg = ctx.config
        logger.info("Checking if repository already exists...")

        replaced = False
        if os.path.isdir(cfg.install_dir):
            logger.warning("Directory %s already exists", cfg.install_dir)
            resolution = ctx.resolve_conflict(cfg.install_dir)
            if resolution is ConflictResolution.REUSE_EXISTING:
                logger.warning("Skipping repository clone")
                return StepResult.warn(self, "existing checkout reused", path=cfg.install_dir)

            logger.info("Removing existing directory...")
            try:
                remove_tree(cfg.install_dir, dry_run=ctx.dry_run)
            except OSError as e:
                logger.error("Failed to remove existing directory")
                return StepResult.fail(self, f"could not remove {cfg.install_dir}: {e}")
            log_success(logger, "Removed existing directory")
            replaced = True

        logger.info("Cloning repository from %s...", cfg.repo_url)
        r = ctx.gateway.clone_repository(cfg.repo_url, cfg.install_dir)
        if not r.ok:
            logger.error("Failed to clone repository")
            return StepResult.fail(self, r.stderr.strip() or f"git exited {r.returncode}")

        log_success(logger, "Repository cloned successfully to %s", cfg.install_dir)
        return StepResult.ok(self, path=cfg.install_dir, replaced=replaced)
