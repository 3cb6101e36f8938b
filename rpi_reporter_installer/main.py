from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .conflict import ConflictResolution, ConflictResolver, fixed_resolver, prompt_resolver
from .console import print_banner, print_plain, print_rule
from .context import InstallContext
from .gateway import HostGateway, SystemGateway
from .install_config import ConfigError, InstallConfig, config_with, load_install_config
from .logging_utils import DEFAULT_LOG_PATH, SUCCESS, configure_logging, log_success
from .pipeline import PipelineResult, Step, run_pipeline, select_steps
from .report_store import build_report, save_report
from .steps import (
    AddUserToGroupStep,
    CheckInternetStep,
    CheckRootStep,
    CheckServiceStatusStep,
    CloneRepositoryStep,
    EnableServiceStep,
    InstallPythonRequirementsStep,
    InstallSystemPackagesStep,
    SetupSystemdServiceStep,
    StartServiceStep,
)

logger = logging.getLogger(__name__)


def build_steps() -> List[Step]:
    return [
        CheckRootStep(),
        CheckInternetStep(),
        InstallSystemPackagesStep(),
        CloneRepositoryStep(),
        InstallPythonRequirementsStep(),
        AddUserToGroupStep(),
        SetupSystemdServiceStep(),
        EnableServiceStep(),
        StartServiceStep(),
        CheckServiceStatusStep(),
    ]


def print_summary(result: PipelineResult, config: InstallConfig) -> None:
    print_rule()
    if result.ok:
        log_success(logger, "Installation completed successfully!")
        print_plain()
        print_plain("Service logs can be viewed with:")
        print_plain(f"  sudo journalctl -u {config.service_name} -f")
    else:
        logger.error("Installation completed with %d error(s)", result.failed_count)
        print_plain()
        print_plain("Please review the errors above and try again")
    print_rule()


def run(
    *,
    config: InstallConfig,
    gateway: SystemGateway,
    resolve_conflict: ConflictResolver = prompt_resolver,
    dry_run: bool = False,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    only: Optional[List[str]] = None,
    report_path: Optional[str] = None,
) -> PipelineResult:
    """Run the installation steps and print the summary."""

    ctx = InstallContext(
        config=config,
        gateway=gateway,
        resolve_conflict=resolve_conflict,
        dry_run=dry_run,
    )

    print_banner()
    result = run_pipeline(
        ctx=ctx,
        steps=build_steps(),
        start_at=start_at,
        stop_after=stop_after,
        only=only,
    )
    print_summary(result, config)

    if report_path:
        try:
            save_report(report_path, build_report(result, config))
        except OSError as e:
            logger.error("Could not write run report %s: %s", report_path, e)
    return result


def _resolver_from_args(args: argparse.Namespace) -> ConflictResolver:
    if args.replace_existing:
        return fixed_resolver(ConflictResolution.REPLACE_FRESH)
    if args.keep_existing:
        return fixed_resolver(ConflictResolution.REUSE_EXISTING)
    return prompt_resolver


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="rpi-reporter-installer",
        description="Install and configure RPi-Reporter-MQTT2HA-Daemon as a systemd service.",
    )
    p.add_argument("--config", default=None, help="YAML file overriding the install settings")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    p.add_argument("--report", default=None, help="Write a per-step run report (json|yaml)")
    p.add_argument("--repo-url", default=None)
    p.add_argument("--install-dir", default=None)
    p.add_argument("--service-name", default=None)
    existing = p.add_mutually_exclusive_group()
    existing.add_argument(
        "--replace-existing",
        action="store_true",
        help="Remove an existing install dir and clone fresh without asking",
    )
    existing.add_argument(
        "--keep-existing",
        action="store_true",
        help="Reuse an existing install dir without asking",
    )
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 04_clone_repository)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--only", action="append", default=None, metavar="STEP_ID", help="Run only this step (repeatable)")
    p.add_argument("--dry-run", action="store_true", help="Log host commands instead of running them")
    p.add_argument("--quiet", action="store_true", help="Hide INFO lines on the console")
    p.add_argument("--list-steps", action="store_true", help="Print the step ids and exit")

    args = p.parse_args(argv)

    if args.list_steps:
        for step in build_steps():
            print_plain(f"{step.step_id}  {step.name}")
        return 0

    configure_logging(log_path=args.log, level=SUCCESS if args.quiet else logging.INFO)

    try:
        config = config_with(
            load_install_config(args.config),
            repo_url=args.repo_url,
            install_dir=args.install_dir,
            service_name=args.service_name,
        )
    except (ConfigError, FileNotFoundError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        select_steps(build_steps(), start_at=args.start_at, stop_after=args.stop_after, only=args.only)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    result = run(
        config=config,
        gateway=HostGateway(dry_run=bool(args.dry_run)),
        resolve_conflict=_resolver_from_args(args),
        dry_run=bool(args.dry_run),
        start_at=args.start_at,
        stop_after=args.stop_after,
        only=args.only,
        report_path=args.report,
    )
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
