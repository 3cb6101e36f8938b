from __future__ import annotations

import enum
import logging
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Protocol, Sequence

from .console import print_plain
from .gateway import GatewayError
from .lib.command import CommandError

if TYPE_CHECKING:
    from .context import InstallContext

logger = logging.getLogger(__name__)

# Raised by a step for host-side trouble; recorded as that step's failure.
STEP_ERRORS = (CommandError, GatewayError, OSError, subprocess.SubprocessError)


class Outcome(enum.Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


@dataclass(frozen=True)
class StepResult:
    step_id: str
    name: str
    outcome: Outcome
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.outcome is not Outcome.FAILURE

    @classmethod
    def ok(cls, step: "Step", message: str = "", **details: Any) -> "StepResult":
        return cls(step.step_id, step.name, Outcome.SUCCESS, message, details)

    @classmethod
    def warn(cls, step: "Step", message: str = "", **details: Any) -> "StepResult":
        return cls(step.step_id, step.name, Outcome.WARNING, message, details)

    @classmethod
    def fail(cls, step: "Step", message: str = "", **details: Any) -> "StepResult":
        return cls(step.step_id, step.name, Outcome.FAILURE, message, details)


class Step(Protocol):
    """A single idempotent installation step."""

    step_id: str
    name: str

    def run(self, ctx: "InstallContext") -> StepResult:
        ...


@dataclass(frozen=True)
class PipelineResult:
    results: List[StepResult]

    @property
    def failures(self) -> List[StepResult]:
        return [r for r in self.results if not r.succeeded]

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return self.failed_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def select_steps(
    steps: Sequence[Step],
    *,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    only: Optional[Iterable[str]] = None,
) -> List[Step]:
    """Pick the window of steps to run, keeping the fixed order."""

    ids = [s.step_id for s in steps]
    wanted = set(only or [])
    for sid in [start_at, stop_after, *wanted]:
        if sid is not None and sid not in ids:
            raise ValueError(f"Unknown step id: {sid}")

    selected: List[Step] = []
    started = start_at is None
    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        if not wanted or step.step_id in wanted:
            selected.append(step)

        if stop_after is not None and step.step_id == stop_after:
            break
    return selected


def run_step(ctx: "InstallContext", step: Step) -> StepResult:
    logger.debug("Running step %s", step.step_id)
    try:
        result = step.run(ctx)
    except STEP_ERRORS as e:
        logger.debug("Step %s raised", step.step_id, exc_info=True)
        logger.error("%s: %s", step.name, e)
        result = StepResult.fail(step, str(e), error=type(e).__name__)
    logger.debug("Step %s -> %s", step.step_id, result.outcome.value)
    return result


def run_pipeline(
    *,
    ctx: "InstallContext",
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    only: Optional[Iterable[str]] = None,
) -> PipelineResult:
    """Run steps in order; a failed step never prevents the next one."""

    results: List[StepResult] = []
    for step in select_steps(steps, start_at=start_at, stop_after=stop_after, only=only):
        results.append(run_step(ctx, step))
        print_plain()

    return PipelineResult(results=results)
