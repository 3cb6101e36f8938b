from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .install_config import InstallConfig
from .pipeline import PipelineResult

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"json", "yaml", "yml"}:
        return ext
    # Default to JSON for unknown extensions.
    return "json"


def build_report(
    result: PipelineResult,
    config: InstallConfig,
    *,
    finished_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    when = finished_at or datetime.now(timezone.utc)
    return {
        "finished_at": when.isoformat(),
        "failed_count": result.failed_count,
        "exit_code": result.exit_code,
        "steps": [
            {
                "step_id": r.step_id,
                "name": r.name,
                "outcome": r.outcome.value,
                "message": r.message,
                "details": dict(r.details),
            }
            for r in result.results
        ],
        "config": config.as_dict(),
    }


def save_report(path: str, report: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) in {"yaml", "yml"}:
        p.write_text(yaml.safe_dump(report, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.debug("Run report written to %s", p)


def load_report(path: str) -> Dict[str, Any]:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if _detect_format(p) in {"yaml", "yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, dict):
        raise ValueError(f"Report file must be an object/dict, got {type(data)}")
    return data
