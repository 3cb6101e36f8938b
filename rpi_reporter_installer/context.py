from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from .conflict import ConflictResolver, prompt_resolver
from .gateway import SystemGateway
from .install_config import InstallConfig


@dataclass(frozen=True)
class InstallContext:
    config: InstallConfig
    gateway: SystemGateway
    resolve_conflict: ConflictResolver = prompt_resolver
    dry_run: bool = False
    now: Callable[[], datetime] = field(default=datetime.now)
