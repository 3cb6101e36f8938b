from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .console import console as default_console

DEFAULT_LOG_PATH = "/var/log/rpi-reporter-installer.log"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_LEVEL_STYLES = {
    "INFO": "blue",
    "SUCCESS": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


def log_success(logger: logging.Logger, msg: str, *args: object) -> None:
    logger.log(SUCCESS, msg, *args)


class ConsoleHandler(logging.Handler):
    """Render records as `[LEVEL] message`, the level tag colored."""

    def __init__(self, console: Optional[Console] = None, level: int = logging.INFO):
        super().__init__(level=level)
        self.console = console or default_console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            name = "ERROR" if record.levelno >= logging.ERROR else record.levelname
            style = _LEVEL_STYLES.get(name, "white")
            self.console.print(
                f"[{style}]\\[{name}][/{style}] {escape(record.getMessage())}",
                soft_wrap=True,
                highlight=False,
            )
        except Exception:
            self.handleError(record)


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
    console: Optional[Console] = None,
) -> str:
    """Configure logging.

    The file log records everything down to DEBUG (each command line and its
    captured output); the console shows the leveled `[LEVEL] message` lines.

    Notes:
    - Writing to /var/log needs root. If it fails we fall back to a file in
      the working directory and keep going.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_rpi_installer_configured", False):
        return getattr(logger, "_rpi_installer_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: logging.Handler
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError:
        chosen_path = str(Path.cwd() / "rpi-reporter-installer.log")
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        handlers.append(ConsoleHandler(console=console, level=level))

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_rpi_installer_configured", True)
    setattr(logger, "_rpi_installer_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path


def reset_logging() -> None:
    """Detach the handlers installed by configure_logging()."""

    logger = logging.getLogger()
    if not getattr(logger, "_rpi_installer_configured", False):
        return
    for h in list(logger.handlers):
        if isinstance(h, (ConsoleHandler, logging.FileHandler)):
            logger.removeHandler(h)
            h.close()
    setattr(logger, "_rpi_installer_configured", False)
