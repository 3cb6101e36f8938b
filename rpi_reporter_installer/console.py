"""Shared terminal output: banner, separators and the run summary."""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False)

RULE_WIDTH = 72
TITLE = "RPi-Reporter-MQTT2HA-Daemon Installation Script"


def print_rule(char: str = "=", width: int = RULE_WIDTH) -> None:
    console.print(char * width, markup=False)


def print_plain(text: str = "") -> None:
    console.print(text, markup=False, soft_wrap=True)


def print_banner() -> None:
    print_rule()
    print_plain(f"  {TITLE}")
    print_rule()
    print_plain()


def print_verbatim(text: str) -> None:
    """Pass external tool output through untouched."""
    console.out(text.rstrip("\n"), highlight=False)
