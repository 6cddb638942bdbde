"""Colour-coded console output shared by every command."""

from __future__ import annotations

from rich.console import Console

__all__ = ["console", "error_console", "error", "info", "plain", "success", "warning"]


console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def plain(message: str = "") -> None:
    console.print(message, markup=False, soft_wrap=True)


def info(message: str) -> None:
    """Progress messages, e.g. ``Cloning repository to ...``."""

    console.print(message, style="blue", markup=False, soft_wrap=True)


def success(message: str) -> None:
    console.print(message, style="green", markup=False, soft_wrap=True)


def warning(message: str) -> None:
    console.print(message, style="yellow", markup=False, soft_wrap=True)


def error(message: str) -> None:
    """Errors are written to stderr, one line per failure."""

    error_console.print(message, style="red", markup=False, soft_wrap=True)
