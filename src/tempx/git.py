"""Thin wrapper around ``git clone``."""

from __future__ import annotations

from pathlib import Path

from . import console
from .process import CommandResult, run_command

__all__ = ["clone_repository"]


def clone_repository(url: str, target_dir: str | Path) -> CommandResult:
    """Clone ``url`` into ``target_dir``.

    ``url`` is handed to git untouched. Callers are responsible for making
    sure ``target_dir`` does not already hold a conflicting checkout.
    """

    console.info(f"Cloning repository to {target_dir}...")
    result = run_command(["git", "clone", url, str(target_dir)])
    if not result:
        console.error(f"Error cloning repository: {result.error}")
    return result
