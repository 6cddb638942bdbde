"""Package manager detection and dependency installation."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Mapping

from . import console
from .process import CommandResult, run_command

__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "INSTALL_COMMANDS",
    "LOCKFILE_MARKERS",
    "PackageManager",
    "detect_package_manager",
    "install_command",
    "install_dependencies",
]


LOGGER = logging.getLogger(__name__)


class PackageManager(str, Enum):
    """JavaScript package managers tempx knows how to drive."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


# Checked in order; the first marker present in the directory wins.
LOCKFILE_MARKERS: tuple[tuple[str, PackageManager], ...] = (
    ("package-lock.json", PackageManager.NPM),
    ("yarn.lock", PackageManager.YARN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
)

DEFAULT_PACKAGE_MANAGER = PackageManager.BUN

INSTALL_COMMANDS: Mapping[PackageManager, tuple[str, ...]] = {
    PackageManager.NPM: ("npm", "install"),
    PackageManager.YARN: ("yarn", "install"),
    PackageManager.PNPM: ("pnpm", "install"),
    PackageManager.BUN: ("bun", "install"),
}


def detect_package_manager(directory: str | Path) -> PackageManager:
    """Return the package manager that last resolved dependencies in ``directory``.

    Every lockfile maps to its own manager. Earlier releases reported ``npm``
    for all four lockfiles, which made the ``yarn``, ``pnpm`` and ``bun``
    install branches unreachable.
    """

    root = Path(directory)
    for marker, manager in LOCKFILE_MARKERS:
        if (root / marker).exists():
            LOGGER.debug("found %s in %s, using %s", marker, root, manager.value)
            return manager

    LOGGER.debug("no lockfile in %s, defaulting to %s", root, DEFAULT_PACKAGE_MANAGER.value)
    return DEFAULT_PACKAGE_MANAGER


def install_command(manager: PackageManager) -> tuple[str, ...]:
    """Return the argv used to install dependencies with ``manager``."""

    return INSTALL_COMMANDS[manager]


def install_dependencies(directory: str | Path) -> CommandResult:
    """Install dependencies inside ``directory`` with the detected manager.

    The directory must already exist; the ``install`` command checks this
    before calling in.
    """

    manager = detect_package_manager(directory)
    console.info(f"Installing dependencies using {manager.value}...")
    result = run_command(install_command(manager), cwd=directory)
    if not result:
        console.error(f"Error installing dependencies: {result.error}")
    return result
