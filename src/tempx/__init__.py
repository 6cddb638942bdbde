"""Scaffold new projects from GitHub template repositories.

The package lists a user's template repositories, clones the chosen one with
``git`` and installs its JavaScript dependencies with whichever package
manager the project's lockfile points at.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .catalog import TemplateCatalog, TemplateInfo
from .config import ConfigStore, TempxConfig
from .errors import ConfigIOError, PreconditionError, TempxError, UpstreamListError
from .git import clone_repository
from .packages import PackageManager, detect_package_manager, install_dependencies
from .process import CommandResult

__all__ = [
    "CommandResult",
    "ConfigIOError",
    "ConfigStore",
    "PackageManager",
    "PreconditionError",
    "TemplateCatalog",
    "TemplateInfo",
    "TempxConfig",
    "TempxError",
    "UpstreamListError",
    "clone_repository",
    "detect_package_manager",
    "install_dependencies",
]
