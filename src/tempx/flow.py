"""Interactive workflows behind the ``templates`` and ``config`` commands."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from . import console
from .catalog import TemplateCatalog, TemplateInfo, Templates, format_updated_at
from .config import ConfigStore, TempxConfig
from .git import clone_repository
from .packages import install_dependencies
from .process import CommandResult, run_command
from .prompts import Prompter, RichPrompter

__all__ = ["TemplateFlow", "configure_interactive", "open_in_editor"]


LOGGER = logging.getLogger(__name__)

Cloner = Callable[[str, Path], CommandResult]
Installer = Callable[[Path], CommandResult]

MAIN_ACTIONS = [
    ("View template details", "view"),
    ("Use a template", "use"),
    ("Cancel", "cancel"),
]

POST_CLONE_ACTIONS = [
    ("Install dependencies", "install"),
    ("Open in VS Code", "code"),
    ("Nothing", "nothing"),
]


def _remove_path(path: Path) -> None:
    if path.is_dir():
        shutil.rmtree(path)
    else:
        path.unlink()


def open_in_editor(directory: Path) -> CommandResult:
    result = run_command(["code", str(directory)])
    if not result:
        console.error("Failed to open VS Code")
    return result


def configure_interactive(store: ConfigStore, prompter: Prompter) -> bool:
    """Ask for every setting, using the stored values as defaults, and save."""

    config = store.load()
    updated = TempxConfig(
        username=prompter.text("Enter your GitHub username:", default=config.username),
        default_branch=prompter.text("Enter your default branch name:", default=config.default_branch),
        install_command=prompter.text("Enter your install command:", default=config.install_command),
    )
    if not store.save(updated):
        return False
    console.success("Configuration updated successfully!")
    return True


class TemplateFlow:
    """Pick a template repository, clone it and run follow-up actions.

    The flow is strictly sequential; every child process is awaited before
    the next question is asked.
    """

    def __init__(
        self,
        store: ConfigStore | None = None,
        catalog: TemplateCatalog | None = None,
        prompter: Prompter | None = None,
        *,
        clone: Cloner = clone_repository,
        install: Installer = install_dependencies,
        open_editor: Installer = open_in_editor,
    ) -> None:
        self.store = store or ConfigStore()
        self.catalog = catalog or TemplateCatalog()
        self.prompter = prompter or RichPrompter()
        self._clone = clone
        self._install = install
        self._open_editor = open_editor

    def run(self) -> Path | None:
        """Run the workflow and return the directory of the new project, if any.

        :class:`~tempx.errors.UpstreamListError` from the catalog propagates.
        """

        config = self.store.load()
        templates = self.catalog.load_templates(config.username)
        if not templates:
            return None

        action = self.prompter.select("What would you like to do?", MAIN_ACTIONS)
        if action == "cancel":
            return None

        name = self.select_template(templates)
        info = templates[name]
        if action == "view":
            self.show_details(name, info)
            if not self.prompter.confirm("Would you like to use this template?", default=False):
                return None

        target = self.prepare_target_directory(name)
        if target is None:
            return None

        if not self._clone(info.clone_url, target):
            self._discard_partial_clone(target)
            return None

        console.success(f"Template {name} cloned successfully!")
        self.post_clone_actions(target)
        return target

    def select_template(self, templates: Templates) -> str:
        choices = [
            (f"{name} (Last updated: {format_updated_at(info.updated_at)})", name)
            for name, info in templates.items()
        ]
        return self.prompter.select("Select a template:", choices)

    def show_details(self, name: str, info: TemplateInfo) -> None:
        console.info("\nTemplate Details:")
        console.success(f"\nName: {name}")
        console.plain(f"Last Updated: {format_updated_at(info.updated_at)}")
        console.plain(f"Clone URL: {info.clone_url}\n")

    def prepare_target_directory(self, name: str) -> Path | None:
        """Ask where to clone ``name``; ``None`` means the user backed out.

        An existing directory is only removed after explicit confirmation.
        """

        answer = self.prompter.text("Enter target directory:", default=name)
        target = Path(answer or name).expanduser().resolve()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            console.error(f"Cannot create {target.parent}: {exc.strerror or exc}")
            return None

        if target.exists():
            if not self.prompter.confirm(f"Directory {target} exists. Remove it?", default=False):
                console.warning("Operation cancelled.")
                return None
            LOGGER.debug("removing existing path %s", target)
            try:
                _remove_path(target)
            except OSError as exc:
                console.error(f"Could not remove {target}: {exc.strerror or exc}")
                return None

        return target

    def post_clone_actions(self, directory: Path) -> None:
        action = self.prompter.select("What would you like to do next?", POST_CLONE_ACTIONS)
        if action == "install":
            if self._install(directory):
                console.success("Dependencies installed successfully!")
        elif action == "code":
            self._open_editor(directory)

    def _discard_partial_clone(self, target: Path) -> None:
        if not target.exists():
            return
        LOGGER.debug("removing partial clone at %s", target)
        try:
            shutil.rmtree(target)
        except OSError as exc:
            console.warning(f"Could not remove {target}: {exc.strerror or exc}")
