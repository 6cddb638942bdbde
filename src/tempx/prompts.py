"""Interactive prompts used by the template workflow."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from .console import console as default_console

__all__ = ["Choice", "Prompter", "RichPrompter"]


T = TypeVar("T")
Choice = tuple[str, T]


class Prompter(ABC):
    """Source of answers to interactive questions."""

    @abstractmethod
    def text(self, message: str, *, default: str = "") -> str:
        """Ask for free-form text, returning ``default`` on an empty answer."""

    @abstractmethod
    def confirm(self, message: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice[T]]) -> T:
        """Ask the user to pick one of ``choices`` and return its value."""


class RichPrompter(Prompter):
    """Prompt on the terminal with :mod:`rich.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or default_console

    def text(self, message: str, *, default: str = "") -> str:
        if not default:
            return Prompt.ask(Text(message), console=self._console)
        return Prompt.ask(Text(message), console=self._console, default=default)

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return Confirm.ask(Text(message), console=self._console, default=default)

    def select(self, message: str, choices: Sequence[Choice[T]]) -> T:
        if not choices:
            raise ValueError("choices must not be empty")

        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="right")
        table.add_column()
        for index, (label, _) in enumerate(choices, start=1):
            table.add_row(str(index), Text(label))

        self._console.print(Text(message, style="bold"))
        self._console.print(table)
        selected = IntPrompt.ask(
            "Enter a number",
            console=self._console,
            choices=[str(index) for index in range(1, len(choices) + 1)],
            default=1,
            show_choices=False,
        )
        return choices[selected - 1][1]
