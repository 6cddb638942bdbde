"""Child process helpers returning explicit success/failure results."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

__all__ = ["CommandResult", "run_command"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a child process invocation.

    Attributes
    ----------
    succeeded:
        ``True`` when the process could be spawned and exited with status 0.
    error:
        Human readable description of the failure, ``None`` on success.
    """

    succeeded: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, error: str) -> "CommandResult":
        return cls(succeeded=False, error=error)

    def __bool__(self) -> bool:
        return self.succeeded


def run_command(argv: Sequence[str], *, cwd: str | Path | None = None) -> CommandResult:
    """Run ``argv`` to completion, inheriting the console streams.

    The executable is resolved on ``PATH`` first so that wrapper scripts such
    as ``npm.cmd`` are found on Windows. Spawn failures and non-zero exit
    statuses are converted into a failed :class:`CommandResult`; nothing is
    raised to the caller.
    """

    if not argv:
        raise ValueError("argv must not be empty")

    program, *arguments = argv
    executable = shutil.which(program)
    if executable is None:
        LOGGER.debug("executable %r not found on PATH", program)
        return CommandResult.failed(f"{program}: command not found")

    LOGGER.debug("running %s (cwd=%s)", " ".join(argv), cwd or ".")
    try:
        subprocess.run([executable, *arguments], cwd=cwd, check=True)
    except subprocess.CalledProcessError as exc:
        return CommandResult.failed(
            f"`{' '.join(argv)}` exited with status {exc.returncode}"
        )
    except OSError as exc:
        return CommandResult.failed(f"{program}: {exc.strerror or exc}")

    return CommandResult.ok()
