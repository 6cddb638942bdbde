from __future__ import annotations

import stat
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


FakeExecutable = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from a real ``.tempx.json``."""

    path = tmp_path / "settings" / ".tempx.json"
    monkeypatch.setenv("TEMPX_CONFIG", str(path))
    return path


@pytest.fixture()
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that replaces ``PATH`` for the duration of a test."""

    directory = tmp_path / "bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory


@pytest.fixture()
def fake_executable(bin_dir: Path, tmp_path: Path) -> FakeExecutable:
    """Install a shell script on ``PATH`` that records its cwd and arguments.

    The record file holds the working directory on the first line followed by
    one argument per line.
    """

    if sys.platform == "win32":
        pytest.skip("fake executables are POSIX shell scripts")

    def install(name: str, *, exit_code: int = 0) -> Path:
        record = tmp_path / f"{name}.record"
        script = bin_dir / name
        script.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$(pwd -P)\" \"$@\" > '{record}'\n"
            f"exit {exit_code}\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return record

    return install
