"""Persisted user settings."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import console
from .errors import ConfigIOError

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "ConfigStore",
    "TempxConfig",
    "default_config_path",
]


LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = ".tempx.json"
CONFIG_ENV_VAR = "TEMPX_CONFIG"


class TempxConfig(BaseModel):
    """Settings stored in ``.tempx.json``.

    The file uses camelCase keys; missing keys fall back to the defaults
    below and unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    username: str = Field("your_name", description="GitHub user whose template repositories are listed.")
    default_branch: str = Field("main", alias="defaultBranch", description="Default branch for new repositories.")
    install_command: str = Field("bun install", alias="installCommand", description="Preferred install command.")

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True), indent=2)


def default_config_path() -> Path:
    """Return ``$TEMPX_CONFIG`` when set, else ``.tempx.json`` in the working directory."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / CONFIG_FILENAME


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


class ConfigStore:
    """Load and save :class:`TempxConfig` from a JSON file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()

    def read(self) -> TempxConfig:
        """Read the settings file, raising :class:`ConfigIOError` on failure.

        A missing file is not an error: the defaults are returned.
        """

        if not self.path.exists():
            LOGGER.debug("no settings file at %s, using defaults", self.path)
            return TempxConfig()
        try:
            text = self.path.read_bytes().decode("utf-8")
        except OSError as exc:
            raise ConfigIOError(f"{self.path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigIOError(f"{self.path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
        try:
            return TempxConfig.model_validate_json(text)
        except ValidationError as exc:
            raise ConfigIOError(f"{self.path}: {_describe_validation_error(exc)}") from exc

    def write(self, config: TempxConfig) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(config.to_json() + "\n", encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(f"{self.path}: {exc.strerror or exc}") from exc
        LOGGER.debug("saved settings to %s", self.path)

    def load(self) -> TempxConfig:
        """Return the stored settings, falling back to defaults on any error."""

        try:
            return self.read()
        except ConfigIOError as exc:
            console.error(f"Error loading config: {exc}")
            return TempxConfig()

    def save(self, config: TempxConfig) -> bool:
        """Persist ``config``; failures are reported and ``False`` is returned."""

        try:
            self.write(config)
        except ConfigIOError as exc:
            console.error(f"Error saving config: {exc}")
            return False
        return True

    def update(self, **changes: Any) -> bool:
        """Merge ``changes`` (field names) into the stored settings and save."""

        config = self.load().model_copy(update=changes)
        return self.save(config)
