"""Custom exception types used by tempx."""

from __future__ import annotations


class TempxError(RuntimeError):
    """Base class for errors surfaced to the command line."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigIOError(TempxError):
    """Raised when the settings file cannot be read, parsed or written."""


class UpstreamListError(TempxError):
    """Raised when the repository listing cannot be fetched from GitHub."""


class PreconditionError(TempxError):
    """Raised when a command is invoked with arguments it cannot act on."""


__all__ = ["ConfigIOError", "PreconditionError", "TempxError", "UpstreamListError"]
