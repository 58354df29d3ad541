"""Markdown Blogger push error types."""

from __future__ import annotations

from pathlib import Path


class PushError(RuntimeError):
    """Raised when pushing a document fails."""


class InvalidPathError(PushError):
    """Raised when the configured project folder does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            "Project folder does not exist. "
            "Check the path or update your settings."
        )
        self.path = path


class ReadError(PushError):
    """Raised when a document cannot be read from the vault."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to read '{name}': {reason}")
        self.name = name


class WriteError(PushError):
    """Raised when the pushed content cannot be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path


__all__ = ["InvalidPathError", "PushError", "ReadError", "WriteError"]
