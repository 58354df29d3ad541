"""Filesystem primitives used by the push workflow."""

from __future__ import annotations

import os
import stat
from pathlib import Path


def exists(path: Path | str) -> bool:
    return Path(path).exists()


def read_text(path: Path | str) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: Path | str, data: str) -> None:
    """Write ``data`` to ``path``, replacing any existing file."""

    Path(path).write_text(data, encoding="utf-8")


def list_directory(path: Path | str) -> list[str]:
    return sorted(os.listdir(path))


def get_stats(path: Path | str) -> os.stat_result | None:
    """Return ``stat`` metadata for ``path`` or ``None`` when unavailable."""

    try:
        return os.stat(path)
    except OSError:
        return None


def list_subdirectories(path: Path | str, *, show_hidden: bool = False) -> list[str]:
    """Return names of directories directly below ``path``.

    Dot-prefixed entries are skipped unless ``show_hidden`` is set.
    """

    names: list[str] = []
    for name in list_directory(path):
        if not show_hidden and name.startswith("."):
            continue
        stats = get_stats(Path(path) / name)
        if stats is not None and stat.S_ISDIR(stats.st_mode):
            names.append(name)
    return names


__all__ = [
    "exists",
    "get_stats",
    "list_directory",
    "list_subdirectories",
    "read_text",
    "write_text",
]
