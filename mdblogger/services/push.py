"""Push workflow: copy one vault document into the project folder."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from .. import fs
from ..errors import InvalidPathError, WriteError
from ..filenames import convert_filename
from ..vault import Vault, VaultDocument

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class PushResult:
    """Outcome of a successful push."""

    source: VaultDocument
    target: Path


def validate_destination(directories: Sequence[Path | str]) -> Path:
    """Check that the active destination (element 0) is an existing folder.

    Returns the destination as a :class:`Path`. Raises
    :class:`InvalidPathError` when it is empty, missing or not a directory.
    """

    if not directories:
        raise ValueError("At least one destination directory is required.")

    candidate = directories[0]
    if not str(candidate).strip():
        raise InvalidPathError(candidate)

    path = Path(candidate).expanduser()
    if not fs.exists(path) or not path.is_dir():
        raise InvalidPathError(candidate)
    return path


def resolve_target_path(
    destination: Path | str,
    source_name: str,
    *,
    dated: bool,
    now: date | datetime | None = None,
) -> Path:
    filename = convert_filename(source_name, dated, now)
    return (Path(destination).expanduser() / filename).resolve()


def push_document(
    vault: Vault,
    document: VaultDocument,
    destination: Path | str,
    *,
    dated: bool,
    now: date | datetime | None = None,
) -> PushResult:
    """Copy ``document`` into ``destination`` and return where it landed.

    An existing file at the target path is replaced without confirmation.
    """

    destination_path = validate_destination([destination])
    target = resolve_target_path(destination_path, document.name, dated=dated, now=now)
    logger.debug("Pushing %s to %s", document.path, target)

    content = vault.read(document)

    try:
        fs.write_text(target, content)
    except OSError as exc:
        raise WriteError(target, exc.strerror or str(exc)) from exc

    logger.info("Pushed %s to %s", document.path, target)
    return PushResult(source=document, target=target)


__all__ = ["PushResult", "push_document", "resolve_target_path", "validate_destination"]
