"""Read-only access to the notes vault."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from . import fs
from .errors import ReadError

MARKDOWN_SUFFIXES = (".md", ".markdown")


@dataclass(slots=True, frozen=True)
class VaultDocument:
    """Handle to a single document stored in the vault."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name


class Vault:
    """Directory-backed document collection.

    Documents are addressed by their path relative to ``root``. The vault only
    ever reads documents; pushing never mutates the source.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser().resolve()

    def resolve(self, note: Path | str) -> VaultDocument:
        """Return a document handle for ``note``.

        ``note`` may be relative to the vault root or an absolute path inside
        it. Paths leaving the vault or not pointing at a file raise
        :class:`ReadError`.
        """

        raw = Path(note).expanduser()
        full = (raw if raw.is_absolute() else self.root / raw).resolve()
        try:
            relative = full.relative_to(self.root)
        except ValueError as exc:
            raise ReadError(str(note), "path is outside the vault") from exc
        if not full.is_file():
            raise ReadError(str(note), "no such document")
        return VaultDocument(path=relative)

    def read(self, document: VaultDocument) -> str:
        try:
            return fs.read_text(self.root / document.path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(document.name, str(exc)) from exc

    def iter_documents(self) -> Iterator[VaultDocument]:
        """Yield markdown documents below the root, skipping hidden folders."""

        for path in sorted(self.root.rglob("*")):
            relative = path.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.suffix.lower() in MARKDOWN_SUFFIXES and path.is_file():
                yield VaultDocument(path=relative)


__all__ = ["MARKDOWN_SUFFIXES", "Vault", "VaultDocument"]
