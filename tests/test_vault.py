from __future__ import annotations

from pathlib import Path

import pytest
from mdblogger.errors import ReadError
from mdblogger.vault import Vault, VaultDocument


def _make_vault(tmp_path: Path) -> Vault:
    root = tmp_path / "vault"
    (root / "posts").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    (root / "posts" / "First Post.md").write_text("# First", encoding="utf-8")
    (root / "Inbox.markdown").write_text("inbox", encoding="utf-8")
    (root / "image.png").write_bytes(b"\x89PNG")
    (root / ".obsidian" / "workspace.md").write_text("{}", encoding="utf-8")
    return Vault(root)


def test_resolve_relative_and_absolute(tmp_path: Path) -> None:
    vault = _make_vault(tmp_path)

    relative = vault.resolve("posts/First Post.md")
    absolute = vault.resolve(vault.root / "posts" / "First Post.md")

    assert relative == absolute
    assert relative.name == "First Post.md"
    assert vault.read(relative) == "# First"


def test_resolve_rejects_paths_outside_vault(tmp_path: Path) -> None:
    vault = _make_vault(tmp_path)
    outside = tmp_path / "elsewhere.md"
    outside.write_text("x", encoding="utf-8")

    with pytest.raises(ReadError):
        vault.resolve("../elsewhere.md")
    with pytest.raises(ReadError):
        vault.resolve(outside)


def test_resolve_rejects_missing_and_directories(tmp_path: Path) -> None:
    vault = _make_vault(tmp_path)

    with pytest.raises(ReadError):
        vault.resolve("missing.md")
    with pytest.raises(ReadError):
        vault.resolve("posts")


def test_read_undecodable_document(tmp_path: Path) -> None:
    vault = _make_vault(tmp_path)
    (vault.root / "broken.md").write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(ReadError):
        vault.read(VaultDocument(path=Path("broken.md")))


def test_iter_documents_lists_markdown_only(tmp_path: Path) -> None:
    vault = _make_vault(tmp_path)

    paths = [doc.path for doc in vault.iter_documents()]

    assert paths == [Path("Inbox.markdown"), Path("posts/First Post.md")]
