from __future__ import annotations

import textwrap
import tomllib
from pathlib import Path

import pytest
from mdblogger.config import (
    BloggerSettings,
    InvalidConfigError,
    MemorySettingsStore,
    ProjectFolders,
    TomlSettingsStore,
    bootstrap_config_file,
    load_settings,
    save_settings,
)


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


def test_defaults_when_nothing_saved(tmp_path: Path) -> None:
    settings = load_settings(TomlSettingsStore(tmp_path / "missing.toml"))

    assert list(settings.project_folders) == [""]
    assert settings.project_folders.active == ""
    assert settings.show_hidden_folders is False
    assert settings.convert_to_jekyll_format is False


def test_load_settings_success(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [mdblogger]
        project_folders = ["/srv/blog", "/srv/site"]
        selected_folder = "/srv/site"
        convert_to_jekyll_format = true
        """,
    )

    settings = load_settings(TomlSettingsStore(config_path))
    assert list(settings.project_folders) == ["/srv/blog", "/srv/site"]
    assert settings.project_folders.active == "/srv/site"
    assert settings.show_hidden_folders is False
    assert settings.convert_to_jekyll_format is True


def test_camel_case_keys_are_accepted() -> None:
    settings = BloggerSettings.from_mapping(
        {"projectFolders": ["/srv/blog"], "showHiddenFolders": True}
    )

    assert settings.project_folders.active == "/srv/blog"
    assert settings.show_hidden_folders is True


def test_rejects_wrong_types(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [mdblogger]
        project_folders = "/srv/blog"
        """,
    )
    with pytest.raises(InvalidConfigError):
        load_settings(TomlSettingsStore(config_path))

    with pytest.raises(InvalidConfigError):
        BloggerSettings.from_mapping({"convert_to_jekyll_format": "yes"})


def test_rejects_malformed_toml(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, "[mdblogger\n")

    with pytest.raises(InvalidConfigError):
        load_settings(TomlSettingsStore(config_path))


def test_save_settings_writes_readable_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.toml"
    store = TomlSettingsStore(config_path)
    settings = BloggerSettings()
    settings.project_folders.add('C:\\Users\\me\\"blog"')
    settings.show_hidden_folders = True

    save_settings(store, settings)

    with config_path.open("rb") as fh:
        raw = tomllib.load(fh)
    assert raw["mdblogger"]["project_folders"] == ['C:\\Users\\me\\"blog"']
    assert raw["mdblogger"]["show_hidden_folders"] is True
    assert load_settings(store) == settings


def test_save_settings_escapes_control_characters(tmp_path: Path) -> None:
    store = TomlSettingsStore(tmp_path / "config.toml")
    settings = BloggerSettings()
    settings.project_folders.add("/srv/blog\x7f")
    settings.project_folders.add("/srv/\x01site\x02")

    save_settings(store, settings)

    loaded = load_settings(store)
    assert list(loaded.project_folders) == ["/srv/blog\x7f", "/srv/\x01site\x02"]
    assert "\\u007f" in store.path.read_text(encoding="utf-8")


def test_memory_store_round_trip() -> None:
    store = MemorySettingsStore()
    settings = load_settings(store)
    settings.project_folders.add("/srv/blog")
    save_settings(store, settings)

    assert store.data is not None
    assert store.data["project_folders"] == ["/srv/blog"]


def test_bootstrap_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"

    assert bootstrap_config_file(config_path) is True
    assert bootstrap_config_file(config_path) is False
    assert list(load_settings(TomlSettingsStore(config_path)).project_folders) == [""]


def test_project_folders_add_normalizes_and_skips_duplicates() -> None:
    folders = ProjectFolders()

    assert folders.add("  /srv/my   blog ") is True
    assert folders.add("/srv/my blog") is False
    assert folders.add("   ") is False
    assert list(folders) == ["/srv/my blog"]


def test_project_folders_selection_survives_reordering() -> None:
    folders = ProjectFolders(["/a", "/b", "/c"])
    folders.select("/b")

    assert folders.active == "/b"
    assert folders.active_first() == ["/b", "/a", "/c"]

    folders.remove("/a")
    assert folders.active == "/b"


def test_project_folders_removing_active_falls_back_to_first() -> None:
    folders = ProjectFolders(["/a", "/b"], selected="/b")

    assert folders.remove("/b") is True
    assert folders.active == "/a"
    assert folders.remove("/missing") is False


def test_project_folders_never_empty() -> None:
    folders = ProjectFolders(["/a"])
    folders.remove("/a")

    assert list(folders) == [""]
    assert folders.active == ""


def test_select_unknown_folder_rejected() -> None:
    with pytest.raises(InvalidConfigError):
        ProjectFolders(["/a"]).select("/b")
