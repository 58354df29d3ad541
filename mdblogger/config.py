"""Settings model and persistence for Markdown Blogger."""

from __future__ import annotations

import re
import tomllib
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

DEFAULT_CONFIG_DIR = Path("~/.config/mdblogger").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
SETTINGS_TABLE = "mdblogger"
PLACEHOLDER_FOLDER = ""

_WHITESPACE_RUN = re.compile(r"\s+")
# TOML basic strings reject raw control characters and DEL.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Legacy camelCase keys from data.json files.
_KEY_ALIASES = {
    "projectFolders": "project_folders",
    "selectedFolder": "selected_folder",
    "showHiddenFolders": "show_hidden_folders",
    "convertToJekyllFormat": "convert_to_jekyll_format",
}


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class InvalidConfigError(ConfigError):
    """Raised when stored settings hold values of the wrong type."""


def normalize_folder(path: str) -> str:
    """Trim ``path`` and collapse inner whitespace runs to a single space."""

    return _WHITESPACE_RUN.sub(" ", path.strip())


class ProjectFolders:
    """Ordered, never-empty list of project folders with an explicit selection.

    The active folder is the selected one when it is still listed, otherwise
    the first entry.
    """

    def __init__(
        self,
        folders: Iterable[str] | None = None,
        selected: str | None = None,
    ) -> None:
        self._folders: list[str] = []
        for folder in folders or ():
            if folder not in self._folders:
                self._folders.append(folder)
        if not self._folders:
            self._folders.append(PLACEHOLDER_FOLDER)
        self._selected = selected if selected in self._folders else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._folders)

    def __len__(self) -> int:
        return len(self._folders)

    def __contains__(self, item: object) -> bool:
        return item in self._folders

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectFolders):
            return NotImplemented
        return self._folders == other._folders and self.active == other.active

    def __repr__(self) -> str:
        return f"ProjectFolders({self._folders!r}, selected={self._selected!r})"

    @property
    def active(self) -> str:
        if self._selected is not None:
            return self._selected
        return self._folders[0]

    @property
    def selected(self) -> str | None:
        return self._selected

    def active_first(self) -> list[str]:
        """Return the folders with the active one moved to index 0."""

        active = self.active
        return [active] + [folder for folder in self._folders if folder != active]

    def add(self, path: str) -> bool:
        """Append ``path``; empty and duplicate entries are ignored.

        The placeholder entry is dropped once a real folder is added.
        """

        normalized = normalize_folder(path)
        if not normalized or normalized in self._folders:
            return False
        if self._folders == [PLACEHOLDER_FOLDER]:
            self._folders.clear()
        self._folders.append(normalized)
        return True

    def remove(self, path: str) -> bool:
        normalized = self._lookup(path)
        if normalized not in self._folders:
            return False
        self._folders.remove(normalized)
        if self._selected == normalized:
            self._selected = None
        if not self._folders:
            self._folders.append(PLACEHOLDER_FOLDER)
        return True

    def select(self, path: str) -> None:
        normalized = self._lookup(path)
        if normalized not in self._folders:
            raise InvalidConfigError(f"Unknown project folder: {path}")
        self._selected = normalized

    def _lookup(self, path: str) -> str:
        # Entries edited by hand may not be normalized.
        return path if path in self._folders else normalize_folder(path)


@dataclass(slots=True)
class BloggerSettings:
    """In-memory representation of the persisted settings."""

    project_folders: ProjectFolders = field(default_factory=ProjectFolders)
    show_hidden_folders: bool = False
    convert_to_jekyll_format: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> BloggerSettings:
        """Merge persisted ``raw`` values over the defaults."""

        data = {_KEY_ALIASES.get(key, key): value for key, value in (raw or {}).items()}

        folders_raw = data.get("project_folders", [PLACEHOLDER_FOLDER])
        if not isinstance(folders_raw, list) or not all(
            isinstance(item, str) for item in folders_raw
        ):
            raise InvalidConfigError("'project_folders' must be a list of strings")

        selected = data.get("selected_folder")
        if selected is not None and not isinstance(selected, str):
            raise InvalidConfigError("'selected_folder' must be a string when provided")

        flags: dict[str, bool] = {}
        for key in ("show_hidden_folders", "convert_to_jekyll_format"):
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise InvalidConfigError(f"'{key}' must be a boolean")
            flags[key] = value

        return cls(
            project_folders=ProjectFolders(folders_raw, selected=selected),
            **flags,
        )

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {"project_folders": list(self.project_folders)}
        if self.project_folders.selected is not None:
            data["selected_folder"] = self.project_folders.selected
        data["show_hidden_folders"] = self.show_hidden_folders
        data["convert_to_jekyll_format"] = self.convert_to_jekyll_format
        return data


class SettingsStore(Protocol):
    """Opaque key-value persistence for settings."""

    def load(self) -> Mapping[str, Any] | None:  # pragma: no cover - Protocol
        """Return stored settings, or ``None`` when nothing was saved yet."""

    def save(self, data: Mapping[str, Any]) -> None:  # pragma: no cover - Protocol
        """Persist ``data``, replacing previous contents."""


class MemorySettingsStore:
    """Settings store kept in memory."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self.data = dict(data) if data is not None else None

    def load(self) -> Mapping[str, Any] | None:
        return dict(self.data) if self.data is not None else None

    def save(self, data: Mapping[str, Any]) -> None:
        self.data = dict(data)


class TomlSettingsStore:
    """Settings stored in the ``[mdblogger]`` table of a TOML file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or DEFAULT_CONFIG_PATH).expanduser()

    def load(self) -> Mapping[str, Any] | None:
        if not self.path.exists():
            return None

        try:
            with self.path.open("rb") as fh:
                raw = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Failed to read {self.path}: {exc}") from exc

        section = raw.get(SETTINGS_TABLE)
        if section is None:
            return None
        if not isinstance(section, dict):
            raise InvalidConfigError(f"'{SETTINGS_TABLE}' section must be a table")
        return section

    def save(self, data: Mapping[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(format_settings(data), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write {self.path}: {exc}") from exc


def format_settings(data: Mapping[str, Any]) -> str:
    """Render ``data`` as the ``[mdblogger]`` TOML table."""

    lines = [f"[{SETTINGS_TABLE}]"]
    for key, value in data.items():
        lines.append(f"{key} = {_toml_value(value)}")
    return "\n".join(lines) + "\n"


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_toml_value(item) for item in value) + "]"
    raise InvalidConfigError(f"Unsupported setting value: {value!r}")


def _quote(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    escaped = _CONTROL_CHARS.sub(lambda m: f"\\u{ord(m.group()):04x}", escaped)
    return f'"{escaped}"'


def load_settings(store: SettingsStore) -> BloggerSettings:
    return BloggerSettings.from_mapping(store.load())


def save_settings(store: SettingsStore, settings: BloggerSettings) -> None:
    store.save(settings.to_mapping())


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    TomlSettingsStore(path).save(BloggerSettings().to_mapping())
    return True


__all__ = [
    "BloggerSettings",
    "ConfigError",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_PATH",
    "InvalidConfigError",
    "MemorySettingsStore",
    "PLACEHOLDER_FOLDER",
    "ProjectFolders",
    "SettingsStore",
    "TomlSettingsStore",
    "bootstrap_config_file",
    "format_settings",
    "load_settings",
    "normalize_folder",
    "save_settings",
]
