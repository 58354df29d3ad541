"""Application bootstrap and context container for Markdown Blogger."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import BloggerSettings, TomlSettingsStore, load_settings, save_settings
from .plugins import CommandContext, Notifier
from .vault import Vault


@dataclass(slots=True)
class AppContext:
    """Aggregates core services for the CLI lifecycle."""

    settings: BloggerSettings
    store: TomlSettingsStore
    vault: Vault
    notifier: Notifier

    def save(self) -> None:
        save_settings(self.store, self.settings)

    def command_context(self) -> CommandContext:
        return CommandContext(
            settings=self.settings,
            store=self.store,
            vault=self.vault,
            notifier=self.notifier,
        )


def bootstrap(
    config_path: Path | None,
    vault_dir: Path | None,
    notifier: Notifier,
) -> AppContext:
    """Load settings and open the vault."""

    store = TomlSettingsStore(config_path)
    settings = load_settings(store)
    vault = Vault(vault_dir if vault_dir is not None else Path.cwd())
    return AppContext(settings=settings, store=store, vault=vault, notifier=notifier)
