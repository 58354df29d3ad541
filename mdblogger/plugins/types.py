"""Type definitions for Markdown Blogger plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:  # pragma: no cover - type check only
    from ..config import BloggerSettings, SettingsStore
    from ..vault import Vault, VaultDocument


class Notifier(Protocol):
    """User-facing feedback channel provided by the host."""

    def notice(self, message: str) -> None:  # pragma: no cover - Protocol
        """Show a transient notice."""

    def error_modal(self, message: str) -> None:  # pragma: no cover - Protocol
        """Show ``message`` in a modal the user has to dismiss."""


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(slots=True)
class CommandContext:
    """Services handed to command and menu callbacks."""

    settings: "BloggerSettings"
    store: "SettingsStore"
    vault: "Vault"
    notifier: Notifier
    clock: Callable[[], datetime] = field(default=_utc_now)


class CommandCallback(Protocol):
    """Callable run when a command or menu item is triggered."""

    def __call__(
        self,
        context: CommandContext,
        document: "VaultDocument | None",
    ) -> bool:  # pragma: no cover - Protocol
        """Run the action and report whether it succeeded."""


@dataclass(slots=True, frozen=True)
class CommandContribution:
    """Command exposed to the host under a stable id and display name."""

    command_id: str
    name: str
    callback: CommandCallback


@dataclass(slots=True, frozen=True)
class MenuItem:
    """Entry offered in a document's context menu."""

    title: str
    icon: str
    callback: CommandCallback
