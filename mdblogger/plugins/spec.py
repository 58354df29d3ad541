"""Hook specifications for Markdown Blogger plugins."""

from __future__ import annotations

from collections.abc import Iterable

from ..vault import VaultDocument
from ._markers import hookspec
from .types import CommandContribution, MenuItem


class BloggerHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def blogger_commands(self) -> Iterable[CommandContribution]:
        """Return commands the plugin exposes to the host."""

    @hookspec
    def file_menu_items(self, document: VaultDocument) -> Iterable[MenuItem]:
        """Return context-menu entries offered for ``document``."""
