"""Helpers for creating and working with the Markdown Blogger plugin manager."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from typing import Tuple, TypeVar

import pluggy

from ..vault import VaultDocument
from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import BloggerHookSpec
from .types import CommandContribution, MenuItem

_T = TypeVar("_T")


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager() -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` configured for Markdown Blogger."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(BloggerHookSpec)

    manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except pluggy.PluginValidationError as exc:  # pragma: no cover - defensive
            raise PluginRegistrationError(str(exc)) from exc


def iter_plugin_modules() -> Tuple[object, ...]:
    """Return plugin modules bundled with Markdown Blogger."""

    return _builtin_plugin_modules()


@lru_cache(maxsize=1)
def _builtin_plugin_modules() -> Tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()
    _builtin_plugin_modules.cache_clear()


def iter_command_contributions(
    manager: pluggy.PluginManager,
) -> Iterator[CommandContribution]:
    for contributions in manager.hook.blogger_commands():
        if not contributions:
            continue
        yield from _ensure_iterable(contributions, CommandContribution)


def load_commands() -> dict[str, CommandContribution]:
    """Collect commands from all registered plugins, keyed by id."""

    manager = get_plugin_manager()

    commands: dict[str, CommandContribution] = {}
    for contribution in iter_command_contributions(manager):
        key = contribution.command_id.lower()
        if key in commands:
            raise PluginRegistrationError(
                f"Duplicate command id detected: '{contribution.command_id}'."
            )
        commands[key] = contribution

    return commands


def collect_menu_items(document: VaultDocument) -> list[MenuItem]:
    """Return context-menu entries offered for ``document``."""

    manager = get_plugin_manager()

    items: list[MenuItem] = []
    # pluggy calls the most recently registered plugin first.
    for contributions in reversed(manager.hook.file_menu_items(document=document)):
        if not contributions:
            continue
        items.extend(_ensure_iterable(contributions, MenuItem))
    return items


def _ensure_iterable(contributions: object, kind: type[_T]) -> Iterable[_T]:
    """Normalize hook return values to a concrete iterable of ``kind``."""

    if isinstance(contributions, kind):
        return (contributions,)

    if not isinstance(contributions, Iterable) or isinstance(
        contributions, (str, bytes)
    ):
        raise PluginRegistrationError(
            "Plugin hook did not return an iterable contribution collection."
        )

    normalized: list[_T] = []
    for item in contributions:
        if not isinstance(item, kind):
            raise PluginRegistrationError(
                f"Plugin contributions must be {kind.__name__} instances."
            )
        normalized.append(item)
    return tuple(normalized)


__all__ = [
    "PluginRegistrationError",
    "collect_menu_items",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_command_contributions",
    "iter_plugin_modules",
    "load_commands",
    "register_modules",
    "reset_plugin_manager_cache",
]
