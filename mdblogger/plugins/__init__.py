"""Markdown Blogger plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    collect_menu_items,
    get_plugin_manager,
    load_commands,
    reset_plugin_manager_cache,
)
from .types import CommandContext, CommandContribution, MenuItem, Notifier

__all__ = [
    "CommandContext",
    "CommandContribution",
    "ENTRY_POINT_GROUP",
    "MenuItem",
    "Notifier",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "collect_menu_items",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_commands",
    "reset_plugin_manager_cache",
]
