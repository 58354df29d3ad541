"""Shared helpers for Markdown Blogger CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class BloggerCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


class ClickNotifier:
    """Render host notices on the terminal."""

    def notice(self, message: str) -> None:
        click.echo(message)

    def error_modal(self, message: str) -> None:
        click.echo(click.style(message, fg="red"), err=True)


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path: Path | None = ctx.obj.get("config_path")
    vault_dir: Path | None = ctx.obj.get("vault_dir")

    try:
        app = bootstrap(config_path, vault_dir, ClickNotifier())
    except ConfigError as exc:
        raise BloggerCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def save_app(app: AppContext) -> None:
    try:
        app.save()
    except ConfigError as exc:
        raise BloggerCliError(str(exc)) from exc
