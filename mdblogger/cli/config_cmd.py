"""Config command for Markdown Blogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    TomlSettingsStore,
    bootstrap_config_file,
    load_settings,
)
from ._common import BloggerCliError


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Edit the settings file, creating it with defaults when missing.

    The file is checked after the editor closes so a broken edit is reported
    right away instead of on the next push.
    """

    config_path: Path = ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH

    try:
        if bootstrap_config_file(config_path):
            click.echo(f"Created configuration at {config_path}")
    except ConfigError as exc:
        raise BloggerCliError(str(exc)) from exc

    click.edit(filename=str(config_path))

    try:
        settings = load_settings(TomlSettingsStore(config_path))
    except ConfigError as exc:
        raise BloggerCliError(f"{config_path} is not valid: {exc}") from exc

    click.echo(f"Active project folder: {settings.project_folders.active or '(not set)'}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
