"""Settings commands for Markdown Blogger CLI."""

from __future__ import annotations

import click

from ..config import format_settings
from ._common import get_app, save_app

_FLAGS = {
    "show-hidden-folders": "show_hidden_folders",
    "jekyll-format": "convert_to_jekyll_format",
}


@click.group(name="settings")
def settings() -> None:
    """Show or change Markdown Blogger settings."""


@settings.command(name="show")
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the current settings as TOML."""

    app = get_app(ctx)
    click.echo(f"# {app.store.path}")
    click.echo(format_settings(app.settings.to_mapping()), nl=False)


@settings.command(name="set")
@click.argument("key", type=click.Choice(sorted(_FLAGS)))
@click.argument("value", type=click.BOOL)
@click.pass_context
def set_flag(ctx: click.Context, key: str, value: bool) -> None:
    """Turn the KEY setting on or off."""

    app = get_app(ctx)
    setattr(app.settings, _FLAGS[key], value)
    save_app(app)
    click.echo(f"{key} = {'on' if value else 'off'}")


def register(cli: click.Group) -> None:
    """Register the command group with the root CLI group."""

    cli.add_command(settings)
