"""Folder browser command for Markdown Blogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import fs
from ._common import BloggerCliError, get_app


@click.command(name="browse")
@click.option(
    "-a",
    "--all",
    "show_all",
    is_flag=True,
    help="Include hidden folders regardless of settings.",
)
@click.argument("path", type=click.Path(path_type=Path), required=False)
@click.pass_context
def browse(ctx: click.Context, path: Path | None, show_all: bool) -> None:
    """List folders below PATH (default: home) to pick a project folder."""

    app = get_app(ctx)
    current = (path or Path.home()).expanduser().resolve()
    show_hidden = show_all or app.settings.show_hidden_folders

    try:
        names = fs.list_subdirectories(current, show_hidden=show_hidden)
    except OSError as exc:
        raise BloggerCliError(f"Cannot list {current}: {exc.strerror or exc}") from exc

    click.echo(f"{current}:")
    for name in names:
        click.echo(f"  {current / name}")
    if not names:
        click.echo("  (no folders)")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(browse)
