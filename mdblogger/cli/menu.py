"""Context-menu command for Markdown Blogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..plugins import PluginRegistrationError, collect_menu_items
from ._common import BloggerCliError, get_app
from .commands import resolve_document


@click.command(name="menu")
@click.option(
    "-r",
    "--run",
    "title",
    type=str,
    default=None,
    help="Run the menu entry with this title.",
)
@click.argument("note", type=click.Path(path_type=Path))
@click.pass_context
def menu(ctx: click.Context, note: Path, title: str | None) -> None:
    """Show (or run) the context-menu actions offered for NOTE."""

    app = get_app(ctx)
    document = resolve_document(app, note)

    try:
        items = collect_menu_items(document)
    except PluginRegistrationError as exc:
        raise BloggerCliError(str(exc)) from exc

    if title is None:
        if not items:
            click.echo("No actions are available.")
            return
        click.echo(f"Actions for {document.path}:\n")
        for item in items:
            click.echo(f"  - {item.title} [{item.icon}]")
        return

    for item in items:
        if item.title.lower() == title.lower():
            if not item.callback(app.command_context(), document):
                ctx.exit(1)
            return

    raise BloggerCliError(f"No menu action named '{title}'.")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(menu)
