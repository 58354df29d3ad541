"""List command for Markdown Blogger CLI."""

from __future__ import annotations

import click

from ._common import get_app


@click.command(name="ls")
@click.pass_context
def ls(ctx: click.Context) -> None:
    """List markdown notes in the vault."""

    app = get_app(ctx)
    documents = list(app.vault.iter_documents())
    if not documents:
        click.echo(f"No notes found in {app.vault.root}")
        return
    for document in documents:
        click.echo(str(document.path))


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
