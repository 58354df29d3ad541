"""Project folder management commands for Markdown Blogger CLI."""

from __future__ import annotations

import click

from ..config import InvalidConfigError, normalize_folder
from ._common import BloggerCliError, get_app, save_app


@click.group(name="folders")
def folders() -> None:
    """Manage the project folders notes are pushed to."""


@folders.command(name="list")
@click.pass_context
def list_folders(ctx: click.Context) -> None:
    """List configured project folders; the active one is starred."""

    project_folders = get_app(ctx).settings.project_folders
    for folder in project_folders:
        marker = "*" if folder == project_folders.active else " "
        click.echo(f"{marker} {folder or '(not set)'}")


@folders.command(name="add")
@click.argument("path", type=str)
@click.pass_context
def add_folder(ctx: click.Context, path: str) -> None:
    """Add PATH to the project folders."""

    app = get_app(ctx)
    if not app.settings.project_folders.add(path):
        click.echo("Folder is empty or already configured.")
        return
    save_app(app)
    click.echo(f"Added {normalize_folder(path)}")


@folders.command(name="remove")
@click.argument("path", type=str)
@click.pass_context
def remove_folder(ctx: click.Context, path: str) -> None:
    """Remove PATH from the project folders."""

    app = get_app(ctx)
    if not app.settings.project_folders.remove(path):
        raise BloggerCliError(f"Unknown project folder: {path}")
    save_app(app)
    click.echo(f"Removed {normalize_folder(path)}")


@folders.command(name="select")
@click.argument("path", type=str)
@click.pass_context
def select_folder(ctx: click.Context, path: str) -> None:
    """Make PATH the active project folder."""

    app = get_app(ctx)
    try:
        app.settings.project_folders.select(path)
    except InvalidConfigError as exc:
        raise BloggerCliError(str(exc)) from exc
    save_app(app)
    click.echo(f"Active project folder: {app.settings.project_folders.active}")


def register(cli: click.Group) -> None:
    """Register the command group with the root CLI group."""

    cli.add_command(folders)
