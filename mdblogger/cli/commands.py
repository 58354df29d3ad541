"""Host commands contributed by plugins (validate-path, push-md)."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import click

from ..app import AppContext
from ..errors import ReadError
from ..plugins import PluginRegistrationError, load_commands
from ..plugins.builtin.blogger import PUSH_COMMAND_ID, VALIDATE_COMMAND_ID
from ..vault import VaultDocument
from ._common import BloggerCliError, get_app


def run_command(
    ctx: click.Context,
    app: AppContext,
    command_id: str,
    document: VaultDocument | None = None,
    *,
    post_date: datetime | None = None,
) -> None:
    """Invoke a plugin command and exit non-zero when it reports failure."""

    try:
        commands = load_commands()
    except PluginRegistrationError as exc:
        raise BloggerCliError(str(exc)) from exc

    contribution = commands.get(command_id.lower())
    if contribution is None:
        available = ", ".join(sorted(commands))
        raise BloggerCliError(f"Unknown command: {command_id}. Available: {available}.")

    context = app.command_context()
    if post_date is not None:
        context.clock = lambda: post_date

    if not contribution.callback(context, document):
        ctx.exit(1)


def resolve_document(app: AppContext, note: Path) -> VaultDocument:
    try:
        return app.vault.resolve(note)
    except ReadError as exc:
        raise BloggerCliError(str(exc)) from exc


@click.command(name=VALIDATE_COMMAND_ID)
@click.pass_context
def validate_path(ctx: click.Context) -> None:
    """Check that the active project folder exists."""

    run_command(ctx, get_app(ctx), VALIDATE_COMMAND_ID)


@click.command(name=PUSH_COMMAND_ID)
@click.option(
    "--date",
    "post_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date used for Jekyll file names (default: today, UTC).",
)
@click.argument("note", type=click.Path(path_type=Path))
@click.pass_context
def push_md(ctx: click.Context, note: Path, post_date: datetime | None) -> None:
    """Push NOTE from the vault into the active project folder."""

    app = get_app(ctx)
    document = resolve_document(app, note)
    if post_date is not None:
        post_date = post_date.replace(tzinfo=timezone.utc)
    run_command(ctx, app, PUSH_COMMAND_ID, document, post_date=post_date)


def register(cli: click.Group) -> None:
    """Register the commands with the root CLI group."""

    cli.add_command(validate_path)
    cli.add_command(push_md)
