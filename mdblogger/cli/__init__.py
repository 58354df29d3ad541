"""Markdown Blogger CLI package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import click

from . import browse, commands, config_cmd, folders, ls, menu, settings_cmd
from ._common import CONTEXT_SETTINGS, BloggerCliError

__all__ = ["cli", "main", "BloggerCliError"]

_LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "--vault",
    "vault_dir",
    type=click.Path(path_type=Path, file_okay=False, exists=True),
    default=None,
    help="Vault directory notes are read from (default: current directory).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path_opt: Path | None,
    vault_dir: Path | None,
    verbose: bool,
) -> None:
    """Push vault notes into a blog or static site project."""

    ctx.ensure_object(dict)
    configure_logging(verbose)

    ctx.obj["config_path"] = config_path_opt
    ctx.obj["vault_dir"] = vault_dir


for register_command in (
    commands.register,
    menu.register,
    ls.register,
    folders.register,
    settings_cmd.register,
    browse.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="mdb", standalone_mode=False) or 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
