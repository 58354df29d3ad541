"""Built-in plugin exposing the validate and push commands."""

from __future__ import annotations

import logging

from ...errors import InvalidPathError, PushError
from ...services.push import push_document, validate_destination
from ...vault import VaultDocument
from .. import CommandContribution, MenuItem, hookimpl
from ..types import CommandContext

logger = logging.getLogger(__name__)

VALIDATE_COMMAND_ID = "validate-path"
PUSH_COMMAND_ID = "push-md"
PUSH_TITLE = "Push markdown"


def _check_destination(context: CommandContext) -> bool:
    try:
        validate_destination(context.settings.project_folders.active_first())
    except InvalidPathError as exc:
        logger.debug("Invalid project folder: %r", exc.path)
        context.notifier.error_modal(str(exc))
        return False
    return True


def validate_path(context: CommandContext, document: VaultDocument | None) -> bool:
    if not _check_destination(context):
        return False
    context.notifier.notice(f"Valid path: {context.settings.project_folders.active}")
    return True


def push_markdown(context: CommandContext, document: VaultDocument | None) -> bool:
    if not _check_destination(context):
        return False
    if document is None:
        return False

    settings = context.settings
    try:
        result = push_document(
            context.vault,
            document,
            settings.project_folders.active,
            dated=settings.convert_to_jekyll_format,
            now=context.clock(),
        )
    except InvalidPathError as exc:
        context.notifier.error_modal(str(exc))
        return False
    except PushError as exc:
        context.notifier.notice(f"Error while pushing: {exc}")
        return False

    context.notifier.notice(f"File pushed successfully: {result.target}")
    return True


@hookimpl
def blogger_commands() -> tuple[CommandContribution, ...]:
    """Expose the built-in commands to the host."""

    return (
        CommandContribution(
            command_id=VALIDATE_COMMAND_ID,
            name="Validate path",
            callback=validate_path,
        ),
        CommandContribution(
            command_id=PUSH_COMMAND_ID,
            name=PUSH_TITLE,
            callback=push_markdown,
        ),
    )


@hookimpl
def file_menu_items(document: VaultDocument) -> tuple[MenuItem, ...]:
    return (MenuItem(title=PUSH_TITLE, icon="upload", callback=push_markdown),)
