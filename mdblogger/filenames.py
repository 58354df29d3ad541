"""Target filename derivation for pushed documents.

Dated mode follows the Jekyll post convention ``YYYY-MM-DD-title.md``. The
date is always the UTC calendar date, so a push shortly before local midnight
can carry the next (or previous) day depending on the user's offset.

The title is the file name up to its last dot, so ``"foo."`` gives ``"foo"``
while dot files such as ``".draft"`` keep their whole name. Whitespace means
the ECMAScript set (which includes U+FEFF but not the U+001C-U+001F
separators that Python's regex whitespace class accepts), matching the editor
extension.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from pathlib import PurePath

_DISALLOWED_CHARS = re.compile(r"[#?]")
_WHITESPACE_RUN = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
_DATE_FORMAT = "%Y-%m-%d"
POST_SUFFIX = ".md"


def utc_today() -> date:
    return datetime.now(tz=timezone.utc).date()


def format_post_date(now: date | datetime) -> str:
    """Format ``now`` as ``YYYY-MM-DD`` using its UTC calendar date.

    Naive datetimes are assumed to already be in UTC.
    """

    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        now = now.date()
    return now.strftime(_DATE_FORMAT)


def sanitize_title(title: str) -> str:
    """Drop ``#`` and ``?`` and turn each whitespace run into one hyphen."""

    cleaned = _DISALLOWED_CHARS.sub("", title)
    return _WHITESPACE_RUN.sub("-", cleaned)


def post_title(source_name: str) -> str:
    """Return the file name without its extension."""

    base = PurePath(source_name).name
    dot = base.rfind(".")
    if dot <= 0 or base == "..":
        return base
    return base[:dot]


def to_jekyll_filename(source_name: str, now: date | datetime | None = None) -> str:
    title = post_title(source_name)
    stamp = format_post_date(now if now is not None else utc_today())
    # An empty title still yields "YYYY-MM-DD-.md".
    return f"{stamp}-{sanitize_title(title)}{POST_SUFFIX}"


def convert_filename(
    source_name: str,
    dated: bool,
    now: date | datetime | None = None,
) -> str:
    """Return the filename a document is pushed under.

    Without ``dated`` the source name is returned unchanged.
    """

    if not dated:
        return source_name
    return to_jekyll_filename(source_name, now)


__all__ = [
    "POST_SUFFIX",
    "convert_filename",
    "format_post_date",
    "post_title",
    "sanitize_title",
    "to_jekyll_filename",
    "utc_today",
]
