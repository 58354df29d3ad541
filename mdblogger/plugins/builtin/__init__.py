"""Built-in Markdown Blogger plugins."""

from __future__ import annotations

from . import blogger

BUILTIN_PLUGINS = (blogger,)

__all__ = ["BUILTIN_PLUGINS"]
