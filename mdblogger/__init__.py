"""Markdown Blogger: push notes from a vault into a static site project."""

from __future__ import annotations

__version__ = "0.3.0"
