"""Service layer for Markdown Blogger workflows."""
