"""CLI command modules for gostrap."""

from cli.commands.templates import templates_app

__all__ = ["templates_app"]
