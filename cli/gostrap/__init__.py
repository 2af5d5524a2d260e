"""gostrap CLI.

Command-line interface for scaffolding Go projects from templates.
"""

__version__ = "0.1.0"

from cli.gostrap.cli import app, main

__all__ = ["__version__", "app", "main"]
