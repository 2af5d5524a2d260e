"""Rich console output utilities for the gostrap CLI."""

import logging
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from scaffolding.doctor import DoctorReport
from scaffolding.extractor import ExtractionReport
from scaffolding.templates import TemplateEntry


console = Console()
error_console = Console(stderr=True)


APP_BANNER = r"""
  ____  ___  ___ _____ ____      _    ____
 / ___|/ _ \/ __|_   _|  _ \    / \  |  _ \
| |  _| | | \__ \ | | | |_) |  / _ \ | |_) |
| |_| | |_| |__) || | |  _ <  / ___ \|  __/
 \____|\___/|___/ |_| |_| \_\/_/   \_\_|
"""


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> None:
    """Send diagnostic logging to stderr through rich.

    Raises:
        ValueError: If ``level`` is not one of LOG_LEVELS
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}")


def print_banner() -> None:
    console.print(f"[cyan]{APP_BANNER}[/cyan]", highlight=False)


def print_templates(entries: Iterable[TemplateEntry]) -> None:
    """Print installed templates as a table."""
    table = Table(title="Available Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Author", style="green")

    count = 0
    for entry in entries:
        table.add_row(entry.name, entry.description or "-", entry.author or "-")
        count += 1

    console.print(table)
    console.print(f"\n[dim]Total: {count} templates[/dim]")


def print_extraction_report(report: ExtractionReport) -> None:
    """Print per-template results of a download."""
    for name in report.extracted:
        print_success(f"Template '{name}' extracted")
    for name, reason in report.skipped.items():
        print_warning(f"Template '{name}' skipped: {reason}")
    for name, reason in report.failed.items():
        print_error(f"Template '{name}' failed: {reason}")

    if not report.extracted and not report.failed and not report.skipped:
        print_warning(f"No templates found in {report.source}")


def print_doctor_report(report: DoctorReport) -> None:
    """Print environment check results."""
    for check in report.tools:
        if check.available:
            print_success(check.detail)
        else:
            print_error(check.detail)

    if report.tools_ok:
        print_success("All required tools are installed and accessible.")

    if report.template_count == 0:
        print_warning("No templates found in the templates directory.")
    else:
        print_info(f"{report.template_count} templates installed")
