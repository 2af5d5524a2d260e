"""Template CLI commands for gostrap.

Manage the local template catalog.
"""

from typing import Optional

import typer

from cli.gostrap.output import (
    console,
    print_error,
    print_extraction_report,
    print_info,
    print_success,
    print_templates,
    print_warning,
)
from scaffolding.errors import ScaffoldError

templates_app = typer.Typer(
    name="templates",
    help="Manage the local template catalog.",
    no_args_is_help=True,
)


def get_store():
    """Get the template store for the current config."""
    from scaffolding.config import get_config
    from scaffolding.templates import TemplateStore

    config = get_config()
    return TemplateStore(config.templates.store_path, config.templates.metadata_file)


def get_extractor():
    """Get the template extractor for the current config."""
    from scaffolding.config import get_config
    from scaffolding.extractor import TemplateExtractor
    from tools import GitTool

    return TemplateExtractor.from_config(get_config(), GitTool())


def load_catalog() -> list[str]:
    """List templates, downloading the default repository on first run."""
    extractor = get_extractor()

    def populate() -> None:
        print_info("No local templates yet, downloading the default repository")
        print_extraction_report(extractor.download())

    return extractor.store.list_templates(populate=populate)


@templates_app.command("list")
def list_templates() -> None:
    """List installed templates.

    Example:
        gostrap templates list
    """
    try:
        names = load_catalog()
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)

    store = get_store()
    if not names:
        print_warning(f"No templates found in {store.root}")
        console.print("[dim]Download templates with: gostrap templates add --url <repo>[/dim]")
        raise typer.Exit(1)

    print_templates(store.entries(names))


@templates_app.command("add")
def add(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="Git repository URL to download templates from",
    ),
) -> None:
    """Download templates from a git repository.

    Examples:
        gostrap templates add
        gostrap templates add --url https://github.com/org/go-templates.git
    """
    extractor = get_extractor()
    if not url:
        print_warning(f"No URL specified, using default repository: {extractor.settings.default_repo_url}")

    try:
        report = extractor.download(url)
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_extraction_report(report)
    if report.failed:
        raise typer.Exit(1)
    print_success("Templates downloaded successfully")


@templates_app.command("delete")
def delete(
    name: str = typer.Argument(..., help="Template name"),
) -> None:
    """Delete one installed template.

    Example:
        gostrap templates delete figo-templates-fiber
    """
    try:
        get_store().remove(name)
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Template '{name}' deleted successfully")


@templates_app.command("delete-all")
def delete_all(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Do not ask for confirmation",
    ),
) -> None:
    """Delete every installed template.

    Example:
        gostrap templates delete-all --yes
    """
    store = get_store()
    if not yes and not typer.confirm(f"Delete all templates in {store.root}?"):
        raise typer.Exit(1)

    try:
        store.remove_all()
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success("All templates deleted successfully")
