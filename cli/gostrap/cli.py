"""gostrap CLI.

Main command-line interface for creating Go projects from templates.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from cli.gostrap.output import (
    configure_logging,
    console,
    print_banner,
    print_doctor_report,
    print_error,
    print_extraction_report,
    print_info,
    print_success,
    print_warning,
)
from scaffolding.errors import InvalidProjectNameError, ScaffoldError, SelectionCancelled

app = typer.Typer(
    name="gostrap",
    help="gostrap - scaffold new Go projects from git-hosted templates",
)

# Config sub-app
config_app = typer.Typer(
    name="config",
    help="Manage configuration settings.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# Register template sub-app
from cli.commands.templates import templates_app, list_templates, load_catalog

app.add_typer(templates_app, name="templates")
app.command("list", hidden=True)(list_templates)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Create a new Go project interactively when no command is given."""
    from scaffolding.config import get_config

    config = get_config()
    try:
        configure_logging(log_level or config.logging.level)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if ctx.invoked_subcommand is None:
        console.clear()
        print_banner()
        name = prompt_project_name()
        _create(name, None)


def prompt_project_name() -> str:
    """Ask for a project name until a valid one is given."""
    from scaffolding.generator import validate_project_name

    while True:
        raw = typer.prompt("Input your project name", default="", show_default=False)
        try:
            return validate_project_name(raw)
        except InvalidProjectNameError as e:
            print_error(str(e))


def select_template() -> str:
    """Let the user pick an installed template with the arrow keys."""
    from cli.commands.templates import get_store
    from scaffolding.selector import TemplateSelector

    names = load_catalog()
    store = get_store()
    if not names:
        raise ScaffoldError(f"No templates found in {store.root}")

    selector = TemplateSelector(list(store.entries(names)), console=console)
    selected = selector.run()
    console.clear()
    return selected


def _create(name: str, template: Optional[str]) -> None:
    from scaffolding.config import get_config
    from scaffolding.generator import ProjectGenerator

    try:
        if not template:
            template = select_template()
        ProjectGenerator.from_config(get_config()).generate(name, template)
    except SelectionCancelled:
        console.print("[dim]Selection cancelled[/dim]")
        raise typer.Exit(1)
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        print_warning("Interrupted by user")
        raise typer.Exit(130)


@app.command()
def create(
    name: str = typer.Option(..., "--name", "-n", help="Name of the project"),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Project template to use (default: choose interactively)",
    ),
) -> None:
    """Create a new Go project from a template.

    Examples:
        gostrap create --name myapp
        gostrap create -n myapp -t figo-templates-fiber
    """
    _create(name, template)


app.command("new", hidden=True)(create)
app.command("init", hidden=True)(create)


@app.command()
def doctor() -> None:
    """Check the environment for git, go and installed templates.

    When no templates are installed, offers to download the defaults.
    """
    from cli.commands.templates import get_extractor, get_store
    from scaffolding.doctor import run_doctor

    console.print(Panel("[bold]gostrap doctor[/bold]", border_style="cyan"))
    try:
        report = run_doctor(get_store())
    except ScaffoldError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_doctor_report(report)

    if report.template_count == 0:
        if typer.confirm("Do you want to download default templates?", default=False):
            try:
                extraction = get_extractor().download()
            except ScaffoldError as e:
                print_error(str(e))
                raise typer.Exit(1)
            print_extraction_report(extraction)
            if extraction.failed:
                raise typer.Exit(1)
        else:
            print_info("Download the default templates later with: gostrap templates add")

    if not report.tools_ok:
        raise typer.Exit(1)


@config_app.command("show")
def config_show(
    section: Optional[str] = typer.Argument(
        None,
        help="Config section to show (templates, project, logging)",
    ),
) -> None:
    """Show current configuration.

    Examples:
        gostrap config show
        gostrap config show templates
    """
    from scaffolding.config import find_config_file, get_config

    config_path = find_config_file()
    if config_path:
        print_info(f"Config file: {config_path}")
    else:
        print_warning("No config file found (using defaults)")

    config = get_config()
    section_map = {
        "templates": config.templates,
        "project": config.project,
        "logging": config.logging,
    }

    if section:
        section_lower = section.lower()
        if section_lower not in section_map:
            print_error(f"Unknown section: {section}")
            print_info(f"Available: {', '.join(section_map.keys())}")
            raise typer.Exit(1)
        sections = [(section_lower, section_map[section_lower])]
    else:
        sections = list(section_map.items())

    for name, section_config in sections:
        console.print(f"\n[bold][{name}][/bold]")

        table = Table(show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for key, value in vars(section_config).items():
            if not key.startswith("_"):
                table.add_row(key, str(value))

        if name == "templates":
            table.add_row("store_path", str(config.templates.store_path))

        console.print(table)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing gostrap.toml",
    ),
) -> None:
    """Create a default gostrap.toml in the current directory.

    Example:
        gostrap config init
        gostrap config init --force
    """
    from scaffolding.config import CONFIG_FILE_NAME, DEFAULT_CONFIG_TOML

    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        print_warning(f"Config file already exists: {config_path}")
        print_info("Use --force to overwrite")
        raise typer.Exit(1)

    config_path.write_text(DEFAULT_CONFIG_TOML)
    print_success(f"Created config file: {config_path}")


@app.command()
def version() -> None:
    """Show gostrap version."""
    from cli.gostrap import __version__

    console.print(f"gostrap version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
