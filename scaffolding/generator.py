"""Project generator for scaffolding new projects from installed templates."""

import logging
import re
from pathlib import Path
from typing import Callable

from rich.console import Console

from tools import GitTool, ShellTool

from .config import Config, ProjectConfig
from .copier import copy_tree
from .errors import InvalidProjectNameError, ScaffoldError
from .filters import PathFilter
from .templates import TemplateStore

logger = logging.getLogger(__name__)

console = Console()

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_project_name(name: str) -> str:
    """Check a project name.

    Allowed: ASCII letters, digits, '-' and '_'.

    Returns:
        The stripped name

    Raises:
        InvalidProjectNameError: If the name is empty or has other characters
    """
    name = name.strip()
    if not name:
        raise InvalidProjectNameError("Project name cannot be empty")
    if not PROJECT_NAME_PATTERN.match(name):
        raise InvalidProjectNameError(
            f"Invalid project name: {name!r} (use letters, digits, '-' and '_')"
        )
    return name


class ProjectGenerator:
    """Generates a new project from an installed template.

    Steps:
    - Copy the template tree (without its descriptor)
    - Initialize a git repository
    - Run the post-create commands (go get, go mod tidy)
    """

    def __init__(
        self,
        store: TemplateStore,
        settings: ProjectConfig | None = None,
        path_filter: PathFilter | None = None,
        output_dir: Path | None = None,
        git_factory: Callable[[Path], GitTool] = GitTool,
        shell_factory: Callable[[Path], ShellTool] = ShellTool,
    ):
        """Initialize project generator.

        Args:
            store: Store holding the templates
            settings: Post-create behaviour
            path_filter: Names left out of the copy
            output_dir: Parent directory for projects (default: current dir)
            git_factory: Builds the git wrapper for a project directory
            shell_factory: Builds the command runner for a project directory
        """
        self.store = store
        self.settings = settings or ProjectConfig()
        self.path_filter = path_filter
        self.output_dir = output_dir or Path.cwd()
        self.git_factory = git_factory
        self.shell_factory = shell_factory

    @classmethod
    def from_config(cls, config: Config, output_dir: Path | None = None) -> "ProjectGenerator":
        store = TemplateStore(config.templates.store_path, config.templates.metadata_file)
        path_filter = PathFilter.from_lists(
            config.templates.excluded_dirs,
            config.templates.excluded_files,
        )
        return cls(store, config.project, path_filter, output_dir)

    def generate(self, name: str, template: str) -> Path:
        """Generate the project.

        Args:
            name: Project name, also the directory name
            template: Installed template name

        Returns:
            Path to created project directory

        Raises:
            InvalidProjectNameError: If the name is not allowed
            TemplateNotFoundError: If the template is not installed
            CopyError: If copying fails (the directory is left as is)
            ExternalToolError: If git or a post-create command fails
        """
        name = validate_project_name(name)
        entry = self.store.get(template)
        project_dir = self.output_dir / name

        if project_dir.exists() and not project_dir.is_dir():
            raise ScaffoldError(f"Path already exists and is not a directory: {project_dir}")
        if project_dir.exists() and any(project_dir.iterdir()):
            raise ScaffoldError(f"Directory already exists and is not empty: {project_dir}")

        console.print(f"\n[bold blue]Creating project:[/bold blue] {name}")
        console.print(f"[dim]Template: {entry.name}[/dim]")
        console.print(f"[dim]Directory: {project_dir}[/dim]\n")

        copied = copy_tree(
            entry.root,
            project_dir,
            self.path_filter,
            skip_files=[self.store.metadata_file],
        )
        console.print(f"[green]Copied:[/green] {copied} files")
        logger.info("Copied %d files from %s to %s", copied, entry.root, project_dir)

        if self.settings.init_git:
            self.git_factory(project_dir).init(project_dir)
            console.print("[green]Initialized:[/green] git repository")

        shell = self.shell_factory(project_dir)
        for command in self.settings.post_create_commands:
            label = " ".join(command)
            console.print(f"[dim]Running {label} ...[/dim]")
            shell.run(command)
            console.print(f"[green]Finished:[/green] {label}")

        console.print(f"\n[bold green]Project '{name}' created successfully![/bold green]")
        console.print("\n[bold]Next steps:[/bold]")
        console.print(f"  cd {name}")

        return project_dir
