"""Git operations tool."""

import subprocess
from pathlib import Path
from typing import Any

from .base import BaseTool, ToolResult, ToolStatus


class GitTool(BaseTool):
    """Tool for the git commands gostrap needs.

    Provides:
    - Cloning a template repository
    - Initializing a repository in a new project
    - Version reporting for doctor
    """

    name = "git"
    description = "Git repository operations"

    def __init__(self, repo_path: Path | str | None = None) -> None:
        """Initialize Git tool.

        Args:
            repo_path: Working directory for git (default: current directory)
        """
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()

    def execute(self, operation: str, **kwargs: Any) -> ToolResult:
        """Execute a Git operation.

        Args:
            operation: Operation name (clone, init, version)
            **kwargs: Operation-specific parameters

        Returns:
            ToolResult with operation output
        """
        operations = {
            "clone": self._clone,
            "init": self._init,
            "version": self._version,
        }

        if operation not in operations:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error=f"Unknown operation: {operation}. Available: {list(operations.keys())}",
            )

        return operations[operation](**kwargs)

    def clone(self, url: str, destination: Path | str) -> ToolResult:
        """Clone ``url`` into ``destination``, raising ExternalToolError on failure."""
        return self._clone(url=url, destination=destination).raise_for_status()

    def init(self, path: Path | str | None = None) -> ToolResult:
        """Initialize a repository, raising ExternalToolError on failure."""
        return self._init(path=path).raise_for_status()

    def _run_git(self, *args: str, cwd: Path | None = None) -> ToolResult:
        """Run a git command."""
        command = ["git", *args]
        try:
            result = subprocess.run(
                command,
                cwd=cwd or self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error="git is not installed or not available in PATH",
                metadata={"command": command},
            )

        meta = {"command": command, "returncode": result.returncode}
        if result.returncode != 0:
            return ToolResult(status=ToolStatus.FAILURE, error=result.stderr, metadata=meta)
        return ToolResult(status=ToolStatus.SUCCESS, output=result.stdout.strip(), metadata=meta)

    def _clone(self, url: str, destination: Path | str) -> ToolResult:
        """Clone a repository."""
        return self._run_git("clone", url, str(destination))

    def _init(self, path: Path | str | None = None) -> ToolResult:
        """Initialize a repository."""
        return self._run_git("init", cwd=Path(path) if path else None)

    def _version(self) -> ToolResult:
        """Get git version string."""
        return self._run_git("--version")
