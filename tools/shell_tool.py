"""Shell command execution tool."""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Any

from .base import BaseTool, ToolResult, ToolStatus

logger = logging.getLogger(__name__)


class ShellTool(BaseTool):
    """Tool for running build-tool commands inside a project directory.

    Provides:
    - Post-create housekeeping (go get, go mod tidy)
    - Version probes for doctor (go version, git --version)
    """

    name = "shell"
    description = "Shell command execution"

    def __init__(
        self,
        working_dir: Path | str | None = None,
        timeout: int = 300,
    ) -> None:
        """Initialize shell tool.

        Args:
            working_dir: Working directory for commands
            timeout: Default timeout in seconds
        """
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.timeout = timeout

    def execute(self, operation: str, **kwargs: Any) -> ToolResult:
        """Execute a shell operation.

        Args:
            operation: Operation name (run, version)
            **kwargs: Operation-specific parameters

        Returns:
            ToolResult with command output
        """
        operations = {
            "run": self._run,
            "version": self._version,
        }

        if operation not in operations:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error=f"Unknown operation: {operation}. Available: {list(operations.keys())}",
            )

        return operations[operation](**kwargs)

    def run(self, command: str | list[str], timeout: int | None = None) -> ToolResult:
        """Run a command and raise ExternalToolError if it fails."""
        return self._run(command, timeout=timeout).raise_for_status()

    def _run(
        self,
        command: str | list[str],
        timeout: int | None = None,
        env: dict[str, str] | None = None,
    ) -> ToolResult:
        """Run a command with combined output capture."""
        if isinstance(command, str):
            parts = shlex.split(command)
        else:
            parts = list(command)

        if not parts:
            return ToolResult(status=ToolStatus.FAILURE, error="Empty command")

        meta = {"command": parts}
        logger.debug("Running %s in %s", " ".join(parts), self.working_dir)

        try:
            result = subprocess.run(
                parts,
                cwd=self.working_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=timeout or self.timeout,
                check=False,
                env={**os.environ, **(env or {})},
            )
        except subprocess.TimeoutExpired:
            return ToolResult(
                status=ToolStatus.TIMEOUT,
                error=f"Command timed out after {timeout or self.timeout}s",
                metadata=meta,
            )
        except FileNotFoundError:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error=f"Command not found: {parts[0]}",
                metadata=meta,
            )

        meta["returncode"] = result.returncode
        return ToolResult(
            status=ToolStatus.SUCCESS if result.returncode == 0 else ToolStatus.FAILURE,
            output=result.stdout,
            error=result.stdout if result.returncode != 0 else None,
            metadata=meta,
        )

    def _version(self, program: str, flag: str = "version") -> ToolResult:
        """Report a program's version string, e.g. ``go version``."""
        result = self._run([program, flag], timeout=30)
        if result.success:
            result.output = result.output.strip()
        return result
