"""Exceptions raised by the template catalog and project scaffolding."""

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all gostrap errors."""

    pass


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template, or the template store itself, does not exist."""

    pass


class MetadataError(ScaffoldError):
    """Raised when a template descriptor exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed template descriptor {path}: {reason}")


class CopyError(ScaffoldError):
    """Raised when copying a template tree fails."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to copy {path}: {reason}")


class SelectionCancelled(ScaffoldError):
    """Raised when the user leaves the template selector without choosing."""

    pass


class ExternalToolError(ScaffoldError):
    """Raised when git, go or another external command exits non-zero."""

    def __init__(self, command: list[str], returncode: int | None, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        message = f"Command failed: {' '.join(command)}"
        if returncode is not None:
            message += f" (exit code {returncode})"
        if output:
            message += f"\n{output.strip()}"
        super().__init__(message)


class InvalidURLError(ScaffoldError):
    """Raised when a repository name cannot be derived from a URL."""

    pass


class InvalidProjectNameError(ScaffoldError):
    """Raised when a project name contains unsupported characters."""

    pass
