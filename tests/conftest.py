"""
Pytest fixtures for gostrap tests.

No test touches the network, git or go: cloning and project commands are
replaced by fakes that record their calls.
"""

from pathlib import Path

import pytest

from scaffolding.config import Config, TemplatesConfig
from scaffolding.templates import TemplateStore
from tools.base import ToolResult, ToolStatus


def write_module(directory: Path, files: dict[str, str] | None = None) -> Path:
    """Create a directory that qualifies as a template (has go.mod)."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "go.mod").write_text(f"module example.com/{directory.name}\n\ngo 1.22\n")
    for rel_path, content in (files or {}).items():
        path = directory / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return directory


# =============================================================================
# Fakes
# =============================================================================


class FakeCloner:
    """Stands in for GitTool.clone by copying a local directory."""

    def __init__(self, source: Path | None = None, fail: bool = False):
        self.source = source
        self.fail = fail
        self.calls: list[tuple[str, Path]] = []

    def clone(self, url: str, destination: Path | str) -> ToolResult:
        import shutil

        destination = Path(destination)
        self.calls.append((url, destination))
        if self.fail:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error="fatal: repository not found",
                metadata={"command": ["git", "clone", url, str(destination)], "returncode": 128},
            ).raise_for_status()
        shutil.copytree(self.source, destination)
        return ToolResult(status=ToolStatus.SUCCESS)


class FakeShell:
    """Records commands instead of running them."""

    instances: list["FakeShell"] = []

    def __init__(self, working_dir: Path, fail_on: str | None = None):
        self.working_dir = Path(working_dir)
        self.fail_on = fail_on
        self.commands: list[list[str]] = []
        FakeShell.instances.append(self)

    def run(self, command: list[str]) -> ToolResult:
        self.commands.append(list(command))
        if self.fail_on and self.fail_on in command:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error="go: cannot find main module",
                metadata={"command": list(command), "returncode": 1},
            ).raise_for_status()
        return ToolResult(status=ToolStatus.SUCCESS, output="")


class FakeGit:
    """Records git init calls."""

    def __init__(self, repo_path: Path):
        self.repo_path = Path(repo_path)
        self.initialized: list[Path] = []

    def init(self, path: Path | None = None) -> ToolResult:
        target = Path(path or self.repo_path)
        (target / ".git").mkdir(exist_ok=True)
        self.initialized.append(target)
        return ToolResult(status=ToolStatus.SUCCESS)


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Template store location (not created)."""
    return tmp_path / "store"


@pytest.fixture
def store(store_dir: Path) -> TemplateStore:
    """TemplateStore over a temporary directory."""
    return TemplateStore(store_dir)


@pytest.fixture
def config(store_dir: Path) -> Config:
    """Config pointing at the temporary store."""
    return Config(templates=TemplatesConfig(templates_dir=str(store_dir)))


@pytest.fixture
def source_repo(tmp_path: Path) -> Path:
    """
    A cloned template repository.

    Layout:
    - go.mod at the root (root is a template)
    - fiber/, gin/ : Go modules (templates)
    - docs/        : no go.mod (not a template)
    - .github/     : excluded even though it has a go.mod
    - nested/inner : go.mod two levels down (not a template)
    """
    repo = write_module(tmp_path / "source" / "go-templates", {"main.go": "package main\n"})
    write_module(repo / "fiber", {"main.go": "package main // fiber\n"})
    write_module(repo / "gin", {"cmd/server/main.go": "package main // gin\n"})
    (repo / "docs").mkdir()
    (repo / "docs" / "README.md").write_text("# docs\n")
    write_module(repo / ".github")
    write_module(repo / "nested" / "inner")
    (repo / ".git").mkdir()
    (repo / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return repo
