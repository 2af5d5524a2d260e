"""Environment checks for gostrap."""

from dataclasses import dataclass

from tools import GitTool, ShellTool

from .templates import TemplateStore


@dataclass
class ToolCheck:
    """Availability of one external program."""

    name: str
    available: bool
    detail: str


@dataclass
class DoctorReport:
    """Result of an environment check."""

    tools: list[ToolCheck]
    template_count: int

    @property
    def tools_ok(self) -> bool:
        return all(check.available for check in self.tools)


def run_doctor(
    store: TemplateStore,
    git: GitTool | None = None,
    shell: ShellTool | None = None,
) -> DoctorReport:
    """Check that git and go are installed and count installed templates.

    The template store is only read, never populated.
    """
    git = git or GitTool()
    shell = shell or ShellTool()

    checks = []
    for name, result in (
        ("git", git.execute("version")),
        ("go", shell.execute("version", program="go")),
    ):
        if result.success:
            checks.append(ToolCheck(name, True, result.output))
        else:
            checks.append(ToolCheck(name, False, f"{name} is not installed or not available in PATH"))

    template_count = len(store.list_templates()) if store.root.exists() else 0
    return DoctorReport(tools=checks, template_count=template_count)
