"""Base tool interface for external command wrappers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ToolStatus(Enum):
    """Status of a tool execution."""

    SUCCESS = "success"
    FAILURE = "failure"
    TIMEOUT = "timeout"


@dataclass
class ToolResult:
    """Result of a tool execution."""

    status: ToolStatus
    output: Any = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == ToolStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.success

    def raise_for_status(self) -> "ToolResult":
        """Raise ExternalToolError unless the tool succeeded.

        Returns:
            self, so calls can be chained
        """
        if not self.success:
            from scaffolding.errors import ExternalToolError

            raise ExternalToolError(
                command=self.metadata.get("command", []),
                returncode=self.metadata.get("returncode"),
                output=self.error or "",
            )
        return self


class BaseTool(ABC):
    """Abstract base class for all tools.

    Tools wrap a single external program (git, go) and never raise from
    ``execute``; failures come back as a ToolResult.
    """

    name: str = "base_tool"
    description: str = "Base tool interface"

    @abstractmethod
    def execute(self, operation: str, **kwargs: Any) -> ToolResult:
        """Execute the tool operation.

        Args:
            operation: Operation name
            **kwargs: Operation-specific parameters

        Returns:
            ToolResult with status and output
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
