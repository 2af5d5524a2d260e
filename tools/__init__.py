"""Wrappers around the external programs gostrap drives.

Provides:
- Git operations (clone, init)
- Shell commands (go get, go mod tidy, version probes)
"""

from .base import BaseTool, ToolResult, ToolStatus
from .git_tool import GitTool
from .shell_tool import ShellTool

__all__ = [
    "BaseTool",
    "ToolResult",
    "ToolStatus",
    "GitTool",
    "ShellTool",
]
