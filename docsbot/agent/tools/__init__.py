"""Agent tools."""

from docsbot.agent.tools.base import Tool
from docsbot.agent.tools.errors import InvalidArgumentError, ToolError
from docsbot.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry", "ToolError", "InvalidArgumentError"]
