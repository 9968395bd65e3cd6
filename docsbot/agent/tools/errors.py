"""Errors raised by agent tools."""


class ToolError(Exception):
    """Base error for tool failures that should be reported to the caller."""

    def __init__(self, message: str, tool_name: str = ""):
        super().__init__(message)
        self.tool_name = tool_name


class InvalidArgumentError(ToolError, ValueError):
    """Raised when tool input fails validation, before any I/O happens."""
