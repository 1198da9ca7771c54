"""Exception hierarchy for tool invocation and registry lookups."""

from __future__ import annotations


class ToolSetError(Exception):
    """Base class for every failure raised by ``ToolSet.call`` and ``ToolSet.documents``."""


class ToolError(ToolSetError):
    """Failure raised at the type-erasure boundary of a single tool."""


class JsonError(ToolError):
    """Arguments could not be parsed, or a result could not be serialized."""

    def __init__(self, message: str, tool_name: str | None = None) -> None:
        super().__init__(f"JsonError: {message}")
        self.tool_name = tool_name


class ToolCallError(ToolError):
    """The tool ran and failed with its own domain error.

    Attributes:
        tool_name: Name of the tool that failed.
        cause: The original exception raised by the tool.
    """

    def __init__(self, tool_name: str, cause: BaseException) -> None:
        super().__init__(f"ToolCallError: {cause}")
        self.tool_name = tool_name
        self.cause = cause


class ToolNotFoundError(ToolSetError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"ToolNotFoundError: {name}")
        self.name = name


class InitError(Exception):
    """A tool could not be rebuilt from its persisted context.

    Raised outside the call path, so it is not a ``ToolSetError``.
    """

    def __init__(self, tool_name: str, cause: BaseException) -> None:
        super().__init__(f"InitError: {tool_name}: {cause}")
        self.tool_name = tool_name
        self.cause = cause
