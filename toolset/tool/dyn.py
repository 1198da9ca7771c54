"""Type-erased tool interfaces.

``ToolDyn`` is the uniform, string-in/string-out view of a tool that the
registry stores. ``ToolAdapter`` implements it for any ``Tool`` by parsing the
JSON arguments into the tool's ``Args`` type and serializing its ``Output``;
``ToolEmbeddingAdapter`` does the same for ``ToolEmbedding`` and additionally
erases the ``Context`` type to a plain JSON value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import JsonValue, PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ._utils import type_adapter
from .base import Tool, ToolEmbedding
from .errors import InitError, JsonError, ToolCallError
from .types import ToolDefinition

logger = logging.getLogger(__name__)


class ToolDyn(ABC):
    """Tool interface operating on JSON strings instead of native types."""

    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    async def definition(self, prompt: str) -> ToolDefinition:
        raise NotImplementedError

    @abstractmethod
    async def call(self, args: str) -> str:
        """Call the tool with a JSON argument string.

        Returns:
            The JSON serialization of the tool's output.

        Raises:
            JsonError: Arguments are malformed or the output is not serializable.
            ToolCallError: The tool failed with its declared error type.
        """
        raise NotImplementedError


class ToolEmbeddingDyn(ToolDyn):
    """Erased interface for tools that can be indexed for retrieval."""

    @abstractmethod
    def context(self) -> JsonValue:
        """The tool's context as a JSON value.

        Raises:
            JsonError: The context could not be serialized.
        """
        raise NotImplementedError

    @abstractmethod
    def embedding_docs(self) -> list[str]:
        raise NotImplementedError


class ToolAdapter(ToolDyn):
    """Erases a ``Tool`` behind the ``ToolDyn`` interface."""

    def __init__(self, tool: Tool[Any, Any]) -> None:
        if tool.Args is None:
            raise TypeError(
                f"{type(tool).__name__} does not declare an Args type; "
                "subclass Tool[Args, Output] or assign Args"
            )
        self._tool = tool
        self._args_adapter = _adapter_for(tool, "Args")
        self._output_adapter = _adapter_for(tool, "Output")

    @property
    def tool(self) -> Tool[Any, Any]:
        """The wrapped tool."""
        return self._tool

    def name(self) -> str:
        return self._tool.name()

    async def definition(self, prompt: str) -> ToolDefinition:
        return await self._tool.definition(prompt)

    async def call(self, args: str) -> str:
        tool = self._tool
        name = tool.name()
        try:
            parsed = self._args_adapter.validate_json(args)
        except ValidationError as e:
            logger.debug("Rejected arguments for tool %s: %s", name, e)
            raise JsonError(str(e), tool_name=name) from e

        try:
            output = await tool.call(parsed)
        except tool.Error as e:
            logger.debug("Tool %s failed: %s: %s", name, type(e).__name__, e)
            raise ToolCallError(name, e) from e

        try:
            return self._output_adapter.dump_json(output).decode()
        except PydanticSerializationError as e:
            raise JsonError(str(e), tool_name=name) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._tool!r})"


class ToolEmbeddingAdapter(ToolAdapter, ToolEmbeddingDyn):
    """Erases a ``ToolEmbedding`` behind the ``ToolEmbeddingDyn`` interface."""

    _tool: ToolEmbedding[Any, Any, Any, Any]

    def __init__(self, tool: ToolEmbedding[Any, Any, Any, Any]) -> None:
        super().__init__(tool)
        self._context_adapter = _adapter_for(tool, "Context")

    def context(self) -> JsonValue:
        tool = self._tool
        try:
            return self._context_adapter.dump_python(tool.context(), mode="json")
        except PydanticSerializationError as e:
            raise JsonError(str(e), tool_name=tool.name()) from e

    def embedding_docs(self) -> list[str]:
        return list(self._tool.embedding_docs())


def _adapter_for(tool: Tool[Any, Any], slot: str) -> TypeAdapter[Any]:
    """Build the TypeAdapter for one of the tool's declared types, or reject the tool."""
    try:
        return type_adapter(getattr(tool, slot))
    except PydanticSchemaGenerationError as e:
        raise TypeError(
            f"{type(tool).__name__} declares {slot} type {getattr(tool, slot)!r}, "
            "which cannot be converted to or from JSON"
        ) from e


def as_dyn(tool: Tool[Any, Any] | ToolDyn) -> ToolDyn:
    """Erase ``tool``; already-erased tools are returned as-is."""
    if isinstance(tool, ToolDyn):
        return tool
    if isinstance(tool, ToolEmbedding):
        return ToolEmbeddingAdapter(tool)
    if isinstance(tool, Tool):
        return ToolAdapter(tool)
    raise TypeError(f"Expected a Tool or ToolDyn, got {type(tool).__name__}")


def as_embedding_dyn(tool: ToolEmbedding[Any, Any, Any, Any] | ToolEmbeddingDyn) -> ToolEmbeddingDyn:
    """Erase an embeddable ``tool``; already-erased tools are returned as-is."""
    if isinstance(tool, ToolEmbeddingDyn):
        return tool
    if isinstance(tool, ToolEmbedding):
        return ToolEmbeddingAdapter(tool)
    raise TypeError(f"Expected a ToolEmbedding or ToolEmbeddingDyn, got {type(tool).__name__}")


def revive_tool(
    tool_cls: type[ToolEmbedding[Any, Any, Any, Any]],
    state: Any,
    context: JsonValue,
) -> ToolEmbeddingDyn:
    """Rebuild an embeddable tool from a persisted context.

    Args:
        tool_cls: The tool class to instantiate.
        state: Runtime dependencies passed to ``tool_cls.init``.
        context: The JSON value previously returned by ``context()``.

    Returns:
        The revived tool, erased.

    Raises:
        InitError: The context does not match the tool's Context type, or
                   ``init`` raised the tool's InitError type.
    """
    tool_name = getattr(tool_cls, "NAME", tool_cls.__name__)
    try:
        typed_context = type_adapter(tool_cls.Context).validate_python(context)
    except ValidationError as e:
        raise InitError(tool_name, e) from e

    try:
        tool = tool_cls.init(state, typed_context)
    except tool_cls.InitError as e:
        raise InitError(tool_name, e) from e

    return ToolEmbeddingAdapter(tool)
