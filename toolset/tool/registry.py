"""Name-keyed tool registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic_core import PydanticSerializationError

from ._utils import pretty_json
from .base import Tool, ToolEmbedding
from .dyn import ToolDyn, ToolEmbeddingDyn, as_dyn, as_embedding_dyn
from .errors import JsonError, ToolNotFoundError
from .tool_type import EmbeddingTool, SimpleTool, ToolType
from .types import Document, ToolDefinition

logger = logging.getLogger(__name__)


class ToolSet:
    """A set of tools addressed by name.

    Entries are keyed by the name the tool reports, so a stored entry's
    ``name()`` always equals its key. Registering a second tool under an
    existing name replaces the first.

    The set performs no locking: tools must handle concurrent calls
    themselves, and mutating the set while calls are in flight is up to the
    host to synchronize.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolType] = {}

    @classmethod
    def from_tools(cls, tools: Iterable[Tool[Any, Any] | ToolDyn]) -> ToolSet:
        """Create a ToolSet from a list of tools."""
        toolset = cls()
        for tool in tools:
            toolset.add_tool(tool)
        return toolset

    @staticmethod
    def builder() -> ToolSetBuilder:
        """Create a toolset builder."""
        return ToolSetBuilder()

    def contains(self, name: str) -> bool:
        """Check if the toolset contains a tool with the given name."""
        return name in self._tools

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def add_tool(self, tool: Tool[Any, Any] | ToolDyn) -> None:
        """Add a tool to the toolset, replacing any tool with the same name."""
        erased = as_dyn(tool)
        self._insert(SimpleTool(erased))

    def add_tools(self, toolset: ToolSet) -> None:
        """Merge another toolset into this one; its entries win on collision."""
        for entry in toolset._tools.values():
            self._insert(entry)

    def _insert(self, entry: ToolType) -> None:
        name = entry.name()
        if name in self._tools:
            logger.warning("Tool '%s' is being overwritten", name)
        self._tools[name] = entry

    def get(self, name: str) -> ToolType | None:
        """Return the registry entry for ``name``, if any."""
        return self._tools.get(name)

    def embedding_tools(self) -> list[ToolEmbeddingDyn]:
        """Return the tools registered as retrievable."""
        tools: list[ToolEmbeddingDyn] = []
        for entry in self._tools.values():
            match entry:
                case EmbeddingTool(tool=tool):
                    tools.append(tool)
                case SimpleTool():
                    pass
        return tools

    async def call(self, name: str, args: str) -> str:
        """Call a tool with the given name and JSON arguments.

        Returns:
            The JSON-serialized output of the tool.

        Raises:
            ToolNotFoundError: No tool is registered under ``name``.
            JsonError: The arguments are malformed or the output is not serializable.
            ToolCallError: The tool itself failed.
        """
        entry = self._tools.get(name)
        if entry is None:
            raise ToolNotFoundError(name)

        logger.info("Calling tool %s with args:\n%s", name, pretty_json(args))
        return await entry.call(args)

    async def definitions(self, prompt: str) -> list[ToolDefinition]:
        """Get the definitions of all tools, tailored to ``prompt``."""
        return [await entry.definition(prompt) for entry in self._tools.values()]

    async def documents(self) -> list[Document]:
        """Get the documents of all the tools in the toolset.

        Raises:
            JsonError: A definition could not be serialized. No partial
                       result is returned.
        """
        docs: list[Document] = []
        for entry in self._tools.values():
            name = entry.name()
            definition = await entry.definition("")
            try:
                rendered = definition.model_dump_json(indent=2)
            except PydanticSerializationError as e:
                raise JsonError(str(e), tool_name=name) from e
            docs.append(Document(id=name, text=f"Tool: {name}\nDefinition: \n{rendered}"))
        return docs

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tools={list(self._tools)!r})"


class ToolSetBuilder:
    """Fluent builder separating always-available tools from retrievable ones."""

    def __init__(self) -> None:
        self._tools: list[ToolType] = []

    def static_tool(self, tool: Tool[Any, Any] | ToolDyn) -> ToolSetBuilder:
        """Add a tool that is always available to the agent."""
        self._tools.append(SimpleTool(as_dyn(tool)))
        return self

    def dynamic_tool(self, tool: ToolEmbedding[Any, Any, Any, Any] | ToolEmbeddingDyn) -> ToolSetBuilder:
        """Add a tool that is selected by similarity search."""
        self._tools.append(EmbeddingTool(as_embedding_dyn(tool)))
        return self

    def build(self) -> ToolSet:
        """Create the ToolSet; later tools replace earlier ones with the same name."""
        toolset = ToolSet()
        for entry in self._tools:
            toolset._insert(entry)
        return toolset
