"""Registry entries.

A ``ToolType`` is either a ``SimpleTool`` or an ``EmbeddingTool``. Both
dispatch ``name``/``definition``/``call`` to the wrapped erased tool, so the
registry handles them uniformly, while retrieval code can match on the
variant to decide what is eligible for indexing::

    match entry:
        case EmbeddingTool(tool=tool):
            index(tool.embedding_docs(), tool.context())
        case SimpleTool():
            pass
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeAlias

from .dyn import ToolDyn, ToolEmbeddingDyn
from .types import ToolDefinition


@dataclass(frozen=True, slots=True)
class SimpleTool:
    """Entry for a tool that is always available."""

    tool: ToolDyn
    kind: ClassVar[Literal["simple"]] = "simple"

    def name(self) -> str:
        return self.tool.name()

    async def definition(self, prompt: str) -> ToolDefinition:
        return await self.tool.definition(prompt)

    async def call(self, args: str) -> str:
        return await self.tool.call(args)


@dataclass(frozen=True, slots=True)
class EmbeddingTool:
    """Entry for a tool that can be retrieved by similarity search."""

    tool: ToolEmbeddingDyn
    kind: ClassVar[Literal["embedding"]] = "embedding"

    def name(self) -> str:
        return self.tool.name()

    async def definition(self, prompt: str) -> ToolDefinition:
        return await self.tool.definition(prompt)

    async def call(self, args: str) -> str:
        return await self.tool.call(args)


ToolType: TypeAlias = SimpleTool | EmbeddingTool
