"""Tool abstraction and registry for LLM function calling."""

from .base import Tool, ToolEmbedding
from .dyn import (
    ToolAdapter,
    ToolDyn,
    ToolEmbeddingAdapter,
    ToolEmbeddingDyn,
    as_dyn,
    as_embedding_dyn,
    revive_tool,
)
from .errors import (
    InitError,
    JsonError,
    ToolCallError,
    ToolError,
    ToolNotFoundError,
    ToolSetError,
)
from .function_tool import FunctionTool, tool
from .registry import ToolSet, ToolSetBuilder
from .tool_type import EmbeddingTool, SimpleTool, ToolType
from .types import Document, ToolDefinition

__all__ = [
    # Core types
    "Tool",
    "ToolEmbedding",
    "ToolDefinition",
    "Document",
    # Type erasure
    "ToolDyn",
    "ToolEmbeddingDyn",
    "ToolAdapter",
    "ToolEmbeddingAdapter",
    "as_dyn",
    "as_embedding_dyn",
    "revive_tool",
    # Registry
    "ToolType",
    "SimpleTool",
    "EmbeddingTool",
    "ToolSet",
    "ToolSetBuilder",
    # Function-based tools
    "FunctionTool",
    "tool",
    # Errors
    "ToolSetError",
    "ToolError",
    "JsonError",
    "ToolCallError",
    "ToolNotFoundError",
    "InitError",
]
