"""Function-based tool implementation and decorator."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, ParamSpec, TypeVar, overload

from pydantic import BaseModel, JsonValue

from ._utils import build_args_model, return_type
from .base import Tool
from .types import ToolDefinition

P = ParamSpec("P")
R = TypeVar("R")


class FunctionTool(Tool[BaseModel, Any]):
    """Tool backed by a Python function.

    Wraps a sync or async function, building the argument model from its
    signature and the description from its docstring. Sync functions run in
    a worker thread with the caller's context variables.

    Usage:
        def search(query: str, limit: int = 10) -> str:
            '''Search the index.'''
            return f"Results for {query}"

        tool = FunctionTool(search)
        toolset = ToolSet.from_tools([tool])
        await toolset.call("search", '{"query": "test"}')
    """

    def __init__(
        self,
        func: Callable[..., Any],
        *,
        name: str | None = None,
        description: str | None = None,
        parameters: JsonValue | None = None,
    ) -> None:
        """Initialize from a function.

        Args:
            func: The function to wrap (sync or async).
            name: Optional override for tool name.
            description: Optional override for tool description.
            parameters: Optional override for the parameter schema. Arguments
                        are still validated against the function signature.
        """
        self._func = func
        self._name = name
        self._description = description
        self._parameters = parameters
        self._is_async = inspect.iscoroutinefunction(func)

        model_name = "".join(part.capitalize() for part in self.name().split("_")) + "Args"
        self.Args = build_args_model(func, model_name)
        self.Output = return_type(func)

    def name(self) -> str:
        return self._name or self._func.__name__

    @property
    def description(self) -> str:
        if self._description is not None:
            return self._description
        return inspect.cleandoc(self._func.__doc__ or "")

    @property
    def parameters(self) -> JsonValue:
        if self._parameters is not None:
            return self._parameters
        return self.Args.model_json_schema()

    async def definition(self, prompt: str) -> ToolDefinition:
        return ToolDefinition(
            name=self.name(),
            description=self.description,
            parameters=self.parameters,
        )

    async def call(self, args: BaseModel) -> Any:
        kwargs = {field: getattr(args, field) for field in type(args).model_fields}
        if self._is_async:
            return await self._func(**kwargs)
        return await asyncio.to_thread(self._func, **kwargs)


@overload
def tool(func: Callable[P, R], /) -> FunctionTool:
    ...


@overload
def tool(
    *,
    name: str | None = None,
    description: str | None = None,
    parameters: JsonValue | None = None,
) -> Callable[[Callable[P, R]], FunctionTool]:
    ...


def tool(
    func: Callable[P, R] | None = None,
    *,
    name: str | None = None,
    description: str | None = None,
    parameters: JsonValue | None = None,
) -> FunctionTool | Callable[[Callable[P, R]], FunctionTool]:
    """Decorator to convert a Python function into a FunctionTool.

    Can be used with or without parentheses:

        @tool
        def add(x: int, y: int) -> int:
            '''Add x and y together.'''
            return x + y

        @tool(name="subtract")
        async def sub(x: int, y: int) -> int:
            return x - y

    Args:
        func: The function to decorate (when used without parentheses).
        name: Optional override for tool name.
        description: Optional override for tool description.
        parameters: Optional override for the parameter schema.

    Returns:
        FunctionTool instance, or a decorator function.
    """

    def decorator(f: Callable[P, R]) -> FunctionTool:
        return FunctionTool(f, name=name, description=description, parameters=parameters)

    if func is None:
        return decorator
    return decorator(func)
