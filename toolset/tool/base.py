"""Statically typed tool abstractions.

Tool authors subclass ``Tool`` (or ``ToolEmbedding`` for tools that can be
selected by similarity search) with concrete type parameters::

    class AddArgs(BaseModel):
        x: int
        y: int

    class Adder(Tool[AddArgs, int]):
        NAME = "add"

        async def definition(self, prompt: str) -> ToolDefinition:
            return ToolDefinition(
                name="add",
                description="Add x and y together",
                parameters=AddArgs.model_json_schema(),
            )

        async def call(self, args: AddArgs) -> int:
            return args.x + args.y

The type parameters are picked up when the subclass is created and exposed as
the ``Args`` and ``Output`` attributes; the erasure layer uses them to parse
the model's JSON arguments and to serialize the result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Self, TypeVar, get_args, get_origin

from .types import ToolDefinition

ArgsT = TypeVar("ArgsT")
OutputT = TypeVar("OutputT")
ContextT = TypeVar("ContextT")
StateT = TypeVar("StateT")

# Type parameter -> attribute that receives the concrete type
_TYPE_SLOTS: dict[Any, str] = {
    ArgsT: "Args",
    OutputT: "Output",
    ContextT: "Context",
}


class Tool(ABC, Generic[ArgsT, OutputT]):
    """Abstract base class for tools.

    Subclasses must implement:
    - definition(self, prompt) -> ToolDefinition (async)
    - call(self, args) -> Output (async)

    and either set ``NAME`` or override ``name()``.

    Configuration attributes:
    - NAME: str - Unique tool name.
    - Args: Type the JSON arguments are validated into. Taken from the
      first type parameter unless assigned in the class body.
    - Output: Type of the result, serialized back to JSON. Taken from the
      second type parameter, defaults to Any.
    - Error: Exception type (or tuple of types) the tool raises for domain
      failures. Those are reported as ToolCallError; anything else
      propagates unchanged.
    """

    NAME: ClassVar[str]

    Args: Any = None
    Output: Any = Any
    Error: type[BaseException] | tuple[type[BaseException], ...] = Exception

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Tool)):
                continue
            for param, arg in zip(origin.__parameters__, get_args(base)):
                slot = _TYPE_SLOTS.get(param)
                if slot is None or isinstance(arg, TypeVar) or slot in cls.__dict__:
                    continue
                setattr(cls, slot, arg)

    def name(self) -> str:
        """The unique name of the tool used for identification and invocation."""
        try:
            return type(self).NAME
        except AttributeError:
            raise NotImplementedError(
                f"{type(self).__name__} must define NAME or override name()"
            ) from None

    @abstractmethod
    async def definition(self, prompt: str) -> ToolDefinition:
        """Return the tool definition.

        The user prompt can be used to tailor the definition to the request.
        """
        raise NotImplementedError

    @abstractmethod
    async def call(self, args: ArgsT) -> OutputT:
        """Execute the tool with validated arguments."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name()}')"


class ToolEmbedding(Tool[ArgsT, OutputT], Generic[ArgsT, OutputT, ContextT, StateT]):
    """A tool that can be stored in a vector store and selected by similarity.

    ``Context`` is the serializable configuration saved alongside the
    embeddings; ``State`` carries the runtime dependencies (clients, API keys)
    handed to ``init`` when the tool is rebuilt.

    Configuration attributes:
    - Context: Type of the persisted context, from the third type parameter.
    - InitError: Exception type (or tuple of types) ``init`` raises when a
      context cannot be revived.
    """

    Context: Any = Any
    InitError: type[BaseException] | tuple[type[BaseException], ...] = Exception

    @abstractmethod
    def embedding_docs(self) -> list[str]:
        """Documents used as embeddings for the tool.

        Several documents let the tool be retrieved from more than one
        direction. A tool that should never be retrieved returns an empty list.
        """
        raise NotImplementedError

    @abstractmethod
    def context(self) -> ContextT:
        """Snapshot of the tool's persisted configuration."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def init(cls, state: StateT, context: ContextT) -> Self:
        """Build a live tool from a persisted context and fresh runtime state."""
        raise NotImplementedError
