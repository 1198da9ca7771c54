"""Unit tests for Tool and its type-erased adapters."""

from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from toolset.tool import (
    JsonError,
    Tool,
    ToolAdapter,
    ToolCallError,
    ToolDefinition,
    ToolDyn,
    ToolEmbeddingAdapter,
    as_dyn,
)


class GreetArgs(BaseModel):
    name: str
    excited: bool = False


@dataclass
class Greeting:
    text: str
    length: int


class UnknownPersonError(Exception):
    pass


class Greeter(Tool[GreetArgs, Greeting]):
    NAME = "greet"
    Error = UnknownPersonError

    async def definition(self, prompt: str) -> ToolDefinition:
        return ToolDefinition(
            name=self.NAME,
            description=f"Greet someone ({prompt})" if prompt else "Greet someone",
            parameters=GreetArgs.model_json_schema(),
        )

    async def call(self, args: GreetArgs) -> Greeting:
        if args.name == "nobody":
            raise UnknownPersonError("no such person")
        if args.name == "crash":
            raise RuntimeError("bug in tool")
        text = f"Hello, {args.name}" + ("!" if args.excited else ".")
        return Greeting(text=text, length=len(text))


class Leaky(Tool[dict, Any]):
    NAME = "leaky"

    async def definition(self, prompt: str) -> ToolDefinition:
        return ToolDefinition(name=self.NAME, description="Returns an opaque object")

    async def call(self, args: dict) -> Any:
        return object()


class Untyped(Tool):
    NAME = "untyped"

    async def definition(self, prompt: str) -> ToolDefinition:
        return ToolDefinition(name=self.NAME, description="")

    async def call(self, args):
        return None


class Nameless(Tool[dict, int]):
    async def definition(self, prompt: str) -> ToolDefinition:
        return ToolDefinition(name="nameless", description="")

    async def call(self, args: dict) -> int:
        return 1


class TestToolTypeParameters:
    """Test cases for resolving Args and Output from type parameters."""

    def test_parameters_resolved(self):
        """Test that Tool[Args, Output] sets the Args and Output attributes."""
        assert Greeter.Args is GreetArgs
        assert Greeter.Output is Greeting
        assert Greeter.Error is UnknownPersonError

    def test_class_body_overrides_parameters(self):
        """Test that explicit assignments win over type parameters."""

        class Explicit(Tool[GreetArgs, str]):
            NAME = "explicit"
            Output = int

            async def definition(self, prompt):
                return ToolDefinition(name=self.NAME, description="")

            async def call(self, args):
                return 1

        assert Explicit.Args is GreetArgs
        assert Explicit.Output is int

    def test_parameters_inherited(self):
        """Test that subclasses of a concrete tool keep its types."""

        class LoudGreeter(Greeter):
            pass

        assert LoudGreeter.Args is GreetArgs
        assert LoudGreeter.Output is Greeting

    def test_name_defaults_to_constant(self):
        """Test that name() returns NAME."""
        assert Greeter().name() == "greet"
        assert repr(Greeter()) == "Greeter(name='greet')"

    def test_name_missing(self):
        """Test that a tool without NAME must override name()."""
        with pytest.raises(NotImplementedError):
            Nameless().name()

    def test_abstract_class_cannot_instantiate(self):
        """Test that Tool is abstract."""
        with pytest.raises(TypeError):
            Tool()


class TestToolAdapter:
    """Test cases for the ToolDyn adapter."""

    @pytest.mark.asyncio
    async def test_call_serializes_output(self):
        """Test that the output is serialized to a JSON string."""
        tool = ToolAdapter(Greeter())
        result = await tool.call('{"name": "Ada", "excited": true}')
        assert result == '{"text":"Hello, Ada!","length":11}'

    @pytest.mark.asyncio
    async def test_defaults_applied(self):
        """Test that argument defaults are filled in."""
        result = await ToolAdapter(Greeter()).call('{"name": "Ada"}')
        assert '"Hello, Ada."' in result

    @pytest.mark.asyncio
    async def test_invalid_args(self):
        """Test that invalid arguments raise JsonError naming the tool."""
        with pytest.raises(JsonError) as exc_info:
            await ToolAdapter(Greeter()).call('{"excited": true}')
        assert exc_info.value.tool_name == "greet"
        assert str(exc_info.value).startswith("JsonError: ")
        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    async def test_declared_error_wrapped(self):
        """Test that the tool's own error is wrapped with its cause."""
        with pytest.raises(ToolCallError) as exc_info:
            await ToolAdapter(Greeter()).call('{"name": "nobody"}')
        error = exc_info.value
        assert isinstance(error.cause, UnknownPersonError)
        assert error.__cause__ is error.cause
        assert str(error) == "ToolCallError: no such person"

    @pytest.mark.asyncio
    async def test_undeclared_error_propagates(self):
        """Test that exceptions outside the Error type are not wrapped."""
        with pytest.raises(RuntimeError, match="bug in tool"):
            await ToolAdapter(Greeter()).call('{"name": "crash"}')

    @pytest.mark.asyncio
    async def test_unserializable_output(self):
        """Test that an output pydantic cannot serialize raises JsonError."""
        with pytest.raises(JsonError):
            await ToolAdapter(Leaky()).call("{}")

    @pytest.mark.asyncio
    async def test_definition_passthrough(self):
        """Test that definition() forwards the prompt to the tool."""
        definition = await ToolAdapter(Greeter()).definition("say hi")
        assert definition.description == "Greet someone (say hi)"

    def test_missing_args_type(self):
        """Test that a tool without an Args type cannot be erased."""
        with pytest.raises(TypeError):
            ToolAdapter(Untyped())


class TestAsDyn:
    """Test cases for as_dyn()."""

    def test_wraps_tool(self):
        """Test that a Tool is wrapped in a ToolAdapter."""
        erased = as_dyn(Greeter())
        assert isinstance(erased, ToolAdapter)
        assert not isinstance(erased, ToolEmbeddingAdapter)
        assert erased.name() == "greet"

    def test_passthrough(self):
        """Test that already-erased tools are returned unchanged."""
        erased = as_dyn(Greeter())
        assert as_dyn(erased) is erased

    def test_custom_tool_dyn(self):
        """Test that hand-written ToolDyn implementations are accepted."""

        class Echo(ToolDyn):
            def name(self):
                return "echo"

            async def definition(self, prompt):
                return ToolDefinition(name="echo", description="Echo the arguments")

            async def call(self, args):
                return args

        echo = Echo()
        assert as_dyn(echo) is echo

    def test_rejects_other_objects(self):
        """Test that non-tools are rejected."""
        with pytest.raises(TypeError):
            as_dyn("greet")


class TestToolDefinition:
    """Test cases for ToolDefinition serialization."""

    @pytest.mark.asyncio
    async def test_round_trip(self):
        """Test that a definition survives JSON serialization unchanged."""
        definition = await Greeter().definition("prompt")
        restored = ToolDefinition.model_validate_json(definition.model_dump_json())
        assert restored == definition

    def test_frozen(self):
        """Test that definitions are immutable."""
        definition = ToolDefinition(name="a", description="b")
        with pytest.raises(Exception):
            definition.name = "c"
        assert definition.parameters == {}
