"""Data types shared by tools and the registry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class ToolDefinition(BaseModel):
    """Description of a tool as presented to the model.

    Attributes:
        name: Name the model uses to call the tool.
        description: What the tool does.
        parameters: JSON Schema of the call arguments, in the provider's
                    function-calling convention.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: JsonValue = Field(default_factory=dict)


class Document(BaseModel):
    """A text block that can be placed in a prompt as context."""

    id: str
    text: str
    additional_props: dict[str, str] = Field(default_factory=dict)
