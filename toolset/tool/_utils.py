"""Utility functions for argument models, type adapters and log formatting."""

from __future__ import annotations

import functools
import inspect
import json
from collections.abc import Callable
from typing import Any, get_type_hints

from pydantic import BaseModel, TypeAdapter, create_model


@functools.lru_cache(maxsize=None)
def type_adapter(python_type: Any) -> TypeAdapter[Any]:
    """Return a cached TypeAdapter for ``python_type``."""
    return TypeAdapter(python_type)


def build_args_model(
    func: Callable[..., Any],
    model_name: str,
) -> type[BaseModel]:
    """Build a pydantic model from a function's parameters.

    Args:
        func: The function to extract parameters from.
        model_name: Class name of the generated model.

    Returns:
        A model with one field per parameter. Parameters without a default
        are required; unannotated parameters accept any JSON value.

    Raises:
        TypeError: If the function takes ``*args``, ``**kwargs`` or
                   positional-only parameters.
    """
    try:
        hints = get_type_hints(func)
    except Exception:
        hints = {}

    sig = inspect.signature(func)
    fields: dict[str, Any] = {}

    for param_name, param in sig.parameters.items():
        if param_name == "self":
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            raise TypeError(
                f"{func.__qualname__} takes variadic parameter '{param_name}', "
                "which cannot be described as tool arguments"
            )
        if param.kind is inspect.Parameter.POSITIONAL_ONLY:
            raise TypeError(
                f"{func.__qualname__} takes positional-only parameter '{param_name}'; "
                "tool arguments are passed by keyword"
            )

        param_type = hints.get(param_name, Any)
        if param.default is inspect.Parameter.empty:
            fields[param_name] = (param_type, ...)
        else:
            fields[param_name] = (param_type, param.default)

    return create_model(model_name, **fields)


def return_type(func: Callable[..., Any]) -> Any:
    """Return the annotated return type of ``func``, or ``Any``."""
    try:
        hints = get_type_hints(func)
    except Exception:
        return Any
    return hints.get("return", Any)


def pretty_json(text: str) -> str:
    """Pretty-print a JSON string for logging, returning it unchanged if it is not JSON."""
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return text
