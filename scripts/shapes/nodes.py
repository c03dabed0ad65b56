"""Variant representation for schema nodes.

A schema node is a tagged list ``[tag, options, *params]``. ``options``
holds metadata about the schema such as ``title`` and ``description``.
Metadata that belongs to the context rather than the schema itself, such
as ``role``, is carried by an ``annotation`` node wrapping the schema:

    ['annotation', {'role': 'max'}, ['number', {}, ['value', 0]]]

Annotations are only meaningful inside a composite (object, tuple,
function).

Plain lists double as literal shorthand for tuple and list schemas, so
genuine nodes are told apart by type: every node is a ``SchemaNode``.
``SchemaNode`` compares equal to a plain list of the same shape.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidSchemaArgument

SchemaTag = Literal[
    "string",
    "number",
    "boolean",
    "null",
    "or",
    "array",
    "tuple",
    "list",
    "object",
    "dict",
    "function",
    "annotation",
]
DescriptorTag = Literal["value", "pattern", "interval", "reference"]


class SchemaNode(list):
    """A blessed ``[tag, options, *params]`` list."""

    @property
    def tag(self) -> str:
        return self[0]

    @property
    def options(self) -> dict[str, Any]:
        return self[1]

    @property
    def params(self) -> list[Any]:
        return self[2:]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class FunctionSchemaNode(SchemaNode):
    """Function schema ``['function', options, returns, *arguments]``."""

    def __init__(self, items=(), coerce: Callable[[Any], SchemaNode] | None = None):
        super().__init__(items)
        self._coerce = coerce

    def to(self, schema: Any) -> FunctionSchemaNode:
        """Return a copy of this schema with its return slot set to ``schema``.

        ``schema`` goes through literal coercion, the default builder's
        unless the node was created with its own ``coerce``.
        """
        coerce = self._coerce
        if coerce is None:
            from scripts.shapes import literals as coerce
        return FunctionSchemaNode([self[0], dict(self[1]), coerce(schema), *self[3:]], coerce=self._coerce)


def is_schema(value: Any) -> bool:
    return isinstance(value, SchemaNode)


def bless(node) -> SchemaNode:
    if isinstance(node, SchemaNode):
        return node
    return SchemaNode(node)


def bless_fn(fn: Callable[..., Any]) -> Callable[..., SchemaNode]:
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        return bless(fn(*args, **kwargs))

    return wrapper


def bless_all(table: Mapping[str, Any]) -> dict[str, Any]:
    return {name: bless_fn(value) if callable(value) else bless(value) for name, value in table.items()}


class SchemaOptions(BaseModel):
    """Metadata stored in the ``options`` slot of a node."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    description: str | None = None
    role: str | None = None


def merge_options(*options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge option mappings left to right, dropping ``None`` values."""
    merged: dict[str, Any] = {}
    for opts in options:
        if opts:
            merged.update(opts)
    merged = {key: value for key, value in merged.items() if value is not None}
    try:
        validated = SchemaOptions.model_validate(merged)
    except ValidationError as exc:
        raise InvalidSchemaArgument(f"Invalid schema options {merged!r}") from exc
    # extra values are kept as given, not re-serialized
    return {
        key: getattr(validated, key) if key in SchemaOptions.model_fields else value
        for key, value in merged.items()
    }


__all__ = [
    "SchemaTag",
    "DescriptorTag",
    "SchemaNode",
    "FunctionSchemaNode",
    "SchemaOptions",
    "is_schema",
    "bless",
    "bless_fn",
    "bless_all",
    "merge_options",
]
