"""Classification of bare values accepted as schema shorthand."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from .errors import UnknownSchemaValue
from .nodes import is_schema


class LiteralKind(Enum):
    NODE = auto()
    TEXT = auto()
    NUMBER = auto()
    SEQUENCE = auto()
    MAPPING = auto()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def literal_kind(value: Any) -> LiteralKind:
    if is_schema(value):
        return LiteralKind.NODE
    if isinstance(value, str):
        return LiteralKind.TEXT
    if is_number(value):
        return LiteralKind.NUMBER
    if isinstance(value, (list, tuple)):
        return LiteralKind.SEQUENCE
    if isinstance(value, dict):
        return LiteralKind.MAPPING
    raise UnknownSchemaValue(value)


__all__ = ["LiteralKind", "literal_kind", "is_number"]
