"""Lexical classification of object schema keys."""

from __future__ import annotations

from typing import Literal

from .cache import REFERENCE_PREFIX

KeyKind = Literal["pattern", "reference", "string"]


def key_type(key: str, prefix: str = REFERENCE_PREFIX) -> KeyKind:
    """Classify a mapping key.

    ``/.../`` keys are patterns and keys starting with the reference
    prefix are cache tokens. A literal key that happens to start with the
    prefix is taken for a reference.
    """
    if key[:1] == "/" and key[-1:] == "/":
        return "pattern"
    if key.startswith(prefix):
        return "reference"
    return "string"


def pattern_source(key: str) -> str:
    return key[1:-1]


__all__ = ["KeyKind", "key_type", "pattern_source"]
