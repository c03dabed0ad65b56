"""Errors raised while building schemas."""

from __future__ import annotations

from typing import Any


class SchemaError(Exception):
    """Base class for schema construction failures."""


class UnknownSchemaValue(SchemaError):
    """Raised when a bare value has no schema equivalent."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown schema value {value!r}")


class UnresolvedReference(SchemaError):
    """Raised when a reference key token has no cache entry."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unresolved schema reference {token!r}")


class InvalidSchemaArgument(SchemaError):
    """Raised when a builder receives arguments it cannot use."""


__all__ = ["SchemaError", "UnknownSchemaValue", "UnresolvedReference", "InvalidSchemaArgument"]
