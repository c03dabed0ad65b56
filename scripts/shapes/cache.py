"""Reference cache for schemas used as mapping keys.

Mapping keys are hashed, and schema nodes are lists, so a schema cannot
be a key directly. A titled schema (see ``desc``) instead converts to a
fresh token when turned into text:

    {str(person): number()}

The token is recorded against the schema, and the key classifier looks
it up again while building the object schema.

The cache is append-only. Every conversion mints a new token and a new
entry, even for a schema already in the cache, and nothing is evicted:
entries must outlive the schemas that refer to them. Processing enough
reference keys will exhaust memory.
"""

from __future__ import annotations

import itertools
import logging

from scripts.shapes.logger import describe_node

from .errors import UnresolvedReference
from .nodes import SchemaNode

# don't prefix literal schema keys with this
REFERENCE_PREFIX = "__$$_$_$$"

# token ids are unique across all caches
_token_ids = itertools.count(1)


class ReferenceCache:
    def __init__(self, prefix: str = REFERENCE_PREFIX):
        self.prefix = prefix
        self._entries: dict[str, SchemaNode] = {}

    def mint(self, node: SchemaNode) -> str:
        token = f"{self.prefix}{next(_token_ids)}"
        self._entries[token] = node
        return token

    def resolve(self, token: str) -> SchemaNode:
        try:
            return self._entries[token]
        except KeyError:
            raise UnresolvedReference(token) from None

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __len__(self) -> int:
        return len(self._entries)


REFERENCE_CACHE = ReferenceCache()


class ReferenceSchemaNode(SchemaNode):
    """Schema node that registers itself in a cache when converted to text."""

    def __init__(self, items=(), cache: ReferenceCache | None = None, logger: logging.Logger | None = None):
        super().__init__(items)
        self._cache = cache if cache is not None else REFERENCE_CACHE
        self._logger = logger

    def __str__(self) -> str:
        token = self._cache.mint(self)
        if self._logger:
            self._logger.debug(f"Minted reference token {token} for {describe_node(self)}")
        return token

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def ref_handler(
    node: SchemaNode, cache: ReferenceCache | None = None, logger: logging.Logger | None = None
) -> ReferenceSchemaNode:
    return ReferenceSchemaNode(node, cache=cache, logger=logger)


__all__ = ["REFERENCE_PREFIX", "REFERENCE_CACHE", "ReferenceCache", "ReferenceSchemaNode", "ref_handler"]
