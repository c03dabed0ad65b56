"""Builders that assemble schema nodes from arguments and literals."""

from __future__ import annotations

import logging
import re
from typing import Any, NotRequired, Optional, TypedDict

from scripts.shapes.logger import Logger, describe_node
from scripts.shapes.utils import partition, resolve_config

from .cache import REFERENCE_CACHE, ReferenceCache, ReferenceSchemaNode, ref_handler
from .errors import InvalidSchemaArgument
from .keys import key_type, pattern_source
from .coercion import LiteralKind, is_number, literal_kind
from .nodes import FunctionSchemaNode, SchemaNode, bless_all, bless_fn, is_schema, merge_options


class BuilderConfig(TypedDict):
    enable_logger: NotRequired[bool]
    logger_name: NotRequired[str]
    log_level: NotRequired[int]
    shared_cache: NotRequired[bool]


class BuilderConfigRequired(TypedDict):
    enable_logger: bool
    logger_name: str
    log_level: int
    shared_cache: bool


DEFAULT_CONFIG: BuilderConfigRequired = {
    "enable_logger": False,
    "logger_name": "Schema Builder",
    "log_level": logging.DEBUG,
    "shared_cache": True,
}


class SchemaBuilder:
    """Schema constructors sharing one reference cache.

    Calling the builder coerces a literal, so ``S({"len": 10})`` is the
    same as ``S.object_of({"len": 10})``. Keys of a mapping may be
    ``/regex/`` patterns or reference tokens minted by ``str()`` on a
    schema returned from ``desc``.
    """

    def __init__(self, config: Optional[BuilderConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": self.config["logger_name"],
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).logger
        self.cache = REFERENCE_CACHE if self.config["shared_cache"] else ReferenceCache()
        constants = bless_all({"boolean": ["boolean", {}], "nullval": ["null", {}]})
        self.boolean: SchemaNode = constants["boolean"]
        self.nullval: SchemaNode = constants["nullval"]
        self.logger.info("Schema builder initialized")

    def __call__(self, value: Any) -> SchemaNode:
        return self.literals(value)

    # Literals ----------------------------------------------------------------
    def literals(self, value: Any) -> SchemaNode:
        kind = literal_kind(value)
        if kind is LiteralKind.NODE:
            return value
        self.logger.debug(f"Coercing {kind.name.lower()} literal")
        if kind is LiteralKind.TEXT:
            return self.string(value)
        if kind is LiteralKind.NUMBER:
            return self.number(value)
        if kind is LiteralKind.SEQUENCE:
            return self.array_of(value[0]) if len(value) == 1 else self.array(*value)
        return self.object_of(value) if len(value) == 1 else self.object(value)

    # Scalars -----------------------------------------------------------------
    @bless_fn
    def string(self, value: str | re.Pattern | None = None) -> list[Any]:
        if value is None:
            descriptor = []
        elif isinstance(value, str):
            descriptor = ["value", value]
        elif isinstance(value, re.Pattern):
            descriptor = ["pattern", value]
        else:
            raise InvalidSchemaArgument(f"string() expects text or a compiled pattern, got {value!r}")
        return ["string", {}, descriptor]

    @bless_fn
    def number(self, value: int | float | list | tuple | None = None) -> list[Any]:
        if value is None:
            descriptor = []
        elif is_number(value):
            descriptor = ["value", value]
        elif isinstance(value, (list, tuple)) and len(value) == 2 and all(is_number(v) for v in value):
            descriptor = ["interval", list(value)]
        else:
            raise InvalidSchemaArgument(f"number() expects a number or a [low, high] pair, got {value!r}")
        return ["number", {}, descriptor]

    # Composites --------------------------------------------------------------
    @bless_fn
    def or_(self, *schemas: Any) -> list[Any]:
        return ["or", {}, *[self.literals(schema) for schema in schemas]]

    @bless_fn
    def array(self, *schemas: Any) -> list[Any]:
        return ["tuple", {}, *[self.literals(schema) for schema in schemas]]

    @bless_fn
    def array_of(self, schema: Any) -> list[Any]:
        return ["list", {}, self.literals(schema)]

    @bless_fn
    def object(self, *args: Any) -> list[Any]:
        return self._object_args("object", args)

    @bless_fn
    def dict_(self, *args: Any) -> list[Any]:
        return self._object_args("dict", args)

    def fn(self, *schemas: Any) -> FunctionSchemaNode:
        return FunctionSchemaNode(
            ["function", {}, None, *[self.literals(schema) for schema in schemas]],
            coerce=self.literals,
        )

    def with_return(self, fn_schema: SchemaNode, schema: Any) -> FunctionSchemaNode:
        if not is_schema(fn_schema) or fn_schema[0] != "function":
            raise InvalidSchemaArgument(f"with_return() expects a function schema, got {fn_schema!r}")
        return FunctionSchemaNode(
            [fn_schema[0], dict(fn_schema[1]), self.literals(schema), *fn_schema[3:]],
            coerce=self.literals,
        )

    # Metadata ----------------------------------------------------------------
    def desc(self, *args: Any) -> ReferenceSchemaNode:
        """Attach a description, and optionally a title, to a schema.

        ``desc(description, schema)`` or ``desc(title, description, schema)``.
        New metadata replaces what the schema already carries; an omitted
        title keeps the existing one. The result can be used as a reference
        key (see ``cache``).
        """
        if len(args) == 2:
            title = None
            description, schema = args
        elif len(args) == 3:
            title, description, schema = args
        else:
            raise InvalidSchemaArgument(f"desc() takes 2 or 3 arguments ({len(args)} given)")
        tag, options, *params = self.literals(schema)
        merged = merge_options(options, {"title": title, "description": description})
        node = ref_handler([tag, merged, *params], cache=self.cache, logger=self.logger)
        self.logger.debug(f"Described {describe_node(node)}")
        return node

    @bless_fn
    def role(self, name: str, schema: Any) -> list[Any]:
        return ["annotation", merge_options({"role": name}), self.literals(schema)]

    # Keys --------------------------------------------------------------------
    def key(self, value: Any, raw_key: Any) -> list[SchemaNode]:
        """Resolve one mapping entry to a ``[key_schema, value_schema]`` pair."""
        if isinstance(raw_key, re.Pattern):
            return [self.string(raw_key), self.literals(value)]
        if is_number(raw_key):
            raw_key = str(raw_key)
        if not isinstance(raw_key, str):
            raise InvalidSchemaArgument(f"Unsupported object key {raw_key!r}")

        kind = key_type(raw_key, self.cache.prefix)
        self.logger.debug(f"Classified key {raw_key!r} as {kind}")
        cases = {
            "pattern": lambda: [self.string(self._compile_pattern(raw_key)), self.literals(value)],
            "string": lambda: [self.string(raw_key), self.literals(value)],
            "reference": lambda: [self._resolve_reference(raw_key), self.literals(value)],
        }
        return cases[kind]()

    def _resolve_reference(self, token: str) -> SchemaNode:
        node = self.cache.resolve(token)
        self.logger.debug(f"Resolved reference {token} to {describe_node(node)}")
        return node

    def _compile_pattern(self, raw_key: str) -> re.Pattern:
        try:
            return re.compile(pattern_source(raw_key))
        except re.error as exc:
            raise InvalidSchemaArgument(f"Invalid pattern key {raw_key!r}") from exc

    def _object_args(self, tag: str, args: tuple[Any, ...]) -> list[Any]:
        # ({key: value, ...}) or (key, value, ...)
        if len(args) == 1:
            (entries,) = args
            if not isinstance(entries, dict):
                raise InvalidSchemaArgument(f"{tag} schema expects a mapping, got {type(entries).__name__}")
            return [tag, {}, *[self.key(value, raw_key) for raw_key, value in entries.items()]]
        try:
            pairs = partition(args, 2)
        except ValueError as exc:
            raise InvalidSchemaArgument(f"{tag} schema expects alternating keys and values") from exc
        return [tag, {}, *[[self.literals(k), self.literals(v)] for k, v in pairs]]

    # Aliases -----------------------------------------------------------------
    dict = dict_
    object_of = dict_
    objectOf = dict_
    arrayOf = array_of
    d = desc


__all__ = ["SchemaBuilder", "BuilderConfig", "DEFAULT_CONFIG"]
