"""Builders for structural schemas of JSON-like values."""

from .errors import InvalidSchemaArgument, SchemaError, UnknownSchemaValue, UnresolvedReference
from .nodes import (
    DescriptorTag,
    FunctionSchemaNode,
    SchemaNode,
    SchemaOptions,
    SchemaTag,
    bless,
    bless_all,
    bless_fn,
    is_schema,
    merge_options,
)
from .cache import REFERENCE_CACHE, REFERENCE_PREFIX, ReferenceCache, ReferenceSchemaNode, ref_handler
from .keys import KeyKind, key_type
from .coercion import LiteralKind, literal_kind
from .builder import BuilderConfig, SchemaBuilder

S = SchemaBuilder()

literals = S.literals
string = S.string
number = S.number
or_ = S.or_
array = S.array
array_of = S.array_of
arrayOf = S.arrayOf
object_ = S.object
dict_ = S.dict_
object_of = S.object_of
objectOf = S.objectOf
fn = S.fn
with_return = S.with_return
desc = S.desc
d = S.d
role = S.role
boolean = S.boolean
nullval = S.nullval

__all__ = [
    "S",
    "SchemaBuilder",
    "BuilderConfig",
    "SchemaNode",
    "FunctionSchemaNode",
    "ReferenceSchemaNode",
    "SchemaOptions",
    "SchemaTag",
    "DescriptorTag",
    "ReferenceCache",
    "REFERENCE_CACHE",
    "REFERENCE_PREFIX",
    "KeyKind",
    "LiteralKind",
    "SchemaError",
    "UnknownSchemaValue",
    "UnresolvedReference",
    "InvalidSchemaArgument",
    "is_schema",
    "bless",
    "bless_fn",
    "bless_all",
    "merge_options",
    "ref_handler",
    "key_type",
    "literal_kind",
    "literals",
    "string",
    "number",
    "or_",
    "array",
    "array_of",
    "arrayOf",
    "object_",
    "dict_",
    "object_of",
    "objectOf",
    "fn",
    "with_return",
    "desc",
    "d",
    "role",
    "boolean",
    "nullval",
]
