"""Tests for the schema builder API."""

import re

import pytest

from scripts.shapes import (
    FunctionSchemaNode,
    InvalidSchemaArgument,
    ReferenceSchemaNode,
    is_schema,
)


class TestString:
    """Test string schemas."""

    def test_empty(self, builder):
        """Test the unconstrained string schema."""
        assert builder.string() == ["string", {}, []]

    def test_constant(self, builder):
        """Test a fixed string value."""
        assert builder.string("foo") == ["string", {}, ["value", "foo"]]

    def test_pattern(self, builder):
        """Test that patterns are kept as compiled."""
        pattern = re.compile("^fo*")
        schema = builder.string(pattern)
        assert schema == ["string", {}, ["pattern", pattern]]
        assert schema[2][1].pattern == "^fo*"

    def test_rejects_other_values(self, builder):
        """Test that numbers are not string constants."""
        with pytest.raises(InvalidSchemaArgument):
            builder.string(5)


class TestNumber:
    """Test number schemas."""

    def test_empty(self, builder):
        """Test the unconstrained number schema."""
        assert builder.number() == ["number", {}, []]

    def test_constant(self, builder):
        """Test a fixed number value."""
        assert builder.number(5) == ["number", {}, ["value", 5]]

    def test_interval(self, builder):
        """Test that pairs describe an interval."""
        assert builder.number([0, float("inf")]) == ["number", {}, ["interval", [0, float("inf")]]]
        assert builder.number((1, 2)) == ["number", {}, ["interval", [1, 2]]]

    @pytest.mark.parametrize("value", ["5", [1, 2, 3], [1, "2"], True])
    def test_rejects_other_values(self, builder, value):
        """Test that only numbers and pairs are accepted."""
        with pytest.raises(InvalidSchemaArgument):
            builder.number(value)


class TestComposites:
    """Test or, tuple, list and function schemas."""

    def test_or_keeps_order(self, builder):
        """Test that alternatives keep argument order."""
        assert builder.or_(builder.number(5), builder.string("foo")) == [
            "or",
            {},
            ["number", {}, ["value", 5]],
            ["string", {}, ["value", "foo"]],
        ]

    def test_or_keeps_duplicates(self, builder):
        """Test that alternatives are not deduplicated."""
        assert builder.or_(1, 1) == ["or", {}, ["number", {}, ["value", 1]], ["number", {}, ["value", 1]]]

    def test_array_is_tuple(self, builder):
        """Test that array builds a tuple schema without extra wrapping."""
        assert builder.array(builder.number(5), "foo") == [
            "tuple",
            {},
            ["number", {}, ["value", 5]],
            ["string", {}, ["value", "foo"]],
        ]

    def test_array_of(self, builder):
        """Test the list schema and its camel case alias."""
        assert builder.array_of(1) == ["list", {}, ["number", {}, ["value", 1]]]
        assert builder.arrayOf(1) == builder.array_of(1)

    def test_boolean_and_null(self, builder):
        """Test the constant schemas."""
        assert builder.boolean == ["boolean", {}]
        assert builder.nullval == ["null", {}]
        assert is_schema(builder.boolean) and is_schema(builder.nullval)

    def test_fn(self, builder):
        """Test that function schemas leave the return slot empty."""
        schema = builder.fn(builder.string(), 5)
        assert schema == ["function", {}, None, ["string", {}, []], ["number", {}, ["value", 5]]]
        assert isinstance(schema, FunctionSchemaNode)

    def test_fn_to(self, builder):
        """Test that to() returns a copy with the return schema set."""
        schema = builder.fn("a")
        returned = schema.to("b")
        assert returned == ["function", {}, ["string", {}, ["value", "b"]], ["string", {}, ["value", "a"]]]
        assert schema[2] is None
        assert returned.to(1)[2] == ["number", {}, ["value", 1]]

    def test_with_return(self, builder):
        """Test the functional form of to()."""
        titled = builder.desc("F", "a function", builder.fn(builder.number()))
        returned = builder.with_return(titled, builder.nullval)
        assert returned == ["function", {"title": "F", "description": "a function"}, ["null", {}], ["number", {}, []]]

    def test_with_return_rejects_other_schemas(self, builder):
        """Test that only function schemas take a return schema."""
        with pytest.raises(InvalidSchemaArgument):
            builder.with_return(builder.string(), 1)


class TestObjects:
    """Test object and dict schemas."""

    def test_mapping_form(self, builder):
        """Test that mapping keys go through key classification."""
        assert builder.object({"foo": builder.number(5), "/ba?r/": 1}) == [
            "object",
            {},
            [["string", {}, ["value", "foo"]], ["number", {}, ["value", 5]]],
            [["string", {}, ["pattern", re.compile("ba?r")]], ["number", {}, ["value", 1]]],
        ]

    def test_alternating_form(self, builder, titled):
        """Test that alternating arguments pair up keys and values."""
        assert builder.object("len", 10, titled, builder.string()) == [
            "object",
            {},
            [["string", {}, ["value", "len"]], ["number", {}, ["value", 10]]],
            [titled, ["string", {}, []]],
        ]

    def test_alternating_form_skips_classification(self, builder):
        """Test that alternating keys are coerced as plain literals."""
        assert builder.dict_("/a/", 1) == ["dict", {}, [["string", {}, ["value", "/a/"]], ["number", {}, ["value", 1]]]]

    def test_dict_aliases(self, builder):
        """Test that dict, object_of and objectOf build dict schemas."""
        expected = ["dict", {}, [["string", {}, ["value", "k"]], ["string", {}, []]]]
        assert builder.dict({"k": builder.string()}) == expected
        assert builder.object_of({"k": builder.string()}) == expected
        assert builder.objectOf({"k": builder.string()}) == expected

    def test_no_arguments(self, builder):
        """Test that an object without arguments has no entries."""
        assert builder.object() == ["object", {}]

    def test_reference_round_trip(self, builder, titled):
        """Test that a titled schema used as a key comes back as the key schema."""
        schema = builder({str(titled): builder.number()})
        assert schema == ["dict", {}, [["string", {"title": "Name", "description": "desc"}, []], ["number", {}, []]]]
        assert schema[2][0] is titled

    def test_reference_reused(self, builder, titled):
        """Test that one schema can key several entries."""
        schema = builder.object({str(titled): 1, f"{titled}": 2})
        assert schema[2][0] is titled and schema[3][0] is titled
        assert len(builder.cache) == 2

    def test_rejects_non_mapping(self, builder):
        """Test that a single argument must be a mapping."""
        with pytest.raises(InvalidSchemaArgument):
            builder.object([1, 2])

    def test_rejects_odd_arguments(self, builder):
        """Test that alternating arguments must pair up."""
        with pytest.raises(InvalidSchemaArgument):
            builder.object("a", 1, "b")


class TestMetadata:
    """Test desc and role."""

    def test_description_only(self, builder):
        """Test that the two argument form omits the title."""
        assert builder.desc("doc string", builder.array(builder.number(5), builder.string("foo"))) == [
            "tuple",
            {"description": "doc string"},
            ["number", {}, ["value", 5]],
            ["string", {}, ["value", "foo"]],
        ]

    def test_title_and_description(self, builder):
        """Test that the three argument form sets both."""
        assert builder.desc("title string", "doc string", builder.number()) == [
            "number",
            {"title": "title string", "description": "doc string"},
            [],
        ]

    def test_short_alias(self, builder):
        """Test that d is desc."""
        assert builder.d("x", 1) == builder.desc("x", 1)

    def test_returns_reference_node(self, builder):
        """Test that described schemas can be used as reference keys."""
        assert isinstance(builder.desc("D", builder.string()), ReferenceSchemaNode)

    def test_does_not_mutate_input(self, builder):
        """Test that desc copies the target schema."""
        original = builder.string()
        builder.desc("T", "D", original)
        assert original == ["string", {}, []]

    def test_redescribe(self, builder):
        """Test that new metadata overrides and absent metadata is kept."""
        first = builder.desc("Old", "D1", builder.string())
        assert builder.desc("New", "D2", first)[1] == {"title": "New", "description": "D2"}
        assert builder.desc("D2", first)[1] == {"title": "Old", "description": "D2"}

    def test_coerces_literal_target(self, builder):
        """Test that desc accepts literal targets."""
        assert builder.desc("D", "foo") == ["string", {"description": "D"}, ["value", "foo"]]

    @pytest.mark.parametrize("args", [(), ("D",), ("a", "b", "c", "d")])
    def test_rejects_arity(self, builder, args):
        """Test that desc takes two or three arguments."""
        with pytest.raises(InvalidSchemaArgument):
            builder.desc(*args)

    def test_rejects_non_text_title(self, builder):
        """Test that titles must be text."""
        with pytest.raises(InvalidSchemaArgument):
            builder.desc(5, "D", builder.string())

    def test_role(self, builder):
        """Test that role wraps the schema in an annotation."""
        assert builder.role("max", builder.number()) == ["annotation", {"role": "max"}, ["number", {}, []]]
        assert is_schema(builder.role("max", 1)[2])
