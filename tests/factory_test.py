#!/usr/bin/env python3
"""
Tests for building validator trees from Python types.
"""
from typing import Annotated, List, Tuple

import pytest

from json_typeschema import (
    ErrorCode,
    ItemJsonSchemaField,
    JsonSchemaField,
    Schema,
    UnsupportedTypeError,
    Validator,
    ValidatorFactory,
    ValueKind,
)
from json_typeschema.validators import (
    ArrayValidator,
    BooleanValidator,
    EnumValidator,
    IntegerValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
)

from models import (
    Account,
    Bounds,
    Half,
    Letter,
    Message,
    Pair,
    Person,
    ScoreBoard,
    Sensor,
    Shape,
    Square,
    Tagged,
    Team,
    Wrapper,
)


class TestScalarValidators:
    """Tests for integer, number, string and boolean validators."""

    def test_integer_constraints(self):
        """Test that set constraints are copied."""
        field = JsonSchemaField(minimum=1, maximum=10, exclusive_maximum=True, multiple_of=3)
        v = ValidatorFactory.create(ValueKind.INTEGER, int, field)
        assert isinstance(v, IntegerValidator)
        assert v.minimum == 1
        assert v.maximum == 10
        assert v.exclusive_minimum is False
        assert v.exclusive_maximum is True
        assert v.multiple_of == 3

    def test_unset_constraints_keep_defaults(self):
        """Test that an empty descriptor changes nothing."""
        v = ValidatorFactory.create(ValueKind.NUMBER, float, JsonSchemaField())
        assert v == NumberValidator()
        assert v.minimum is None
        assert v.maximum is None
        assert v.multiple_of is None

    def test_zero_is_a_real_bound(self):
        """Test that a zero minimum is kept."""
        v = ValidatorFactory.create(ValueKind.INTEGER, int, JsonSchemaField(minimum=0, maximum=0))
        assert v.minimum == 0
        assert v.maximum == 0

    def test_fractional_integer_bounds(self):
        """Test that fractional bounds on integers are enforced as written."""
        v = ValidatorFactory.create(ValueKind.INTEGER, int, JsonSchemaField(minimum=1.9, maximum=5.0))
        assert v.minimum == 1.9
        assert v.maximum == 5
        assert isinstance(v.maximum, int)
        assert not Validator().validate(1, v).valid
        assert Validator().validate(2, v).valid

        result = Schema.from_type(Bounds).validate({"lo": 0, "hi": 0})
        assert [(e.code, e.path) for e in result.errors] == [
            (ErrorCode.NUMBER_TOO_SMALL, "/lo"),
            (ErrorCode.NUMBER_TOO_LARGE, "/hi"),
        ]

    def test_fractional_integer_multiple(self):
        """Test that a fractional multipleOf is never rounded away."""
        v = ValidatorFactory.create_from_type(Half)
        assert v.properties["n"].validator.multiple_of == 0.5
        assert Validator().validate({"n": 3}, v).valid

    def test_number_constraints(self):
        """Test that number bounds keep their fractions."""
        v = ValidatorFactory.create_from_type(float, JsonSchemaField(minimum=0.5, exclusive_minimum=True))
        assert v.minimum == 0.5
        assert v.exclusive_minimum is True

    def test_string_pattern(self):
        """Test that a pattern is copied."""
        v = ValidatorFactory.create_from_type(str, JsonSchemaField(pattern="^a"))
        assert v == StringValidator(pattern="^a")
        assert ValidatorFactory.create_from_type(str).pattern is None

    def test_boolean(self):
        """Test the boolean validator."""
        assert ValidatorFactory.create_from_type(bool) == BooleanValidator()

    def test_create_from_name(self):
        """Test creation from a wire type name."""
        assert isinstance(ValidatorFactory.create_from_name("Integer"), IntegerValidator)
        assert isinstance(ValidatorFactory.create_from_name("array"), ArrayValidator)
        with pytest.raises(UnsupportedTypeError):
            ValidatorFactory.create_from_name("tuple")

    def test_invalid_descriptor(self):
        """Test that impossible descriptors are rejected."""
        with pytest.raises(ValueError):
            JsonSchemaField(multiple_of=0)
        with pytest.raises(ValueError):
            JsonSchemaField(min_items=-1)


class TestArrayValidators:
    """Tests for array validators."""

    def test_item_bounds_and_items(self):
        """Test an integer array with item bounds."""
        v = ValidatorFactory.create(
            ValueKind.ARRAY, List[int], JsonSchemaField(min_items=1, max_items=5)
        )
        assert isinstance(v, ArrayValidator)
        assert v.min_items == 1
        assert v.max_items == 5
        assert isinstance(v.items, Schema)
        assert v.items.kind is ValueKind.INTEGER
        assert isinstance(v.items.validator, IntegerValidator)

    def test_member_array(self):
        """Test an array member of a class."""
        board = ValidatorFactory.create_from_type(ScoreBoard)
        scores = board.properties["scores"].validator
        assert scores.min_items == 1
        assert scores.max_items == 5
        assert scores.items.validator == IntegerValidator()

    def test_item_descriptor(self):
        """Test that element constraints come from the item descriptor."""
        v = ValidatorFactory.create_from_type(Tagged)
        tags = v.properties["tags"].validator
        assert tags.max_items == 3
        assert tags.items.validator == StringValidator(pattern="^[a-z]+$")

        counts = v.properties["counts"].validator
        assert counts.items.validator == IntegerValidator(minimum=1, multiple_of=2)

    def test_annotated_type(self):
        """Test descriptors annotated on the type itself."""
        v = ValidatorFactory.create_from_type(
            Annotated[List[str], JsonSchemaField(min_items=2), ItemJsonSchemaField(pattern="x")]
        )
        assert v.min_items == 2
        assert v.items.validator.pattern == "x"

    def test_untyped_array(self):
        """Test that a bare list has no item schema."""
        assert ValidatorFactory.create_from_type(list).items is None
        assert ValidatorFactory.create(ValueKind.ARRAY).items is None

    def test_fixed_tuples(self):
        """Test that only uniform tuples get an item schema."""
        v = ValidatorFactory.create_from_type(Tuple[int, int])
        assert v.items.validator == IntegerValidator()
        with pytest.raises(UnsupportedTypeError):
            ValidatorFactory.create_from_type(Pair)

    def test_nested_arrays(self):
        """Test arrays of arrays."""
        v = ValidatorFactory.create_from_type(List[List[bool]])
        inner = v.items.validator
        assert isinstance(inner, ArrayValidator)
        assert inner.items.validator == BooleanValidator()


class TestObjectValidators:
    """Tests for object validators."""

    def test_person(self):
        """Test the members and required names of a class."""
        v = ValidatorFactory.create_from_type(Person)
        assert isinstance(v, ObjectValidator)
        assert list(v.properties) == ["firstName", "lastName", "age"]
        assert v.required == ["firstName", "lastName"]
        assert v.properties["age"].validator == IntegerValidator(minimum=0)
        assert v.properties["age"].description == "Age in years"

    def test_properties_need_a_descriptor(self):
        """Test that only described properties are walked."""
        v = ValidatorFactory.create_from_type(Account)
        assert list(v.properties) == ["owner", "balance"]
        assert v.required == ["owner"]
        assert v.properties["balance"].validator == IntegerValidator(minimum=0)

    def test_export_flags(self):
        """Test that a member's export flags control the walk of its type."""
        v = ValidatorFactory.create_from_type(Wrapper)
        inner = v.properties["inner"].validator
        assert list(inner.properties) == ["balance"]

    def test_overridden_property(self):
        """Test that a subclass property replaces the base class definition."""
        v = ValidatorFactory.create_from_type(Square)
        assert list(v.properties) == ["size", "label", "side"]
        assert v.properties["size"].validator == StringValidator(pattern="^a")
        assert Schema.create(Square).properties["size"].type == "string"
        assert ValidatorFactory.create_from_type(Shape).properties["size"].validator == IntegerValidator(minimum=0)

    def test_min_properties(self):
        """Test that minProperties is copied only when positive."""
        v = ValidatorFactory.create(ValueKind.OBJECT, Person, JsonSchemaField(min_properties=2))
        assert v.min_properties == 2
        v = ValidatorFactory.create(ValueKind.OBJECT, Person, JsonSchemaField(min_properties=0))
        assert v.min_properties is None

    def test_nested_objects(self):
        """Test objects inside objects and arrays."""
        v = ValidatorFactory.create_from_type(Team)
        assert v.required == ["leader"]
        leader = v.properties["leader"]
        assert leader.title == "Person"
        assert leader.validator == ValidatorFactory.create_from_type(Person)
        members = v.properties["members"].validator
        assert members.min_items == 1
        assert members.items.validator == ValidatorFactory.create_from_type(Person)
        assert v.properties["motto"].validator == StringValidator()

    def test_enum_member(self):
        """Test that enum members get enum validators."""
        v = ValidatorFactory.create_from_type(Message)
        assert v.properties["letter"].validator == EnumValidator(["A", "B"])
        assert ValidatorFactory.create_from_type(Letter).values == ("A", "B")

    def test_object_without_type(self):
        """Test that an object validator without a type has no properties."""
        v = ValidatorFactory.create(ValueKind.OBJECT)
        assert v.properties == {}
        assert v.required == []

    def test_unsupported_kind(self):
        """Test that an unknown kind is rejected."""
        with pytest.raises(UnsupportedTypeError):
            ValidatorFactory.create("integer")


class TestSchemaFromType:
    """Tests for schemas carrying validators."""

    def test_schema_from_type(self):
        """Test the schema wrapper of a validator tree."""
        s = ValidatorFactory.schema_from_type(Sensor)
        assert s.title == "Sensor"
        assert s.kind is ValueKind.OBJECT
        assert s.validator.properties["reading"].validator == IntegerValidator(
            minimum=0, maximum=100, exclusive_minimum=True, multiple_of=5
        )

    def test_to_dict(self):
        """Test the JSON Schema document of a validator tree."""
        assert Schema.from_type(Sensor).to_dict() == {
            "title": "Sensor",
            "type": "object",
            "properties": {
                "reading": {
                    "type": "integer",
                    "minimum": 0,
                    "exclusiveMinimum": True,
                    "maximum": 100,
                    "multipleOf": 5,
                },
                "threshold": {"type": "integer"},
            },
        }
