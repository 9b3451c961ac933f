#!/usr/bin/env python3
"""
Tests for schema creation from Python types.
"""
import json

import pytest

from json_typeschema import ExportFlags, Schema, SchemaProperty, SchemaPropertyItem, ValueKind

from models import Account, Letter, Message, Person, ScoreBoard


class TestSchemaCreate:
    """Tests for Schema.create."""

    def test_person(self):
        """Test the person example from json-schema.org."""
        s = Schema.create(Person)
        assert s.title == "Person"
        assert s.kind is ValueKind.OBJECT
        assert s.properties["firstName"].type == "string"
        assert s.properties["lastName"].type == "string"
        assert s.properties["age"].type == "integer"
        assert s.properties["age"].description == "Age in years"
        assert s.properties["age"].minimum == 0
        assert s.required == ["firstName", "lastName"]

    def test_required_names_are_properties(self):
        """Test that every required name is a property."""
        for t in (Person, ScoreBoard, Account):
            s = Schema.create(t)
            assert all(name in s.properties for name in s.required)

    def test_enum_member(self):
        """Test that an enum member becomes anyOf alternatives."""
        s = Schema.create(Message)
        letter = s.properties["letter"]
        assert letter.type is None
        assert letter.any_of == (
            SchemaPropertyItem(enum=("A",), description="A"),
            SchemaPropertyItem(enum=("B",), description="B"),
        )
        assert s.properties["text"].type == "string"
        assert s.required == []

    def test_enum_type(self):
        """Test that an enum type lists its alternatives."""
        s = Schema.create(Letter)
        assert s.kind is ValueKind.ENUM
        assert s.to_dict() == {
            "title": "Letter",
            "anyOf": [
                {"enum": ["A"], "description": "A"},
                {"enum": ["B"], "description": "B"},
            ],
        }
        assert s != Schema(title="Letter", kind=ValueKind.ENUM)

    def test_title_from_decorator(self):
        """Test that json_schema_object sets the title."""
        s = Schema.create(ScoreBoard)
        assert s.title == "Score Board"
        assert s.properties["scores"].type == "array"
        assert s.properties["ratio"].type == "number"
        assert s.properties["active"].type == "boolean"
        assert s.required == ["name"]

    def test_fields_before_properties(self):
        """Test member order and the export flags."""
        s = Schema.create(Account)
        assert list(s.properties) == ["owner", "balance", "nickname"]
        assert s.properties["balance"].description == "Balance in cents"
        assert s.required == ["owner"]

        fields_only = Schema.create(Account, ExportFlags.PUBLIC_FIELDS)
        assert list(fields_only.properties) == ["owner"]

        properties_only = Schema.create(Account, ExportFlags.PUBLIC_PROPERTIES)
        assert list(properties_only.properties) == ["balance", "nickname"]
        assert properties_only.required == []

    def test_scalar_type(self):
        """Test that scalar types have no properties."""
        s = Schema.create(int)
        assert s.title == "int"
        assert s.kind is ValueKind.INTEGER
        assert s.properties == {}
        assert s.required == []


class TestSchemaEquality:
    """Tests for structural schema equality."""

    def test_equal_schemas(self):
        """Test that schemas of the same type are equal."""
        assert Schema.create(Person) == Schema.create(Person)
        assert hash(Schema.create(Person)) == hash(Schema.create(Person))

    def test_property_order_is_ignored(self):
        """Test that property order does not matter."""
        a = Schema("T", properties={"x": SchemaProperty(type="string"), "y": SchemaProperty(type="integer")})
        b = Schema("T", properties={"y": SchemaProperty(type="integer"), "x": SchemaProperty(type="string")})
        assert a == b

    def test_required_order_matters(self):
        """Test that required names are compared as a sequence."""
        properties = {"x": SchemaProperty(type="string"), "y": SchemaProperty(type="string")}
        a = Schema("T", properties=properties, required=["x", "y"])
        b = Schema("T", properties=properties, required=["y", "x"])
        assert a != b

    def test_differences(self):
        """Test that title, kind and properties are compared."""
        base = Schema("T", properties={"x": SchemaProperty(type="string")})
        assert base != Schema("U", properties={"x": SchemaProperty(type="string")})
        assert base != Schema("T", kind=ValueKind.ARRAY, properties={"x": SchemaProperty(type="string")})
        assert base != Schema("T", properties={"x": SchemaProperty(type="integer")})
        assert base != "T"


class TestSchemaProperty:
    """Tests for SchemaProperty."""

    def test_type_and_any_of_are_exclusive(self):
        """Test that a property is either typed or enumerated."""
        with pytest.raises(ValueError):
            SchemaProperty(type="string", any_of=(SchemaPropertyItem(enum=("A",)),))

    def test_from_enum(self):
        """Test enum alternatives."""
        prop = SchemaProperty.from_enum(Letter)
        assert [item.enum for item in prop.any_of] == [("A",), ("B",)]
        assert prop.to_dict() == {
            "anyOf": [
                {"enum": ["A"], "description": "A"},
                {"enum": ["B"], "description": "B"},
            ]
        }


class TestSchemaSerialization:
    """Tests for writing schemas as JSON."""

    def test_to_dict(self):
        """Test the JSON Schema document of a created schema."""
        assert Schema.create(Person).to_dict() == {
            "title": "Person",
            "type": "object",
            "properties": {
                "firstName": {"type": "string"},
                "lastName": {"type": "string"},
                "age": {"type": "integer", "description": "Age in years", "minimum": 0},
            },
            "required": ["firstName", "lastName"],
        }

    def test_to_json(self):
        """Test that the JSON output is UTF-8 bytes."""
        data = Schema.create(Message).to_json(indent=2)
        assert isinstance(data, bytes)
        document = json.loads(data.decode("utf-8"))
        assert document["title"] == "Message"
        assert "type" not in document["properties"]["letter"]
