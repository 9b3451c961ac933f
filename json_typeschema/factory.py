"""
Recursive construction of validator trees from Python types and schema documents.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .api import SchemaParseError, UnsupportedTypeError, ValueKind
from .fields import (
    BaseJsonSchemaField,
    ExportFlags,
    ItemJsonSchemaField,
    JsonSchemaField,
    get_fields,
    get_title,
    iter_members,
)
from .kinds import element_type_of, kind_of, unwrap_type
from .nodes import JsonNode, JsonValueType
from .schema import Schema
from .utils import SchemaKeywords
from .validators import (
    ArrayValidator,
    BooleanValidator,
    EnumValidator,
    IntegerValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
    ValidatorBase,
)

logger = logging.getLogger("json_typeschema")


class ValidatorFactory:
    """
    Builds validator trees.

    The tree mirrors the schema nesting: object validators own the schemas
    of their properties and array validators own the schema of their
    elements. Constraints are copied from a member's descriptor only when
    they are set, so an unset constraint never overrides a default.
    """

    @classmethod
    def create(cls,
               kind: ValueKind,
               t: Any = None,
               field: Optional[BaseJsonSchemaField] = None,
               item_field: Optional[ItemJsonSchemaField] = None) -> ValidatorBase:
        """
        Create the validator for a value kind.

        Args:
            kind: JSON value kind
            t: Python type, used to recurse into array elements and object members
            field: Constraints of the value
            item_field: Constraints of the array elements

        Returns:
            The validator tree

        Raises:
            UnsupportedTypeError: If the kind has no validator
        """
        builder = _BUILDERS.get(kind)
        if builder is None:
            raise UnsupportedTypeError(f"No validator for value kind {kind!r}")

        t = unwrap_type(t)[0] if t is not None else None
        validator = builder(t, field, item_field)
        logger.debug(f"Created {validator} for {t!r}")
        return validator

    @classmethod
    def create_from_type(cls,
                         t: Any,
                         field: Optional[BaseJsonSchemaField] = None,
                         item_field: Optional[ItemJsonSchemaField] = None) -> ValidatorBase:
        """
        Create the validator tree of a Python type.

        Descriptors annotated on ``t`` itself are used when none are given.
        """
        annotated_field, annotated_item_field = get_fields(t)
        return cls.create(kind_of(t), t,
                          field or annotated_field,
                          item_field or annotated_item_field)

    @classmethod
    def create_from_name(cls, name: str) -> ValidatorBase:
        """Create an unconstrained validator from a JSON Schema type name."""
        return cls.create(ValueKind.from_name(name))

    @classmethod
    def schema_from_type(cls,
                         t: Any,
                         field: Optional[BaseJsonSchemaField] = None,
                         item_field: Optional[ItemJsonSchemaField] = None) -> Schema:
        """
        Create a schema of a Python type that carries its validator tree.

        Args:
            t: Python type
            field: Constraints of the value
            item_field: Constraints of the array elements

        Returns:
            The schema with its validator
        """
        validator = cls.create_from_type(t, field, item_field)
        kind = validator.value_kind
        return Schema(
            title=get_title(t) if kind is ValueKind.OBJECT else None,
            kind=kind,
            description=getattr(field, "description", None),
            validator=validator,
        )

    @classmethod
    def load(cls, node: JsonNode) -> Schema:
        """
        Create a schema with its validator tree from a schema document node.

        The validator is chosen by the ``type`` keyword (``enum`` when only an
        enumeration is given) and every other keyword is handed to its parse
        method. Keywords no validator understands are ignored.

        Args:
            node: Object node of a JSON Schema document

        Returns:
            The schema with its validator

        Raises:
            SchemaParseError: If the node is not an object or lacks a type
            UnsupportedTypeError: If the type names no modeled kind
        """
        if node.value_type is not JsonValueType.OBJECT:
            raise SchemaParseError(f"Schema must be an object: {node.value!r}", node.value)

        type_node = node.get(SchemaKeywords.TYPE)
        if type_node is not None:
            kind = ValueKind.from_name(type_node.get_string())
        elif SchemaKeywords.ENUM in node:
            kind = ValueKind.ENUM
        else:
            raise SchemaParseError(f"Schema has no type: {node.value!r}", node.value)

        validator = cls.create(kind)
        for key, value in node.object_items:
            if key in SchemaKeywords.METADATA:
                continue
            if not validator.parse(key, value):
                logger.debug(f"Ignoring keyword '{key}' for {kind.value} schema")

        title = node.get(SchemaKeywords.TITLE)
        description = node.get(SchemaKeywords.DESCRIPTION)
        return Schema(
            title=title.get_string() if title is not None else None,
            kind=kind,
            required=getattr(validator, "required", None),
            description=description.get_string() if description is not None else None,
            validator=validator,
        )


def _as_integer(value: Any) -> Any:
    # Fractional bounds stay fractional
    if float(value).is_integer():
        return int(value)
    return value


def _create_integer(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> IntegerValidator:
    v = IntegerValidator()
    if field is not None:
        if field.minimum is not None:
            v.minimum = _as_integer(field.minimum)
        if field.exclusive_minimum:
            v.exclusive_minimum = True
        if field.maximum is not None:
            v.maximum = _as_integer(field.maximum)
        if field.exclusive_maximum:
            v.exclusive_maximum = True
        if field.multiple_of is not None:
            v.multiple_of = _as_integer(field.multiple_of)
    return v


def _create_number(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> NumberValidator:
    v = NumberValidator()
    if field is not None:
        if field.minimum is not None:
            v.minimum = field.minimum
        if field.exclusive_minimum:
            v.exclusive_minimum = True
        if field.maximum is not None:
            v.maximum = field.maximum
        if field.exclusive_maximum:
            v.exclusive_maximum = True
        if field.multiple_of is not None:
            v.multiple_of = field.multiple_of
    return v


def _create_string(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> StringValidator:
    v = StringValidator()
    if field is not None and field.pattern is not None:
        v.pattern = field.pattern
    return v


def _create_boolean(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> BooleanValidator:
    return BooleanValidator()


def _create_array(t: Any,
                  field: Optional[BaseJsonSchemaField],
                  item_field: Optional[ItemJsonSchemaField]) -> ArrayValidator:
    v = ArrayValidator()
    if field is not None:
        if field.min_items is not None:
            v.min_items = field.min_items
        if field.max_items is not None:
            v.max_items = field.max_items

    if t is not None:
        element_type = element_type_of(t)
        if element_type is not None:
            v.items = ValidatorFactory.schema_from_type(element_type, item_field or ItemJsonSchemaField())
    return v


def _create_object(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> ObjectValidator:
    v = ObjectValidator()
    if field is not None and field.min_properties:
        v.min_properties = field.min_properties

    if t is not None:
        export_flags = getattr(field, "export_flags", ExportFlags.DEFAULT)
        for member in iter_members(t, export_flags, require_property_field=True):
            schema = ValidatorFactory.schema_from_type(member.type, member.field, member.item_field)
            v.add_property(member.name, schema, required=member.field.required)
    return v


def _create_enum(t: Any, field: Optional[BaseJsonSchemaField], item_field) -> EnumValidator:
    if t is None:
        return EnumValidator()
    return EnumValidator.from_enum(t)


_BUILDERS: Dict[ValueKind, Callable[..., ValidatorBase]] = {
    ValueKind.INTEGER: _create_integer,
    ValueKind.NUMBER: _create_number,
    ValueKind.STRING: _create_string,
    ValueKind.BOOLEAN: _create_boolean,
    ValueKind.ARRAY: _create_array,
    ValueKind.OBJECT: _create_object,
    ValueKind.ENUM: _create_enum,
}
