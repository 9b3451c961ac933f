"""
Schema model: the serializable description of a data shape.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .api import SchemaParseError, ValidationResult, ValueKind
from .fields import ExportFlags, JsonSchemaField, get_title, iter_members
from .kinds import is_enum, kind_of, unwrap_type
from .nodes import JsonNode, JsonValueType
from .utils import SchemaKeywords
from .validators import ValidatorBase

logger = logging.getLogger("json_typeschema")


@dataclass(frozen=True)
class SchemaPropertyItem:
    """One literal alternative of an enumerated property."""
    enum: Tuple[Any, ...]
    description: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {SchemaKeywords.ENUM: list(self.enum)}
        if self.description is not None:
            result[SchemaKeywords.DESCRIPTION] = self.description
        if self.type is not None:
            result[SchemaKeywords.TYPE] = self.type
        return result


@dataclass(frozen=True)
class SchemaProperty:
    """
    Description of one property of an object schema.

    A property is either a typed scalar (``type``) or a set of enumerated
    alternatives (``any_of``), never both.
    """
    description: Optional[str] = None
    required: bool = False
    type: Optional[str] = None
    minimum: Optional[Union[int, float]] = None
    any_of: Optional[Tuple[SchemaPropertyItem, ...]] = None

    def __post_init__(self):
        if self.type is not None and self.any_of is not None:
            raise ValueError("A schema property cannot have both a type and anyOf alternatives")

    @classmethod
    def from_field(cls, kind: ValueKind, field: Optional[JsonSchemaField] = None) -> "SchemaProperty":
        if field is None:
            return cls(type=kind.value)
        return cls(
            description=field.description,
            required=field.required,
            type=kind.value,
            minimum=field.minimum,
        )

    @classmethod
    def from_enum(cls, enum_type: type) -> "SchemaProperty":
        items = tuple(
            SchemaPropertyItem(enum=(member.name,), description=member.name)
            for member in enum_type
        )
        return cls(any_of=items)

    @classmethod
    def from_node(cls, node: JsonNode) -> "SchemaProperty":
        # Property keywords are not read back yet; only the name survives a parse
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.type is not None:
            result[SchemaKeywords.TYPE] = self.type
        if self.description is not None:
            result[SchemaKeywords.DESCRIPTION] = self.description
        if self.minimum is not None:
            result[SchemaKeywords.MINIMUM] = self.minimum
        if self.any_of is not None:
            result[SchemaKeywords.ANY_OF] = [item.to_dict() for item in self.any_of]
        return result


class Schema:
    """
    Declarative description of a data shape.

    A schema built by ``create`` describes the type for display. A schema
    built by the ValidatorFactory or by ``load`` also carries the validator
    tree that checks data against it.

    Attributes:
        title: Display title
        kind: JSON value kind
        properties: Property descriptions by name
        required: Names of required properties, in declaration order
        description: Optional description
        validator: Executable counterpart, if any
        any_of: Literal alternatives of an enum schema
    """

    def __init__(self,
                 title: Optional[str] = None,
                 kind: ValueKind = ValueKind.OBJECT,
                 properties: Optional[Dict[str, SchemaProperty]] = None,
                 required: Optional[Sequence[str]] = None,
                 description: Optional[str] = None,
                 validator: Optional[ValidatorBase] = None,
                 any_of: Optional[Sequence[SchemaPropertyItem]] = None):
        self.title = title
        self.kind = kind
        self.properties: Dict[str, SchemaProperty] = dict(properties or {})
        self.required: List[str] = list(required or [])
        self.description = description
        self.validator = validator
        self.any_of: Tuple[SchemaPropertyItem, ...] = tuple(any_of or ())

    @classmethod
    def create(cls, t: Any, export_flags: ExportFlags = ExportFlags.DEFAULT) -> "Schema":
        """
        Describe a Python type.

        Args:
            t: The type to describe
            export_flags: Which members of a class become properties

        Returns:
            The schema of the type

        Raises:
            UnsupportedTypeError: If the type or one of its members has no JSON kind
        """
        kind = kind_of(t)
        properties: Dict[str, SchemaProperty] = {}
        required: List[str] = []

        if kind is ValueKind.OBJECT:
            for member in iter_members(t, export_flags):
                member_type, _ = unwrap_type(member.type)
                if is_enum(member_type):
                    prop = SchemaProperty.from_enum(member_type)
                else:
                    prop = SchemaProperty.from_field(kind_of(member_type), member.field)
                properties[member.name] = prop
                if member.field is not None and member.field.required:
                    required.append(member.name)

        any_of = None
        if kind is ValueKind.ENUM:
            any_of = SchemaProperty.from_enum(unwrap_type(t)[0]).any_of

        logger.debug(f"Described {get_title(t)} as {kind.value} with {len(properties)} properties")
        return cls(title=get_title(t), kind=kind, properties=properties, required=required, any_of=any_of)

    @classmethod
    def from_type(cls, t: Any, field=None, item_field=None) -> "Schema":
        """Build a schema carrying its validator tree. See ValidatorFactory.schema_from_type."""
        from .factory import ValidatorFactory
        return ValidatorFactory.schema_from_type(t, field, item_field)

    @classmethod
    def parse(cls, data: bytes) -> "Schema":
        """
        Read the outline of an object schema from JSON bytes.

        Only the title, the property names and the required names are read.

        Args:
            data: UTF-8 encoded JSON Schema document

        Returns:
            The parsed schema, always of object kind

        Raises:
            SchemaParseError: If the document is not an object or a field has the wrong kind
        """
        root = JsonNode.parse(data)
        if root.value_type is not JsonValueType.OBJECT:
            raise SchemaParseError(f"Root value must be an object: {root.value!r}", root.value)

        title = root.get(SchemaKeywords.TITLE)
        properties = root.get(SchemaKeywords.PROPERTIES)
        required = root.get(SchemaKeywords.REQUIRED)

        return cls(
            title=title.get_string() if title is not None else None,
            kind=ValueKind.OBJECT,
            properties={
                name: SchemaProperty.from_node(node) for name, node in properties.object_items
            } if properties is not None else {},
            required=[item.get_string() for item in required.array_items] if required is not None else [],
        )

    @classmethod
    def load(cls, data: bytes) -> "Schema":
        """
        Read a full schema document, validator tree included.

        Args:
            data: UTF-8 encoded JSON Schema document

        Returns:
            The schema with its validator
        """
        from .factory import ValidatorFactory
        return ValidatorFactory.load(JsonNode.parse(data))

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate data against this schema's validator tree.

        Raises:
            ValueError: If the schema has no validator
        """
        from .validator import Validator
        return Validator().validate(value, self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the JSON Schema document of this schema.

        Returns:
            Dictionary of schema keywords
        """
        result: Dict[str, Any] = {}
        if self.title is not None:
            result[SchemaKeywords.TITLE] = self.title
        if self.description is not None:
            result[SchemaKeywords.DESCRIPTION] = self.description

        if self.validator is not None:
            result.update(self.validator.to_dict())
            return result

        if self.kind is ValueKind.ENUM:
            result[SchemaKeywords.ANY_OF] = [item.to_dict() for item in self.any_of]
        else:
            result[SchemaKeywords.TYPE] = self.kind.value
        if self.kind is ValueKind.OBJECT:
            result[SchemaKeywords.PROPERTIES] = {
                name: prop.to_dict() for name, prop in self.properties.items()
            }
            result[SchemaKeywords.REQUIRED] = list(self.required)
        return result

    def to_json(self, indent: Optional[int] = None) -> bytes:
        """Write this schema as UTF-8 encoded JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False).encode("utf-8")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return (self.title == other.title
                and self.kind == other.kind
                and self.properties == other.properties
                and self.required == other.required
                and self.any_of == other.any_of
                and self.validator == other.validator)

    def __hash__(self) -> int:
        return hash(self.title)

    def __repr__(self) -> str:
        return (f"Schema(title={self.title!r}, kind={self.kind.value}, "
                f"properties={list(self.properties)}, required={self.required})")
