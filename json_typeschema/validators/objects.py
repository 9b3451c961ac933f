"""
Object validator implementation.
"""

from typing import Any, Dict, List, Optional

from .base import ValidatorBase, ValidationContext
from ..api import ErrorCode, ValueKind
from ..nodes import JsonNode
from ..utils import SchemaKeywords

_MISSING = object()


def get_member_value(obj: Any, name: str) -> Any:
    """
    Read a member from a mapping or an object.

    Args:
        obj: Mapping or instance
        name: Member name

    Returns:
        The member value, or a sentinel when the member does not exist
    """
    if isinstance(obj, dict):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


class ObjectValidator(ValidatorBase):
    """
    Validator for object values.

    The property schemas are owned by this validator. ``required`` is
    compared as a set.
    """

    _kind = ValueKind.OBJECT
    _fields = ("min_properties", "properties", "required")
    _hash = 7

    def __init__(self,
                 properties: Optional[Dict[str, "Schema"]] = None,
                 required: Optional[List[str]] = None,
                 min_properties: Optional[int] = None):
        """
        Initialize a new object validator.

        Args:
            properties: Schemas for specific properties
            required: Names of required properties
            min_properties: Minimum number of properties
        """
        self.properties: Dict[str, "Schema"] = dict(properties or {})
        self.required: List[str] = list(required or [])
        self.min_properties = min_properties

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return (self.min_properties == other.min_properties
                and self.properties == other.properties
                and set(self.required) == set(other.required))

    __hash__ = ValidatorBase.__hash__

    def add_property(self, name: str, schema: "Schema", required: bool = False) -> None:
        self.properties[name] = schema
        if required and name not in self.required:
            self.required.append(name)

    def parse(self, key: str, value: JsonNode) -> bool:
        if key == SchemaKeywords.MIN_PROPERTIES:
            self.min_properties = value.get_int32()
        elif key == SchemaKeywords.REQUIRED:
            self.required = [item.get_string() for item in value.array_items]
        elif key == SchemaKeywords.PROPERTIES:
            from ..factory import ValidatorFactory
            self.properties = {name: ValidatorFactory.load(node) for name, node in value.object_items}
        else:
            return False
        return True

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        valid = True

        if self.min_properties is not None and len(value) < self.min_properties:
            context.add_error(
                ErrorCode.OBJECT_TOO_FEW_PROPERTIES,
                f"Object has {len(value)} properties, but minimum is {self.min_properties}",
                value=value,
                constraint=self
            )
            valid = False

        for prop in self.required:
            if prop not in value:
                context.add_error(
                    ErrorCode.REQUIRED_PROPERTY_MISSING,
                    f"Missing required property '{prop}'",
                    value=value,
                    constraint=self
                )
                valid = False

        for prop, schema in self.properties.items():
            if prop in value and schema.validator is not None:
                with context.with_path(prop, SchemaKeywords.PROPERTIES, prop):
                    if not schema.validator.validate(value[prop], context):
                        valid = False

        return valid

    def _to_json_value(self, value: Any) -> Any:
        if not self.properties:
            return value

        result = {}
        for name, schema in self.properties.items():
            member = get_member_value(value, name)
            # Unset optional members are left out rather than written as null
            if member is _MISSING or member is None:
                continue
            if schema.validator is not None:
                member = schema.validator._to_json_value(member)
            result[name] = member
        return result

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.min_properties is not None:
            result[SchemaKeywords.MIN_PROPERTIES] = self.min_properties
        result[SchemaKeywords.PROPERTIES] = {
            name: schema.to_dict() for name, schema in self.properties.items()
        }
        if self.required:
            result[SchemaKeywords.REQUIRED] = list(self.required)
        return result
