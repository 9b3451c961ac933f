"""
Enum validator implementation.
"""

import enum
from typing import Any, Dict, Optional, Sequence, Tuple

from .base import ValidatorBase, ValidationContext
from ..api import ErrorCode, ValueKind
from ..nodes import JsonNode
from ..utils import SchemaKeywords


class EnumValidator(ValidatorBase):
    """
    Validator for enum members, written on the wire as their member names.
    """

    _kind = ValueKind.ENUM
    _fields = ("values",)
    _hash = 8

    def __init__(self, values: Optional[Sequence[Any]] = None):
        """
        Initialize a new enum validator.

        Args:
            values: Allowed literals
        """
        self.values: Tuple[Any, ...] = tuple(values or ())

    @classmethod
    def from_enum(cls, enum_type: type) -> "EnumValidator":
        return cls(member.name for member in enum_type)

    def parse(self, key: str, value: JsonNode) -> bool:
        if key == SchemaKeywords.ENUM:
            self.values = tuple(item.value for item in value.array_items)
            return True
        return False

    def _validate_type(self, value: Any, context: ValidationContext) -> bool:
        # Any JSON value may appear in an enumeration
        return True

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        if value in self.values:
            return True

        context.add_error(
            ErrorCode.ENUM_MISMATCH,
            f"Value '{value}' not in enumeration: {list(self.values)}",
            value=value,
            constraint=self
        )
        return False

    def _to_json_value(self, value: Any) -> Any:
        if isinstance(value, enum.Enum):
            return value.name
        return value

    def to_dict(self) -> Dict[str, Any]:
        return {SchemaKeywords.ENUM: list(self.values)}
