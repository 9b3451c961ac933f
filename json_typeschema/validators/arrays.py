"""
Array validator implementation.
"""

from typing import Any, Dict, Optional

from .base import ValidatorBase, ValidationContext
from ..api import ErrorCode, ValueKind
from ..nodes import JsonNode
from ..utils import SchemaKeywords


class ArrayValidator(ValidatorBase):
    """
    Validator for array values.

    The element schema is owned by this validator.
    """

    _kind = ValueKind.ARRAY
    _fields = ("min_items", "max_items", "items")
    _hash = 6

    def __init__(self,
                 items: Optional["Schema"] = None,
                 min_items: Optional[int] = None,
                 max_items: Optional[int] = None):
        """
        Initialize a new array validator.

        Args:
            items: Schema of the array elements
            min_items: Minimum number of items
            max_items: Maximum number of items
        """
        self.items = items
        self.min_items = min_items
        self.max_items = max_items

    def parse(self, key: str, value: JsonNode) -> bool:
        if key == SchemaKeywords.MIN_ITEMS:
            self.min_items = value.get_int32()
        elif key == SchemaKeywords.MAX_ITEMS:
            self.max_items = value.get_int32()
        elif key == SchemaKeywords.ITEMS:
            from ..factory import ValidatorFactory
            self.items = ValidatorFactory.load(value)
        else:
            return False
        return True

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        valid = True

        if self.min_items is not None and len(value) < self.min_items:
            context.add_error(
                ErrorCode.ARRAY_TOO_SHORT,
                f"Array has {len(value)} items, but minimum is {self.min_items}",
                value=value,
                constraint=self
            )
            valid = False

        if self.max_items is not None and len(value) > self.max_items:
            context.add_error(
                ErrorCode.ARRAY_TOO_LONG,
                f"Array has {len(value)} items, but maximum is {self.max_items}",
                value=value,
                constraint=self
            )
            valid = False

        if self.items is not None and self.items.validator is not None:
            for i, item in enumerate(value):
                with context.with_path(i, SchemaKeywords.ITEMS):
                    if not self.items.validator.validate(item, context):
                        valid = False

        return valid

    def _to_json_value(self, value: Any) -> Any:
        if isinstance(value, (str, bytes, dict)):
            return value
        try:
            items = list(value)
        except TypeError:
            return value
        if self.items is None or self.items.validator is None:
            return items
        return [self.items.validator._to_json_value(item) for item in items]

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.min_items is not None:
            result[SchemaKeywords.MIN_ITEMS] = self.min_items
        if self.max_items is not None:
            result[SchemaKeywords.MAX_ITEMS] = self.max_items
        if self.items is not None:
            result[SchemaKeywords.ITEMS] = self.items.to_dict()
        return result
