"""
String validator implementation.
"""

import re
from typing import Any, Dict, Optional, Pattern

from .base import ValidatorBase, ValidationContext
from ..api import ErrorCode, ValueKind
from ..nodes import JsonNode
from ..utils import SchemaKeywords


class StringValidator(ValidatorBase):
    """
    Validator for string values.
    """

    _kind = ValueKind.STRING
    _fields = ("pattern",)
    _hash = 4

    def __init__(self, pattern: Optional[str] = None):
        """
        Initialize a new string validator.

        Args:
            pattern: Regular expression the string must match
        """
        self.pattern = pattern

    @property
    def compiled_pattern(self) -> Optional[Pattern]:
        if self.pattern is None:
            return None
        return re.compile(self.pattern)

    def parse(self, key: str, value: JsonNode) -> bool:
        if key == SchemaKeywords.PATTERN:
            self.pattern = value.get_string()
            return True
        return False

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        if self.pattern is None:
            return True

        try:
            compiled = self.compiled_pattern
        except re.error as e:
            context.add_error(
                ErrorCode.SCHEMA_INVALID,
                f"Invalid regex pattern: {str(e)}",
                value=value,
                constraint=self
            )
            return False

        if not compiled.search(value):
            context.add_error(
                ErrorCode.PATTERN_MISMATCH,
                f"String '{value}' does not match pattern '{self.pattern}'",
                value=value,
                constraint=self
            )
            return False

        return True

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.pattern is not None:
            result[SchemaKeywords.PATTERN] = self.pattern
        return result
