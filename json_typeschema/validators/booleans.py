"""
Boolean validator implementation.
"""

from typing import Any

from .base import ValidatorBase, ValidationContext
from ..api import ValueKind
from ..nodes import JsonNode


class BooleanValidator(ValidatorBase):
    """
    Validator for boolean values.
    """

    _kind = ValueKind.BOOLEAN
    _hash = 5

    def parse(self, key: str, value: JsonNode) -> bool:
        return False

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        # No additional constraints for booleans
        return True
