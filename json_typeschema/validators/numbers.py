"""
Integer and number validator implementations.

See http://json-schema.org/latest/json-schema-validation.html#numeric
"""

import decimal
from abc import abstractmethod
from typing import Any, Dict, Optional, Union

from .base import ValidatorBase, ValidationContext
from ..api import ErrorCode, ValueKind
from ..nodes import JsonNode
from ..utils import SchemaKeywords

Number = Union[int, float]


class _NumericValidator(ValidatorBase):
    """
    Shared implementation of the numeric keywords.

    Exclusivity flags only take effect when the matching bound is set.
    """

    _fields = ("multiple_of", "maximum", "exclusive_maximum", "minimum", "exclusive_minimum")

    def __init__(self,
                 minimum: Optional[Number] = None,
                 maximum: Optional[Number] = None,
                 exclusive_minimum: bool = False,
                 exclusive_maximum: bool = False,
                 multiple_of: Optional[Number] = None):
        self.minimum = minimum
        self.maximum = maximum
        self.exclusive_minimum = exclusive_minimum
        self.exclusive_maximum = exclusive_maximum
        self.multiple_of = multiple_of

    @abstractmethod
    def _read_number(self, value: JsonNode) -> Number:
        """Read a numeric keyword value in this variant's number type."""

    def parse(self, key: str, value: JsonNode) -> bool:
        if key == SchemaKeywords.MULTIPLE_OF:
            self.multiple_of = self._read_number(value)
        elif key == SchemaKeywords.MAXIMUM:
            self.maximum = self._read_number(value)
        elif key == SchemaKeywords.EXCLUSIVE_MAXIMUM:
            self.exclusive_maximum = value.get_boolean()
        elif key == SchemaKeywords.MINIMUM:
            self.minimum = self._read_number(value)
        elif key == SchemaKeywords.EXCLUSIVE_MINIMUM:
            self.exclusive_minimum = value.get_boolean()
        else:
            return False
        return True

    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        valid = True

        if self.minimum is not None:
            if self.exclusive_minimum and value <= self.minimum:
                context.add_error(
                    ErrorCode.NUMBER_TOO_SMALL,
                    f"Value {value} must be greater than {self.minimum}",
                    value=value,
                    constraint=self
                )
                valid = False
            elif not self.exclusive_minimum and value < self.minimum:
                context.add_error(
                    ErrorCode.NUMBER_TOO_SMALL,
                    f"Value {value} must be greater than or equal to {self.minimum}",
                    value=value,
                    constraint=self
                )
                valid = False

        if self.maximum is not None:
            if self.exclusive_maximum and value >= self.maximum:
                context.add_error(
                    ErrorCode.NUMBER_TOO_LARGE,
                    f"Value {value} must be less than {self.maximum}",
                    value=value,
                    constraint=self
                )
                valid = False
            elif not self.exclusive_maximum and value > self.maximum:
                context.add_error(
                    ErrorCode.NUMBER_TOO_LARGE,
                    f"Value {value} must be less than or equal to {self.maximum}",
                    value=value,
                    constraint=self
                )
                valid = False

        if self.multiple_of is not None:
            if isinstance(value, float) or isinstance(self.multiple_of, float):
                # Floating point remainders are compared with a tolerance
                remainder = value % self.multiple_of
                is_multiple = remainder < 1e-10 or abs(remainder - self.multiple_of) < 1e-10
            else:
                is_multiple = value % self.multiple_of == 0

            if not is_multiple:
                context.add_error(
                    ErrorCode.NUMBER_NOT_MULTIPLE,
                    f"Value {value} is not a multiple of {self.multiple_of}",
                    value=value,
                    constraint=self
                )
                valid = False

        return valid

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.multiple_of is not None:
            result[SchemaKeywords.MULTIPLE_OF] = self.multiple_of
        if self.minimum is not None:
            result[SchemaKeywords.MINIMUM] = self.minimum
            if self.exclusive_minimum:
                result[SchemaKeywords.EXCLUSIVE_MINIMUM] = True
        if self.maximum is not None:
            result[SchemaKeywords.MAXIMUM] = self.maximum
            if self.exclusive_maximum:
                result[SchemaKeywords.EXCLUSIVE_MAXIMUM] = True
        return result


class IntegerValidator(_NumericValidator):
    """Validator for integer values."""

    _kind = ValueKind.INTEGER
    _hash = 2

    def _read_number(self, value: JsonNode) -> int:
        return value.get_int32()

    def _to_json_value(self, value: Any) -> Any:
        # IntEnum and friends are written as their plain integer value
        if isinstance(value, int) and not isinstance(value, bool):
            return int(value)
        return value


class NumberValidator(_NumericValidator):
    """Validator for number values, integers included."""

    _kind = ValueKind.NUMBER
    _hash = 3

    def _read_number(self, value: JsonNode) -> float:
        return value.get_double()

    def _to_json_value(self, value: Any) -> Any:
        if isinstance(value, decimal.Decimal):
            return float(value)
        return value
