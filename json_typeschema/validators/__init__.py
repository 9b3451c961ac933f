"""
Validator package initialization.
"""

from .base import ValidatorBase, ValidationContext
from .numbers import IntegerValidator, NumberValidator
from .strings import StringValidator
from .booleans import BooleanValidator
from .arrays import ArrayValidator
from .objects import ObjectValidator
from .enums import EnumValidator

__all__ = [
    "ValidatorBase",
    "ValidationContext",
    "IntegerValidator",
    "NumberValidator",
    "StringValidator",
    "BooleanValidator",
    "ArrayValidator",
    "ObjectValidator",
    "EnumValidator",
]
