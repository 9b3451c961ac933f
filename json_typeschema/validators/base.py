"""
Base validator classes.
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Tuple

from ..api import ErrorCode, TypeMismatchError, ValidationError, ValidationFailedError, ValueKind
from ..nodes import JsonNode
from ..utils import JsonPointer, TypeUtils


class ValidationContext:
    """
    Context for validation operations.

    This class maintains state during the validation process,
    including the current path and the collected errors.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new validation context.

        Args:
            verbose: Whether to include additional details in errors
        """
        self.errors: List[ValidationError] = []
        self.path_parts: List[str] = []
        self.schema_path_parts: List[str] = []
        self.verbose = verbose

    @property
    def path(self) -> str:
        """JSON Pointer to the value currently being validated."""
        return JsonPointer.from_parts(self.path_parts)

    @property
    def schema_path(self) -> str:
        """JSON Pointer to the schema node currently being applied."""
        return JsonPointer.from_parts(self.schema_path_parts)

    def add_error(self,
                  code: ErrorCode,
                  message: str,
                  value: Any = None,
                  constraint: Any = None) -> None:
        """
        Add a validation error to the context.

        Args:
            code: Error code
            message: Error message
            value: Value that failed validation
            constraint: Validator that was violated
        """
        error = ValidationError(
            code=code,
            path=self.path,
            message=message,
            schema_path=self.schema_path,
            value=value,
            constraint=constraint
        )
        self.errors.append(error)

    def with_path(self, *parts: Any):
        """
        Context manager descending into a child value.

        Args:
            parts: Data path segment, followed by the schema path segments

        Returns:
            Context manager
        """
        return PathContext(self, parts[0], parts[1:])

    def __str__(self) -> str:
        return f"ValidationContext(path={self.path}, errors={len(self.errors)})"


class PathContext:
    """Context manager for temporarily descending into a child value."""

    def __init__(self, context: ValidationContext, part: Any, schema_parts: Tuple[Any, ...]):
        self.context = context
        self.part = part
        self.schema_parts = schema_parts

    def __enter__(self):
        self.context.path_parts.append(str(self.part))
        self.context.schema_path_parts.extend(str(p) for p in self.schema_parts)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.context.path_parts.pop()
        if self.schema_parts:
            del self.context.schema_path_parts[-len(self.schema_parts):]


class ValidatorBase(ABC):
    """
    Base class for all schema validators.

    Each variant owns the constraint fields named in ``_fields``. Equality
    compares those fields only and is never true across variants.
    """

    _kind: ClassVar[ValueKind]
    _fields: ClassVar[Tuple[str, ...]] = ()
    _hash: ClassVar[int] = 0

    @property
    def value_kind(self) -> ValueKind:
        return self._kind

    @abstractmethod
    def parse(self, key: str, value: JsonNode) -> bool:
        """
        Read one constraint keyword of a schema document.

        Args:
            key: Schema keyword
            value: Node holding the keyword's value

        Returns:
            True if the keyword belongs to this validator
        """

    def assign(self, other: "ValidatorBase") -> "ValidatorBase":
        """
        Patch this validator with the constraints of another.

        Args:
            other: Validator of the same variant

        Returns:
            A new validator carrying the constraints of ``other``

        Raises:
            TypeMismatchError: If ``other`` is a different variant
        """
        if type(other) is not type(self):
            raise TypeMismatchError(
                f"Cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        patched = copy.copy(self)
        for name in self._fields:
            setattr(patched, name, copy.copy(getattr(other, name)))
        return patched

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self._fields)

    def __hash__(self) -> int:
        return self._hash

    def validate(self, value: Any, context: ValidationContext) -> bool:
        """
        Validate a value against this validator.

        Args:
            value: Value to validate
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        if not self._validate_type(value, context):
            return False
        return self._validate_type_specific(value, context)

    def _validate_type(self, value: Any, context: ValidationContext) -> bool:
        expected = self._kind.value
        actual = TypeUtils.get_json_type(value)
        if actual == expected or (expected == "number" and actual == "integer"):
            return True
        context.add_error(
            ErrorCode.TYPE_ERROR,
            f"Expected {expected}, got {actual}",
            value=value,
            constraint=self
        )
        return False

    @abstractmethod
    def _validate_type_specific(self, value: Any, context: ValidationContext) -> bool:
        """
        Validate variant-specific constraints.

        Called after the type check has passed.
        """

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the JSON Schema keywords of this validator.

        Returns:
            Dictionary of schema keywords
        """
        return {"type": self._kind.value}

    def _to_json_value(self, value: Any) -> Any:
        return value

    def dump(self, value: Any) -> Any:
        """
        Convert a value to plain JSON data and check that it conforms.

        Args:
            value: Python value described by this validator

        Returns:
            JSON-compatible data

        Raises:
            ValidationFailedError: If the converted value does not conform
        """
        data = self._to_json_value(value)
        context = ValidationContext()
        if not self.validate(data, context):
            raise ValidationFailedError(context.errors)
        return data

    def serialize(self, value: Any) -> str:
        """Write a conforming value as JSON text."""
        return json.dumps(self.dump(value), ensure_ascii=False)

    def __str__(self) -> str:
        parts = []
        for name in self._fields:
            value = getattr(self, name)
            if value is None or value is False or value in ([], {}, ()):
                continue
            parts.append(f"{name}={value!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"

    def __repr__(self) -> str:
        return self.__str__()
