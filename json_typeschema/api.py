"""
Public API for the type-driven JSON Schema library.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, List, Optional


class ValueKind(Enum):
    """The JSON value categories a schema node can describe."""
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    # Enum types are described by a closed set of literals, never by "type"
    ENUM = "enum"

    @classmethod
    def from_name(cls, name: str) -> "ValueKind":
        """
        Look up a kind by its JSON Schema type name.

        Args:
            name: Type name such as "integer" (case-insensitive)

        Returns:
            The matching ValueKind

        Raises:
            UnsupportedTypeError: If the name is not a modeled kind
        """
        try:
            return cls(name.lower())
        except (ValueError, AttributeError):
            raise UnsupportedTypeError(f"Unknown JSON value kind: {name!r}") from None


class JsonSchemaError(Exception):
    """Base class for all errors raised by json_typeschema."""


class UnsupportedTypeError(JsonSchemaError):
    """A type (or member type) has no JSON value kind."""


class TypeMismatchError(JsonSchemaError):
    """Two validators of different variants were combined."""


class SchemaParseError(JsonSchemaError):
    """
    Schema input could not be decoded.

    Attributes:
        value: The raw value that caused the failure
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ValidationFailedError(JsonSchemaError):
    """
    A value handed to a validator for serialization does not conform.

    Attributes:
        errors: The validation errors that were found
    """

    def __init__(self, errors: List["ValidationError"]):
        self.errors = errors
        details = "; ".join(str(e) for e in errors)
        super().__init__(f"Value does not conform to schema: {details}")


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    TYPE_ERROR = auto()
    REQUIRED_PROPERTY_MISSING = auto()
    PATTERN_MISMATCH = auto()
    NUMBER_TOO_SMALL = auto()
    NUMBER_TOO_LARGE = auto()
    NUMBER_NOT_MULTIPLE = auto()
    ARRAY_TOO_SHORT = auto()
    ARRAY_TOO_LONG = auto()
    OBJECT_TOO_FEW_PROPERTIES = auto()
    ENUM_MISMATCH = auto()
    SCHEMA_INVALID = auto()


@dataclass
class ValidationError:
    """
    Represents a validation error with structured information.

    Attributes:
        code: The error code identifying the type of error
        path: JSON Pointer to the value that failed validation
        message: Human-readable error message
        schema_path: JSON Pointer to the schema location that triggered the error
        value: The value that failed validation
        constraint: The validator that was violated
    """
    code: ErrorCode
    path: str
    message: str
    schema_path: Optional[str] = None
    value: Any = None
    constraint: Any = None

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass
class ValidationResult:
    """
    Result of validating data against a validator tree.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


class JsonValidator:
    """
    Main entrypoint class for validating data against Python types.

    The validator tree for each type is built by the ValidatorFactory and
    the data is checked by a Validator.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new JSON validator.

        Args:
            verbose: Whether to include additional details in error messages
        """
        from .factory import ValidatorFactory
        from .validator import Validator

        self.verbose = verbose
        self.factory = ValidatorFactory
        self.validator = Validator(verbose=verbose)

    def validate(self, data: Any, t: Any) -> ValidationResult:
        """
        Validate data against the validator tree derived from a type.

        Args:
            data: The JSON data to validate
            t: The Python type describing the data

        Returns:
            ValidationResult containing validation status and any errors
        """
        validator = self.factory.create_from_type(t)
        return self.validator.validate(data, validator)
