"""
Utility classes shared by the schema builder, parser and validators.
"""

from typing import Any, List


class JsonPointer:
    """
    Utility class for building JSON Pointers (RFC 6901).

    Validation errors locate the failing value with a JSON Pointer.
    """

    @staticmethod
    def from_parts(parts: List[str]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: List of path segments

        Returns:
            JSON Pointer string
        """
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: str) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # Replace ~ with ~0 and / with ~1
        return str(part).replace("~", "~0").replace("/", "~1")


class TypeUtils:
    """Utilities for working with JSON values."""

    @staticmethod
    def get_json_type(value: Any) -> str:
        """
        Get the JSON Schema type name for a Python value.

        Args:
            value: Python value

        Returns:
            JSON Schema type name
        """
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "boolean"
        elif isinstance(value, int):
            return "integer"
        elif isinstance(value, float):
            return "number"
        elif isinstance(value, str):
            return "string"
        elif isinstance(value, list):
            return "array"
        elif isinstance(value, dict):
            return "object"
        else:
            return type(value).__name__


class SchemaKeywords:
    """Constants for the JSON Schema keywords this library models."""

    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    MULTIPLE_OF = "multipleOf"

    # String keywords
    PATTERN = "pattern"

    # Array keywords
    ITEMS = "items"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"

    # Object keywords
    PROPERTIES = "properties"
    REQUIRED = "required"
    MIN_PROPERTIES = "minProperties"

    # Enumerations
    ENUM = "enum"
    ANY_OF = "anyOf"

    # Schema metadata
    TITLE = "title"
    DESCRIPTION = "description"
    SCHEMA = "$schema"

    METADATA = frozenset({TITLE, DESCRIPTION, TYPE, SCHEMA})
