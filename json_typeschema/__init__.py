#!/usr/bin/env python3
"""
Type-driven JSON Schema

This package derives JSON Schema descriptions and matching validator trees
from annotated Python classes, and reads JSON Schema documents back into the
same model.
"""

import logging

from .api import (
    ErrorCode,
    JsonSchemaError,
    JsonValidator,
    SchemaParseError,
    TypeMismatchError,
    UnsupportedTypeError,
    ValidationError,
    ValidationFailedError,
    ValidationResult,
    ValueKind,
)
from .factory import ValidatorFactory
from .fields import ExportFlags, ItemJsonSchemaField, JsonSchemaField, json_schema_object
from .kinds import kind_of
from .nodes import JsonNode, JsonValueType
from .schema import Schema, SchemaProperty, SchemaPropertyItem
from .validator import Validator
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("json_typeschema")

# Export public classes and functions
__all__ = [
    "ErrorCode",
    "ExportFlags",
    "ItemJsonSchemaField",
    "JsonNode",
    "JsonSchemaError",
    "JsonSchemaField",
    "JsonValidator",
    "JsonValueType",
    "Schema",
    "SchemaParseError",
    "SchemaProperty",
    "SchemaPropertyItem",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "ValidationError",
    "ValidationFailedError",
    "ValidationResult",
    "Validator",
    "ValidatorFactory",
    "ValueKind",
    "json_schema_object",
    "kind_of",
]
