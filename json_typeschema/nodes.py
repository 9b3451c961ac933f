"""
Node tree over parsed JSON text.
"""

import json
from enum import Enum, auto
from typing import Any, Iterator, Optional, Tuple, Union

from .api import SchemaParseError
from .utils import TypeUtils

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class JsonValueType(Enum):
    """Runtime kind of a parsed JSON value."""
    NULL = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


class JsonNode:
    """
    A parsed JSON value with keyed access and typed extraction.

    Typed extraction fails with SchemaParseError when the node holds a
    value of another kind.
    """

    def __init__(self, value: Any):
        self.value = value

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "JsonNode":
        """
        Parse JSON text into a node tree.

        Args:
            text: JSON text, bytes are decoded as UTF-8

        Returns:
            The root node

        Raises:
            SchemaParseError: If the text is not valid JSON
        """
        try:
            if isinstance(text, (bytes, bytearray)):
                text = text.decode("utf-8")
            return cls(json.loads(text))
        except UnicodeDecodeError as e:
            raise SchemaParseError(f"Input is not valid UTF-8: {e}", text) from e
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"Failed to parse JSON: {e.msg} at position {e.pos}", text) from e

    @property
    def value_type(self) -> JsonValueType:
        value = self.value
        if value is None:
            return JsonValueType.NULL
        if isinstance(value, bool):
            return JsonValueType.BOOLEAN
        if isinstance(value, int):
            return JsonValueType.INTEGER
        if isinstance(value, float):
            return JsonValueType.NUMBER
        if isinstance(value, str):
            return JsonValueType.STRING
        if isinstance(value, list):
            return JsonValueType.ARRAY
        return JsonValueType.OBJECT

    def _expect(self, *types: JsonValueType) -> None:
        if self.value_type not in types:
            expected = " or ".join(t.name.lower() for t in types)
            raise SchemaParseError(
                f"Expected {expected}, got {TypeUtils.get_json_type(self.value)}: {self.value!r}",
                self.value
            )

    def __getitem__(self, key: Union[str, int]) -> "JsonNode":
        if isinstance(key, int):
            self._expect(JsonValueType.ARRAY)
        else:
            self._expect(JsonValueType.OBJECT)
        return JsonNode(self.value[key])

    def __contains__(self, key: str) -> bool:
        return self.value_type is JsonValueType.OBJECT and key in self.value

    def get(self, key: str) -> Optional["JsonNode"]:
        """Get a child node of an object, or None when the key is absent."""
        self._expect(JsonValueType.OBJECT)
        if key not in self.value:
            return None
        return JsonNode(self.value[key])

    @property
    def array_items(self) -> Iterator["JsonNode"]:
        self._expect(JsonValueType.ARRAY)
        return (JsonNode(item) for item in self.value)

    @property
    def object_items(self) -> Iterator[Tuple[str, "JsonNode"]]:
        self._expect(JsonValueType.OBJECT)
        return ((key, JsonNode(item)) for key, item in self.value.items())

    def get_string(self) -> str:
        self._expect(JsonValueType.STRING)
        return self.value

    def get_int32(self) -> int:
        self._expect(JsonValueType.INTEGER)
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise SchemaParseError(f"Integer out of 32-bit range: {self.value}", self.value)
        return self.value

    def get_double(self) -> float:
        self._expect(JsonValueType.INTEGER, JsonValueType.NUMBER)
        return float(self.value)

    def get_boolean(self) -> bool:
        self._expect(JsonValueType.BOOLEAN)
        return self.value

    def __repr__(self) -> str:
        return f"JsonNode({self.value!r})"
