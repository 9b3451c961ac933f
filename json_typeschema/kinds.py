"""
Mapping from Python types to JSON value kinds.
"""

import collections.abc
import decimal
import enum
import inspect
from typing import Any, Annotated, Optional, Tuple, Union, get_args, get_origin
from types import UnionType

from .api import UnsupportedTypeError, ValueKind

# Exact matches only: bool must not resolve through int, nor IntEnum through int
_TYPE_MAP = {
    int: ValueKind.INTEGER,
    float: ValueKind.NUMBER,
    decimal.Decimal: ValueKind.NUMBER,
    str: ValueKind.STRING,
    bool: ValueKind.BOOLEAN,
}

_ARRAY_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
)


def unwrap_type(t: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """
    Strip Annotated and Optional wrappers from a type.

    Args:
        t: A type or typing annotation

    Returns:
        The bare type and the Annotated metadata found on the way
    """
    metadata: Tuple[Any, ...] = ()
    while True:
        origin = get_origin(t)
        if origin is Annotated:
            args = get_args(t)
            t = args[0]
            metadata += tuple(args[1:])
        elif origin is Union or origin is UnionType:
            args = [a for a in get_args(t) if a is not type(None)]
            if len(args) != 1:
                return t, metadata
            t = args[0]
        else:
            return t, metadata


def is_enum(t: Any) -> bool:
    """Check if a type is an Enum."""
    return inspect.isclass(t) and issubclass(t, enum.Enum)


def is_array_like(t: Any) -> bool:
    """Check if a type is a sequence (list, tuple, set or their generic forms)."""
    if t in _ARRAY_ORIGINS:
        return True
    return get_origin(t) in _ARRAY_ORIGINS


def element_type_of(t: Any) -> Optional[Any]:
    """
    Get the element type of an array-like type.

    Args:
        t: An array-like type such as list[int] or tuple[str, ...]

    Returns:
        The element type, or None for unparameterized sequences

    Raises:
        UnsupportedTypeError: If a fixed-length tuple mixes element types
    """
    t, _ = unwrap_type(t)
    args = get_args(t)
    if not args:
        return None
    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    if any(arg != args[0] for arg in args[1:]):
        raise UnsupportedTypeError(f"No single element type for {t!r}")
    return args[0]


def kind_of(t: Any) -> ValueKind:
    """
    Get the JSON value kind of a Python type.

    Exact builtin matches win, then enums, then sequences, then classes.
    Enums are checked before sequences so an enum is never reported as an
    array.

    Args:
        t: A type or typing annotation

    Returns:
        The JSON value kind

    Raises:
        UnsupportedTypeError: If the type has no JSON representation
    """
    t, _ = unwrap_type(t)

    try:
        kind = _TYPE_MAP.get(t)
    except TypeError:
        kind = None
    if kind is not None:
        return kind

    if is_enum(t):
        return ValueKind.ENUM

    if is_array_like(t):
        return ValueKind.ARRAY

    # typing.Any is a class on newer interpreters
    if t is not Any and (get_origin(t) is dict or inspect.isclass(t)):
        return ValueKind.OBJECT

    raise UnsupportedTypeError(f"No JSON value kind for type {t!r}")
