"""
Per-member constraint descriptors and declared-member enumeration.

Constraints are attached to members with ``typing.Annotated``::

    @json_schema_object(title="Person")
    @dataclass
    class Person:
        firstName: Annotated[str, JsonSchemaField(required=True)]
        age: Annotated[int, JsonSchemaField(description="Age in years", minimum=0)]
        tags: Annotated[List[str], JsonSchemaField(min_items=1), ItemJsonSchemaField(pattern="^[a-z]+$")]

Properties carry their descriptors on the getter's return annotation.
"""

import dataclasses
import enum
import typing
from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Optional, Tuple, Union

from .kinds import unwrap_type

TITLE_ATTRIBUTE = "__json_schema_title__"

Number = Union[int, float]


class ExportFlags(enum.Flag):
    """Which members of a class are walked when building an object schema."""
    NONE = 0
    PUBLIC_FIELDS = 1
    PUBLIC_PROPERTIES = 2
    DEFAULT = PUBLIC_FIELDS | PUBLIC_PROPERTIES


@dataclass(frozen=True)
class BaseJsonSchemaField:
    """
    Constraints shared by member and array-item descriptors.

    A value of None means the constraint is not set. Zero is a real bound.
    """
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    multiple_of: Optional[Number] = None
    pattern: Optional[str] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    min_properties: Optional[int] = None

    def __post_init__(self):
        if self.multiple_of is not None and self.multiple_of <= 0:
            raise ValueError(f"multiple_of must be positive, got {self.multiple_of}")
        for name in ("min_items", "max_items", "min_properties"):
            count = getattr(self, name)
            if count is not None and count < 0:
                raise ValueError(f"{name} must not be negative, got {count}")


@dataclass(frozen=True)
class JsonSchemaField(BaseJsonSchemaField):
    """Constraints and metadata for one member of a class."""
    required: bool = False
    description: Optional[str] = None
    export_flags: ExportFlags = ExportFlags.DEFAULT


@dataclass(frozen=True)
class ItemJsonSchemaField(BaseJsonSchemaField):
    """Constraints for the elements of an array member."""


class Member(NamedTuple):
    """A declared member of a class together with its descriptors."""
    name: str
    type: Any
    field: Optional[JsonSchemaField]
    item_field: Optional[ItemJsonSchemaField]


def json_schema_object(title: Optional[str] = None):
    """
    Class decorator recording the display title of a type's schema.

    Args:
        title: Schema title, defaults to the class name
    """
    def decorator(cls):
        setattr(cls, TITLE_ATTRIBUTE, title if title is not None else cls.__name__)
        return cls
    return decorator


def get_title(t: Any) -> str:
    """Get the schema title of a type."""
    t, _ = unwrap_type(t)
    # Read from the class itself so subclasses do not inherit a base title
    title = vars(t).get(TITLE_ATTRIBUTE) if isinstance(t, type) else None
    if title is not None:
        return title
    return getattr(t, "__name__", None) or str(t)


def get_fields(annotation: Any) -> Tuple[Optional[JsonSchemaField], Optional[ItemJsonSchemaField]]:
    """
    Extract the member and item descriptors from an annotation.

    Args:
        annotation: A member annotation, possibly Annotated

    Returns:
        The member descriptor and the array-item descriptor (either may be None)
    """
    _, metadata = unwrap_type(annotation)
    field = next((m for m in metadata if isinstance(m, JsonSchemaField)), None)
    item_field = next((m for m in metadata if isinstance(m, ItemJsonSchemaField)), None)
    return field, item_field


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _iter_fields(t: type) -> Iterator[Member]:
    hints = typing.get_type_hints(t, include_extras=True)
    for name, annotation in hints.items():
        if not _is_public(name):
            continue
        if typing.get_origin(annotation) is typing.ClassVar or annotation is typing.ClassVar:
            continue
        if isinstance(annotation, dataclasses.InitVar):
            continue
        field, item_field = get_fields(annotation)
        # Public instance fields without a descriptor are present but unconstrained
        yield Member(name, annotation, field or JsonSchemaField(), item_field)


def _iter_properties(t: type, require_property_field: bool) -> Iterator[Member]:
    # Names are ordered base class first; each resolves to its most derived definition
    names = dict.fromkeys(name for klass in reversed(t.__mro__) for name in vars(klass))
    for name in names:
        if not _is_public(name):
            continue
        attr = next(vars(klass)[name] for klass in t.__mro__ if name in vars(klass))
        if not isinstance(attr, property) or attr.fget is None:
            continue
        annotation = typing.get_type_hints(attr.fget, include_extras=True).get("return")
        if annotation is None:
            continue
        field, item_field = get_fields(annotation)
        if field is None and require_property_field:
            continue
        yield Member(name, annotation, field, item_field)


def iter_members(t: Any,
                 export_flags: ExportFlags = ExportFlags.DEFAULT,
                 require_property_field: bool = False) -> Iterator[Member]:
    """
    Enumerate the declared members of a class.

    Fields come first, then properties, each in declaration order with base
    classes before subclasses.

    Args:
        t: The class to inspect
        export_flags: Which kinds of members to enumerate
        require_property_field: Skip properties that carry no JsonSchemaField

    Yields:
        One Member per enumerated field or property
    """
    t, _ = unwrap_type(t)
    if not isinstance(t, type):
        return

    if ExportFlags.PUBLIC_FIELDS in export_flags:
        yield from _iter_fields(t)

    if ExportFlags.PUBLIC_PROPERTIES in export_flags:
        yield from _iter_properties(t, require_property_field)
