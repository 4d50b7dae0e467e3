"""
Canonical descriptor kinds and id helpers.

Defines the closed set of descriptor variants. Each member's serialized value is the
descriptor ``id``: the discriminator used by the validation engine and the lookup key
presentation layers use to find a renderer.

Design principles
-----------------
1) One naming standard:
   - Enum member names: UPPER_SNAKE
   - Serialized values (descriptor ids, renderer keys): lower_snake
   - Configuration keys (``value_type``, ``inner_type``): lower_snake

2) Closed family:
   - Adding a variant means adding a member here, a frozen dataclass in
     ``shapekit.core.descriptors``, a local rule in ``shapekit.core.validate`` and a
     configuration shape in ``shapekit.core.derive``.

Examples
--------
>>> from shapekit.core.kinds import PRIMITIVE_KINDS, DescriptorKind, kind_from_value
>>> kind_from_value("union") is DescriptorKind.UNION
True
>>> DescriptorKind.LITERAL in PRIMITIVE_KINDS
True
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

from .errors import DescriptorError

__all__ = [
    "DescriptorKind",
    "PRIMITIVE_KINDS",
    "COMPOSITE_KINDS",
    "is_lower_snake",
    "kind_from_value",
]


class DescriptorKind(Enum):
    """
    All descriptor variants.

    Primitives carry no child descriptors; composites delegate validation to the
    descriptors held in their configuration or derived from it.
    """

    # Primitives
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    VOID = "void"
    ANY = "any"
    LITERAL = "literal"
    # Composites
    LIST = "list"
    RECORD = "record"
    OBJECT = "object"
    OPTIONAL = "optional"
    UNION = "union"
    TYPE = "type"
    # Domain composites
    FILE = "file"
    IMAGE = "image"


PRIMITIVE_KINDS: Final[frozenset[DescriptorKind]] = frozenset(
    {
        DescriptorKind.NULL,
        DescriptorKind.BOOLEAN,
        DescriptorKind.NUMBER,
        DescriptorKind.STRING,
        DescriptorKind.VOID,
        DescriptorKind.ANY,
        DescriptorKind.LITERAL,
    }
)

COMPOSITE_KINDS: Final[frozenset[DescriptorKind]] = frozenset(DescriptorKind) - PRIMITIVE_KINDS

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "value_type"), False otherwise.

    Examples:
      >>> is_lower_snake("inner_type")
      True
      >>> is_lower_snake("innerType")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def kind_from_value(value: str | DescriptorKind) -> DescriptorKind:
    """
    Resolve a descriptor id (or kind) to its DescriptorKind.

    Surrounding whitespace and upper case are tolerated ("  Union " -> UNION).

    Args:
      value (str | DescriptorKind): Descriptor id or kind.

    Returns:
      DescriptorKind: Matching kind.

    Raises:
      DescriptorError: If value is not a known descriptor id.
    """
    if isinstance(value, DescriptorKind):
        return value
    if not isinstance(value, str):
        raise DescriptorError(f"descriptor id must be a string (got: {value!r})")
    norm = value.strip().lower()
    if not is_lower_snake(norm):
        raise DescriptorError(f"descriptor id must be lower_snake (got: {value!r})")
    try:
        return DescriptorKind(norm)
    except ValueError as exc:
        raise DescriptorError(f"unknown descriptor id: {value!r}") from exc
