"""
Read-only traversal of descriptor trees for external tooling.

Presentation layers and tooling walk a schema through these helpers instead of the
validation machinery: ``children`` lists the child descriptors a variant holds in its
configuration, ``walk`` visits a whole tree, and ``describe`` renders a JSON-ready
``DescriptorInfo``.

Notes:
    - Derived shapes are not children; they are recomputed by the engine on demand.
    - ``walk`` skips descriptors it has already visited (by identity), so it terminates
      on cyclic graphs. ``describe`` raises DescriptorError on a cycle instead.

Examples:
    >>> from shapekit.core.descriptors import NumberType, ObjectType, StringType
    >>> from shapekit.core.introspect import children, describe
    >>> [key for key, _ in children(ObjectType({"a": StringType(), "b": NumberType()}))]
    ['a', 'b']
    >>> describe(StringType().list()).children[0].descriptor.id
    'string'
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .descriptors import (
    Descriptor,
    ListType,
    ObjectType,
    OptionalType,
    RecordType,
    TypeType,
    UnionType,
)
from .errors import DescriptorError
from .typing import Path, PathKey

__all__ = [
    "DescriptorInfo",
    "DescriptorChild",
    "children",
    "walk",
    "describe",
]


class DescriptorChild(BaseModel):
    """Child slot of a described descriptor (field name, config key, or union index)."""

    model_config = ConfigDict(extra="forbid")

    key: PathKey
    descriptor: DescriptorInfo


class DescriptorInfo(BaseModel):
    """
    JSON-ready description of a descriptor tree.

    Attributes:
        id (str): Descriptor id.
        configuration (Any): Scalar configuration for descriptors without children
            (literal value, file tag mapping); None otherwise.
        children (list[DescriptorChild]): Child descriptors in declaration order.
    """

    model_config = ConfigDict(extra="forbid")

    id: str
    configuration: Any = None
    children: list[DescriptorChild] = Field(default_factory=list)


DescriptorChild.model_rebuild()
DescriptorInfo.model_rebuild()


def children(descriptor: Descriptor) -> tuple[tuple[PathKey, Descriptor], ...]:
    """
    Child descriptors held in ``descriptor``'s configuration.

    Returns:
        tuple[tuple[str | int, Descriptor], ...]: ``(key, child)`` pairs. Keys are field
        names for objects, ``"value_type"``/``"inner_type"``/``"described"`` for wrappers
        and indices for unions.
    """
    match descriptor:
        case ListType(value_type=child) | RecordType(value_type=child):
            return (("value_type", child),)
        case OptionalType(inner_type=child):
            return (("inner_type", child),)
        case ObjectType(fields=fields):
            return fields
        case UnionType(alternatives=alternatives):
            return tuple(enumerate(alternatives))
        case TypeType(described=child):
            return (("described", child),)
        case _:
            return ()


def walk(descriptor: Descriptor) -> Iterator[tuple[Path, Descriptor]]:
    """
    Preorder traversal yielding ``(path, descriptor)`` for every reachable descriptor.

    Each descriptor instance is yielded once, at the first path that reaches it.
    """
    seen: set[int] = set()
    stack: list[tuple[Path, Descriptor]] = [((), descriptor)]
    while stack:
        path, current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield path, current
        for key, child in reversed(children(current)):
            stack.append(((*path, key), child))


def _describe(descriptor: Descriptor, active: set[int]) -> DescriptorInfo:
    marker = id(descriptor)
    if marker in active:
        raise DescriptorError(f"cannot describe cyclic descriptor graph at {descriptor.id!r}")
    kids = children(descriptor)
    if not kids:
        configuration = descriptor.configuration
        return DescriptorInfo(id=descriptor.id, configuration=configuration)
    active.add(marker)
    try:
        described = [DescriptorChild(key=key, descriptor=_describe(child, active)) for key, child in kids]
    finally:
        active.discard(marker)
    return DescriptorInfo(id=descriptor.id, children=described)


def describe(descriptor: Descriptor) -> DescriptorInfo:
    """
    Describe a descriptor tree as a pydantic model.

    Raises:
        DescriptorError: If the descriptor graph is cyclic.
    """
    return _describe(descriptor, set())
