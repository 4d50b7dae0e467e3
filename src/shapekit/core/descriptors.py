"""
Frozen descriptor variants: the schema nodes of shapekit.

Each descriptor is an immutable value made of a kind (whose value is the descriptor
``id``) and a variant-specific configuration. Descriptors are composed at schema
definition time, usually as module-level constants, and never change afterwards:
``optional()`` and ``list()`` always build a new descriptor.

Responsibilities
- Define one frozen, slotted dataclass per DescriptorKind.
- Expose the inspectable ``configuration`` of each variant (child descriptors, literal
  value, file tag) so external tooling can walk a tree.
- Check the structural type of configuration at construction (children must be
  descriptors, literals must be primitives).

Not here
- Local validation rules live in ``shapekit.core.validate`` and are dispatched by
  pattern matching over these classes.
- Derived shapes and configuration shapes live in ``shapekit.core.derive``.

Examples:
    >>> from shapekit.core.descriptors import NumberType, ObjectType, StringType
    >>> person = ObjectType({"name": StringType(), "age": NumberType()})
    >>> person.validate({"name": "Al", "age": 30})
    True
    >>> person.validate({"name": "Al"})
    False
    >>> person.list().id
    'list'
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar

from .errors import DescriptorError
from .kinds import DescriptorKind
from .typing import DescriptorId, Primitive

__all__ = [
    "Descriptor",
    "NullType",
    "BooleanType",
    "NumberType",
    "StringType",
    "VoidType",
    "AnyType",
    "LiteralType",
    "ListType",
    "RecordType",
    "ObjectType",
    "OptionalType",
    "UnionType",
    "TypeType",
    "FileType",
    "ImageType",
]


def _require_descriptor(value: Any, what: str, kind: DescriptorKind) -> None:
    if not isinstance(value, Descriptor):
        raise DescriptorError(f"{kind.value}: {what} must be a Descriptor (got: {value!r})")


@dataclass(frozen=True, slots=True)
class Descriptor:
    """
    Base of every descriptor variant.

    Attributes:
        kind (DescriptorKind): Variant tag, fixed per subclass.

    Notes:
        - ``id`` is ``kind.value``; it is the renderer lookup key.
        - ``configuration_descriptor`` and ``derived_descriptor`` are computed on access
          from pure functions; nothing is cached on the instance.
    """

    kind: ClassVar[DescriptorKind]

    @property
    def id(self) -> DescriptorId:
        return DescriptorId(self.kind.value)

    @property
    def configuration(self) -> Any:
        """Variant-specific configuration; None for variants without any."""
        return None

    @property
    def configuration_descriptor(self) -> Descriptor:
        """Descriptor that accepts this variant's valid configuration values."""
        from .derive import configuration_shape

        return configuration_shape(self.kind)

    @property
    def derived_descriptor(self) -> Descriptor | None:
        """Descriptor a value must satisfy before the local rule runs, if any."""
        from .derive import derive_shape

        return derive_shape(self)

    def validate(self, value: Any) -> bool:
        """Return whether value conforms to this descriptor. Never raises for wrong shapes."""
        from .validate import validate

        return validate(self, value)

    def optional(self) -> OptionalType:
        """Wrap this descriptor so that nil is also accepted."""
        return OptionalType(self)

    def list(self) -> ListType:
        """Build a list descriptor whose elements are this descriptor."""
        return ListType(self)


# ============================================================================
# Primitives
# ============================================================================


@dataclass(frozen=True, slots=True)
class NullType(Descriptor):
    """Accepts only the nil sentinel (None)."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.NULL


@dataclass(frozen=True, slots=True)
class BooleanType(Descriptor):
    """Accepts True and False."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class NumberType(Descriptor):
    """Accepts finite int/float values; bool, NaN and infinities are rejected."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.NUMBER


@dataclass(frozen=True, slots=True)
class StringType(Descriptor):
    """Accepts str values."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.STRING


@dataclass(frozen=True, slots=True)
class VoidType(Descriptor):
    """
    Accepts the absent value (None).

    Void is the configuration descriptor of every variant that takes no configuration.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.VOID


@dataclass(frozen=True, slots=True)
class AnyType(Descriptor):
    """Accepts every value, including None."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.ANY


@dataclass(frozen=True, slots=True)
class LiteralType(Descriptor):
    """
    Accepts exactly one primitive value.

    Attributes:
        value (str | int | float | bool): Expected value. Equality is strict: True does
            not match 1 and "1" does not match 1, while 1 matches 1.0.

    Raises:
        DescriptorError: If value is not a primitive, or is a NaN or infinite float.

    Notes:
        Equality and hashing follow the same strictness as validation, so
        ``LiteralType(1) != LiteralType(True)`` while ``LiteralType(1) == LiteralType(1.0)``.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.LITERAL

    value: Primitive

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, int, float, bool)):
            raise DescriptorError(f"literal: value must be str, int, float or bool (got: {self.value!r})")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise DescriptorError(f"literal: numeric value must be finite (got: {self.value!r})")

    def _key(self) -> tuple[bool, Primitive]:
        return (isinstance(self.value, bool), self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralType):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def configuration(self) -> Primitive:
        return self.value


# ============================================================================
# Composites
# ============================================================================


@dataclass(frozen=True, slots=True)
class ListType(Descriptor):
    """
    Sequence (list or tuple) whose every element satisfies ``value_type``.

    Attributes:
        value_type (Descriptor): Element descriptor.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.LIST

    value_type: Descriptor

    def __post_init__(self) -> None:
        _require_descriptor(self.value_type, "value_type", self.kind)

    @property
    def configuration(self) -> dict[str, Descriptor]:
        return {"value_type": self.value_type}


@dataclass(frozen=True, slots=True)
class RecordType(Descriptor):
    """
    Mapping with arbitrary str keys whose every value satisfies ``value_type``.

    Attributes:
        value_type (Descriptor): Value descriptor.

    Notes:
        None is rejected: an empty mapping and an absent mapping are different things.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.RECORD

    value_type: Descriptor

    def __post_init__(self) -> None:
        _require_descriptor(self.value_type, "value_type", self.kind)

    @property
    def configuration(self) -> dict[str, Descriptor]:
        return {"value_type": self.value_type}


@dataclass(frozen=True, slots=True)
class ObjectType(Descriptor):
    """
    Open object: a mapping whose declared fields each satisfy their descriptor.

    Attributes:
        fields (tuple[tuple[str, Descriptor], ...]): Declared fields in insertion order.
            The constructor also accepts a mapping of field name to descriptor.

    Raises:
        DescriptorError: If a field name is not a str, a field name repeats, or a field
            value is not a Descriptor.

    Notes:
        - Undeclared keys of a validated value are ignored.
        - An absent field is looked up as None, so only descriptors that accept None
          (Optional, Null, Void, Any) make a field optional.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.OBJECT

    fields: tuple[tuple[str, Descriptor], ...]

    def __post_init__(self) -> None:
        raw = self.fields
        items: Iterable[Any] = raw.items() if isinstance(raw, Mapping) else raw
        seen: set[str] = set()
        normalized: list[tuple[str, Descriptor]] = []
        for item in items:
            try:
                name, descriptor = item
            except (TypeError, ValueError) as exc:
                raise DescriptorError(f"object: fields must be (name, descriptor) pairs (got: {item!r})") from exc
            if not isinstance(name, str):
                raise DescriptorError(f"object: field names must be str (got: {name!r})")
            if name in seen:
                raise DescriptorError(f"object: duplicate field name {name!r}")
            _require_descriptor(descriptor, f"field {name!r}", self.kind)
            seen.add(name)
            normalized.append((name, descriptor))
        object.__setattr__(self, "fields", tuple(normalized))

    @property
    def shape(self) -> Mapping[str, Descriptor]:
        """Read-only view of field name -> descriptor, in declaration order."""
        return MappingProxyType(dict(self.fields))

    @property
    def configuration(self) -> dict[str, Descriptor]:
        return dict(self.fields)

    def extend(self, extra: Mapping[str, Descriptor]) -> ObjectType:
        """Return a new object with ``extra`` fields added or replacing existing ones."""
        merged = dict(self.fields)
        merged.update(extra)
        return ObjectType(merged)


@dataclass(frozen=True, slots=True)
class OptionalType(Descriptor):
    """
    Accepts None or any value ``inner_type`` accepts.

    Attributes:
        inner_type (Descriptor): Wrapped descriptor.

    Notes:
        Derives ``UnionType((inner_type, NullType()))`` as its pre-check.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.OPTIONAL

    inner_type: Descriptor

    def __post_init__(self) -> None:
        _require_descriptor(self.inner_type, "inner_type", self.kind)

    @property
    def configuration(self) -> dict[str, Descriptor]:
        return {"inner_type": self.inner_type}


@dataclass(frozen=True, slots=True)
class UnionType(Descriptor):
    """
    Accepts a value when any alternative accepts it.

    Attributes:
        alternatives (tuple[Descriptor, ...]): Non-empty, ordered alternatives. Any
            iterable is accepted by the constructor.

    Raises:
        DescriptorError: If there are no alternatives or one is not a Descriptor.

    Notes:
        Order does not change the boolean outcome; it decides which alternative is
        "the" match (see shapekit.core.validate.match_alternative).
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.UNION

    alternatives: tuple[Descriptor, ...]

    def __post_init__(self) -> None:
        alternatives = tuple(self.alternatives)
        if not alternatives:
            raise DescriptorError("union: requires at least one alternative")
        for index, alt in enumerate(alternatives):
            _require_descriptor(alt, f"alternative {index}", self.kind)
        object.__setattr__(self, "alternatives", alternatives)

    @property
    def configuration(self) -> tuple[Descriptor, ...]:
        return self.alternatives


@dataclass(frozen=True, slots=True)
class TypeType(Descriptor):
    """
    The type of a type: accepts descriptors whose id equals ``described.id``.

    Attributes:
        described (Descriptor): Descriptor whose variant is expected.

    Notes:
        Identity of ``id`` is the equality notion; configurations are not compared.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.TYPE

    described: Descriptor

    def __post_init__(self) -> None:
        _require_descriptor(self.described, "described", self.kind)

    @property
    def configuration(self) -> Descriptor:
        return self.described


# ============================================================================
# Domain composites
# ============================================================================


@dataclass(frozen=True, slots=True)
class FileType(Descriptor):
    """
    An uploaded file value: ``{name, length, mimeType, dataUrl, type}``.

    Attributes:
        file_type (str | None): Expected file category tag (e.g. "jpg"). None, "*" and
            "*/*" accept any category; a concrete tag narrows the value's ``type``
            field to that literal.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.FILE

    file_type: str | None = None

    def __post_init__(self) -> None:
        if self.file_type is not None and not isinstance(self.file_type, str):
            raise DescriptorError(f"file: type must be a str or None (got: {self.file_type!r})")

    @property
    def configuration(self) -> dict[str, str | None]:
        return {"type": self.file_type}


@dataclass(frozen=True, slots=True)
class ImageType(Descriptor):
    """An image value: ``{file: <file of type "jpg">}``."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.IMAGE
