"""
Derived shapes and configuration shapes.

Two pure functions back the self-describing side of shapekit:

- ``derive_shape(descriptor)`` returns the descriptor a value must satisfy before the
  variant's local rule runs (or None). It is computed from the descriptor's own
  configuration on every call.
- ``configuration_shape(kind)`` returns the descriptor that accepts valid configuration
  values for a variant. It depends on the kind only, so building it never requires an
  existing descriptor of that kind.

Derivations
| variant  | derived shape
|----------|--------------------------------------------------------------------------
| optional | UnionType((inner_type, NullType()))
| file     | ObjectType({name, length, mimeType, dataUrl, type}); ``type`` is
|          | LiteralType(tag) for a concrete tag, else StringType().optional()
| image    | ObjectType({file: FileType("jpg")})
| others   | None

Examples:
    >>> from shapekit.core.derive import configuration_shape, derive_shape
    >>> from shapekit.core.descriptors import OptionalType, StringType
    >>> from shapekit.core.kinds import DescriptorKind
    >>> derive_shape(OptionalType(StringType())).id
    'union'
    >>> configuration_shape(DescriptorKind.LIST).validate({"value_type": StringType()})
    True
"""

from __future__ import annotations

from .constants import IMAGE_FILE_TYPE, WILDCARD_FILE_TYPES
from .descriptors import (
    AnyType,
    BooleanType,
    Descriptor,
    FileType,
    ImageType,
    ListType,
    LiteralType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    RecordType,
    StringType,
    UnionType,
    VoidType,
)
from .kinds import DescriptorKind

__all__ = [
    "derive_shape",
    "configuration_shape",
    "file_value_shape",
]


def file_value_shape(file_type: str | None = None) -> ObjectType:
    """
    Object shape of a file value, narrowed to a category tag when one is given.

    Args:
        file_type (str | None): Category tag. None and wildcards leave ``type`` open.

    Returns:
        ObjectType: ``{name, length, mimeType, dataUrl, type}``.
    """
    narrowed = file_type is not None and file_type not in WILDCARD_FILE_TYPES
    return ObjectType(
        {
            "name": StringType(),
            "length": NumberType(),
            "mimeType": StringType(),
            "dataUrl": StringType(),
            "type": LiteralType(file_type) if narrowed else StringType().optional(),
        }
    )


def derive_shape(descriptor: Descriptor) -> Descriptor | None:
    """
    Compute the derived descriptor of ``descriptor`` from its configuration.

    Args:
        descriptor (Descriptor): Any descriptor.

    Returns:
        Descriptor | None: Pre-check shape, or None when the variant has none.
    """
    match descriptor:
        case OptionalType(inner_type=inner):
            return UnionType((inner, NullType()))
        case FileType(file_type=tag):
            return file_value_shape(tag)
        case ImageType():
            return ObjectType({"file": FileType(IMAGE_FILE_TYPE)})
        case _:
            return None


def configuration_shape(kind: DescriptorKind) -> Descriptor:
    """
    Descriptor accepting valid configuration values for a variant.

    Args:
        kind (DescriptorKind): Variant.

    Returns:
        Descriptor: Configuration shape (VoidType for variants without configuration).
    """
    match kind:
        case DescriptorKind.LITERAL:
            return UnionType((NumberType(), StringType(), BooleanType()))
        case DescriptorKind.LIST | DescriptorKind.RECORD:
            return ObjectType({"value_type": AnyType()})
        case DescriptorKind.OPTIONAL:
            return ObjectType({"inner_type": AnyType()})
        case DescriptorKind.OBJECT:
            return RecordType(AnyType())
        case DescriptorKind.UNION:
            return ListType(AnyType())
        case DescriptorKind.TYPE:
            return AnyType()
        case DescriptorKind.FILE:
            return ObjectType({"type": StringType().optional()})
        case _:
            return VoidType()
