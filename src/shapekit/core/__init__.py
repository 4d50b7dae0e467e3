"""
Core package aggregator for shapekit descriptors, derivation, and validation.

## Contracts (single source of truth)
- Kinds - the closed DescriptorKind enum; its values are descriptor ids.
- Descriptors - frozen dataclasses, one per kind, with ``optional()``/``list()``.
- Derive - derived shapes and per-kind configuration shapes (pure functions).
- Validate - the recursive engine (``validate``, ``explain``, ``check_configuration``).
- Introspect/Hashing - tree walking, JSON-ready descriptions, fingerprints.
- Log - ``get_logger``/``setup_logging`` for the shapekit logger namespace.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Descriptors are immutable; schemas are usually module-level constants.

## Examples
```python
from shapekit.core import NumberType, ObjectType, StringType, explain

PERSON = ObjectType({"name": StringType(), "age": NumberType().optional()})
PERSON.validate({"name": "Al"})  # True
explain(PERSON, {"name": 1}).issues[0].location()  # '$.name'
```
"""

from __future__ import annotations

from .derive import configuration_shape, derive_shape, file_value_shape
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
    TypeType,
    UnionType,
    VoidType,
)
from .errors import DescriptorError, RecursionLimitError, SchemaError
from .hashing import fingerprint, json_dumps_canonical
from .introspect import DescriptorChild, DescriptorInfo, children, describe, walk
from .kinds import COMPOSITE_KINDS, PRIMITIVE_KINDS, DescriptorKind, kind_from_value
from .log import get_logger, setup_logging
from .validate import (
    ValidationIssue,
    ValidationReport,
    check_configuration,
    depth_ceiling,
    explain,
    match_alternative,
    validate,
)

__all__ = [
    # Kinds
    "DescriptorKind",
    "PRIMITIVE_KINDS",
    "COMPOSITE_KINDS",
    "kind_from_value",
    # Descriptors
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
    # Derivation
    "derive_shape",
    "configuration_shape",
    "file_value_shape",
    # Validation
    "validate",
    "explain",
    "check_configuration",
    "match_alternative",
    "depth_ceiling",
    "ValidationIssue",
    "ValidationReport",
    # Introspection
    "children",
    "walk",
    "describe",
    "DescriptorInfo",
    "DescriptorChild",
    "fingerprint",
    "json_dumps_canonical",
    # Errors
    "SchemaError",
    "DescriptorError",
    "RecursionLimitError",
    # Logging
    "get_logger",
    "setup_logging",
]
