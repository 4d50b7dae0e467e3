"""
shapekit - composable runtime schema descriptors.

Values of any shape are declared as a tree of frozen descriptors that can validate
input values and describe their own configuration with the same mechanism.

## Packages
- shapekit.core - descriptors, derivation, validation engine, introspection.
- shapekit.render - renderer registry for presentation layers.
- shapekit.tabular - Polars DataFrame row validation.
- shapekit.config - EngineSettings (env > TOML > defaults).
"""

from __future__ import annotations

from .config import EngineSettings
from .core import (
    AnyType,
    BooleanType,
    Descriptor,
    DescriptorError,
    DescriptorKind,
    FileType,
    ImageType,
    ListType,
    LiteralType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    RecordType,
    RecursionLimitError,
    SchemaError,
    StringType,
    TypeType,
    UnionType,
    ValidationIssue,
    ValidationReport,
    VoidType,
    check_configuration,
    explain,
    validate,
)

__all__ = [
    "EngineSettings",
    "Descriptor",
    "DescriptorKind",
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
    "validate",
    "explain",
    "check_configuration",
    "ValidationIssue",
    "ValidationReport",
    "SchemaError",
    "DescriptorError",
    "RecursionLimitError",
]
