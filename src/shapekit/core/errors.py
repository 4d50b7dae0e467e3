"""
Core exception types raised by descriptor construction and the validation engine.

Provides typed exceptions for core-domain failures:
- SchemaError as the base for schema-level failures.
- DescriptorError for ill-typed descriptor configuration and unknown descriptor ids.
- RecursionLimitError when validation nests deeper than the configured limit.

Notes:
    - Validation itself never raises for wrong-shaped values; it answers False.
    - RecursionLimitError surfaces cyclic descriptor graphs instead of exhausting the stack.

Examples:
    Catch a construction failure.

    >>> from shapekit.core.errors import DescriptorError
    >>> from shapekit.core.descriptors import UnionType
    >>> try:
    ...     UnionType([])
    ... except DescriptorError as e:
    ...     msg = str(e)
    >>> "at least one alternative" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "DescriptorError",
    "RecursionLimitError",
]


class SchemaError(ValueError):
    """Schema-level failure (shape, configuration, or rejected tabular rows)."""


class DescriptorError(SchemaError):
    """Descriptor configuration is ill-typed, or a descriptor id is unknown."""


class RecursionLimitError(SchemaError):
    """Validation exceeded the configured nesting depth (typically a cyclic descriptor graph)."""

    def __init__(self, max_depth: int, descriptor_id: str) -> None:
        super().__init__(
            f"validation exceeded max_depth={max_depth} at descriptor {descriptor_id!r}; "
            "the descriptor graph is likely cyclic"
        )
        self.max_depth = max_depth
        self.descriptor_id = descriptor_id
