"""
Lightweight typing aliases used across descriptors and the validation engine.

This module contains no runtime logic.

Examples:
    >>> from shapekit.core.typing import DescriptorId, Path
    >>> def show(did: DescriptorId, path: Path) -> str:
    ...     return f"{did}@{'/'.join(map(str, path))}"
    >>> show(DescriptorId("string"), ("items", 0))
    'string@items/0'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NewType

__all__ = [
    "DescriptorId",
    "Primitive",
    "PathKey",
    "Path",
    "OnChange",
]

# Lower_snake variant discriminator; doubles as the renderer lookup key.
DescriptorId = NewType("DescriptorId", str)

# Values a LiteralType may be configured with.
Primitive = str | int | float | bool

# Location of a sub-value inside a validated value: mapping keys and sequence indices.
PathKey = str | int
Path = tuple[PathKey, ...]

# Callback handed to renderers; receives the edited value.
OnChange = Callable[[Any], None]
