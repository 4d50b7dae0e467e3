"""
shapekit.tabular - validate Polars DataFrame rows with shapekit descriptors.

## Public API
- validate_rows - Boolean mask, one entry per row.
- filter_valid - keep accepted rows.
- require_valid - return the frame or raise SchemaError.
"""

from __future__ import annotations

from .validate import filter_valid, require_valid, validate_rows

__all__ = [
    "validate_rows",
    "filter_valid",
    "require_valid",
]
