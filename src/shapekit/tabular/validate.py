"""
Row validation of Polars DataFrames against a descriptor.

Purpose
- Treat every row of a DataFrame as a mapping (``df.iter_rows(named=True)``) and check
  it with the shapekit validation engine, usually against an ObjectType.
- Polars nulls arrive as None, so nullable columns map onto ``optional()`` fields.

Notes
- Struct columns arrive as dicts and list columns as lists, so nested descriptors
  apply unchanged.
- Undeclared columns are ignored, like undeclared keys of an open object.
"""

from __future__ import annotations


import polars as pl

from shapekit.config import EngineSettings
from shapekit.core.descriptors import Descriptor
from shapekit.core.errors import SchemaError
from shapekit.core.log import get_logger
from shapekit.core.validate import validate

__all__ = [
    "validate_rows",
    "filter_valid",
    "require_valid",
]

logger = get_logger(__name__)

# Cap on row indices quoted in a require_valid error message.
_MAX_REPORTED_ROWS = 10


def validate_rows(
    df: pl.DataFrame,
    descriptor: Descriptor,
    *,
    settings: EngineSettings | None = None,
) -> pl.Series:
    """
    Validate each row of ``df`` against ``descriptor``.

    Args:
        df (pl.DataFrame): Frame to validate.
        descriptor (Descriptor): Row descriptor (typically an ObjectType).
        settings (EngineSettings | None): Engine settings.

    Returns:
        pl.Series: Boolean series named "valid", one entry per row.

    Examples:
        >>> import polars as pl
        >>> from shapekit.core.descriptors import NumberType, ObjectType
        >>> df = pl.DataFrame({"age": [30, None]})
        >>> validate_rows(df, ObjectType({"age": NumberType()})).to_list()
        [True, False]
    """
    mask = [validate(descriptor, row, settings=settings) for row in df.iter_rows(named=True)]
    return pl.Series("valid", mask, dtype=pl.Boolean)


def filter_valid(
    df: pl.DataFrame,
    descriptor: Descriptor,
    *,
    settings: EngineSettings | None = None,
) -> pl.DataFrame:
    """
    Keep only the rows of ``df`` accepted by ``descriptor``.

    Returns:
        pl.DataFrame: Filtered frame (same columns, original row order).
    """
    mask = validate_rows(df, descriptor, settings=settings)
    dropped = mask.len() - mask.sum()
    if dropped:
        logger.debug("filter_valid dropped %d of %d rows for %s", dropped, df.height, descriptor.id)
    return df.filter(mask)


def require_valid(
    df: pl.DataFrame,
    descriptor: Descriptor,
    *,
    settings: EngineSettings | None = None,
) -> pl.DataFrame:
    """
    Return ``df`` unchanged if every row is accepted by ``descriptor``.

    Raises:
        SchemaError: Listing (up to ten) failing row indices.
    """
    mask = validate_rows(df, descriptor, settings=settings)
    bad = [index for index, ok in enumerate(mask.to_list()) if not ok]
    if bad:
        shown = bad[:_MAX_REPORTED_ROWS]
        more = "" if len(bad) <= _MAX_REPORTED_ROWS else f" (+{len(bad) - _MAX_REPORTED_ROWS} more)"
        raise SchemaError(f"{len(bad)} row(s) rejected by {descriptor.id!r}: {shown!r}{more}")
    return df
