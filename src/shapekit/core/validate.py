"""
Recursive validation engine.

Every descriptor is checked in two phases:

1. If the descriptor derives a shape (``shapekit.core.derive.derive_shape``), the value
   must satisfy it first; a failure ends the check without consulting the local rule.
2. The variant's local rule runs, recursing into child descriptors for the sub-values
   the variant owns.

``validate`` answers a bool and stops at the first mismatch. ``explain`` runs the same
algorithm but records where values failed as ``ValidationIssue`` entries.

Local rules
| id       | rule
|----------|---------------------------------------------------------------------
| null     | value is None
| void     | value is None (absent)
| boolean  | isinstance(value, bool)
| number   | real number, not bool, finite and not NaN
| string   | isinstance(value, str)
| any      | always
| literal  | strict equality with the configured primitive
| list     | list/tuple, every element valid
| record   | mapping with str keys, every value valid
| object   | mapping, every declared field valid (absent -> None), extra keys ignored
| optional | None or inner valid (decided by the derived union)
| union    | some alternative valid (declared order)
| type     | value is a Descriptor with the configured id
| file     | length >= 0
| image    | always

Notes:
    - Wrong-shaped input never raises; it yields False.
    - Nesting deeper than ``EngineSettings.max_depth`` raises RecursionLimitError, which
      is how a cyclic descriptor graph surfaces. The limit is capped by
      ``depth_ceiling()`` so it always fires before Python's own RecursionError.
"""

from __future__ import annotations

import math
import numbers
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import MAX_DEPTH
from .derive import configuration_shape, derive_shape
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
from .errors import DescriptorError, RecursionLimitError
from .log import get_logger
from .typing import Path, PathKey, Primitive

if TYPE_CHECKING:
    from shapekit.config import EngineSettings

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "validate",
    "explain",
    "check_configuration",
    "match_alternative",
    "depth_ceiling",
]

logger = get_logger(__name__)

# Interpreter frames kept free for callers of validate().
_FRAME_RESERVE = 100


class ValidationIssue(BaseModel):
    """
    One failing location found by ``explain``.

    Attributes:
        path (tuple[str | int, ...]): Keys/indices from the root value to the failing
            sub-value; empty for the root.
        descriptor_id (str): Id of the descriptor that rejected the sub-value.
        message (str): Human-readable reason.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: tuple[PathKey, ...] = ()
    descriptor_id: str
    message: str

    def location(self) -> str:
        """Dotted location, e.g. ``items[2].name``; ``$`` for the root."""
        out = "$"
        for key in self.path:
            out += f"[{key}]" if isinstance(key, int) else f".{key}"
        return out


class ValidationReport(BaseModel):
    """
    Outcome of ``explain``.

    Attributes:
        descriptor_id (str): Id of the root descriptor.
        ok (bool): Same answer ``validate`` gives.
        issues (list[ValidationIssue]): Failing locations (empty when ok).
    """

    model_config = ConfigDict(extra="forbid")

    descriptor_id: str
    ok: bool
    issues: list[ValidationIssue] = Field(default_factory=list)


@dataclass(slots=True)
class _Walk:
    max_depth: int
    issues: list[ValidationIssue] | None = None
    collect_all: bool = False

    @property
    def short_circuit(self) -> bool:
        return self.issues is None or not self.collect_all

    def silent(self) -> _Walk:
        # Same depth limit, nothing recorded.
        return _Walk(max_depth=self.max_depth)

    def fail(self, path: Path, descriptor: Descriptor, message: str) -> bool:
        if self.issues is not None:
            self.issues.append(ValidationIssue(path=path, descriptor_id=descriptor.id, message=message))
        return False


def depth_ceiling() -> int:
    """
    Largest nesting depth the engine can reach before Python's own recursion limit.

    Each nesting level costs at most two interpreter frames (``_check`` and
    ``_local_check``); ``_FRAME_RESERVE`` frames are left for callers.
    """
    return max(1, (sys.getrecursionlimit() - _FRAME_RESERVE) // 2)


def _walk_for(settings: EngineSettings | None, *, collecting: bool) -> _Walk:
    max_depth = min(settings.max_depth if settings is not None else MAX_DEPTH, depth_ceiling())
    collect_all = settings.collect_all if settings is not None else True
    return _Walk(max_depth=max_depth, issues=[] if collecting else None, collect_all=collect_all)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, numbers.Real) and math.isfinite(value)


def _strict_equals(expected: Primitive, value: Any) -> bool:
    if isinstance(expected, bool) or isinstance(value, bool):
        return isinstance(expected, bool) and isinstance(value, bool) and expected is value
    if isinstance(expected, str):
        return isinstance(value, str) and value == expected
    return isinstance(value, (int, float)) and value == expected


def _type_name(value: Any) -> str:
    return "None" if value is None else type(value).__name__


def _check(descriptor: Descriptor, value: Any, path: Path, depth: int, walk: _Walk) -> bool:
    if depth > walk.max_depth:
        raise RecursionLimitError(walk.max_depth, descriptor.id)
    derived = derive_shape(descriptor)
    if derived is not None and not _check(derived, value, path, depth + 1, walk):
        return False
    return _local_check(descriptor, value, path, depth, walk)


def _local_check(descriptor: Descriptor, value: Any, path: Path, depth: int, walk: _Walk) -> bool:
    match descriptor:
        case NullType() | VoidType():
            return value is None or walk.fail(path, descriptor, f"expected None, got {_type_name(value)}")
        case BooleanType():
            return isinstance(value, bool) or walk.fail(path, descriptor, f"expected bool, got {_type_name(value)}")
        case NumberType():
            return _is_number(value) or walk.fail(
                path, descriptor, f"expected a finite number, got {value!r}"
            )
        case StringType():
            return isinstance(value, str) or walk.fail(path, descriptor, f"expected str, got {_type_name(value)}")
        case AnyType() | ImageType():
            return True
        case LiteralType(value=expected):
            return _strict_equals(expected, value) or walk.fail(
                path, descriptor, f"expected literal {expected!r}, got {value!r}"
            )
        case ListType(value_type=item_type):
            if not isinstance(value, (list, tuple)):
                return walk.fail(path, descriptor, f"expected a list, got {_type_name(value)}")
            ok = True
            for index, item in enumerate(value):
                if not _check(item_type, item, (*path, index), depth + 1, walk):
                    ok = False
                    if walk.short_circuit:
                        break
            return ok
        case RecordType(value_type=value_type):
            if not isinstance(value, Mapping):
                return walk.fail(path, descriptor, f"expected a mapping, got {_type_name(value)}")
            ok = True
            for key, item in value.items():
                if not isinstance(key, str):
                    ok = walk.fail(path, descriptor, f"record keys must be str, got {key!r}")
                elif not _check(value_type, item, (*path, key), depth + 1, walk):
                    ok = False
                if not ok and walk.short_circuit:
                    break
            return ok
        case ObjectType(fields=fields):
            if not isinstance(value, Mapping):
                return walk.fail(path, descriptor, f"expected a mapping, got {_type_name(value)}")
            ok = True
            for name, field_type in fields:
                if not _check(field_type, value.get(name), (*path, name), depth + 1, walk):
                    ok = False
                    if walk.short_circuit:
                        break
            return ok
        case OptionalType():
            # Only reached after the derived UnionType((inner, NullType())) accepted value,
            # which already establishes "None or inner valid".
            return True
        case UnionType(alternatives=alternatives):
            silent = walk.silent()
            for alternative in alternatives:
                if _check(alternative, value, path, depth + 1, silent):
                    return True
            ids = ", ".join(alt.id for alt in alternatives)
            return walk.fail(path, descriptor, f"no alternative matched ({ids})")
        case TypeType(described=described):
            if not isinstance(value, Descriptor):
                return walk.fail(path, descriptor, f"expected a descriptor, got {_type_name(value)}")
            return value.id == described.id or walk.fail(
                path, descriptor, f"expected a {described.id!r} descriptor, got {value.id!r}"
            )
        case FileType():
            # Derived shape already guarantees a mapping with a numeric length.
            return value["length"] >= 0 or walk.fail((*path, "length"), descriptor, "file length must be >= 0")
        case _:
            raise DescriptorError(f"no validation rule for descriptor kind {descriptor.id!r}")


def validate(descriptor: Descriptor, value: Any, *, settings: EngineSettings | None = None) -> bool:
    """
    Check whether ``value`` conforms to ``descriptor``.

    Args:
        descriptor (Descriptor): Root descriptor.
        value (Any): Candidate value; any shape.
        settings (EngineSettings | None): Engine settings; defaults apply when None.

    Returns:
        bool: True if value conforms.

    Raises:
        RecursionLimitError: If nesting exceeds settings.max_depth (cyclic descriptor graph).

    Examples:
        >>> from shapekit.core.descriptors import ListType, NumberType
        >>> validate(ListType(NumberType()), [1, 2, 3])
        True
        >>> validate(ListType(NumberType()), [1, "x"])
        False
    """
    return _check(descriptor, value, (), 0, _walk_for(settings, collecting=False))


def explain(descriptor: Descriptor, value: Any, *, settings: EngineSettings | None = None) -> ValidationReport:
    """
    Validate ``value`` and report every failing location.

    Args:
        descriptor (Descriptor): Root descriptor.
        value (Any): Candidate value.
        settings (EngineSettings | None): ``collect_all=False`` stops at the first issue.

    Returns:
        ValidationReport: ``ok`` matches ``validate``; ``issues`` lists failing paths.

    Examples:
        >>> from shapekit.core.descriptors import NumberType, ObjectType, StringType
        >>> report = explain(ObjectType({"name": StringType(), "age": NumberType()}), {"name": "Al"})
        >>> report.ok, [issue.location() for issue in report.issues]
        (False, ['$.age'])
    """
    walk = _walk_for(settings, collecting=True)
    ok = _check(descriptor, value, (), 0, walk)
    issues = walk.issues or []
    logger.debug("explain %s: ok=%s issues=%d", descriptor.id, ok, len(issues))
    return ValidationReport(descriptor_id=descriptor.id, ok=ok, issues=issues)


def check_configuration(descriptor: Descriptor, *, settings: EngineSettings | None = None) -> bool:
    """
    Validate a descriptor's configuration against its variant's configuration shape.

    Args:
        descriptor (Descriptor): Descriptor to self-check.

    Returns:
        bool: True if ``descriptor.configuration`` is accepted by
        ``configuration_shape(descriptor.kind)``.
    """
    return validate(configuration_shape(descriptor.kind), descriptor.configuration, settings=settings)


def match_alternative(
    union: UnionType, value: Any, *, settings: EngineSettings | None = None
) -> int | None:
    """
    Index of the first alternative of ``union`` accepting ``value``.

    Presentation layers use this to pick which alternative editor is active.

    Returns:
        int | None: Alternative index, or None when no alternative matches.
    """
    for index, alternative in enumerate(union.alternatives):
        if validate(alternative, value, settings=settings):
            return index
    return None
