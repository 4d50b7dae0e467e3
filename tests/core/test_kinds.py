"""Tests for `shapekit.core.kinds`."""

import pytest

from shapekit.core.errors import DescriptorError
from shapekit.core.kinds import (
    COMPOSITE_KINDS,
    PRIMITIVE_KINDS,
    DescriptorKind,
    is_lower_snake,
    kind_from_value,
)


def test_all_kind_values_are_lower_snake() -> None:
    for kind in DescriptorKind:
        assert is_lower_snake(kind.value), kind


def test_primitive_and_composite_kinds_partition_the_family() -> None:
    assert PRIMITIVE_KINDS | COMPOSITE_KINDS == frozenset(DescriptorKind)
    assert PRIMITIVE_KINDS.isdisjoint(COMPOSITE_KINDS)
    assert DescriptorKind.LITERAL in PRIMITIVE_KINDS
    assert DescriptorKind.FILE in COMPOSITE_KINDS


@pytest.mark.parametrize("raw", ["union", " Union ", "UNION", DescriptorKind.UNION])
def test_kind_from_value_normalizes(raw: object) -> None:
    assert kind_from_value(raw) is DescriptorKind.UNION


@pytest.mark.parametrize("raw", ["unknown", "list-type", "", 3, None])
def test_kind_from_value_rejects_unknown(raw: object) -> None:
    with pytest.raises(DescriptorError):
        kind_from_value(raw)
