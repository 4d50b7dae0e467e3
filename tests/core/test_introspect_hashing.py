"""Tests for `shapekit.core.introspect` and `shapekit.core.hashing`."""

import pytest

from shapekit.core.descriptors import (
    BooleanType,
    FileType,
    ListType,
    LiteralType,
    NumberType,
    ObjectType,
    OptionalType,
    StringType,
    TypeType,
    UnionType,
)
from shapekit.core.errors import DescriptorError
from shapekit.core.hashing import fingerprint, json_dumps_canonical
from shapekit.core.introspect import children, describe, walk

SCHEMA = ObjectType(
    {
        "title": StringType(),
        "tags": StringType().list(),
        "kind": UnionType([LiteralType("a"), LiteralType("b")]),
        "cover": FileType("png").optional(),
    }
)


def test_children_expose_configuration_slots() -> None:
    assert [key for key, _ in children(SCHEMA)] == ["title", "tags", "kind", "cover"]
    assert children(ListType(NumberType())) == (("value_type", NumberType()),)
    assert children(OptionalType(BooleanType())) == (("inner_type", BooleanType()),)
    assert children(UnionType([StringType(), NumberType()])) == ((0, StringType()), (1, NumberType()))
    assert children(TypeType(StringType())) == (("described", StringType()),)
    assert children(FileType("png")) == ()


def test_walk_is_preorder_with_paths() -> None:
    paths = [(path, d.id) for path, d in walk(SCHEMA)]
    assert paths[0] == ((), "object")
    assert paths[1] == (("title",), "string")
    assert (("tags", "value_type"), "string") in paths
    assert (("kind", 1), "literal") in paths
    assert paths[-1] == (("cover", "inner_type"), "file")


def test_walk_terminates_on_cycles() -> None:
    loop = ListType(StringType())
    object.__setattr__(loop, "value_type", loop)
    assert [path for path, _ in walk(loop)] == [()]


def test_describe_produces_json_ready_tree() -> None:
    info = describe(SCHEMA)
    dumped = info.model_dump(mode="json")
    assert dumped["id"] == "object"
    assert [child["key"] for child in dumped["children"]] == ["title", "tags", "kind", "cover"]
    kind = dumped["children"][2]["descriptor"]
    assert [alt["descriptor"]["configuration"] for alt in kind["children"]] == ["a", "b"]
    cover = dumped["children"][3]["descriptor"]["children"][0]["descriptor"]
    assert cover == {"id": "file", "configuration": {"type": "png"}, "children": []}


def test_describe_rejects_cycles() -> None:
    loop = OptionalType(StringType())
    object.__setattr__(loop, "inner_type", loop)
    with pytest.raises(DescriptorError, match="cyclic"):
        describe(loop)


def test_fingerprint_is_structural() -> None:
    rebuilt = ObjectType(
        {
            "title": StringType(),
            "tags": ListType(StringType()),
            "kind": UnionType((LiteralType("a"), LiteralType("b"))),
            "cover": OptionalType(FileType("png")),
        }
    )
    assert fingerprint(SCHEMA) == fingerprint(rebuilt)
    assert fingerprint(SCHEMA) != fingerprint(SCHEMA.extend({"extra": BooleanType()}))
    assert fingerprint(LiteralType(1)) != fingerprint(LiteralType("1"))


def test_json_dumps_canonical_sorted() -> None:
    assert json_dumps_canonical({"b": 1, "a": {"d": 2, "c": 3}}) == '{"a":{"c":3,"d":2},"b":1}'
