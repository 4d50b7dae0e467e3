"""Tests for the two-phase engine in `shapekit.core.validate`."""

import time

import pytest

from shapekit.config import EngineSettings
from shapekit.core.descriptors import (
    AnyType,
    BooleanType,
    Descriptor,
    ListType,
    NumberType,
    ObjectType,
    OptionalType,
    RecordType,
    StringType,
    UnionType,
)
from shapekit.core.errors import DescriptorError, RecursionLimitError
from shapekit.core.validate import depth_ceiling, explain, match_alternative, validate


def test_validate_function_and_method_agree() -> None:
    schema = ObjectType({"tags": StringType().list(), "score": NumberType().optional()})
    for value in ({"tags": []}, {"tags": ["a"], "score": 1.5}, {"tags": "a"}, None):
        assert validate(schema, value) is schema.validate(value)


def test_explain_reports_missing_field_path() -> None:
    report = explain(ObjectType({"name": StringType(), "age": NumberType()}), {"name": "Al"})
    assert report.ok is False
    assert report.descriptor_id == "object"
    assert len(report.issues) == 1
    issue = report.issues[0]
    assert issue.path == ("age",)
    assert issue.descriptor_id == "number"
    assert issue.location() == "$.age"


def test_explain_collects_every_failure_by_default() -> None:
    schema = ObjectType({"items": ListType(ObjectType({"n": NumberType()})), "flag": BooleanType()})
    value = {"items": [{"n": 1}, {"n": "x"}, {"n": None}], "flag": "yes"}
    report = explain(schema, value)
    assert report.ok is False
    assert [issue.location() for issue in report.issues] == ["$.items[1].n", "$.items[2].n", "$.flag"]


def test_explain_stops_at_first_issue_when_configured() -> None:
    schema = ListType(NumberType())
    report = explain(schema, ["a", "b"], settings=EngineSettings(collect_all=False))
    assert report.ok is False
    assert [issue.path for issue in report.issues] == [(0,)]


def test_explain_ok_matches_validate() -> None:
    schema = RecordType(UnionType([StringType(), NumberType()]))
    for value in ({}, {"a": 1, "b": "c"}, {"a": None}, [], None):
        report = explain(schema, value)
        assert report.ok is validate(schema, value)
        assert (report.issues == []) is report.ok


def test_union_failure_is_reported_once() -> None:
    report = explain(UnionType([StringType(), NumberType()]), True)
    assert len(report.issues) == 1
    assert report.issues[0].descriptor_id == "union"
    assert "string, number" in report.issues[0].message


def test_optional_failure_reports_derived_union() -> None:
    report = explain(OptionalType(StringType()), 5)
    assert report.ok is False
    assert report.issues[0].descriptor_id == "union"


def test_match_alternative_returns_first_match() -> None:
    union = UnionType([NumberType(), AnyType(), StringType()])
    assert match_alternative(union, 1) == 0
    assert match_alternative(union, "x") == 1
    assert match_alternative(UnionType([StringType()]), 1) is None


def test_wrong_shapes_never_raise() -> None:
    schema = ObjectType(
        {
            "a": RecordType(ListType(NumberType())),
            "b": UnionType([StringType().optional(), BooleanType()]),
        }
    )
    for value in (None, 0, "x", [], object(), {"a": object()}, {"a": {"k": object()}}, {"a": {"k": [object()]}}):
        assert validate(schema, value) is False


def test_cyclic_descriptor_graph_raises_recursion_limit() -> None:
    loop = OptionalType(StringType())
    object.__setattr__(loop, "inner_type", loop)
    with pytest.raises(RecursionLimitError, match="max_depth=16"):
        validate(loop, 5, settings=EngineSettings(max_depth=16))


def test_depth_limit_applies_to_deep_values() -> None:
    nested = AnyType()
    for _ in range(10):
        nested = ListType(nested)
    value: list = []
    for _ in range(9):
        value = [value]
    assert validate(nested, value) is True
    with pytest.raises(RecursionLimitError):
        validate(nested, value, settings=EngineSettings(max_depth=5))


def test_unknown_descriptor_subclass_has_no_rule() -> None:
    class Rogue(Descriptor):
        kind = StringType.kind

    with pytest.raises(DescriptorError, match="no validation rule"):
        validate(Rogue(), "x")


def test_nested_optionals_validate_in_linear_time() -> None:
    schema: Descriptor = StringType()
    for _ in range(30):
        schema = schema.optional()
    start = time.perf_counter()
    assert schema.validate("x") is True
    assert schema.validate(None) is True
    assert schema.validate(1) is False
    assert explain(schema, 1).ok is False
    assert time.perf_counter() - start < 1.0


def test_optional_object_chain_validates_in_linear_time() -> None:
    schema: Descriptor = ObjectType({"n": NumberType()})
    value: dict = {"n": 0}
    for level in range(40):
        schema = ObjectType({"n": NumberType(), "child": schema.optional()})
        value = {"n": level, "child": value}
    start = time.perf_counter()
    assert schema.validate(value) is True
    assert time.perf_counter() - start < 1.0


def test_deep_optional_objects_need_a_larger_max_depth() -> None:
    schema: Descriptor = ObjectType({})
    value: dict = {}
    for _ in range(100):
        schema = ObjectType({"child": schema.optional()})
        value = {"child": value}
    with pytest.raises(RecursionLimitError):
        validate(schema, value)
    assert validate(schema, value, settings=EngineSettings(max_depth=400)) is True


def test_max_depth_is_capped_below_the_interpreter_limit() -> None:
    loop = OptionalType(StringType())
    object.__setattr__(loop, "inner_type", loop)
    with pytest.raises(RecursionLimitError, match=f"max_depth={depth_ceiling()}"):
        validate(loop, 5, settings=EngineSettings(max_depth=10**6))
