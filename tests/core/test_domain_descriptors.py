"""Tests for the File and Image domain descriptors."""

import pytest

from shapekit.core.descriptors import FileType, ImageType
from shapekit.core.errors import DescriptorError
from shapekit.core.validate import explain


def _file(**overrides: object) -> dict:
    value = {
        "name": "cat.jpg",
        "length": 2048,
        "mimeType": "image/jpeg",
        "dataUrl": "data:image/jpeg;base64,AAAA",
        "type": "jpg",
    }
    value.update(overrides)
    return value


def test_untyped_file_accepts_any_category() -> None:
    assert FileType().validate(_file()) is True
    assert FileType().validate(_file(type="pdf")) is True
    assert FileType().validate({k: v for k, v in _file().items() if k != "type"}) is True


def test_file_value_uses_camel_case_keys() -> None:
    value = {"name": "a.jpg", "length": 10, "mimeType": "image/jpeg", "dataUrl": "data:,"}
    assert FileType().validate(value) is True
    snake = {"name": "a.jpg", "length": 10, "mime_type": "image/jpeg", "data_url": "data:,"}
    assert FileType().validate(snake) is False


def test_wildcard_file_accepts_any_category() -> None:
    assert FileType("*/*").validate(_file(type="png")) is True


def test_typed_file_narrows_category() -> None:
    assert FileType("jpg").validate(_file()) is True
    assert FileType("jpg").validate(_file(type="png")) is False
    assert FileType("jpg").validate({k: v for k, v in _file().items() if k != "type"}) is False


@pytest.mark.parametrize(
    "overrides",
    [{"name": None}, {"length": "big"}, {"mimeType": 1}, {"dataUrl": None}, {"type": 3}],
)
def test_file_rejects_malformed_fields(overrides: dict) -> None:
    assert FileType().validate(_file(**overrides)) is False


def test_file_local_rule_rejects_negative_length() -> None:
    report = explain(FileType(), _file(length=-1))
    assert report.ok is False
    assert report.issues[0].path == ("length",)
    assert report.issues[0].descriptor_id == "file"


def test_file_rejects_non_mappings() -> None:
    assert FileType().validate(None) is False
    assert FileType().validate("cat.jpg") is False


def test_file_type_must_be_string() -> None:
    with pytest.raises(DescriptorError, match="file"):
        FileType(3)  # type: ignore[arg-type]
    assert FileType("png").configuration == {"type": "png"}


def test_image_wraps_a_jpg_file() -> None:
    assert ImageType().validate({"file": _file()}) is True
    assert ImageType().validate({"file": _file(type="png")}) is False
    assert ImageType().validate({"file": None}) is False
    assert ImageType().validate(None) is False
    assert ImageType().configuration is None


def test_image_explain_points_into_the_file() -> None:
    report = explain(ImageType(), {"file": _file(name=None)})
    assert [issue.location() for issue in report.issues] == ["$.file.name"]
