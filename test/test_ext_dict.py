import json
from typing import Any

from assertpy import assert_that
from assertpy import soft_assertions
import pytest

from collection_ext import ExtDict


@pytest.fixture(scope="module")
def sample_mapping() -> dict[str, int]:
    return {"a": 1, "b": 2}


@pytest.fixture
def ext(sample_mapping: dict[str, int]) -> ExtDict[str, int]:
    return ExtDict(sample_mapping)


def test_is_dict(ext: ExtDict[str, int], sample_mapping: dict[str, int]) -> None:
    with soft_assertions():
        assert_that(ext).is_instance_of(dict)
        assert_that(ext).is_equal_to(sample_mapping)
        assert_that(list(ext)).is_equal_to(list(sample_mapping))


def test_str(ext: ExtDict[str, int], sample_mapping: dict[str, int]) -> None:
    assert_that(str(ext)).is_equal_to(str(sample_mapping))


def test_repr(ext: ExtDict[str, int]) -> None:
    recreated = eval(repr(ext))
    assert_that(recreated).is_instance_of(ExtDict).is_equal_to(ext)


def test_json_serialization(
    ext: ExtDict[str, int], sample_mapping: dict[str, int]
) -> None:
    dumped = json.dumps(ext, sort_keys=True)
    expected = json.dumps(sample_mapping, sort_keys=True)
    assert_that(dumped).is_equal_to(expected)


def test_add_merges_right_biased(ext: ExtDict[str, int]) -> None:
    result = ext + {"b": 3, "c": 4}
    with soft_assertions():
        assert_that(result).is_instance_of(ExtDict)
        assert_that(result).is_equal_to({"a": 1, "b": 3, "c": 4})
        assert_that(ext).described_as("left untouched").is_equal_to({"a": 1, "b": 2})


def test_iadd_mutates(ext: ExtDict[str, int]) -> None:
    alias = ext
    ext += {"b": 3, "c": 4}
    with soft_assertions():
        assert_that(ext).is_same_as(alias)
        assert_that(ext).is_equal_to({"a": 1, "b": 3, "c": 4})


def test_sub_removes_keys(ext: ExtDict[str, int]) -> None:
    result = ext - ["b", "z"]
    with soft_assertions():
        assert_that(result).is_instance_of(ExtDict)
        assert_that(result).is_equal_to({"a": 1})
        assert_that(ext).described_as("left untouched").contains_key("b")


def test_isub_mutates(ext: ExtDict[str, int]) -> None:
    alias = ext
    ext -= {"a"}
    with soft_assertions():
        assert_that(ext).is_same_as(alias)
        assert_that(ext).is_equal_to({"b": 2})


@pytest.mark.parametrize(
    "stmt",
    [
        "ext + 1",
        "ext + ['a']",
        "ext += 1",
    ],
)
def test_add_requires_mapping(ext: ExtDict[str, int], stmt: str) -> None:
    with pytest.raises(TypeError):
        exec(stmt)


def test_lookup_helpers() -> None:
    d = ExtDict({"a": 1, "b": 2, "c": 1})
    with soft_assertions():
        assert_that(d.has_key("a")).is_true()
        assert_that(d.has_key("z")).is_false()
        assert_that(sorted(d.keys_for_value(1))).is_equal_to(["a", "c"])


def test_remove_all_keys(ext: ExtDict[str, int]) -> None:
    assert_that(ext.remove_all_keys(["a", "missing"])).is_none()
    assert_that(ext).is_equal_to({"b": 2})


def test_case_folding() -> None:
    d: ExtDict[str, Any] = ExtDict({"Content-Type": "json", "X-ID": 7})
    d.lowercase_all_keys()
    assert_that(d).is_equal_to({"content-type": "json", "x-id": 7})
    d.uppercase_all_keys()
    assert_that(d).is_equal_to({"CONTENT-TYPE": "json", "X-ID": 7})


def test_json_string(ext: ExtDict[str, int]) -> None:
    with soft_assertions():
        assert_that(ext.json_string()).is_equal_to('{"a":1,"b":2}')
        assert_that(json.loads(ext.json_string(prettify=True) or "")).is_equal_to(ext)
        assert_that(ExtDict({"o": object()}).json_string()).is_none()
