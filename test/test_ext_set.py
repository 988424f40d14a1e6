from assertpy import assert_that
from assertpy import soft_assertions
import pytest

from collection_ext import ExtList
from collection_ext import ExtSet


@pytest.fixture(scope="module")
def ext() -> ExtSet[int]:
    return ExtSet({1, 2, 3, 4})


def test_is_set(ext: ExtSet[int]) -> None:
    with soft_assertions():
        assert_that(ext).is_instance_of(set)
        assert_that(ext == {1, 2, 3, 4}).is_true()


def test_str_and_repr(ext: ExtSet[int]) -> None:
    with soft_assertions():
        assert_that(str(ext)).is_equal_to(str({1, 2, 3, 4}))
        assert_that(eval(repr(ext))).is_instance_of(ExtSet).is_equal_to(ext)
        assert_that(eval(repr(ExtSet()))).is_instance_of(ExtSet).is_empty()


def test_array(ext: ExtSet[int]) -> None:
    arr = ext.array
    with soft_assertions():
        assert_that(arr).is_instance_of(ExtList)
        assert_that(sorted(arr)).is_equal_to([1, 2, 3, 4])


def test_average(ext: ExtSet[int]) -> None:
    with soft_assertions():
        assert_that(ext.average).is_equal_to(2.5)
        assert_that(ExtSet[float]().average).is_equal_to(0.0)


def test_predicates(ext: ExtSet[int]) -> None:
    with soft_assertions():
        assert_that(ext.count_where(lambda n: n % 2 == 0)).is_equal_to(2)
        assert_that(ext.all_matching(lambda n: n < 5)).is_true()
        assert_that(ext.all_matching(lambda n: n < 4)).is_false()
