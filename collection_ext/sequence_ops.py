"""Operations over ordered sequences.

Functions that only read accept any :class:`~collections.abc.Sequence` or
iterable. Functions that mutate work on a ``list`` in place and return that
same list so calls can be chained.
"""

from collections import Counter
from collections.abc import Callable
from collections.abc import Hashable
from collections.abc import Iterable
from collections.abc import Sequence
from datetime import date
from datetime import datetime
from itertools import chain
from operator import attrgetter
from typing import Any

from .date_util import DateComponent
from .date_util import normalize_date


def equal_unordered[T](a: Sequence[T], b: Sequence[T]) -> bool:
    """Check multiset equality of two sequences.

    Both sequences must hold the same elements with the same multiplicities,
    in any order. ``[1, 1, 2]`` and ``[1, 2, 2]`` are not equal.

    Hashable elements are counted by hash, so a NaN only matches itself (the
    same object), as it does in a ``dict``. Sequences holding unhashable
    elements are counted by equality instead.

    :param Sequence[T] a: First sequence.
    :param Sequence[T] b: Second sequence.
    :return: ``True`` if ``a`` and ``b`` are equal as multisets.
    :rtype: bool
    """
    if len(a) != len(b):
        return False
    if all(isinstance(e, Hashable) for e in chain(a, b)):
        return Counter(a) == Counter(b)
    return all(_count_equal(a, e) == _count_equal(b, e) for e in a)


def _count_equal(seq: Iterable[Any], item: Any) -> int:
    return sum(1 for e in seq if e == item)


def sliced_by_date[T](
    elements: Iterable[T],
    components: Iterable[DateComponent],
    key: Callable[[T], date] | str,
) -> dict[datetime, list[T]]:
    """Group elements by a date truncated to the given components.

    ``key`` is either a callable returning the element's date or the name of
    the attribute holding it.

    :param Iterable[T] elements: Elements to group.
    :param Iterable[DateComponent] components: Calendar components to keep,
        e.g. :data:`~collection_ext.date_util.DAY_PRECISION`.
    :param key: Date extractor or attribute name.
    :type key: Callable[[T], date] | str
    :return: Mapping of normalized date to the elements sharing it, in
        encounter order.
    :rtype: dict[datetime, list[T]]
    :raises ValueError: If an element's date cannot be normalized.
    """
    get_date: Callable[[T], date] = attrgetter(key) if isinstance(key, str) else key
    kept = frozenset(components)
    groups: dict[datetime, list[T]] = {}
    for element in elements:
        groups.setdefault(normalize_date(get_date(element), kept), []).append(element)
    return groups


def remove_all_occurrences[T](seq: list[T], *items: T) -> list[T]:
    """Remove, in place, every element equal to any of ``items``.

    :param list[T] seq: List to modify.
    :param T *items: Values to remove.
    :return: ``seq`` itself.
    :rtype: list[T]
    """
    if not items:
        return seq
    seq[:] = [e for e in seq if e not in items]
    return seq


def remove_duplicates[T](seq: list[T]) -> list[T]:
    """Drop repeated elements in place, keeping first occurrences.

    :param list[T] seq: List to modify.
    :return: ``seq`` itself.
    :rtype: list[T]
    """
    seq[:] = without_duplicates(seq)
    return seq


def without_duplicates[T](
    seq: Iterable[T], key: Callable[[T], Hashable] | None = None
) -> list[T]:
    """Return the elements of ``seq`` without repeats, keeping first occurrences.

    Without ``key`` elements are compared by equality, so unhashable elements
    are fine. With ``key`` two elements are duplicates when their keys are
    equal; keys must be hashable.

    :param Iterable[T] seq: Source elements.
    :param key: Optional function deriving the identity of an element.
    :type key: Callable[[T], Hashable] | None
    :return: A new list.
    :rtype: list[T]
    """
    result: list[T] = []
    if key is None:
        for e in seq:
            if e not in result:
                result.append(e)
        return result

    seen: set[Hashable] = set()
    for e in seq:
        marker = key(e)
        if marker in seen:
            continue
        seen.add(marker)
        result.append(e)
    return result


def count_where[T](seq: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Count the elements satisfying ``predicate``.

    Exceptions raised by ``predicate`` propagate to the caller.
    """
    count = 0
    for e in seq:
        if predicate(e):
            count += 1
    return count


def all_matching[T](seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Check that no element fails ``predicate``.

    ``True`` for an empty sequence. Stops at the first failing element.
    Exceptions raised by ``predicate`` propagate to the caller.
    """
    return all(predicate(e) for e in seq)


def histogram[H: Hashable](seq: Iterable[H]) -> dict[H, int]:
    """Count the occurrences of each distinct value.

    >>> histogram(["Car", "Car", "Dog"])
    {'Car': 2, 'Dog': 1}
    """
    return dict(Counter(seq))
