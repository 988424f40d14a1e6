"""Helpers shared by sets and other general collections."""

from collections.abc import Collection
from collections.abc import Iterable
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction


type Number = int | float | Decimal | Fraction


def as_list[T](collection: Iterable[T]) -> list[T]:
    """Materialize a collection, typically a set, into a list.

    The order of the result follows the collection's iteration order, which
    for sets is unspecified.
    """
    return list(collection)


def full_range(collection: Collection[object]) -> range:
    """Return the span of valid indices, ``0`` to ``len(collection)`` exclusive."""
    return range(len(collection))


def average(values: Iterable[Number]) -> Number:
    """Compute the arithmetic mean of ``values``.

    Integers average to a ``float``. ``float``, :class:`~decimal.Decimal` and
    :class:`~fractions.Fraction` values average to their own type.

    :param Iterable[Number] values: Numbers to average.
    :return: The mean, or ``0.0`` when ``values`` is empty.
    :rtype: Number
    """
    items = values if isinstance(values, Collection) else list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def indices_of[T](item: T, collection: Sequence[T]) -> list[int]:
    """Return every index whose element equals ``item``, ascending.

    >>> indices_of("x", ["x", "y", "x"])
    [0, 2]
    """
    return [i for i, e in enumerate(collection) if e == item]
