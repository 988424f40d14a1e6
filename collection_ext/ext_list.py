"""List type carrying the sequence operations as methods.

The :class:`ExtList` behaves like a standard :class:`list` and adds the
operations from :mod:`collection_ext.sequence_ops` and
:mod:`collection_ext.collection_ops`. Slices return an ``ExtList``.
"""

from collections.abc import Callable
from collections.abc import Hashable
from collections.abc import Iterable
from collections.abc import Sequence
from datetime import date
from datetime import datetime
from typing import cast, overload, SupportsIndex

from . import collection_ops
from . import sequence_ops
from .date_util import DateComponent


class ExtList[T](list[T]):
    """A :class:`list` with collection helpers.

    Equality, hashing rules and JSON encoding are those of :class:`list`.
    Helpers that build a new sequence return an ``ExtList``; helpers that
    mutate return ``self`` so calls can be chained.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({super().__repr__()})"

    def __str__(self) -> str:
        return list.__repr__(self)

    @overload
    def __getitem__(self, index: SupportsIndex) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "ExtList[T]": ...

    def __getitem__(self, index: SupportsIndex | slice) -> "T | ExtList[T]":
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return ExtList(cast(list[T], result))
        return cast(T, result)

    def equal_unordered(self, other: Sequence[T]) -> bool:
        """Check multiset equality with ``other``.

        See :func:`~collection_ext.sequence_ops.equal_unordered`.
        """
        return sequence_ops.equal_unordered(self, other)

    def sliced_by_date(
        self,
        components: Iterable[DateComponent],
        key: Callable[[T], date] | str,
    ) -> dict[datetime, "ExtList[T]"]:
        """Group the elements by truncated date.

        See :func:`~collection_ext.sequence_ops.sliced_by_date`.
        """
        groups = sequence_ops.sliced_by_date(self, components, key)
        return {d: ExtList(group) for d, group in groups.items()}

    def remove_all_occurrences(self, *items: T) -> "ExtList[T]":
        sequence_ops.remove_all_occurrences(self, *items)
        return self

    def remove_duplicates(self) -> "ExtList[T]":
        sequence_ops.remove_duplicates(self)
        return self

    def without_duplicates(
        self, key: Callable[[T], Hashable] | None = None
    ) -> "ExtList[T]":
        return ExtList(sequence_ops.without_duplicates(self, key))

    def indices_of(self, item: T) -> list[int]:
        return collection_ops.indices_of(item, self)

    @property
    def full_range(self) -> range:
        return collection_ops.full_range(self)

    @property
    def average(self) -> collection_ops.Number:
        """Arithmetic mean of the elements, ``0.0`` when empty."""
        return collection_ops.average(cast(list[collection_ops.Number], self))

    def count_where(self, predicate: Callable[[T], bool]) -> int:
        return sequence_ops.count_where(self, predicate)

    def all_matching(self, predicate: Callable[[T], bool]) -> bool:
        return sequence_ops.all_matching(self, predicate)

    @property
    def histogram(self) -> dict[T, int]:
        return sequence_ops.histogram(cast(list[Hashable], self))  # type: ignore[return-value]
