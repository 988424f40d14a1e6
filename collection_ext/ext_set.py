"""Set type carrying the collection helpers as methods."""

from collections.abc import Callable
from typing import cast

from . import collection_ops
from . import sequence_ops
from .ext_list import ExtList


class ExtSet[T](set[T]):
    """A :class:`set` with collection helpers."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({set(self)!r})"

    def __str__(self) -> str:
        return repr(set(self))

    @property
    def array(self) -> ExtList[T]:
        """The elements as an :class:`ExtList`, in unspecified order."""
        return ExtList(collection_ops.as_list(self))

    @property
    def average(self) -> collection_ops.Number:
        return collection_ops.average(cast(set[collection_ops.Number], self))

    def count_where(self, predicate: Callable[[T], bool]) -> int:
        return sequence_ops.count_where(self, predicate)

    def all_matching(self, predicate: Callable[[T], bool]) -> bool:
        return sequence_ops.all_matching(self, predicate)
