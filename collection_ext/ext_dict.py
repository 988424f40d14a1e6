"""Dictionary type carrying the mapping operations as methods and operators.

The :class:`ExtDict` behaves like a standard :class:`dict`. On top of it:

* ``a + b`` merges, with ``b`` winning on shared keys; ``a += b`` does the
  same in place.
* ``a - keys`` drops the given keys; ``a -= keys`` does the same in place.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from typing import cast, Self

from . import mapping_ops
from .json_util import json_string


class ExtDict[K, V](dict[K, V]):
    """A :class:`dict` with merge/subtract operators and lookup helpers.

    Equality and JSON encoding are those of :class:`dict`. Operators that
    build a new mapping return an ``ExtDict``.
    """

    def __str__(self) -> str:
        return dict.__repr__(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({super().__repr__()})"

    def __add__(self, other: Mapping[K, V]) -> "ExtDict[K, V]":
        if not isinstance(other, Mapping):
            return NotImplemented
        return ExtDict(mapping_ops.merge(self, other))

    def __iadd__(self, other: Mapping[K, V]) -> Self:
        if not isinstance(other, Mapping):
            return NotImplemented
        mapping_ops.merge_in_place(self, other)
        return self

    def __sub__(self, keys: Iterable[K]) -> "ExtDict[K, V]":
        return ExtDict(mapping_ops.subtract_keys(self, keys))

    def __isub__(self, keys: Iterable[K]) -> Self:
        self.remove_all_keys(keys)
        return self

    def has_key(self, key: K) -> bool:
        return mapping_ops.has_key(self, key)

    def keys_for_value(self, value: V) -> list[K]:
        return mapping_ops.keys_for_value(self, value)

    def remove_all_keys(self, keys: Iterable[K]) -> None:
        """Remove the given keys, ignoring the ones that are not present."""
        mapping_ops.subtract_keys_in_place(self, keys)

    def lowercase_all_keys(self) -> None:
        """Lowercase every key in place. Keys must be strings.

        See :func:`~collection_ext.mapping_ops.uppercase_all_keys` for the
        collision rule.
        """
        mapping_ops.lowercase_all_keys(cast("ExtDict[str, V]", self))

    def uppercase_all_keys(self) -> None:
        """Uppercase every key in place. Keys must be strings."""
        mapping_ops.uppercase_all_keys(cast("ExtDict[str, V]", self))

    def json_string(self, prettify: bool = False) -> str | None:
        """Encode as a JSON object, or return ``None`` if that is impossible."""
        return json_string(cast("ExtDict[str, V]", self), prettify)
