"""Operations over mappings.

Pure variants return a new ``dict`` and leave their inputs untouched. The
``*_in_place`` variants and the key-case helpers modify the mapping they are
given and return ``None``, like :meth:`dict.update`.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import MutableMapping


def merge[K, V](a: Mapping[K, V], b: Mapping[K, V]) -> dict[K, V]:
    """Return the union of ``a`` and ``b``; on shared keys ``b`` wins.

    >>> merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    {'a': 1, 'b': 3, 'c': 4}
    """
    result = dict(a)
    merge_in_place(result, b)
    return result


def merge_in_place[K, V](a: MutableMapping[K, V], b: Mapping[K, V]) -> None:
    """Copy every entry of ``b`` into ``a``, overwriting shared keys."""
    for k, v in b.items():
        a[k] = v


def subtract_keys[K, V](a: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return a copy of ``a`` without the given keys.

    Keys that ``a`` does not contain are ignored.
    """
    result = dict(a)
    subtract_keys_in_place(result, keys)
    return result


def subtract_keys_in_place[K, V](a: MutableMapping[K, V], keys: Iterable[K]) -> None:
    """Remove the given keys from ``a``, ignoring the ones it does not contain."""
    for k in keys:
        a.pop(k, None)


def has_key[K](mapping: Mapping[K, object], key: K) -> bool:
    return key in mapping


def keys_for_value[K, V](mapping: Mapping[K, V], value: V) -> list[K]:
    """Return every key whose value equals ``value``.

    The order of the returned keys is not part of the contract.
    """
    return [k for k, v in mapping.items() if v == value]


def lowercase_all_keys[V](mapping: MutableMapping[str, V]) -> None:
    """Replace every key with its lowercase form, keeping the values.

    See :func:`uppercase_all_keys` for what happens when two keys fold to the
    same string.
    """
    _fold_keys(mapping, str.lower)


def uppercase_all_keys[V](mapping: MutableMapping[str, V]) -> None:
    """Replace every key with its uppercase form, keeping the values.

    Keys are visited in a snapshot of the mapping's iteration order. A key
    that changes when folded is moved to its folded form and overwrites any
    value already stored there, so when several keys collide the last one
    moved wins. Keys that are already folded are never moved.
    """
    _fold_keys(mapping, str.upper)


def _fold_keys[V](mapping: MutableMapping[str, V], fold: Callable[[str], str]) -> None:
    for key in list(mapping):
        folded = fold(key)
        if folded != key:
            mapping[folded] = mapping.pop(key)
