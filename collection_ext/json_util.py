"""Utilities for turning mappings into JSON text."""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from typing import Final


logger = logging.getLogger(__name__)

# Type definitions for JSON structures
type JSONPrimitive = str | int | float | bool | None
type JSONValue = JSONPrimitive | "JSONDict" | "JSONList"
type JSONDict = dict[str, "JSONValue"]
type JSONList = list["JSONValue"]

_COMPACT_SEPARATORS: Final[tuple[str, str]] = (",", ":")
_PRETTY_INDENT: Final[int] = 2


def json_string(mapping: Mapping[str, object], prettify: bool = False) -> str | None:
    """Encode a mapping as a JSON object.

    The result parses back to an equivalent mapping with :func:`json.loads`.
    Encoding never raises: anything that is not representable as a JSON
    object yields ``None``. That covers non-mapping input, non-``str`` keys
    at any depth, tuples and other values the :mod:`json` encoder would
    rewrite or reject, NaN and infinities, and circular references.

    :param Mapping[str, object] mapping: Mapping to encode.
    :param bool prettify: Use indented multi-line output instead of the
        compact form.
    :return: The JSON text, or ``None`` if the mapping cannot be encoded.
    :rtype: str | None
    """
    if not isinstance(mapping, Mapping):
        logger.debug("Not a JSON object: %s", type(mapping).__name__)
        return None
    try:
        problem = _find_unencodable(mapping, set())
        if problem is not None:
            logger.debug("Mapping is not JSON-encodable: %s", problem)
            return None
        if prettify:
            return json.dumps(
                dict(mapping), indent=_PRETTY_INDENT, ensure_ascii=False, allow_nan=False
            )
        return json.dumps(
            dict(mapping),
            separators=_COMPACT_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, OverflowError, RecursionError) as e:
        logger.debug("Mapping is not JSON-encodable: %s", e)
        return None


def _find_unencodable(value: object, active: set[int]) -> str | None:
    """Describe the first part of ``value`` that would not survive a round trip.

    ``active`` holds the ids of the containers on the current path.
    """
    if value is None or isinstance(value, (str, int, float)):
        return None
    if not isinstance(value, (Mapping, list)):
        return f"unsupported value of type {type(value).__name__}"
    if id(value) in active:
        return "circular reference"
    active.add(id(value))
    if isinstance(value, Mapping):
        for k, v in value.items():
            if not isinstance(k, str):
                return f"key {k!r} is not a string"
            problem = _find_unencodable(v, active)
            if problem is not None:
                return problem
    else:
        for item in value:
            problem = _find_unencodable(item, active)
            if problem is not None:
                return problem
    active.discard(id(value))
    return None
