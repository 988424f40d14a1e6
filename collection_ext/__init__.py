"""Convenience operations for lists, sets and dictionaries.

Every operation is available as a plain function taking the container as its
first argument, and as a method or operator on the :class:`ExtList`,
:class:`ExtSet` and :class:`ExtDict` subclasses of the built-in types.
"""

from .collection_ops import as_list
from .collection_ops import average
from .collection_ops import full_range
from .collection_ops import indices_of
from .collection_ops import Number
from .date_util import DateComponent
from .date_util import DAY_PRECISION
from .date_util import normalize_date
from .ext_dict import ExtDict
from .ext_list import ExtList
from .ext_set import ExtSet
from .json_util import json_string
from .json_util import JSONDict
from .json_util import JSONList
from .json_util import JSONPrimitive
from .json_util import JSONValue
from .mapping_ops import has_key
from .mapping_ops import keys_for_value
from .mapping_ops import lowercase_all_keys
from .mapping_ops import merge
from .mapping_ops import merge_in_place
from .mapping_ops import subtract_keys
from .mapping_ops import subtract_keys_in_place
from .mapping_ops import uppercase_all_keys
from .sequence_ops import all_matching
from .sequence_ops import count_where
from .sequence_ops import equal_unordered
from .sequence_ops import histogram
from .sequence_ops import remove_all_occurrences
from .sequence_ops import remove_duplicates
from .sequence_ops import sliced_by_date
from .sequence_ops import without_duplicates


__all__ = [
    # Extension types
    "ExtDict",
    "ExtList",
    "ExtSet",
    # Sequence operations
    "equal_unordered",
    "sliced_by_date",
    "remove_all_occurrences",
    "remove_duplicates",
    "without_duplicates",
    "count_where",
    "all_matching",
    "histogram",
    # Collection helpers
    "Number",
    "as_list",
    "full_range",
    "average",
    "indices_of",
    # Date granularity
    "DateComponent",
    "DAY_PRECISION",
    "normalize_date",
    # Mapping operations
    "merge",
    "merge_in_place",
    "subtract_keys",
    "subtract_keys_in_place",
    "has_key",
    "keys_for_value",
    "lowercase_all_keys",
    "uppercase_all_keys",
    # JSON
    "JSONPrimitive",
    "JSONValue",
    "JSONDict",
    "JSONList",
    "json_string",
]
