"""
Basic Sequence Utilities Package

Reference implementations of elementary sequence algorithms, written out
by hand for study:

    - Bubble sort (characters, general elements, delimited tokens)
    - Order-preserving deduplication
    - Linear-scan minimum search

Every function is pure: inputs are copied, never mutated, and no state
survives a call.
"""

from sequtils.sorting import (
    SortDirection,
    SortReport,
    bubble_sort,
    trace_bubble_sort,
    sort_characters_ascending,
    sort_elements_ascending,
    sort_delimited_ascending,
)
from sequtils.dedup import (
    unique_in_order,
    deduplicate_delimited,
    deduplicate_characters,
    deduplicate_elements,
)
from sequtils.scanning import EmptyInputError, find_minimum

__version__ = "0.1.0"

__all__ = [
    "SortDirection",
    "SortReport",
    "bubble_sort",
    "trace_bubble_sort",
    "sort_characters_ascending",
    "sort_elements_ascending",
    "sort_delimited_ascending",
    "unique_in_order",
    "deduplicate_delimited",
    "deduplicate_characters",
    "deduplicate_elements",
    "EmptyInputError",
    "find_minimum",
]
