"""
Bubble Sort Utilities

Classic O(n^2) bubble sort and the ascending sort operations built on it:
    - Characters of a string
    - Any sequence of comparable elements
    - Tokens of a delimiter-joined string

ALGORITHM:
    For a sequence of length n, run n-1 passes. Pass i sweeps adjacent
    pairs (j, j+1) for j = 0 .. n-2-i and swaps any out-of-order pair.
    Ascending order swaps on ">", descending on "<".

    There is no early exit for already-sorted input. The pass and
    comparison counts are therefore fixed by the input length, which
    trace_bubble_sort() reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Sequence


class SortDirection(Enum):
    """Ordering produced by bubble_sort()."""
    ASCENDING = "ascending"    # swap when left > right
    DESCENDING = "descending"  # swap when left < right


def _out_of_order(left: Any, right: Any, direction: SortDirection) -> bool:
    if direction is SortDirection.ASCENDING:
        return left > right
    return left < right


def _bubble_sort_in_place(items: List[Any], direction: SortDirection) -> int:
    """Sort a private list in place. Returns the number of swaps made."""
    n = len(items)
    swaps = 0
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if _out_of_order(items[j], items[j + 1], direction):
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
    return swaps


def bubble_sort(
    items: Sequence[Any],
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[Any]:
    """
    Return a new list with the items of *items* bubble-sorted.

    Args:
        items: Any finite sequence of mutually comparable elements
        direction: SortDirection.ASCENDING (default) or DESCENDING

    Returns:
        A fresh list. The caller's sequence is never mutated.
    """
    result = list(items)
    _bubble_sort_in_place(result, direction)
    return result


@dataclass
class SortReport:
    """Work done by one bubble sort run."""
    result: List[Any] = field(default_factory=list)
    direction: SortDirection = SortDirection.ASCENDING
    length: int = 0
    passes: int = 0
    comparisons: int = 0
    swaps: int = 0

    def summary(self) -> str:
        lines = [
            f"Bubble sort ({self.direction.value}) of {self.length} element(s)",
            f"  passes:      {self.passes}",
            f"  comparisons: {self.comparisons}",
            f"  swaps:       {self.swaps}",
            f"  result:      {self.result}",
        ]
        return "\n".join(lines)


def trace_bubble_sort(
    items: Sequence[Any],
    direction: SortDirection = SortDirection.ASCENDING,
) -> SortReport:
    """
    Bubble sort *items* and report the work it took.

    The swap count equals the number of inversions in the input, so an
    already sorted input reports zero swaps while still paying the full
    n(n-1)/2 comparisons.
    """
    result = list(items)
    n = len(result)
    swaps = _bubble_sort_in_place(result, direction)
    return SortReport(
        result=result,
        direction=direction,
        length=n,
        passes=max(n - 1, 0),
        comparisons=n * (n - 1) // 2,
        swaps=swaps,
    )


def sort_characters_ascending(text: str) -> str:
    """Sort the characters of *text*: "51654" -> "14556"."""
    return "".join(bubble_sort(text))


def sort_elements_ascending(items: Sequence[Any]) -> List[Any]:
    """Sort strings or numbers ascending: [5, 9, 8] -> [5, 8, 9]."""
    return bubble_sort(items)


def sort_delimited_ascending(text: str, delimiter: str = ",") -> str:
    """
    Sort the tokens of a delimiter-joined string lexicographically.

    Tokens are compared as strings, so "10" sorts before "9". Empty tokens
    from leading, trailing or doubled delimiters sort first:

        "5,1,8,9,7" -> "1,5,7,8,9"
        "b,a,"      -> ",a,b"
    """
    tokens = text.split(delimiter)
    return delimiter.join(bubble_sort(tokens))
