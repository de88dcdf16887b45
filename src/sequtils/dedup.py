"""
Order-preserving deduplication.

Each function keeps the first occurrence of every distinct element and
drops later repeats. Retained elements stay in their original relative
order: this is NOT sort-then-dedup.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence


def unique_in_order(items: Iterable[Any]) -> List[Any]:
    """
    Linear scan keeping each element the first time it is seen.

    Hashable elements are tracked in a set. Unhashable ones (lists, dicts,
    sets) fall back to an equality scan of the result built so far. Once an
    unhashable element is kept, new hashable elements are also checked
    against the result, since a frozenset can equal an earlier set.
    """
    result: List[Any] = []
    seen = set()
    has_unhashable = False
    for item in items:
        try:
            hash(item)
        except TypeError:
            if item in result:
                continue
            has_unhashable = True
        else:
            if item in seen or (has_unhashable and item in result):
                continue
            seen.add(item)
        result.append(item)
    return result


def deduplicate_delimited(text: str, delimiter: str = ",") -> str:
    """Drop repeated tokens: "1,5,6,4,5" -> "1,5,6,4"."""
    return delimiter.join(unique_in_order(text.split(delimiter)))


def deduplicate_characters(text: str) -> str:
    """Drop repeated characters: "hello" -> "helo"."""
    return "".join(unique_in_order(text))


def deduplicate_elements(items: Sequence[Any]) -> List[Any]:
    """Drop repeated strings or numbers, returning a new list."""
    return unique_in_order(items)
