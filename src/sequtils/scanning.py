"""
Linear-scan extremum search.
"""

from typing import Any, Sequence


class EmptyInputError(ValueError):
    """Raised when a scan needs at least one element and gets none."""
    pass


def find_minimum(items: Sequence[Any]) -> Any:
    """
    Return the smallest element of *items*.

    Single pass, starting from the first element and replacing the current
    value whenever a strictly smaller one appears. Ties keep the earliest
    element.

    Raises:
        EmptyInputError: If *items* is empty
    """
    if len(items) == 0:
        raise EmptyInputError("find_minimum() arg is an empty sequence")

    current = items[0]
    for item in items:
        if item < current:
            current = item
    return current
