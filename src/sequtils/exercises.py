"""
Practice exercises: sample calls of the sequence utilities as data.

An Exercise names an operation, its positional arguments and (optionally)
the result it should produce. The runner looks the operation up in
OPERATIONS, calls it and records what came back, so the same sample set
drives the demo script, the test suite and the YAML/JSON files written by
sequtils.serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from sequtils.sorting import (
    sort_characters_ascending,
    sort_elements_ascending,
    sort_delimited_ascending,
)
from sequtils.dedup import (
    deduplicate_delimited,
    deduplicate_characters,
    deduplicate_elements,
)
from sequtils.scanning import EmptyInputError, find_minimum


OPERATIONS: Dict[str, Callable[..., Any]] = {
    "sort_characters_ascending": sort_characters_ascending,
    "sort_elements_ascending": sort_elements_ascending,
    "sort_delimited_ascending": sort_delimited_ascending,
    "deduplicate_delimited": deduplicate_delimited,
    "deduplicate_characters": deduplicate_characters,
    "deduplicate_elements": deduplicate_elements,
    "find_minimum": find_minimum,
}


class UnknownOperationError(KeyError):
    """Raised when an exercise names an operation not in OPERATIONS."""
    pass


@dataclass
class Exercise:
    """
    One sample call.

    Properties:
        operation: Key into OPERATIONS (e.g., "find_minimum")
        args: Positional arguments for the call
        expected: Result the call should return (None = not checked)
        description: Human-readable note (optional)
        expect_error: The call must raise EmptyInputError
    """

    operation: str
    args: List[Any] = field(default_factory=list)
    expected: Any = None
    description: Optional[str] = None
    expect_error: bool = False

    def call_signature(self) -> str:
        rendered = ", ".join(repr(a) for a in self.args)
        return f"{self.operation}({rendered})"


@dataclass
class ExerciseResult:
    """Outcome of running an Exercise."""

    exercise: Exercise
    actual: Any = None
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        expected = self.exercise.expected
        if self.exercise.expect_error:
            return self.error is not None
        if self.error is not None:
            return False
        return expected is None or self.actual == expected


def resolve_operation(name: str) -> Callable[..., Any]:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation: {name}") from None


def run_exercise(exercise: Exercise) -> ExerciseResult:
    """
    Call the exercise's operation with its arguments.

    EmptyInputError is recorded on the result. Any other exception
    propagates to the caller.
    """
    operation = resolve_operation(exercise.operation)
    try:
        actual = operation(*exercise.args)
    except EmptyInputError as e:
        return ExerciseResult(exercise=exercise, error=str(e))
    return ExerciseResult(exercise=exercise, actual=actual)


def run_exercises(exercises: List[Exercise]) -> List[ExerciseResult]:
    return [run_exercise(ex) for ex in exercises]


def build_practice_exercises() -> List[Exercise]:
    """The classic sample calls, with the results they are known to give."""
    return [
        Exercise(
            operation="sort_characters_ascending",
            args=["51654"],
            expected="14556",
            description="Order the characters of a single string",
        ),
        Exercise(
            operation="sort_elements_ascending",
            args=[[1, 5, 6, 4, 5]],
            expected=[1, 4, 5, 5, 6],
            description="Order a list of numbers",
        ),
        Exercise(
            operation="sort_elements_ascending",
            args=[["shaw", "kailash", "shaw"]],
            expected=["kailash", "shaw", "shaw"],
            description="Order a list of strings",
        ),
        Exercise(
            operation="sort_delimited_ascending",
            args=["1,5,6,4,5"],
            expected="1,4,5,5,6",
            description="Order comma-separated tokens",
        ),
        Exercise(
            operation="sort_delimited_ascending",
            args=["5,1,8,9,7"],
            expected="1,5,7,8,9",
        ),
        Exercise(
            operation="deduplicate_delimited",
            args=["1,5,6,4,5"],
            expected="1,5,6,4",
            description="Remove repeated comma-separated tokens",
        ),
        Exercise(
            operation="deduplicate_characters",
            args=["hello"],
            expected="helo",
            description="Remove repeated letters",
        ),
        Exercise(
            operation="deduplicate_elements",
            args=[["kailash", "shaw", "kailash"]],
            expected=["kailash", "shaw"],
            description="Remove repeated list entries",
        ),
        Exercise(
            operation="find_minimum",
            args=[[5, 9, 7, 5, 1, 6, 8, 9, 7]],
            expected=1,
            description="Smallest number by linear scan",
        ),
        Exercise(
            operation="find_minimum",
            args=[[]],
            expect_error=True,
            description="Empty input is an error, not a silent None",
        ),
    ]
