#!/usr/bin/env python3
"""
Demo: Run the practice exercises and print each call with its result.
"""

from sequtils.exercises import build_practice_exercises, run_exercises
from sequtils.serialization import exercises_to_yaml
from sequtils.sorting import SortDirection, trace_bubble_sort


def print_results(results):
    """Pretty-print exercise results."""
    print()
    print("=" * 70)
    print("PRACTICE EXERCISES")
    print("=" * 70)
    print()

    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"[{status}] {result.exercise.call_signature()}")
        if result.exercise.description:
            print(f"    {result.exercise.description}")
        if result.error:
            print(f"    raised: {result.error}")
        else:
            print(f"    -> {result.actual!r}")
    print()

    passed = sum(1 for r in results if r.passed)
    print(f"{passed}/{len(results)} exercises passed")


def main():
    results = run_exercises(build_practice_exercises())
    print_results(results)

    print()
    print("-" * 70)
    print(trace_bubble_sort([5, 9, 7, 5, 1, 6, 8, 9, 7]).summary())
    print(trace_bubble_sort([1, 2, 3, 4, 5], direction=SortDirection.DESCENDING).summary())

    print()
    print("-" * 70)
    print("Exercises as YAML:")
    print(exercises_to_yaml(build_practice_exercises()))


if __name__ == "__main__":
    main()
