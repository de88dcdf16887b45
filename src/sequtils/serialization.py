"""
Serialization helpers for practice exercises and their results.

Round-trips exercises through an explicit dict representation, then JSON or
YAML. Tuples in arguments come back as lists.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from sequtils.exercises import Exercise, ExerciseResult


EXERCISE_KEYS = ("operation", "args", "expected", "description", "expect_error")


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def exercise_to_dict(ex: Exercise) -> Dict[str, Any]:
    return {
        "operation": ex.operation,
        "args": _plain(ex.args),
        "expected": _plain(ex.expected),
        "description": ex.description,
        "expect_error": ex.expect_error,
    }


def exercise_from_dict(d: Dict[str, Any]) -> Exercise:
    if "operation" not in d:
        raise ValueError(f"Exercise is missing 'operation': {d}")
    unknown = sorted(set(d) - set(EXERCISE_KEYS))
    if unknown:
        warnings.warn(f"Ignoring unknown exercise keys for {d['operation']}: {unknown}", UserWarning)
    args = d.get("args")
    if args is None:
        args = []
    if not isinstance(args, (list, tuple)):
        raise ValueError(f"Exercise args for {d['operation']} must be a list, got {type(args).__name__}")
    return Exercise(
        operation=d["operation"],
        args=list(args),
        expected=d.get("expected"),
        description=d.get("description"),
        expect_error=bool(d.get("expect_error", False)),
    )


def result_to_dict(r: ExerciseResult) -> Dict[str, Any]:
    return {
        "exercise": exercise_to_dict(r.exercise),
        "actual": _plain(r.actual),
        "error": r.error,
        "passed": r.passed,
    }


def exercises_to_json(exercises: List[Exercise]) -> str:
    return json.dumps([exercise_to_dict(ex) for ex in exercises], sort_keys=True)


def exercises_from_json(s: str) -> List[Exercise]:
    return [exercise_from_dict(d) for d in json.loads(s)]


def exercises_to_yaml(exercises: List[Exercise]) -> str:
    return yaml.safe_dump([exercise_to_dict(ex) for ex in exercises])


def exercises_from_yaml(s: str) -> List[Exercise]:
    return [exercise_from_dict(d) for d in yaml.safe_load(s) or []]


def results_to_json(results: List[ExerciseResult]) -> str:
    return json.dumps([result_to_dict(r) for r in results], sort_keys=True)


def results_to_yaml(results: List[ExerciseResult]) -> str:
    return yaml.safe_dump([result_to_dict(r) for r in results])
