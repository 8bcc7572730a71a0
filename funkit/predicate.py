"""Combining several predicates over a single value."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from funkit.matching import _accepts_arguments, is_collection, is_function

_SHAPE_MESSAGE = "Predicate function must have 1 parameter and must return boolean"


def _evaluate(value: Any, wanted: bool, predicates: Any) -> bool:
    if not is_collection(predicates):
        raise TypeError("Predicates parameter must be an iteratee")
    for predicate in predicates:
        if not is_function(predicate):
            raise TypeError("Got non function as predicate")
        if not _accepts_arguments(predicate, 1):
            raise TypeError(_SHAPE_MESSAGE)
        result = predicate(value)
        if not isinstance(result, bool):
            raise TypeError(_SHAPE_MESSAGE)
        if result is wanted:
            return wanted
    return not wanted


def any_predicates(value: Any, predicates: Sequence[Callable[[Any], bool]]) -> bool:
    """Return True if at least one predicate holds for ``value``."""
    return _evaluate(value, True, predicates)


def all_predicates(value: Any, predicates: Sequence[Callable[[Any], bool]]) -> bool:
    """Return True if every predicate holds for ``value``."""
    return _evaluate(value, False, predicates)