"""Set-like operations on sequences: subset, subtraction and exclusion."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from funkit.matching import is_collection
from funkit.presence import contains


def _check_pair(x: Any, y: Any) -> None:
    if not is_collection(x):
        raise TypeError("First parameter must be a collection")
    if not is_collection(y):
        raise TypeError("Second parameter must be a collection")
    if type(x) is not type(y):
        raise TypeError("Parameters must have the same type")


def subset(x: Sequence[Any], y: Sequence[Any]) -> bool:
    """Return True if every element of ``x`` is present in ``y``.

    A longer ``x`` is never a subset of a shorter ``y``.
    """
    _check_pair(x, y)
    if not x:
        return True
    if not y or len(y) < len(x):
        return False
    return all(contains(y, item) for item in x)


def subtract(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return the elements of ``x`` not present in ``y``, keeping duplicates."""
    _check_pair(x, y)
    removed = set(y)
    return [item for item in x if item not in removed]


def subtract_string(x: list[str], y: list[str]) -> list[str]:
    """Return the strings of ``x`` not present in ``y``, keeping duplicates.

    When ``y`` is empty, ``x`` itself is returned.
    """
    if not x:
        return []
    if not y:
        return x
    removed = set(y)
    return [item for item in x if item not in removed]


def without(items: Sequence[Any], *args: Any) -> list[Any]:
    """Return the elements of ``items`` that equal none of the given values.

    Each value must have the type of the elements of ``items``.
    """
    if not is_collection(items):
        raise TypeError("First parameter must be a collection")
    element_types = {type(item) for item in items}
    if element_types and any(type(value) not in element_types for value in args):
        raise TypeError("Values must have the same type")
    return [item for item in items if item not in args]