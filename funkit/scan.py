"""Iterating over collections and taking their ends."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from funkit.matching import _accepts_arguments, is_collection, is_function, is_iteratee


def _accepts(func: Any, count: int) -> bool:
    return is_function(func) and _accepts_arguments(func, count)


def _visit(items: Any, func: Callable[..., Any], from_right: bool) -> None:
    if not is_iteratee(items):
        raise TypeError("First parameter must be an iteratee")
    if isinstance(items, Mapping):
        if not _accepts(func, 2):
            raise TypeError("Second argument must be a function with two parameters")
        pairs = list(items.items())
        for key, value in reversed(pairs) if from_right else pairs:
            func(key, value)
        return
    if not _accepts(func, 1):
        raise TypeError("Second argument must be a function with one parameter")
    for item in reversed(items) if from_right else items:
        func(item)


def for_each(items: Any, func: Callable[..., Any]) -> None:
    """Call ``func`` on each element, or on each key and value of a mapping."""
    _visit(items, func, from_right=False)


def for_each_right(items: Any, func: Callable[..., Any]) -> None:
    """Like :func:`for_each`, but starting from the end."""
    _visit(items, func, from_right=True)


def _checked(items: Any, name: str) -> Sequence[Any]:
    if not is_collection(items):
        raise TypeError(f"Type {type(items).__name__} is not supported by {name}")
    return items


def head(items: Sequence[Any]) -> Any:
    """Return the first element, or None for an empty sequence."""
    values = _checked(items, "Head")
    return values[0] if values else None


def last(items: Sequence[Any]) -> Any:
    """Return the last element, or None for an empty sequence."""
    values = _checked(items, "Last")
    return values[-1] if values else None


def initial(items: Sequence[Any]) -> Sequence[Any]:
    """Return all but the last element; short sequences come back unchanged."""
    values = _checked(items, "Initial")
    return values if len(values) <= 1 else values[:-1]


def tail(items: Sequence[Any]) -> Sequence[Any]:
    """Return all but the first element; short sequences come back unchanged."""
    values = _checked(items, "Tail")
    return values if len(values) <= 1 else values[1:]