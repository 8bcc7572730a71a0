"""Searching sequences, mappings and strings for elements."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from funkit.matching import (
    _accepts_arguments,
    is_collection,
    is_function,
    is_iteratee,
    make_matcher,
)


def _check_search_args(items: Any, predicate: Any) -> None:
    if not is_iteratee(items):
        raise TypeError("First parameter must be an iteratee")
    if not is_function(predicate) or not _accepts_arguments(predicate, 1):
        raise TypeError("Second argument must be function")


def filter_items(items: Any, predicate: Callable[[Any], bool]) -> list[Any]:
    """Return the elements of a sequence for which ``predicate`` is true."""
    _check_search_args(items, predicate)
    if isinstance(items, Mapping):
        raise TypeError(f"Type {type(items).__name__} is not supported by Filter")
    return [item for item in items if predicate(item)]


def find_key(items: Any, predicate: Callable[[Any], bool]) -> tuple[Any, Any]:
    """Return ``(key, element)`` for the first element matching ``predicate``.

    Keys are indices for sequences and keys for mappings. When nothing
    matches, ``(None, None)`` is returned.
    """
    _check_search_args(items, predicate)
    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    for key, value in pairs:
        if predicate(value):
            return key, value
    return None, None


def find(items: Any, predicate: Callable[[Any], bool]) -> Any:
    """Return the first element matching ``predicate``, or None."""
    return find_key(items, predicate)[1]


def index_of(container: Any, elem: Any) -> int:
    """Return the index of the first occurrence of ``elem``, or -1.

    Strings are searched for a substring; sequences are searched for an equal
    element or, if ``elem`` is callable, one the predicate accepts.
    """
    if isinstance(container, str):
        return container.find(elem)
    if is_collection(container):
        matches = make_matcher(elem)
        return next(
            (index for index, value in enumerate(container) if matches(None, value)),
            -1,
        )
    return -1


def last_index_of(container: Any, elem: Any) -> int:
    """Return the index of the last occurrence of ``elem``, or -1."""
    if isinstance(container, str):
        return container.rfind(elem)
    if is_collection(container):
        matches = make_matcher(elem)
        for index in range(len(container) - 1, -1, -1):
            if matches(None, container[index]):
                return index
    return -1


def contains(container: Any, elem: Any) -> bool:
    """Return True if ``elem`` is present in a string, mapping or sequence.

    Mappings are matched on their keys, or with a ``(key, value)`` predicate.
    """
    if isinstance(container, str):
        return elem in container
    if isinstance(container, Mapping):
        matches = make_matcher(elem, True)
        return any(matches(key, value) for key, value in container.items())
    if is_collection(container):
        matches = make_matcher(elem)
        return any(matches(None, value) for value in container)
    raise TypeError(
        f"Type {type(container).__name__} is not supported by Contains, "
        "supported types are String, Map, Slice, Array"
    )


def every(container: Any, *args: Any) -> bool:
    """Return True if every given element is present in ``container``."""
    return all(contains(container, elem) for elem in args)


def some(container: Any, *args: Any) -> bool:
    """Return True if at least one given element is present in ``container``."""
    return any(contains(container, elem) for elem in args)