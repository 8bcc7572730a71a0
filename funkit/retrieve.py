"""Looking up values along dotted paths through objects, mappings and sequences."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from funkit.matching import is_collection
from funkit.transform import flatten_deep

_MISSING = object()

_SCALARS = (str, bytes, bytearray, int, float, complex)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    return False


def _map_sequence(items: Any, path: str) -> Any:
    if not items:
        return []
    results = []
    for item in items:
        value = _lookup(item, path)
        if value is _MISSING or _is_zero(value):
            continue
        results.append(value)
    if not results:
        return _MISSING
    if all(is_collection(value) for value in results):
        return flatten_deep(results)
    return results


def _step(value: Any, part: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(part, _MISSING)
    if is_collection(value):
        return _map_sequence(value, part)
    if isinstance(value, _SCALARS) or part.startswith("_"):
        return _MISSING
    return getattr(value, part, _MISSING)


def _lookup(value: Any, path: str) -> Any:
    if is_collection(value):
        return _map_sequence(value, path)
    for part in path.split("."):
        if value is None or value is _MISSING:
            return _MISSING
        value = _step(value, part)
    return value


def get(obj: Any, path: str) -> Any:
    """Return the value at dotted ``path``, or None if it is missing or zero.

    Path parts name attributes or mapping keys. Over a sequence the path is
    applied to each element; missing and zero results are left out and nested
    lists are flattened.
    """
    result = _lookup(obj, path)
    if result is _MISSING or _is_zero(result):
        return None
    return result


def get_allow_zero(obj: Any, path: str) -> Any:
    """Like :func:`get`, but zero values such as 0, False and "" are returned."""
    result = _lookup(obj, path)
    return None if result is _MISSING else result


def get_or_else(value: Any, default: Any) -> Any:
    """Return ``value`` unless it is None, in which case return ``default``."""
    return default if value is None else value