"""Folding a sequence into a single value."""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any

from funkit.matching import _accepts_arguments, is_collection, is_function


def _numeric(value: Any) -> int | float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return 0


def _add(acc: Any, elem: Any) -> int | float:
    return _numeric(acc) + _numeric(elem)


def _multiply(acc: Any, elem: Any) -> int | float:
    return _numeric(acc) * _numeric(elem)


_SIGNS: dict[str, Callable[[Any, Any], Any]] = {"+": _add, "*": _multiply}


def reduce_items(items: Sequence[Any], reduce_func: Any, acc: Any) -> Any:
    """Fold ``items`` into one value, starting from ``acc``.

    ``reduce_func`` is either a two-argument function called as
    ``reduce_func(acc, elem)``, or one of the signs ``"+"`` and ``"*"``.
    With a sign, non-numeric elements count as zero; integers stay integers
    and any float makes the result a float.
    """
    if not is_collection(items):
        raise TypeError("First parameter must be an iteratee")
    if isinstance(reduce_func, str):
        try:
            combine = _SIGNS[reduce_func]
        except KeyError:
            raise ValueError("Invalid reduce sign, allowed: '+' and '*'") from None
    elif is_function(reduce_func) and _accepts_arguments(reduce_func, 2):
        combine = reduce_func
    else:
        raise TypeError("Second argument must be a valid function or sign")
    return functools.reduce(combine, items, acc)