"""Shape checks for collections and callables, and element matchers."""

from __future__ import annotations

import functools
import types
from collections.abc import Callable, Mapping, Sequence
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)
_CO_VARARGS = 0x04

Matcher = Callable[[Any, Any], bool]


def is_collection(obj: Any) -> bool:
    """Return True for ordered sequences that are not text."""
    return isinstance(obj, Sequence) and not isinstance(obj, _TEXT_TYPES)


def is_iteratee(obj: Any) -> bool:
    """Return True for sequences (other than text) and mappings."""
    return is_collection(obj) or isinstance(obj, Mapping)


def is_function(obj: Any) -> bool:
    """Return True for callables that are not classes."""
    return callable(obj) and not isinstance(obj, type)


def _function_and_bound(func: Any) -> tuple[types.FunctionType | None, int]:
    if isinstance(func, types.FunctionType):
        return func, 0
    if isinstance(func, types.MethodType):
        inner = func.__func__
        return (inner, 1) if isinstance(inner, types.FunctionType) else (None, 0)
    if isinstance(func, functools.partial):
        return None, 0
    call = getattr(type(func), "__call__", None)
    if isinstance(call, types.FunctionType):
        return call, 1
    return None, 0


def _accepts_arguments(func: Any, count: int) -> bool:
    """Return True if ``func`` can be called with ``count`` positional arguments.

    Callables whose parameters cannot be inspected are assumed to accept them.
    """
    target, bound = _function_and_bound(func)
    if target is None:
        return True
    code = target.__code__
    kw_defaults = target.__kwdefaults__ or {}
    keyword_only = code.co_varnames[code.co_argcount:code.co_argcount + code.co_kwonlyargcount]
    if any(name not in kw_defaults for name in keyword_only):
        return False
    positional = code.co_argcount - bound
    required = code.co_argcount - len(target.__defaults__ or ()) - bound
    if count < required:
        return False
    return bool(code.co_flags & _CO_VARARGS) or count <= positional


def _check_arity(func: Callable[..., Any], count: int) -> None:
    if not _accepts_arguments(func, count):
        plural = "" if count == 1 else "s"
        raise TypeError(
            f"Predicate function must have {count} parameter{plural} and must return boolean"
        )


def _values_equal(actual: Any, expected: Any) -> bool:
    if expected is None or actual is None:
        return actual is expected
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return bool(actual == expected)


def make_matcher(expected_or_predicate: Any, is_map: bool = False) -> Matcher:
    """Build a ``(key, value) -> bool`` matcher.

    A callable is used as a predicate: it receives the value, or the key and
    value when ``is_map`` is true. Anything else is compared for equality with
    the value, or with the key when ``is_map`` is true.
    """
    if is_function(expected_or_predicate):
        predicate = expected_or_predicate
        _check_arity(predicate, 2 if is_map else 1)

        def match_predicate(key: Any, value: Any) -> bool:
            if is_map:
                return bool(predicate(key, value))
            return bool(predicate(value))

        return match_predicate

    expected = expected_or_predicate

    def match_value(key: Any, value: Any) -> bool:
        actual = key if is_map else value
        return _values_equal(actual, expected)

    return match_value