"""Maximum and minimum of sequences, with case-insensitive string variants."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Any


def max_value(items: Iterable[Any]) -> Any:
    """Return the first greatest element, or None when there are none."""
    return max(items, default=None)


def min_value(items: Iterable[Any]) -> Any:
    """Return the first smallest element, or None when there are none."""
    return min(items, default=None)


def _keep_greater(best: str, current: str) -> str:
    return best if best.lower() > current.lower() else current


def _keep_smaller(best: str, current: str) -> str:
    return best if best.lower() < current.lower() else current


def max_string(items: Iterable[str]) -> str | None:
    """Return the greatest string ignoring case; ties go to the later one."""
    strings = list(items)
    if not strings:
        return None
    return reduce(_keep_greater, strings)


def min_string(items: Iterable[str]) -> str | None:
    """Return the smallest string ignoring case; ties go to the later one."""
    strings = list(items)
    if not strings:
        return None
    return reduce(_keep_smaller, strings)