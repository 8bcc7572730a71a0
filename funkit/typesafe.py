"""Plain list helpers: search, filter, fixed-width sums, and in-place reordering."""

from __future__ import annotations

import random
import struct
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def find_first(items: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T | None, bool]:
    """Return ``(element, True)`` for the first match, or ``(None, False)``."""
    for item in items:
        if predicate(item):
            return item, True
    return None, False


def filter_values(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return a new list of the elements for which ``predicate`` is true."""
    return [item for item in items if predicate(item)]


def contains_value(items: Iterable[Any], value: Any) -> bool:
    """Return True if an element equal to ``value`` is present."""
    return any(item == value for item in items)


def index_of_value(items: Sequence[Any], value: Any) -> int:
    """Return the index of the first element equal to ``value``, or -1."""
    return next((index for index, item in enumerate(items) if item == value), -1)


def last_index_of_value(items: Sequence[Any], value: Any) -> int:
    """Return the index of the last element equal to ``value``, or -1."""
    for index in range(len(items) - 1, -1, -1):
        if items[index] == value:
            return index
    return -1


def _wrap_signed(total: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (total + half) % (1 << bits) - half


def _wrap_unsigned(total: int, bits: int) -> int:
    return total % (1 << bits)


def sum_int32(items: Iterable[int]) -> int:
    """Sum as a signed 32-bit integer, wrapping on overflow."""
    return _wrap_signed(sum(items), 32)


def sum_int64(items: Iterable[int]) -> int:
    """Sum as a signed 64-bit integer, wrapping on overflow."""
    return _wrap_signed(sum(items), 64)


def sum_uint32(items: Iterable[int]) -> int:
    """Sum as an unsigned 32-bit integer, wrapping on overflow."""
    return _wrap_unsigned(sum(items), 32)


def sum_uint64(items: Iterable[int]) -> int:
    """Sum as an unsigned 64-bit integer, wrapping on overflow."""
    return _wrap_unsigned(sum(items), 64)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def sum_float32(items: Iterable[float]) -> float:
    """Sum in single precision, rounding after every addition."""
    total = 0.0
    for item in items:
        total = _to_float32(total + _to_float32(item))
    return total


def reverse_in_place(items: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``items`` in place and return it."""
    items.reverse()
    return items


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def uniq_in_place(items: MutableSequence[T]) -> MutableSequence[T]:
    """Remove repeated elements in place, keeping first occurrences, and return ``items``."""
    seen: set[Any] = set()
    kept = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        kept.append(item)
    items[:] = kept
    return items


def shuffle_in_place(items: MutableSequence[T]) -> MutableSequence[T]:
    """Shuffle ``items`` in place with a Fisher-Yates pass and return it."""
    for index in range(len(items)):
        other = random.randrange(index + 1)
        items[index], items[other] = items[other], items[index]
    return items


def drop_first(items: Sequence[T], n: int) -> Sequence[T]:
    """Return the elements after the first ``n``.

    Raises ValueError when ``n`` is negative or larger than the length.
    """
    if not 0 <= n <= len(items):
        raise ValueError(f"cannot drop {n} elements from a sequence of length {len(items)}")
    return items[n:]