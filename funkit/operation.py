"""Numeric sum and product over sequences of mixed values."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from funkit.matching import is_collection


def _numeric(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _checked(items: Any, name: str) -> Sequence[Any]:
    if not is_collection(items):
        raise TypeError(f"Type {type(items).__name__} is not supported by {name}")
    return items


def sum_values(items: Sequence[Any]) -> float:
    """Sum the numbers in a sequence; non-numeric elements count as zero."""
    return math.fsum(_numeric(item) for item in _checked(items, "Sum"))


def product(items: Sequence[Any]) -> float:
    """Multiply the numbers in a sequence; an empty sequence gives 0.0.

    Non-numeric elements count as zero.
    """
    values = _checked(items, "Product")
    if not values:
        return 0.0
    return math.prod(_numeric(item) for item in values)