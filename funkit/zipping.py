"""Pairwise zipping of two sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from funkit.matching import is_collection


@dataclass(frozen=True)
class Tuple:
    """A pair of elements taken at the same position from two sequences."""

    element1: Any
    element2: Any


def zip_pairs(first: Any, second: Any) -> list[Tuple]:
    """Pair up elements of two sequences, truncated to the shorter one.

    If either argument is not a sequence, the result is empty.
    """
    if not (is_collection(first) and is_collection(second)):
        return []
    return [Tuple(a, b) for a, b in zip(first, second)]