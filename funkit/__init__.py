"""Functional helpers for sequences, mappings and objects."""

__version__ = "0.1.0"

__all__ = [
    "conditional",
    "extrema",
    "matching",
    "operation",
    "permutation",
    "predicate",
    "presence",
    "reduce",
    "retrieve",
    "scan",
    "sets",
    "transform",
    "typesafe",
    "zipping",
]