"""Inline conditional selection."""

from __future__ import annotations

from typing import Any


def short_if(condition: bool, a: Any, b: Any) -> Any:
    """Return ``a`` when ``condition`` holds, otherwise ``b``."""
    return a if condition else b