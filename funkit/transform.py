"""Reshaping collections: chunking, mapping, flattening, reordering and pruning."""

from __future__ import annotations

import dataclasses
import random
from collections.abc import Callable, Iterator, Mapping, MutableSequence, Sequence
from typing import Any

from funkit.matching import _accepts_arguments, is_collection, is_function, is_iteratee


def chunk(items: Sequence[Any], size: int) -> Any:
    """Split a sequence into lists of ``size`` elements; the last may be shorter.

    A size of zero returns ``items`` unchanged.
    """
    if not is_collection(items):
        raise TypeError("First parameter must be an array or slice")
    if size == 0:
        return items
    step = abs(size)
    return [list(items[start:start + step]) for start in range(0, len(items), step)]


def to_map(items: Sequence[Any], pivot: str) -> dict[Any, Any]:
    """Index the elements of a sequence by their attribute named ``pivot``."""
    if not is_collection(items):
        raise TypeError(f"{items!r} must be a sequence")
    return {getattr(item, pivot): item for item in items}


def _is_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2


def map_items(items: Any, func: Callable[..., Any]) -> list[Any] | dict[Any, Any]:
    """Apply ``func`` to each element of a sequence, or each key and value of a mapping.

    When every call returns a ``(key, value)`` tuple the results are gathered
    into a dict; otherwise they are returned as a list.
    """
    if not is_iteratee(items):
        raise TypeError("First parameter must be an iteratee")
    if not is_function(func):
        raise TypeError("Second argument must be function")
    if isinstance(items, Mapping):
        if not _accepts_arguments(func, 2):
            raise TypeError(
                "Map function with a map must have two parameters "
                "and must return one or two parameters"
            )
        results = [func(key, value) for key, value in items.items()]
    else:
        if not _accepts_arguments(func, 1):
            raise TypeError(
                "Map function with an array must have one parameter "
                "and must return one or two parameters"
            )
        results = [func(item) for item in items]
    if results and all(_is_pair(result) for result in results):
        return dict(results)
    return results


def flat_map(items: Any, func: Callable[..., Any]) -> list[Any]:
    """Map like :func:`map_items`, then flatten the results by one level."""
    return flatten(map_items(items, func))


def flatten(items: Sequence[Sequence[Any]]) -> list[Any]:
    """Flatten a sequence of sequences by one level."""
    if not is_collection(items) or not all(is_collection(inner) for inner in items):
        raise TypeError("Argument must be an array or slice of at least two dimensions")
    return [element for inner in items for element in inner]


def _walk(items: Sequence[Any]) -> Iterator[Any]:
    for item in items:
        if is_collection(item):
            yield from _walk(item)
        else:
            yield item


def flatten_deep(items: Sequence[Any]) -> list[Any]:
    """Flatten nested sequences recursively into one list."""
    if not is_collection(items):
        raise TypeError("Argument must be an array or slice")
    return list(_walk(items))


def shuffle(items: Sequence[Any]) -> list[Any]:
    """Return a new list holding the elements in random order."""
    if not is_collection(items):
        raise TypeError(f"Type {type(items).__name__} is not supported by Shuffle")
    return random.sample(list(items), len(items))


def reverse(items: Any) -> Any:
    """Return a string or sequence with its elements in reverse order."""
    if isinstance(items, str):
        return items[::-1]
    if is_collection(items):
        return list(reversed(items))
    raise TypeError(f"Type {type(items).__name__} is not supported by Reverse")


def uniq(items: Sequence[Any]) -> list[Any]:
    """Return the elements without repeats, keeping first occurrences in order.

    Values of different types never count as repeats of each other.
    """
    if not is_collection(items):
        raise TypeError(f"Type {type(items).__name__} is not supported by Uniq")
    seen: set[tuple[type, Any]] = set()
    result = []
    for item in items:
        key = (type(item), item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def convert_slice(items: Sequence[Any], out: MutableSequence[Any]) -> MutableSequence[Any]:
    """Append the elements of ``items`` to ``out`` and return ``out``."""
    if not isinstance(out, MutableSequence):
        raise TypeError("Second argument must be a mutable sequence")
    if not is_collection(items):
        raise TypeError("First argument must be an array or slice")
    out.extend(items)
    return out


def drop(items: Sequence[Any], n: int) -> list[Any]:
    """Return the elements after the first ``n``."""
    if not is_collection(items):
        raise TypeError(f"Type {type(items).__name__} is not supported by Drop")
    if not 0 <= n <= len(items):
        raise ValueError(f"cannot drop {n} elements from a sequence of length {len(items)}")
    return list(items[n:])


def _is_struct(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _zero(spec: dataclasses.Field) -> Any:
    if spec.default is not dataclasses.MISSING:
        return spec.default
    if spec.default_factory is not dataclasses.MISSING:
        return spec.default_factory()
    return None


def _blank(obj: Any) -> Any:
    blank = object.__new__(type(obj))
    for spec in dataclasses.fields(obj):
        object.__setattr__(blank, spec.name, _zero(spec))
    return blank


def _field_name(obj: Any, part: str, tag: str | None) -> str:
    specs = dataclasses.fields(obj)
    if tag is None:
        if any(spec.name == part for spec in specs):
            return part
        raise ValueError(f"field name {part} is not found in struct {type(obj).__name__}")
    for spec in specs:
        if tag in spec.metadata and spec.metadata[tag] == part:
            return spec.name
    raise ValueError(f"Struct tag {tag} is not found with key {part}")


def _prune(value: Any, ret: Any, parts: list[str], tag: str | None) -> Any:
    if not parts:
        # The value at the end of a path is shared, not copied.
        return value
    if value is None:
        return ret
    if _is_struct(value):
        if type(ret) is not type(value):
            ret = _blank(value)
        name = _field_name(value, parts[0], tag)
        pruned = _prune(getattr(value, name), getattr(ret, name), parts[1:], tag)
        object.__setattr__(ret, name, pruned)
        return ret
    if is_collection(value):
        if is_collection(ret) and len(ret) == len(value):
            slots = list(ret)
        else:
            slots = [None] * len(value)
        for index, element in enumerate(value):
            slots[index] = _prune(element, slots[index], parts, tag)
        return tuple(slots) if isinstance(value, tuple) else slots
    raise ValueError(
        f"path {'.'.join(parts)} cannot be looked up on kind of {type(value).__name__}"
    )


def _prune_paths(obj: Any, paths: Sequence[str], tag: str | None) -> Any:
    result = _blank(obj) if _is_struct(obj) else None
    for path in paths:
        result = _prune(obj, result, path.split("."), tag)
    return result


def prune(obj: Any, paths: Sequence[str]) -> Any:
    """Return a copy of ``obj`` holding only the fields named by dotted ``paths``.

    Dataclass fields are looked up by name; sequences are pruned element by
    element. Fields off every path are reset to their defaults, or None.
    Raises ValueError when a path cannot be followed.
    """
    return _prune_paths(obj, paths, None)


def prune_by_tag(obj: Any, paths: Sequence[str], tag: str) -> Any:
    """Like :func:`prune`, but path parts match the field metadata entry ``tag``."""
    return _prune_paths(obj, paths, tag)