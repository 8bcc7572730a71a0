# funkit

Small, dependency-free helpers for working with Python sequences, mappings
and objects in a functional style.

## Installation

```
pip install funkit
```

## Modules

| Module | What it offers |
| --- | --- |
| `funkit.matching` | `is_collection` (sequences other than text), `is_iteratee` (collections and mappings), `is_function` (callables that are not classes), `make_matcher` (builds a `(key, value) -> bool` matcher from a value or a predicate) |
| `funkit.extrema` | `max_value`, `min_value`, and case-insensitive `max_string` / `min_string`; all return `None` for empty input |
| `funkit.operation` | `sum_values`, `product`, returning floats; non-numeric elements count as zero and `product([])` is `0.0` |
| `funkit.permutation` | `next_permutation` rearranges a list in place into the next greater permutation, wrapping around at the end; raises `ValueError` for an empty list |
| `funkit.conditional` | `short_if(condition, a, b)` |
| `funkit.zipping` | `zip_pairs` returns a list of `Tuple(element1, element2)` pairs, truncated to the shorter input; empty if either input is not a sequence |
| `funkit.presence` | `filter_items`, `find`, `find_key`, `index_of`, `last_index_of`, `contains`, `every`, `some` |
| `funkit.predicate` | `any_predicates`, `all_predicates` over a list of one-argument predicates |
| `funkit.scan` | `for_each`, `for_each_right`, `head`, `last`, `initial`, `tail` |
| `funkit.sets` | `subset`, `subtract`, `subtract_string`, `without` |
| `funkit.transform` | `chunk`, `to_map`, `map_items`, `flat_map`, `flatten`, `flatten_deep`, `shuffle`, `reverse`, `uniq`, `convert_slice`, `drop`, `prune`, `prune_by_tag` |
| `funkit.reduce` | `reduce_items` with a two-argument function or the signs `"+"` / `"*"` |
| `funkit.retrieve` | `get`, `get_allow_zero`, `get_or_else` for dotted-path lookup |
| `funkit.typesafe` | `find_first`, `filter_values`, `contains_value`, `index_of_value`, `last_index_of_value`, `reverse_in_place`, `reverse_string`, `uniq_in_place`, `shuffle_in_place`, `drop_first`, and wrapping fixed-width sums `sum_int32`, `sum_int64`, `sum_uint32`, `sum_uint64`, `sum_float32` |

## Examples

```python
from funkit.presence import contains, some, filter_items, find_key, index_of
from funkit.transform import chunk, uniq, map_items
from funkit.retrieve import get, get_allow_zero
from funkit.reduce import reduce_items

contains(["foo", "bar"], "bar")                     # True
contains("florent", "rent")                         # True
contains({1: "a", 3: "c"}, 1)                       # True (mappings match on keys)
some("Mark Shaun", "Marc", "Sean")                  # False
filter_items([1, 2, 3, 4], lambda x: x % 2 == 0)    # [2, 4]
find_key({"a": 1, "b": 2}, lambda v: v == 2)        # ("b", 2)
index_of(["foo", "bar"], lambda v: v == "bar")      # 1

chunk([0, 1, 2, 3, 4], 2)                           # [[0, 1], [2, 3], [4]]
uniq([0, 1, 1, 2, 3, 0, 0, 12])                     # [0, 1, 2, 3, 12]
map_items([1, 2], lambda x: (x, x * 10))            # {1: 10, 2: 20}

get({"bar": {"name": "foobar"}}, "bar.name")        # "foobar"
get({"count": 0}, "count")                          # None (zero values are dropped)
get_allow_zero({"count": 0}, "count")               # 0
reduce_items([1, 2, 3, 4], "+", 0)                  # 10
reduce_items(["1", "2"], lambda acc, s: acc + s, "")  # "12"
```

### Pruning dataclasses

`prune` returns a copy of a dataclass instance that keeps only the fields
named by dotted paths; other fields are reset to their defaults, or `None`.
`prune_by_tag` matches path parts against a field's metadata entry instead
of its name. A path that cannot be followed raises `ValueError`.

```python
from dataclasses import dataclass, field
from funkit.transform import prune, prune_by_tag

@dataclass
class Person:
    name: str = field(default="", metadata={"json": "name"})
    age: int = field(default=0, metadata={"json": "age"})

prune(Person("Ada", 36), ["name"])                  # Person(name="Ada", age=0)
prune_by_tag(Person("Ada", 36), ["age"], "json")    # Person(name="", age=36)
```

## Errors

Helpers raise `TypeError` when given an unsupported input, for example
`contains(1, 2)` or `head(42)`, and `ValueError` for out-of-range values
such as `drop([1, 2], 5)` or an unknown reduce sign.

## What it does not do

funkit is a library only: it has no command-line tool and nothing to run
on its own.

## Running the tests

```
pip install -e ".[test]"
pytest
```