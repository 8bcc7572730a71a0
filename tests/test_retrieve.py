from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from funkit.retrieve import get, get_allow_zero, get_or_else


@dataclass
class Bar:
    name: str = ""
    bar: Bar | None = None
    bars: list[Bar] = field(default_factory=list)


@dataclass
class NullInt64:
    int64: int = 0
    valid: bool = False


@dataclass
class Foo:
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    age: int = 0
    bar: Bar | None = None
    bars: list[Bar] = field(default_factory=list)
    empty_value: NullInt64 = field(default_factory=NullInt64)
    bar_interface: Any = None
    bar_pointer: Any = None
    general_interface: Any = None
    zero_bool_value: bool = False
    zero_int_value: int = 0
    zero_int_ptr_value: int | None = None


class FooUnexported:
    def __init__(self) -> None:
        self._unexported = True


BAR = Bar(
    name="Test",
    bars=[
        Bar(name="Level1-1", bar=Bar(name="Level2-1")),
        Bar(name="Level1-2", bar=Bar(name="Level2-2")),
    ],
)

FOO = Foo(
    id=1,
    first_name="Dark",
    last_name="Vador",
    age=30,
    bar=BAR,
    empty_value=NullInt64(int64=10, valid=True),
    bars=[BAR, BAR],
    bar_interface=BAR,
    bar_pointer=BAR,
)

FOO2 = Foo(id=1, first_name="Dark", last_name="Vador", age=30)

M1 = {
    "id": 1,
    "firstname": "dark",
    "lastname": "vador",
    "age": 30,
    "bar": {
        "name": "test",
        "bars": [
            {"name": "level1-1", "bar": {"name": "level2-1"}},
            {"name": "level1-2", "bar": {"name": "level2-2"}},
        ],
    },
}

M2 = {"id": 1, "firstname": "dark", "lastname": "vador", "age": 30}


def test_get_slice():
    assert get([FOO], "id") == [1]
    assert get([FOO], "bar.name") == ["Test"]
    assert get([FOO], "bar") == [BAR]
    assert get([], "bar.name") == []


def test_get_slice_multi_level():
    expected = ["Level2-1", "Level2-2"]
    assert get(FOO, "bar.bars.bar.name") == expected
    assert get([FOO], "bar.bars.bar.name") == expected


def test_get_null():
    assert get(FOO, "empty_value.int64") == 10
    assert get(FOO, "zero_value") is None
    assert get_allow_zero(FOO, "zero_bool_value") is False
    assert get_allow_zero(FooUnexported(), "_unexported") is None
    assert get(FooUnexported(), "_unexported") is None
    assert get_allow_zero(FOO, "zero_int_value") == 0
    assert get_allow_zero(FOO, "zero_int_ptr_value") is None
    assert get_allow_zero(FOO, "empty_value.int64") == 10
    assert get([FOO], "empty_value.int64") == [10]


def test_get_zero_values_are_none():
    assert get(FOO, "zero_bool_value") is None
    assert get(FOO, "zero_int_value") is None


def test_get_nil():
    assert get(FOO2, "bar.name") is None
    assert get([FOO, FOO2], "bar.name") == ["Test"]
    assert get([FOO, FOO2], "bar") == [BAR]


def test_get_map():
    m = {"bar": {"name": "foobar"}}
    assert get(m, "bar.name") == "foobar"
    assert get(m, "foo.name") is None
    assert get([M1, M2], "firstname") == ["dark", "dark"]
    assert get([M1, M2], "bar.name") == ["test"]


def test_get_through_untyped_fields():
    expected = ["Level2-1", "Level2-2"]
    assert get(FOO, "bar_interface.bars.bar.name") == expected
    assert get(FOO, "bar_pointer.bars.bar.name") == expected


def test_get_not_found():
    assert get(FOO, "nope") is None
    assert get(FOO, "id.id") is None
    assert get(FOO, "bar.nope") is None
    assert get(FOO, "bars.nope") is None


def test_get_simple():
    assert get(FOO, "id") == 1
    assert get(FOO, "bar.name") == "Test"
    assert get(FOO, "bar.bars.name") == ["Level1-1", "Level1-2"]


def test_get_or_else():
    text = "hello world"
    assert get_or_else(text, "foobar") == "hello world"
    assert get_or_else(None, "foobar") == "foobar"


def test_get_or_else_keeps_falsy_values():
    assert get_or_else(0, 5) == 0
    assert get_or_else("", "x") == ""