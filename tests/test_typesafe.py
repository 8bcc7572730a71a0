import struct

import pytest

from funkit.typesafe import (
    contains_value,
    drop_first,
    filter_values,
    find_first,
    index_of_value,
    last_index_of_value,
    reverse_in_place,
    reverse_string,
    shuffle_in_place,
    sum_float32,
    sum_int32,
    sum_int64,
    sum_uint32,
    sum_uint64,
    uniq_in_place,
)


def _single(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_contains_int():
    assert contains_value([1, 2, 3, 4], 4) is True
    assert contains_value([1, 2, 3, 4], 5) is False


def test_contains_string():
    assert contains_value(["flo", "gilles"], "flo") is True
    assert contains_value(["flo", "gilles"], "alex") is False


def test_contains_float():
    assert contains_value([0.1, 0.2], 0.1) is True
    assert contains_value([0.1, 0.2], 0.3) is False


def test_filter_string():
    assert filter_values(["a", "b", "c", "d"], lambda x: x >= "c") == ["c", "d"]


def test_filter_int():
    assert filter_values([1, 2, 3, 4], lambda x: x % 2 == 0) == [2, 4]


def test_filter_float():
    assert filter_values([1.0, 2.0, 3.0, 4.0], lambda x: int(x) % 2 == 0) == [2.0, 4.0]


def test_filter_empty_result():
    assert filter_values([1, 3], lambda x: x % 2 == 0) == []


def test_find_first_found():
    assert find_first([1, 2, 3, 4], lambda x: x % 2 == 0) == (2, True)


def test_find_first_missing():
    assert find_first(["a", "b"], lambda x: x == "z") == (None, False)


def test_sum_integers():
    assert sum_int64([1, 2, 3]) == 6
    assert sum_int32([1, 2, 3]) == 6
    assert sum_uint32([1, 2, 3]) == 6
    assert sum_uint64([1, 2, 3]) == 6


def test_sum_wraps_on_overflow():
    assert sum_int32([2**31 - 1, 1]) == -(2**31)
    assert sum_int64([2**63 - 1, 1]) == -(2**63)
    assert sum_uint32([2**32 - 1, 1]) == 0
    assert sum_uint64([2**64 - 1, 2]) == 1


def test_sum_float32():
    assert sum_float32([0.1, 0.2, 0.1]) == _single(0.4)


def test_sum_empty():
    assert sum_int64([]) == 0
    assert sum_float32([]) == 0.0


def test_reverse():
    assert reverse_string("abcdefg") == "gfedcba"
    assert reverse_in_place([1, 2, 3, 4]) == [4, 3, 2, 1]
    assert reverse_in_place(["flo", "gilles"]) == ["gilles", "flo"]
    assert reverse_in_place([0.1, 0.2, 0.3]) == [0.3, 0.2, 0.1]


def test_reverse_is_in_place():
    values = [1, 2, 3]
    result = reverse_in_place(values)
    assert result is values
    assert values == [3, 2, 1]


def test_index_of():
    assert index_of_value(["foo", "bar"], "bar") == 1
    assert index_of_value(["foo", "bar"], "flo") == -1
    assert index_of_value([0, 1, 2], 1) == 1
    assert index_of_value([0, 1, 2], 3) == -1
    assert index_of_value([0.1, 0.2, 0.3], 0.2) == 1
    assert index_of_value([0.1, 0.2, 0.3], 0.4) == -1


def test_last_index_of():
    assert last_index_of_value(["foo", "bar", "bar"], "bar") == 2
    assert last_index_of_value([1, 2, 2, 3], 2) == 2
    assert last_index_of_value([1, 2, 2, 3], 4) == -1


def test_uniq():
    assert uniq_in_place([0, 1, 1, 2, 3, 0, 0, 12]) == [0, 1, 2, 3, 12]
    assert uniq_in_place([0.0, 0.1, 0.1, 0.2, 0.3, 0.0, 0.0, 0.12]) == [0.0, 0.1, 0.2, 0.3, 0.12]
    assert uniq_in_place(["foo", "bar", "foo", "bar"]) == ["foo", "bar"]


def test_uniq_is_in_place():
    values = [3, 3, 1]
    result = uniq_in_place(values)
    assert result is values
    assert values == [3, 1]


def test_shuffle_keeps_elements():
    initial = [1, 2, 3, 5]
    results = shuffle_in_place(list(initial))
    assert len(results) == 4
    assert sorted(results) == initial


def test_shuffle_is_in_place():
    values = [1, 2, 3]
    assert shuffle_in_place(values) is values


def test_drop_string():
    results = drop_first(["the", "quick", "brown", "fox", "jumps", "..."], 3)
    assert results == ["fox", "jumps", "..."]


@pytest.mark.parametrize(
    "items, expected",
    [
        ([0, 0, 0, 0], [0]),
        ([1, 2, 3, 4], [4]),
        ([1.1, 2.2, 3.3, 4.4], [4.4]),
    ],
)
def test_drop_numbers(items, expected):
    assert drop_first(items, 3) == expected


def test_drop_all():
    assert drop_first([1, 2], 2) == []


@pytest.mark.parametrize("n", [-1, 5])
def test_drop_out_of_range(n):
    with pytest.raises(ValueError):
        drop_first([1, 2, 3], n)