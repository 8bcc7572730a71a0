"""Lexicographic next permutation."""

from __future__ import annotations

from typing import Any, MutableSequence


def next_permutation(nums: MutableSequence[Any]) -> None:
    """Rearrange ``nums`` in place into the next greater permutation.

    The greatest permutation wraps around to the smallest one.
    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("nums is empty")

    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1

    if pivot >= 0:
        swap = len(nums) - 1
        while nums[pivot] >= nums[swap]:
            swap -= 1
        nums[pivot], nums[swap] = nums[swap], nums[pivot]

    nums[pivot + 1:] = nums[pivot + 1:][::-1]