"""Array problems: stock trading, jumps, in-place compaction and friends."""

from __future__ import annotations

import random
from collections import Counter
from heapq import merge as _heap_merge
from itertools import accumulate, pairwise
from operator import mul

__all__ = [
    "RandomizedSet",
    "max_profit",
    "max_profit_multi",
    "can_complete_circuit",
    "h_index",
    "can_jump",
    "jump",
    "majority_element",
    "merge",
    "product_except_self",
    "remove_duplicates",
    "remove_duplicates_keep_two",
    "remove_element",
    "rotate",
]


def max_profit(prices: list[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    lowest = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        elif price - lowest > best:
            best = price - lowest
    return best


def max_profit_multi(prices: list[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    return sum(max(0, today - yesterday) for yesterday, today in pairwise(prices))


def can_complete_circuit(gas: list[int], cost: list[int]) -> int:
    """Index of the station from which the whole circuit can be driven, or -1."""
    total = 0
    tank = 0
    start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        diff = fuel - spend
        total += diff
        tank += diff
        if tank < 0:
            start = index + 1
            tank = 0
    return -1 if total < 0 else start


def h_index(citations: list[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    ordered = sorted(citations)
    count = len(ordered)
    for position, cited in enumerate(ordered):
        h = count - position
        if cited >= h:
            return h
    return 0


def can_jump(nums: list[int]) -> bool:
    """Whether the last index can be reached from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def jump(nums: list[int]) -> int:
    """Fewest jumps needed to reach the last index."""
    if not nums:
        raise ValueError("jump needs at least one position")
    end = 0
    farthest = 0
    jumps = 0
    for index, step in enumerate(nums[:-1]):
        farthest = max(farthest, index + step)
        if index == end:
            jumps += 1
            end = farthest
    return jumps


def majority_element(nums: list[int]) -> int:
    """Element appearing more than half the time (Boyer-Moore vote)."""
    count = 0
    candidate = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first n items of nums2 into the first m items of nums1, in place.

    nums1 ends up holding exactly m + n sorted values.
    """
    nums1[:] = list(_heap_merge(nums1[:m], nums2[:n]))[: m + n]


def product_except_self(nums: list[int]) -> list[int]:
    """For each position, the product of every other element."""
    prefix = [1, *accumulate(nums[:-1], mul)] if nums else []
    suffix = [1, *accumulate(reversed(nums[1:]), mul)][::-1] if nums else []
    return [left * right for left, right in zip(prefix, suffix)]


def remove_duplicates(nums: list[int]) -> int:
    """Move the first occurrence of every value to the front; return their count."""
    unique = list(dict.fromkeys(nums))
    nums[: len(unique)] = unique
    return len(unique)


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Keep at most two occurrences of each value at the front; return their count."""
    seen: Counter[int] = Counter()
    kept = []
    for num in nums:
        if seen[num] < 2:
            kept.append(num)
        seen[num] += 1
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to val to the front; return their count."""
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def rotate(nums: list[int], k: int) -> None:
    """Rotate nums to the right by k steps, in place."""
    if not nums:
        return
    size = len(nums)
    cut = size - k % size
    nums[:] = nums[cut:] + nums[:cut]


class RandomizedSet:
    """Set with constant-time insert, remove and uniform random pick."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._values: list[int] = []
        self._indices: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._indices

    def insert(self, val: int) -> bool:
        """Add val; return False if it was already present."""
        if val in self._indices:
            return False
        self._indices[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove val; return False if it was not present."""
        index = self._indices.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._indices[last] = index
        return True

    def get_random(self) -> int:
        """A uniformly chosen member; IndexError when the set is empty."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._values)