"""Two-pointer problems: water containers, subsequences, triplets and palindromes."""

from __future__ import annotations

__all__ = [
    "max_area",
    "is_subsequence",
    "three_sum",
    "two_sum_sorted",
    "is_palindrome",
]


def max_area(height: list[int]) -> int:
    """Largest amount of water held between two of the given walls."""
    if not height:
        raise ValueError("max_area needs at least one wall")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def is_subsequence(s: str, t: str) -> bool:
    """Whether the characters of s appear in t in the same order."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def three_sum(nums: list[int]) -> list[list[int]]:
    """Every distinct triplet of values summing to zero, each in ascending order."""
    ordered = sorted(nums)
    size = len(ordered)
    triples: list[list[int]] = []
    for index, first in enumerate(ordered):
        if index and first == ordered[index - 1]:
            continue
        left, right = index + 1, size - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                triples.append([first, ordered[left], ordered[right]])
                left += 1
                right -= 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right + 1]:
                    right -= 1
    return triples


def two_sum_sorted(numbers: list[int], target: int) -> list[int]:
    """1-based positions of two entries of a sorted list adding up to target.

    Returns an empty list when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def is_palindrome(s: str) -> bool:
    """Whether s reads the same both ways, looking only at letters and digits."""
    normalized = [
        ch.lower() if ch.isascii() else ch for ch in s if ch.isalnum()
    ]
    return normalized == normalized[::-1]