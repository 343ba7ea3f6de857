"""Hash table problems: duplicates, anagrams, mappings and lookups."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "contains_nearby_duplicate",
    "group_anagrams",
    "is_happy",
    "is_isomorphic",
    "longest_consecutive",
    "can_construct",
    "two_sum",
    "is_anagram",
    "word_pattern",
]


def contains_nearby_duplicate(nums: list[int], k: int) -> bool:
    """Whether two equal values sit at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        previous = last_seen.get(num)
        if previous is not None and index - previous <= k:
            return True
        last_seen[num] = index
    return False


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group strings that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of n ends at 1."""
    if n < 0:
        raise ValueError("is_happy needs a non-negative number")
    seen: set[int] = set()
    while n != 1:
        if n in seen:
            return False
        seen.add(n)
        n = _digit_square_sum(n)
    return True


def is_isomorphic(s: str, t: str) -> bool:
    """Whether s maps onto t character by character through a bijection."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if a in forward:
            if forward[a] != b:
                return False
        elif b in backward:
            if backward[b] != a:
                return False
        else:
            forward[a] = b
            backward[b] = a
    return True


def longest_consecutive(nums: list[int]) -> int:
    """Length of the longest run of consecutive integers among nums."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether ransom_note can be spelled from the letters of magazine."""
    if len(ransom_note) > len(magazine):
        return False
    return not Counter(ransom_note) - Counter(magazine)


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices of two entries adding up to target, or an empty list."""
    positions: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = positions.get(target - num)
        if partner is not None:
            return [partner, index]
        positions[num] = index
    return []


def is_anagram(s: str, t: str) -> bool:
    """Whether t is a rearrangement of the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def word_pattern(pattern: str, s: str) -> bool:
    """Whether the single-space-separated words of s follow pattern one to one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for letter, word in zip(pattern, words):
        if forward.get(letter, word) != word or backward.get(word, letter) != letter:
            return False
        forward[letter] = word
        backward[word] = letter
    return True