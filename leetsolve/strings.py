"""String problems: searching, Roman numerals, word handling and zigzag layout."""

from __future__ import annotations

from itertools import cycle

__all__ = [
    "str_str",
    "int_to_roman",
    "roman_to_int",
    "length_of_last_word",
    "longest_common_prefix",
    "reverse_words",
    "convert",
]

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _prefix_table(pattern: str) -> list[int]:
    table = [0] * len(pattern)
    matched = 0
    for index, ch in enumerate(pattern[1:], start=1):
        while matched and ch != pattern[matched]:
            matched = table[matched - 1]
        if ch == pattern[matched]:
            matched += 1
        table[index] = matched
    return table


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of needle in haystack, or -1 (KMP search)."""
    if not needle:
        return 0
    if len(needle) > len(haystack):
        return -1
    table = _prefix_table(needle)
    matched = 0
    for index, ch in enumerate(haystack):
        while matched and needle[matched] != ch:
            matched = table[matched - 1]
        if needle[matched] == ch:
            matched += 1
            if matched == len(needle):
                return index + 1 - matched
    return -1


def int_to_roman(num: int) -> str:
    """Roman numeral for num; an empty string for values below one."""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        if num <= 0:
            break
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Integer value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN_VALUES.get(ch, 0) for ch in s]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in s."""
    trimmed = s.rstrip(" ")
    if not trimmed:
        raise ValueError("string holds no word")
    return len(trimmed) - trimmed.rfind(" ") - 1


def longest_common_prefix(strs: list[str]) -> str:
    """Longest prefix shared by every string in strs."""
    if not strs:
        raise ValueError("longest_common_prefix needs at least one string")
    prefix = []
    for chars in zip(*strs):
        if any(ch != chars[0] for ch in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def reverse_words(s: str) -> str:
    """Words of s in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def convert(s: str, num_rows: int) -> str:
    """Read s written in a zigzag over num_rows rows, row by row."""
    if num_rows == 1:
        return s
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    order = [*range(num_rows), *range(num_rows - 2, 0, -1)]
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for ch, row in zip(s, cycle(order)):
        rows[row].append(ch)
    return "".join("".join(row) for row in rows)