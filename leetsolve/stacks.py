"""Stack problems: postfix evaluation, minimum tracking, paths and brackets."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable

__all__ = ["MinStack", "eval_rpn", "simplify_path", "is_valid"]


def _divide(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Value of an integer expression in reverse Polish notation.

    Division truncates toward zero. The top of the stack is returned.
    """
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        try:
            right = stack.pop()
            left = stack.pop()
        except IndexError:
            raise ValueError(f"operator {token!r} lacks an operand") from None
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]


class MinStack:
    """Stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._values: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def push(self, val: int) -> None:
        """Put val on top."""
        self._values.append(val)
        self._minimums.append(min(val, self._minimums[-1]) if self._minimums else val)

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._values:
            self._values.pop()
            self._minimums.pop()

    def top(self) -> int:
        """The top element; IndexError when empty."""
        if not self._values:
            raise IndexError("top of an empty stack")
        return self._values[-1]

    def get_min(self) -> int:
        """The smallest element; IndexError when empty."""
        if not self._minimums:
            raise IndexError("minimum of an empty stack")
        return self._minimums[-1]


def simplify_path(path: str) -> str:
    """Canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Whether the brackets in s are balanced and properly nested.

    Characters other than brackets are ignored.
    """
    expected: list[str] = []
    for ch in s:
        if ch in _PAIRS:
            expected.append(_PAIRS[ch])
        elif ch in _CLOSERS:
            if not expected or expected.pop() != ch:
                return False
    return not expected