"""Singly linked list node and conversions to and from Python sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = ["ListNode", "from_values", "to_values"]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; None for no values."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Values of the list starting at head; ValueError if the list loops."""
    seen: set[int] = set()
    values = []
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values