"""Linked list problems: arithmetic, merging, partitioning and rewiring."""

from __future__ import annotations

from leetsolve.listnode import ListNode

__all__ = [
    "add_two_numbers",
    "has_cycle",
    "merge_two_lists",
    "partition",
    "delete_duplicates",
    "remove_nth_from_end",
    "reverse_between",
    "rotate_right",
]


def _nodes(head: ListNode | None) -> list[ListNode]:
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


def _link(nodes: list[ListNode], tail: ListNode | None = None) -> ListNode | None:
    """Chain nodes in order, ending in tail; return the first node."""
    following = tail
    for node in reversed(nodes):
        node.next = following
        following = node
    return following


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Sum of two numbers stored as digit lists, least significant digit first."""
    digits = []
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        digits.append(ListNode(digit))
    return _link(digits)


def has_cycle(head: ListNode | None) -> bool:
    """Whether following next links from head ever revisits a node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take from list2."""
    picked = []
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            picked.append(list1)
            list1 = list1.next
        else:
            picked.append(list2)
            list2 = list2.next
    return _link(picked, list1 if list1 is not None else list2)


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Relink so nodes below x come first, keeping relative order in each part."""
    less = []
    rest = []
    for node in _nodes(head):
        (less if node.val < x else rest).append(node)
    return _link(less + rest)


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every node whose value is repeated in a sorted list."""
    kept = []
    nodes = _nodes(head)
    index = 0
    while index < len(nodes):
        end = index + 1
        while end < len(nodes) and nodes[end].val == nodes[index].val:
            end += 1
        if end - index == 1:
            kept.append(nodes[index])
        index = end
    return _link(kept)


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """A list without its n-th node from the end; the input is left untouched.

    Nodes before the removed one are copied and the rest is shared with the
    input. An n larger than the list yields None; an n below 1 acts as 1.
    """
    nodes = _nodes(head)
    if not nodes or n > len(nodes):
        return None
    index = len(nodes) - max(n, 1)
    copies = [ListNode(node.val) for node in nodes[:index]]
    return _link(copies, nodes[index].next)


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes from position left to right (1-based), in place."""
    if left == right:
        return head
    nodes = _nodes(head)
    if not 1 <= left < right <= len(nodes):
        raise ValueError(
            f"positions {left}..{right} do not fit a list of {len(nodes)} nodes"
        )
    start = left - 1
    return _link(nodes[:start] + nodes[start:right][::-1] + nodes[right:])


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by k places, in place."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = _nodes(head)
    if not nodes:
        return head
    shift = k % len(nodes)
    if shift == 0:
        return head
    cut = len(nodes) - shift
    nodes[-1].next = nodes[0]
    nodes[cut - 1].next = None
    return nodes[cut]