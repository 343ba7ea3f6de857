"""Level-by-level views of a binary tree."""

from __future__ import annotations

from collections.abc import Iterator

from leetsolve.tree import TreeNode

__all__ = [
    "average_of_levels",
    "level_order",
    "right_side_view",
    "zigzag_level_order",
]


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Node values grouped by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Mean value of each level."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Rightmost value of each level."""
    return [level[-1].val for level in _levels(root)]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values by level, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]