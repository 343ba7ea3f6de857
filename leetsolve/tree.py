"""Binary tree node and the classic whole-tree problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "TreeNode",
    "from_level_order",
    "build_tree_from_inorder_postorder",
    "build_tree_from_preorder_inorder",
    "count_nodes",
    "flatten",
    "invert_tree",
    "lowest_common_ancestor",
    "max_depth",
    "has_path_sum",
    "is_same_tree",
    "sum_numbers",
    "is_symmetric",
]


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


_END = object()


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _root_position(inorder: list[int], value: int) -> int:
    try:
        return inorder.index(value)
    except ValueError:
        raise ValueError(f"value {value} missing from inorder traversal") from None


def build_tree_from_inorder_postorder(
    inorder: list[int], postorder: list[int]
) -> TreeNode | None:
    """Rebuild a tree from its inorder and postorder traversals."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals differ in length")

    def build(ino: list[int], post: list[int]) -> TreeNode | None:
        if not post:
            return None
        root_val = post[-1]
        split = _root_position(ino, root_val)
        return TreeNode(
            root_val,
            build(ino[:split], post[:split]),
            build(ino[split + 1 :], post[split:-1]),
        )

    return build(list(inorder), list(postorder))


def build_tree_from_preorder_inorder(
    preorder: list[int], inorder: list[int]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")

    def build(pre: list[int], ino: list[int]) -> TreeNode | None:
        if not pre:
            return None
        root_val = pre[0]
        left_size = _root_position(ino, root_val)
        return TreeNode(
            root_val,
            build(pre[1 : 1 + left_size], ino[:left_size]),
            build(pre[1 + left_size :], ino[left_size + 1 :]),
        )

    return build(list(preorder), list(inorder))


def _preorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _preorder(root))


def flatten(root: TreeNode | None) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    nodes = list(_preorder(root))
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    for node in _preorder(root):
        node.left, node.right = node.right, node.left
    return root


def _path_to(root: TreeNode | None, target: int) -> list[TreeNode] | None:
    if root is None:
        return None
    if root.val == target:
        return [root]
    for child in (root.left, root.right):
        path = _path_to(child, target)
        if path is not None:
            return [root, *path]
    return None


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode | None, q: TreeNode | None
) -> TreeNode | None:
    """Deepest node that is an ancestor of both p and q, matched by value.

    Returns None when either node is missing or absent from the tree.
    """
    if p is None or q is None:
        return None
    path_p = _path_to(root, p.val)
    path_q = _path_to(root, q.val)
    if path_p is None or path_q is None:
        return None
    common = None
    for a, b in zip(path_p, path_q):
        if a is not b:
            break
        common = a
    return common


def max_depth(root: TreeNode | None) -> int:
    """Number of levels in the tree."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to target_sum."""
    queue = deque([(root, root.val)] if root is not None else [])
    while queue:
        node, total = queue.popleft()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, total + child.val))
    return False


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def sum_numbers(root: TreeNode | None) -> int:
    """Sum of the numbers spelled by the digits on each root-to-leaf path."""

    def dfs(node: TreeNode | None, prefix: int) -> int:
        if node is None:
            return 0
        value = prefix * 10 + node.val
        if node.left is None and node.right is None:
            return value
        return dfs(node.left, value) + dfs(node.right, value)

    return dfs(root, 0)


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)