"""Binary trees: building balanced search trees and checking tree shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def _walk(self) -> Iterator[int]:
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right

    def inorder(self) -> list[int]:
        """Return the values of the subtree in in-order sequence."""
        return list(self._walk())


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted ``nums``."""

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = low + (high - low) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a search tree with strictly increasing keys."""
    if root is None:
        return True
    walk = root._walk()
    previous = next(walk)
    for val in walk:
        if val <= previous:
            return False
        previous = val
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        left, right = pairs.pop()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pairs.append((left.left, right.right))
        pairs.append((left.right, right.left))
    return True