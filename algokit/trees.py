"""Binary tree nodes and Morris in-order traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def morris_inorder(root: TreeNode | None) -> list[Any]:
    """Return the in-order values of the tree using O(1) extra space.

    Temporary threads are added while walking and removed again, so the tree
    is left as it was found.
    """
    values: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            values.append(current.data)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            values.append(current.data)
            current = current.right
    return values