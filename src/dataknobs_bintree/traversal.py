"""Post-order traversal over the binary encoding.

The walk visits a node's ``left`` subtree, then its ``right`` subtree, then
the node itself. In business terms every node is visited after all of its
descendants and all of its later siblings' subtrees, so bottom-up
aggregation can read finished values from the ``children`` records.

The walk is iterative, so arbitrarily deep trees and long sibling chains
(which become deep ``right`` chains) do not hit the recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import List

from dataknobs_bintree.node import R, TreeNode


def iter_post_order(root: TreeNode[R] | None) -> Iterator[TreeNode[R]]:
    """Yield the nodes of a tree in binary post-order.

    Args:
        root: The node to start from. Only its ``left``/``right`` subtrees
            are walked, never its parent.

    Yields:
        Each node after its ``left`` and ``right`` subtrees.
    """
    if root is None:
        return
    stack: List[TreeNode[R]] = [root]
    prev: TreeNode[R] | None = None
    while stack:
        node = stack[-1]
        if (node.left is None and node.right is None) or (
            prev is not None and (prev is node.left or prev is node.right)
        ):
            stack.pop()
            prev = node
            yield node
        else:
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def traverse(root: TreeNode[R] | None, visit: Callable[[TreeNode[R]], None]) -> None:
    """Call ``visit`` on every node in binary post-order.

    No business leaf/branch distinction is made and nothing is mutated here;
    this is the hook for consumers such as renderers or loggers.

    Args:
        root: The root of the walk. Nothing happens if None.
        visit: Called once per node.

    Example:
        ```python
        names = []
        traverse(root, lambda node: names.append(node.record.name))
        ```
    """
    for node in iter_post_order(root):
        visit(node)
