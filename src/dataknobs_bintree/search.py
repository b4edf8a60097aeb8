"""Predicate search over the binary encoding.

Both searches test a node as soon as it is reached and stop at the first
match. ``find_node`` then descends into the ``left`` link before the
``right`` link, which follows business depth-first order: a node, its
descendants, then its later siblings. ``find_node_right_first`` takes the
``right`` link first, so siblings (and the more recently spliced-in
siblings ahead of them) are tried before anyone's descendants.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import List

from dataknobs_bintree.node import R, TreeNode


def _iter_nodes(start: TreeNode[R] | None, right_first: bool) -> Iterator[TreeNode[R]]:
    stack: List[TreeNode[R]] = []
    node = start
    while node is not None or stack:
        if node is not None:
            yield node
            stack.append(node)
            node = node.right if right_first else node.left
        else:
            popped = stack.pop()
            node = popped.left if right_first else popped.right


def find_node(start: TreeNode[R] | None, predicate: Callable[[R], bool]) -> TreeNode[R] | None:
    """Find the first node whose record satisfies a predicate, left link first.

    Args:
        start: Node to search from; its ``left`` and ``right`` subtrees are
            searched, never its parent.
        predicate: Called with each record until it returns True.

    Returns:
        The first matching node, or None if nothing matches.

    Example:
        ```python
        node = find_node(root, lambda account: account.code == "1100")
        ```
    """
    return next((node for node in _iter_nodes(start, False) if predicate(node.record)), None)


def find_node_right_first(
    start: TreeNode[R] | None, predicate: Callable[[R], bool]
) -> TreeNode[R] | None:
    """Find the first node whose record satisfies a predicate, right link first.

    Preferring the sibling chain finds shallower nodes before descending into
    the subtrees of earlier siblings.

    Args:
        start: Node to search from.
        predicate: Called with each record until it returns True.

    Returns:
        The first matching node, or None if nothing matches.
    """
    return next((node for node in _iter_nodes(start, True) if predicate(node.record)), None)


def find_nodes(start: TreeNode[R] | None, predicate: Callable[[R], bool]) -> List[TreeNode[R]]:
    """Find all nodes whose records satisfy a predicate.

    Args:
        start: Node to search from.
        predicate: Called once with each reachable record.

    Returns:
        Matching nodes in ``find_node`` order.
    """
    return [node for node in _iter_nodes(start, False) if predicate(node.record)]
