"""Consistency checks across a tree's three link systems.

A node is linked three ways: ``parent`` back-references, ``left``/``right``
binary links and the ``children`` record list. ``check_tree`` verifies that
they describe the same tree.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Set

from dataknobs_bintree.exceptions import TreeIntegrityError
from dataknobs_bintree.node import R, TreeNode

logger = logging.getLogger(__name__)


def check_tree(root: TreeNode[R]) -> int:
    """Verify the link invariants of a tree.

    Checks that:
    - the root has no parent;
    - every ``left``/``right`` child points back at the node linking to it;
    - no node is reachable twice;
    - each node's ``children`` holds exactly the records of the nodes on its
      encoded child chain (order is not compared).

    Args:
        root: The root node.

    Returns:
        The number of nodes in the tree.

    Raises:
        TreeIntegrityError: On the first violated invariant.
    """
    if root.parent is not None:
        raise TreeIntegrityError("Root node has a parent", context={"root": root})

    seen: Set[int] = set()
    stack: List[TreeNode[R]] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise TreeIntegrityError("Node reached twice", context={"node": node})
        seen.add(id(node))

        for link, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            if child.parent is not node:
                raise TreeIntegrityError(
                    f"Parent link of {link} child does not point back",
                    context={"node": node, "child": child, "child_parent": child.parent},
                )
            stack.append(child)

        chain = _child_chain(node)
        expected = Counter(id(child.record) for child in chain)
        actual = Counter(id(record) for record in node.children)
        if expected != actual:
            raise TreeIntegrityError(
                "Children records disagree with encoded child chain",
                context={"node": node, "children": list(node.children), "child_nodes": chain},
            )

    logger.debug("Checked %d nodes", len(seen))
    return len(seen)


def _child_chain(node: TreeNode[R]) -> List[TreeNode[R]]:
    # Like TreeNode.child_nodes, but stops on a cyclic sibling chain.
    chain: List[TreeNode[R]] = []
    chain_ids: Set[int] = set()
    child = node.left
    while child is not None:
        if id(child) in chain_ids:
            raise TreeIntegrityError("Sibling chain is cyclic", context={"node": node})
        chain_ids.add(id(child))
        chain.append(child)
        child = child.right
    return chain
