"""Bottom-up aggregation over a rebuilt tree.

Each visited record is classified by its business structure: a node whose
``children`` list is empty is a leaf, anything else is a branch. Leaves get
``leaf_count = 1``; branches get the sum of their children's leaf counts.
Caller callbacks are then invoked so domain values (totals, flags, ...) can
be rolled up the same way.

Example:
    ```python
    from dataknobs_bintree import compute, count_leaves

    root = count_leaves(accounts, is_root, is_parent_of)
    print(root.record.leaf_count)

    def on_branch(account, children):
        account.balance = sum(child.balance for child in children)

    compute(root, on_branch=on_branch)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import List

from dataknobs_bintree.builder import build_tree
from dataknobs_bintree.config import TreeConfig
from dataknobs_bintree.node import R, TreeNode
from dataknobs_bintree.traversal import iter_post_order

logger = logging.getLogger(__name__)

LeafCallback = Callable[[R], None]
BranchCallback = Callable[[R, List[R]], None]


def _compute_node(
    node: TreeNode[R],
    on_leaf: LeafCallback | None,
    on_branch: BranchCallback | None,
) -> None:
    record = node.record
    if node.children:
        record.leaf_count = sum(child.leaf_count for child in node.children)
        record.is_leaf = False
        if on_branch is not None:
            on_branch(record, node.children)
    else:
        record.leaf_count = 1
        record.is_leaf = True
        if on_leaf is not None:
            on_leaf(record)


def _refresh_branch(node: TreeNode[R], on_branch: BranchCallback | None) -> None:
    node.record.leaf_count = sum(child.leaf_count for child in node.children)
    node.record.is_leaf = False
    if on_branch is not None:
        on_branch(node.record, node.children)


def compute(
    root: TreeNode[R] | None,
    on_leaf: LeafCallback | None = None,
    on_branch: BranchCallback | None = None,
) -> None:
    """Aggregate every record of a tree bottom-up.

    Nodes are visited in binary post-order, so every business child is
    finished before its parent.

    Args:
        root: Root of the tree. Nothing happens if None.
        on_leaf: Called with each leaf record after its leaf fields are set.
        on_branch: Called with each branch record and its children's records
            after its leaf count is set.
    """
    if root is None:
        return
    for node in iter_post_order(root):
        _compute_node(node, on_leaf, on_branch)


def compute_ancestors(
    node: TreeNode[R] | None,
    on_leaf: LeafCallback | None = None,
    on_branch: BranchCallback | None = None,
) -> None:
    """Recompute one node and propagate the change up its ancestors.

    The node itself is recomputed as in ``compute``. The walk then follows
    ``parent`` links to the root. A parent is recomputed (leaf count, then
    ``on_branch``) only when the current node sits in that parent's ``left``
    slot. Steps over ``right`` links pass through earlier siblings, which are
    not ancestors, and are skipped. Each business ancestor is therefore
    recomputed exactly once, and no sibling is.

    Only the changed node's ancestor chain is refreshed. Siblings and their
    subtrees are assumed to be up to date already.

    Args:
        node: The changed node. Nothing happens if None.
        on_leaf: Called if ``node`` itself is a leaf.
        on_branch: Called for ``node`` if it is a branch, and for each
            recomputed ancestor.
    """
    if node is None:
        return
    _compute_node(node, on_leaf, on_branch)

    current = node
    num_refreshed = 0
    while current.parent is not None:
        parent = current.parent
        if parent.left is current:
            _refresh_branch(parent, on_branch)
            num_refreshed += 1
        current = parent
    logger.debug("Recomputed %r and %d ancestors", node.record, num_refreshed)


def count_leaves(
    records: Sequence[R],
    is_root: Callable[[R], bool],
    is_parent_of: Callable[[R, R], bool],
    config: TreeConfig | None = None,
) -> TreeNode[R] | None:
    """Build a tree and fill in the leaf counts of all its records.

    A root without children is given ``config.lone_root_leaf_count`` leaves
    (0 by default) instead of the 1 a leaf would normally get.

    Args:
        records: Records in depth-first order of the intended tree.
        is_root: Root condition, as for ``build_tree``.
        is_parent_of: Parent condition, as for ``build_tree``.
        config: Optional build configuration.

    Returns:
        The root node, or None if ``records`` is empty.

    Raises:
        RootNotFoundError: If no record satisfies ``is_root``.
        OrphanRecordError: As for ``build_tree``.
    """
    if config is None:
        config = TreeConfig()
    root = build_tree(records, is_root, is_parent_of, config=config)
    if root is None:
        return None

    compute(root)
    if not root.children:
        root.record.leaf_count = config.lone_root_leaf_count
    return root
