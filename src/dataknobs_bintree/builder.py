"""Rebuild a tree from a flat, depth-first ordered list of records.

The records carry no explicit parent identifiers. Structure is recovered with
two caller predicates: one identifying the root record, and one telling
whether a record is the parent of another. A stack holds the chain of the
most recently seen ancestors; each record is attached under the first
stack entry it is a child of.

Example:
    ```python
    from dataknobs_bintree import build_tree

    root = build_tree(
        accounts,
        is_root=lambda a: a.parent_code is None,
        is_parent_of=lambda child, parent: child.parent_code == parent.code,
    )
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import List

from dataknobs_bintree.config import OrphanPolicy, TreeConfig
from dataknobs_bintree.exceptions import OrphanRecordError, RootNotFoundError
from dataknobs_bintree.node import R, TreeNode

logger = logging.getLogger(__name__)


def build_tree(
    records: Sequence[R],
    is_root: Callable[[R], bool],
    is_parent_of: Callable[[R, R], bool],
    config: TreeConfig | None = None,
) -> TreeNode[R] | None:
    """Build a left-child/right-sibling tree from depth-first ordered records.

    Args:
        records: Records in depth-first order of the intended tree.
        is_root: Returns True for the root record. The first match wins.
        is_parent_of: Called as ``is_parent_of(child, parent)``; returns True
            if ``parent`` is the business parent of ``child``.
        config: Optional build configuration. Defaults to ``TreeConfig()``.

    Returns:
        The root node, or None if ``records`` is empty.

    Raises:
        RootNotFoundError: If no record satisfies ``is_root``.
        OrphanRecordError: If a record's parent is never found and the
            configured orphan policy is ``OrphanPolicy.RAISE``.
    """
    if not records:
        return None
    if config is None:
        config = TreeConfig()

    root_record = next((record for record in records if is_root(record)), None)
    if root_record is None:
        logger.debug("No root among %d records", len(records))
        raise RootNotFoundError(
            "No record satisfied the root condition",
            context={"num_records": len(records)},
        )

    root: TreeNode[R] = TreeNode(root_record)
    stack: List[TreeNode[R]] = [root]
    num_nodes = 1
    for position, record in enumerate(records):
        if record is root_record:
            continue

        parent = stack[-1]
        while not is_parent_of(record, parent.record):
            stack.pop()
            if not stack:
                if config.orphan_policy == OrphanPolicy.RAISE:
                    raise OrphanRecordError(
                        "No parent found for record",
                        context={"record": record, "position": position},
                    )
                logger.warning("No parent found for %r; attaching under the root", record)
                stack.append(root)
                parent = root
                break
            parent = stack[-1]

        node: TreeNode[R] = TreeNode(record)
        _attach(parent, node)
        parent.children.append(record)
        stack.append(node)
        num_nodes += 1

    logger.debug("Built tree with %d nodes from %d records", num_nodes, len(records))
    return root


def _attach(parent: TreeNode[R], node: TreeNode[R]) -> None:
    """Link a new business child of ``parent`` into the binary encoding.

    The first child takes the ``left`` slot and the second becomes its
    ``right`` sibling. Later children are spliced in directly after the first
    child, ahead of the existing siblings.
    """
    first = parent.left
    if first is None:
        parent.left = node
        node.parent = parent
    elif first.right is None:
        first.right = node
        node.parent = first
    else:
        second = first.right
        second.parent = node
        node.right = second
        node.parent = first
        first.right = node
