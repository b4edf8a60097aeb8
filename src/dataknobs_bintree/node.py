"""Binary tree node with left-child/right-sibling encoding.

A general (n-ary) tree of business records is stored as a binary tree where a
node's ``left`` link holds its first business child and its ``right`` link
holds its next business sibling. Each node also keeps a ``parent``
back-reference to the node that links to it in the binary encoding, and a
``children`` list with the records of its business children.

Example:
    ```python
    from dataknobs_bintree import build_tree

    root = build_tree(records, is_root, is_parent_of)
    first = root.left                # first business child
    second = first.right             # its next sibling
    assert second.business_parent is root
    assert len(root.children) == root.num_children
    ```

Note:
    The ``children`` list is filled in insertion order while siblings after
    the second are spliced in at the front of the encoded sibling chain, so
    the two orders can differ once a node has more than two children.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, List, TypeVar

from dataknobs_bintree.records import LeafCounted

R = TypeVar("R", bound=LeafCounted)


class TreeNode(Generic[R]):
    """A tree vertex wrapping one record.

    Attributes:
        record: The wrapped business record.
        left: First business child in the binary encoding, or None.
        right: Next business sibling in the binary encoding, or None.
        parent: The node whose ``left`` or ``right`` link points here, or None
            for the root. This is a navigation link only.
        children: Records of this node's business children.
    """

    def __init__(self, record: R):
        self._record = record
        self._left: TreeNode[R] | None = None
        self._right: TreeNode[R] | None = None
        self._parent: TreeNode[R] | None = None
        self._children: List[R] = []

    def __repr__(self) -> str:
        return f"TreeNode({self._record!r})"

    @property
    def record(self) -> R:
        """The wrapped business record."""
        return self._record

    @property
    def left(self) -> TreeNode[R] | None:
        """The first business child, or None."""
        return self._left

    @left.setter
    def left(self, node: TreeNode[R] | None) -> None:
        self._left = node

    @property
    def right(self) -> TreeNode[R] | None:
        """The next business sibling, or None."""
        return self._right

    @right.setter
    def right(self, node: TreeNode[R] | None) -> None:
        self._right = node

    @property
    def parent(self) -> TreeNode[R] | None:
        """The binary parent, or None for the root."""
        return self._parent

    @parent.setter
    def parent(self, node: TreeNode[R] | None) -> None:
        self._parent = node

    @property
    def children(self) -> List[R]:
        """Records of this node's business children, in insertion order."""
        return self._children

    @property
    def is_root(self) -> bool:
        """True if this node has no binary parent."""
        return self._parent is None

    @property
    def is_primary_child(self) -> bool:
        """True if this node occupies its parent's ``left`` slot."""
        return self._parent is not None and self._parent.left is self

    def has_children(self) -> bool:
        """Check if this node has any business children.

        Returns:
            True if the ``children`` list is non-empty.
        """
        return len(self._children) > 0

    @property
    def num_children(self) -> int:
        """Number of business children."""
        return len(self._children)

    @property
    def business_parent(self) -> TreeNode[R] | None:
        """The node that holds this node's record in its ``children`` list.

        Climbs back along the sibling chain to the first child, whose binary
        parent is the business parent.

        Returns:
            The business parent node, or None for the root.
        """
        node: TreeNode[R] = self
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        return node.parent

    def child_nodes(self) -> List[TreeNode[R]]:
        """Get the business children as nodes, in encoded sibling order.

        Returns:
            The ``left`` child followed by its ``right`` chain.
        """
        result: List[TreeNode[R]] = []
        node = self._left
        while node is not None:
            result.append(node)
            node = node.right
        return result

    @property
    def depth(self) -> int:
        """Number of business generations between the root and this node.

        Returns:
            0 for the root, 1 for its children, and so on.
        """
        result = 0
        node = self.business_parent
        while node is not None:
            result += 1
            node = node.business_parent
        return result

    def get_path(self) -> List[TreeNode[R]]:
        """Get the business path from the root to this node.

        Returns:
            Ordered list of nodes from the root to this node (inclusive).
        """
        path: Deque[TreeNode[R]] = deque()
        node: TreeNode[R] | None = self
        while node is not None:
            path.appendleft(node)
            node = node.business_parent
        return list(path)
