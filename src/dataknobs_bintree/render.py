"""Text and Graphviz renderings of a rebuilt tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Dict, List, Tuple

import graphviz

from dataknobs_bintree.node import R, TreeNode
from dataknobs_bintree.traversal import traverse


def _default_name(node: TreeNode[Any]) -> str:
    return str(node.record)


def as_string(
    node: TreeNode[R],
    delim: str = " ",
    multiline: bool = False,
    node_name_fn: Callable[[TreeNode[R]], str] | None = None,
) -> str:
    """Get a parenthesized outline of the business tree under a node.

    Children appear in encoded sibling order.

    Args:
        node: The node to render.
        delim: The delimiter/indentation to use between levels.
        multiline: If True, puts each node on its own line, indented by depth.
        node_name_fn: Optional function producing a node's label. Defaults to
            ``str(node.record)``.

    Returns:
        String such as ``"(a (b d) c)"``.

    Example:
        ```python
        print(as_string(root, delim="  ", multiline=True))
        # (a
        #   (b
        #     d)
        #   c)
        ```
    """
    if node_name_fn is None:
        node_name_fn = _default_name
    btwn = "\n" if multiline else ""
    parts: List[str] = []
    # frames of (depth, remaining children) for nodes whose ")" is pending
    stack: List[Tuple[int, Iterator[TreeNode[R]]]] = []

    def open_node(current: TreeNode[R], depth: int) -> None:
        name = node_name_fn(current)
        child_nodes = current.child_nodes()
        if child_nodes:
            parts.append("(" + name)
            stack.append((depth, iter(child_nodes)))
        else:
            parts.append(name)

    open_node(node, 0)
    while stack:
        depth, remaining = stack[-1]
        child = next(remaining, None)
        if child is None:
            parts.append(")")
            stack.pop()
            continue
        parts.append(btwn + ((depth + 1) if multiline else 1) * delim)
        open_node(child, depth + 1)
    return "".join(parts)


def build_dot(
    root: TreeNode[R],
    node_name_fn: Callable[[TreeNode[R]], str] | None = None,
    binary: bool = False,
    **kwargs: Any,
) -> graphviz.Digraph:
    """Build a Graphviz Digraph for visualizing a tree.

    Args:
        root: The root node.
        node_name_fn: Optional function producing node labels. Defaults to
            ``str(node.record)``.
        binary: If True, draws the ``left``/``right`` links of the binary
            encoding (edges labelled ``L`` and ``R``) instead of business
            parent-child edges.
        **kwargs: Passed to the ``graphviz.Digraph`` constructor.

    Returns:
        A graphviz.Digraph.

    Example:
        ```python
        dot = build_dot(root, name="accounts", format="png")
        dot.render("/tmp/accounts")
        ```
    """
    if node_name_fn is None:
        node_name_fn = _default_name
    dot = graphviz.Digraph(**kwargs)
    ids: Dict[int, str] = {}

    def add_node(node: TreeNode[R]) -> None:
        ids[id(node)] = f"N_{len(ids):03}"
        dot.node(ids[id(node)], node_name_fn(node))

    traverse(root, add_node)

    def add_edges(node: TreeNode[R]) -> None:
        if binary:
            if node.left is not None:
                dot.edge(ids[id(node)], ids[id(node.left)], label="L")
            if node.right is not None:
                dot.edge(ids[id(node)], ids[id(node.right)], label="R")
        else:
            for child in node.child_nodes():
                dot.edge(ids[id(node)], ids[id(child)])

    traverse(root, add_edges)
    return dot
