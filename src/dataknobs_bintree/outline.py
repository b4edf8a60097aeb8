"""Flat record lists from parenthesized tree outlines.

An outline such as ``"(a (b d) c)"`` names a root ``a`` with children ``b``
and ``c``, where ``b`` has the child ``d``. ``parse_outline`` turns it into
the flat, depth-first ordered record list ``build_tree`` consumes, and the
``outline_is_root``/``outline_is_parent_of`` predicates rebuild the structure
from the records' parent names.

Example:
    ```python
    from dataknobs_bintree import count_leaves
    from dataknobs_bintree.outline import (
        outline_is_parent_of, outline_is_root, parse_outline,
    )

    records = parse_outline("(a (b d) c)")
    root = count_leaves(records, outline_is_root, outline_is_parent_of)
    print(root.record.leaf_count)  # 2
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from pyparsing import OneOrMore, nested_expr

from dataknobs_bintree.records import LeafRecord


@dataclass(eq=False)
class OutlineRecord(LeafRecord):
    """A record named in an outline.

    Attributes:
        name: The node's name as written in the outline.
        parent_name: The enclosing node's name, or None for a top-level node.
    """

    name: str = ""
    parent_name: str | None = None

    def __str__(self) -> str:
        return self.name


def outline_is_root(record: OutlineRecord) -> bool:
    """Root condition for outline records."""
    return record.parent_name is None


def outline_is_parent_of(child: OutlineRecord, parent: OutlineRecord) -> bool:
    """Parent condition for outline records."""
    return child.parent_name == parent.name


def parse_outline(text: str) -> List[OutlineRecord]:
    """Parse a parenthesized outline into depth-first ordered records.

    Names are matched by value, so they should be unique within an outline.

    Args:
        text: The outline, e.g. ``"(root (a b c) d)"``. Text without
            parentheses is a single root record.

    Returns:
        The outline's records in depth-first order.

    Raises:
        pyparsing.ParseException: If the parentheses are malformed.
        ValueError: If a parenthesized group does not start with a name.
    """
    if not text.strip().startswith("("):
        return [OutlineRecord(name=text.strip())]
    data = OneOrMore(nested_expr()).parse_string(text)
    records: List[OutlineRecord] = []
    for item in data.as_list():
        _flatten(item, None, records)
    return records


def _flatten(item: Any, parent_name: str | None, records: List[OutlineRecord]) -> None:
    if isinstance(item, list):
        if not item or isinstance(item[0], list):
            raise ValueError(f"Outline group must start with a name: {item!r}")
        name = item[0]
        records.append(OutlineRecord(name=name, parent_name=parent_name))
        for child in item[1:]:
            _flatten(child, name, records)
    else:
        records.append(OutlineRecord(name=item, parent_name=parent_name))
