"""Tree reconstruction and aggregation over flat record lists.

The dataknobs-bintree package rebuilds a general tree from a flat list of
business records given in depth-first order, using only two caller
predicates: one identifying the root and one telling whether a record is the
parent of another. The tree is stored as a binary tree in left-child /
right-sibling form, with parent back-references and a per-node list of the
business children's records.

## Modules

### builder - Tree reconstruction
`build_tree` walks the records with a stack of candidate ancestors.

### aggregate - Bottom-up computation
- `compute`: full post-order pass setting leaf counts and calling leaf/branch
  callbacks
- `compute_ancestors`: incremental recomputation of one node and its ancestors
- `count_leaves`: build plus leaf counting in one call

### search / traversal - Navigation
- `find_node`, `find_node_right_first`, `find_nodes`
- `traverse`, `iter_post_order`

### integrity, render, outline - Utilities
- `check_tree`: verify that parent, left/right and children links agree
- `as_string`, `build_dot`: text and Graphviz renderings
- `parse_outline`: turn `"(a (b d) c)"` into a record list

## Quick Example

```python
from dataclasses import dataclass
from dataknobs_bintree import LeafRecord, compute, count_leaves, find_node

@dataclass(eq=False)
class Account(LeafRecord):
    code: str = ""
    parent_code: str | None = None
    balance: float = 0.0

accounts = [
    Account(code="1"),
    Account(code="11", parent_code="1"),
    Account(code="111", parent_code="11", balance=5.0),
    Account(code="12", parent_code="1", balance=7.0),
]
root = count_leaves(
    accounts,
    is_root=lambda a: a.parent_code is None,
    is_parent_of=lambda child, parent: child.parent_code == parent.code,
)
print(root.record.leaf_count)  # 2

def roll_up(account, children):
    account.balance = sum(child.balance for child in children)

compute(root, on_branch=roll_up)
print(root.record.balance)  # 12.0
```

Records must expose a mutable integer `leaf_count` and boolean `is_leaf`
(see `LeafCounted`); `LeafRecord` is a ready-made dataclass base.

Trees are not thread-safe: aggregation mutates records in place.
"""

from dataknobs_bintree.aggregate import compute, compute_ancestors, count_leaves
from dataknobs_bintree.builder import build_tree
from dataknobs_bintree.config import OrphanPolicy, TreeConfig
from dataknobs_bintree.exceptions import (
    BinTreeError,
    ConfigurationError,
    OrphanRecordError,
    RootNotFoundError,
    TreeIntegrityError,
)
from dataknobs_bintree.integrity import check_tree
from dataknobs_bintree.node import TreeNode
from dataknobs_bintree.outline import (
    OutlineRecord,
    outline_is_parent_of,
    outline_is_root,
    parse_outline,
)
from dataknobs_bintree.records import LeafCounted, LeafRecord
from dataknobs_bintree.render import as_string, build_dot
from dataknobs_bintree.search import find_node, find_node_right_first, find_nodes
from dataknobs_bintree.traversal import iter_post_order, traverse

__version__ = "0.1.0"

__all__ = [
    "BinTreeError",
    "ConfigurationError",
    "LeafCounted",
    "LeafRecord",
    "OrphanPolicy",
    "OrphanRecordError",
    "OutlineRecord",
    "RootNotFoundError",
    "TreeConfig",
    "TreeIntegrityError",
    "TreeNode",
    "as_string",
    "build_dot",
    "build_tree",
    "check_tree",
    "compute",
    "compute_ancestors",
    "count_leaves",
    "find_node",
    "find_node_right_first",
    "find_nodes",
    "iter_post_order",
    "outline_is_parent_of",
    "outline_is_root",
    "parse_outline",
    "traverse",
]
