"""Record capability required by the tree aggregation functions.

The tree functions treat records as opaque except for two mutable fields: an
integer ``leaf_count`` and a boolean ``is_leaf``. Any object exposing those
attributes can be placed in a tree; no base class is needed.

Example:
    ```python
    from dataclasses import dataclass
    from dataknobs_bintree.records import LeafRecord

    @dataclass(eq=False)
    class Account(LeafRecord):
        code: str = ""
        parent_code: str | None = None
        balance: float = 0.0
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class LeafCounted(Protocol):
    """Protocol for records whose leaf statistics are maintained by a tree."""

    leaf_count: int
    is_leaf: bool


@dataclass(eq=False)
class LeafRecord:
    """Mutable convenience record satisfying ``LeafCounted``.

    Equality is identity so that records holding equal values are still
    distinct tree members.

    Attributes:
        leaf_count: Number of leaves at or below this record.
        is_leaf: True when the record has no business children.
    """

    leaf_count: int = 0
    is_leaf: bool = False
