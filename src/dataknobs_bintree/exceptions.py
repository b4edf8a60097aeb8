"""Exception hierarchy for the binary tree reconstruction package.

All errors raised by this package derive from ``BinTreeError``, which carries
an optional context dictionary with details about the failing input.

Empty input and search misses are not errors: ``build_tree`` and the search
functions return ``None`` for those.

Example:
    ```python
    from dataknobs_bintree import build_tree
    from dataknobs_bintree.exceptions import RootNotFoundError

    try:
        root = build_tree(records, is_root, is_parent_of)
    except RootNotFoundError as e:
        logger.error(f"Error: {e}")
        logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class BinTreeError(Exception):
    """Base exception for the binary tree package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class RootNotFoundError(BinTreeError):
    """Raised when no record satisfies the root condition.

    Example:
        ```python
        raise RootNotFoundError(
            "No record satisfied the root condition",
            context={"num_records": 12}
        )
        ```
    """

    pass


class OrphanRecordError(BinTreeError):
    """Raised when a record's parent cannot be resolved.

    Only raised when the build is configured with ``OrphanPolicy.RAISE``;
    the default policy attaches such records under the root.
    """

    pass


class TreeIntegrityError(BinTreeError):
    """Raised when the parent, left/right and children links disagree."""

    pass


class ConfigurationError(BinTreeError):
    """Raised when tree configuration is invalid.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown configuration key",
            context={"key": "orphan_mode", "valid_keys": ["orphan_policy"]}
        )
        ```
    """

    pass
