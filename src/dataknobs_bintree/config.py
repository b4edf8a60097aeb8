"""Configuration for building and aggregating trees."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict

from dataknobs_bintree.exceptions import ConfigurationError


class OrphanPolicy(Enum):
    """What to do with a record whose parent is never found on the stack."""

    ATTACH_TO_ROOT = "attach_to_root"
    """Attach the record under the root and keep building."""

    RAISE = "raise"
    """Stop the build with an ``OrphanRecordError``."""


@dataclass
class TreeConfig:
    """Configuration for tree building and leaf counting.

    Attributes:
        orphan_policy: Handling of records whose parent condition never matches
            any record on the current ancestor chain (including the root).
        lone_root_leaf_count: Leaf count assigned by ``count_leaves`` to a root
            without any children.
    """

    orphan_policy: OrphanPolicy = OrphanPolicy.ATTACH_TO_ROOT
    lone_root_leaf_count: int = 0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> TreeConfig:
        """Create an instance from a configuration dictionary.

        Args:
            config: Configuration dictionary. Enum fields accept either the
                member or its string value.

        Returns:
            A TreeConfig instance.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid.
        """
        valid_keys = [f.name for f in fields(cls)]
        unknown = [key for key in config if key not in valid_keys]
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                context={"keys": unknown, "valid_keys": valid_keys},
            )

        kwargs = dict(config)
        if "orphan_policy" in kwargs:
            policy = kwargs["orphan_policy"]
            if not isinstance(policy, OrphanPolicy):
                try:
                    kwargs["orphan_policy"] = OrphanPolicy(policy)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid orphan_policy: {policy!r}",
                        context={
                            "value": policy,
                            "valid_values": [p.value for p in OrphanPolicy],
                        },
                    ) from e
        if "lone_root_leaf_count" in kwargs:
            count = kwargs["lone_root_leaf_count"]
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ConfigurationError(
                    f"lone_root_leaf_count must be a non-negative integer, got {count!r}",
                    context={"value": count},
                )
        return cls(**kwargs)
