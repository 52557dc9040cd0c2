"""Configuration system for recordtree.

All configuration is passed per call. These dataclasses bundle the options
that several operations share and validate them before any work starts.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence

from ..core.adapter import MappingAdapter, NodeAdapter
from ..core.errors import ConfigurationError, DepthLimitError


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


@dataclass
class FieldConfig:
    """Names of the structural fields of mapping nodes."""

    id_key: str = "id"
    children_key: str = "children"
    parent_key: str = "parentId"

    def build_adapter(self) -> MappingAdapter:
        return MappingAdapter(self.id_key, self.children_key, self.parent_key)


@dataclass
class DepthConfig:
    """Optional hard limit on how deep a traversal may go.

    Roots are at depth 0. Unlike a display filter, exceeding the limit is a
    structural error: silently truncating would return wrong answers.
    """

    max_depth: Optional[int] = None

    def check(self, node: Any, depth: int) -> None:
        if self.max_depth is not None and depth > self.max_depth:
            raise DepthLimitError(node, depth, self.max_depth)

    def validate(self) -> List[str]:
        if self.max_depth is not None and self.max_depth < 0:
            return ["max_depth cannot be negative"]
        return []


@dataclass
class ShakeConfig:
    """Complete configuration for tree_shake().

    ``filter_fn`` is required. ``on_delete`` is called once for every
    discarded subtree root.
    """

    tree: Optional[Sequence[Any]] = None
    filter_fn: Optional[Callable[[Any], bool]] = None
    on_delete: Optional[Callable[[Any], None]] = None
    id_key: str = "id"
    children_key: str = "children"

    # Extensions
    adapter: Optional[NodeAdapter] = None
    in_place: bool = True
    max_depth: Optional[int] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'ShakeConfig':
        """Build a config from a plain mapping of options.

        Raises:
            ConfigurationError: If the mapping holds unknown option names
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown tree_shake options: {', '.join(unknown)}. "
                f"Choose from: {', '.join(sorted(known))}"
            )
        return cls(**dict(options))

    def build_adapter(self) -> NodeAdapter:
        if self.adapter is not None:
            return self.adapter
        return MappingAdapter(id_key=self.id_key, children_key=self.children_key)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.filter_fn is None:
            errors.append("filter_fn is required")
        elif not callable(self.filter_fn):
            errors.append(f"filter_fn must be callable, got {type(self.filter_fn).__name__}")

        if self.on_delete is not None and not callable(self.on_delete):
            errors.append(f"on_delete must be callable, got {type(self.on_delete).__name__}")

        if self.adapter is not None and not isinstance(self.adapter, NodeAdapter):
            errors.append("adapter must be a NodeAdapter")

        errors.extend(DepthConfig(self.max_depth).validate())

        return errors
