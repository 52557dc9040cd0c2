"""Exception hierarchy for recordtree.

Not finding a node is a normal outcome (``None`` or an empty list) and is
never reported through these exceptions.
"""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for all recordtree errors."""
    pass


class ConfigurationError(TreeError, ValueError):
    """Raised when an operation is configured with unusable options.

    Raised before any traversal begins, so the tree is left untouched.
    """
    pass


class StructuralError(TreeError):
    """Raised when the tree itself is malformed."""
    pass


class CycleError(StructuralError):
    """Raised when the same node object is reached twice in one traversal.

    This covers both real cycles and a node shared between two parents.
    """

    def __init__(self, node: Any, depth: int):
        self.node = node
        self.depth = depth
        super().__init__(
            f"Node {_describe(node)} reached twice (second time at depth {depth}); "
            f"the structure is not a tree"
        )


class DepthLimitError(StructuralError):
    """Raised when traversal goes deeper than the configured max_depth."""

    def __init__(self, node: Any, depth: int, max_depth: Optional[int]):
        self.node = node
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Node {_describe(node)} at depth {depth} exceeds max_depth={max_depth}"
        )


def _describe(node: Any) -> str:
    text = repr(node)
    if len(text) > 60:
        text = text[:57] + "..."
    return text
