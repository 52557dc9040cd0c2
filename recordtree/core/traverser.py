"""Tree traversal strategies for recordtree.

Traversers walk a forest (an ordered sequence of roots) through a
NodeAdapter. They use explicit work-lists instead of recursion, so a deep
tree costs memory proportional to its size and never exhausts the Python
call stack.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .adapter import NodeAdapter
from .errors import CycleError
from .._common.config import DepthConfig, TraversalStrategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Every traversal tracks visited node objects by identity. Reaching the same
    object twice means the input is not a tree and raises CycleError.
    """

    def __init__(self, adapter: NodeAdapter, max_depth: Optional[int] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: NodeAdapter for reading node fields
            max_depth: Deepest allowed depth (None = unlimited). Roots are depth 0.
        """
        self.adapter = adapter
        self.depth = DepthConfig(max_depth)

    @abstractmethod
    def traverse(self, roots: Optional[Iterable[Any]]) -> Iterator[Tuple[Any, int]]:
        """Traverse the forest given by roots.

        Args:
            roots: Root nodes in order (None = empty forest)

        Yields:
            Tuples of (node, depth) where roots have depth 0
        """
        pass

    def _enter(self, node: Any, depth: int, visited: Set[int]) -> None:
        """Record a visit, enforcing the tree shape and depth limit."""
        marker = id(node)
        if marker in visited:
            raise CycleError(node, depth)
        visited.add(marker)
        self.depth.check(node, depth)

    def _children(self, node: Any) -> List[Any]:
        return list(self.adapter.get_children(node) or ())


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self, roots):
        queue: Deque[Tuple[Any, int]] = deque((root, 0) for root in roots or ())
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()
            self._enter(node, depth, visited)
            yield (node, depth)

            for child in self._children(node):
                queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children, siblings left to right.
    """

    def traverse(self, roots):
        # Reversed so the leftmost node is popped first
        stack: List[Tuple[Any, int]] = [(root, 0) for root in reversed(list(roots or ()))]
        visited: Set[int] = set()

        while stack:
            node, depth = stack.pop()
            self._enter(node, depth, visited)
            yield (node, depth)

            children = self._children(node)
            for child in reversed(children):
                stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before their parent. Useful when a node's result depends
    on its whole subtree.
    """

    def traverse(self, roots):
        # Entries are (node, depth, expanded); a node is yielded the second
        # time it reaches the top of the stack.
        stack: List[Tuple[Any, int, bool]] = [
            (root, 0, False) for root in reversed(list(roots or ()))
        ]
        visited: Set[int] = set()

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            self._enter(node, depth, visited)
            stack.append((node, depth, True))
            for child in reversed(self._children(node)):
                stack.append((child, depth + 1, False))


_STRATEGIES = {
    'bfs': BreadthFirstTraverser,
    'breadth_first': BreadthFirstTraverser,
    'dfs_pre': DepthFirstPreOrderTraverser,
    'depth_first_pre': DepthFirstPreOrderTraverser,
    'dfs_post': DepthFirstPostOrderTraverser,
    'depth_first_post': DepthFirstPostOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: NodeAdapter,
                     max_depth: Optional[int] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or name (bfs, dfs_pre, dfs_post)
        adapter: NodeAdapter for the node representation
        max_depth: Deepest allowed depth

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGIES.keys())}"
        )

    return _STRATEGIES[strategy_lower](adapter, max_depth=max_depth)
