"""Subtree pruning for recordtree.

The TreeShaker keeps every branch that contains at least one node satisfying
a predicate and discards every subtree that contains none. It follows the
plan-then-execute pattern: the configuration is validated when the shaker is
created, before any node is touched.
"""

import logging
from collections import deque
from typing import Any, Deque, List, Set

from .adapter import ForestRoot
from .errors import ConfigurationError, CycleError
from .traverser import DepthFirstPreOrderTraverser
from .._common.config import DepthConfig, ShakeConfig

logger = logging.getLogger(__name__)


class TreeShaker:
    """Validated, single-use pruning run.

    Raises:
        ConfigurationError: If the configuration is unusable
    """

    def __init__(self, config: ShakeConfig):
        errors = config.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid tree_shake configuration: {'; '.join(errors)}"
            )

        self.config = config
        self.adapter = config.build_adapter()
        self.depth = DepthConfig(config.max_depth)
        self._probe = DepthFirstPreOrderTraverser(self.adapter)

        self.kept = 0
        self.deleted = 0

    def subtree_matches(self, node: Any) -> bool:
        """Depth-first check for a satisfying node, stopping at the first one."""
        filter_fn = self.config.filter_fn
        return any(filter_fn(item) for item, _ in self._probe.traverse([node]))

    def execute(self) -> List[Any]:
        """Prune the configured tree.

        Returns:
            The surviving roots (a new list, empty if nothing survived)
        """
        adapter = self.adapter
        on_delete = self.config.on_delete
        root = ForestRoot(self.config.tree)

        queue: Deque[Any] = deque([(root, -1)])
        seen: Set[int] = set()

        while queue:
            item, depth = queue.popleft()

            kept_children = []
            for child in adapter.get_children(item) or ():
                if not self.subtree_matches(child):
                    self.deleted += 1
                    if on_delete is not None:
                        on_delete(child)
                    continue

                # Identity of the caller's node, even when working on copies
                marker = id(child)
                if marker in seen:
                    raise CycleError(child, depth + 1)
                seen.add(marker)
                self.depth.check(child, depth + 1)

                if not self.config.in_place:
                    child = adapter.copy_node(child)
                kept_children.append(child)

            if kept_children:
                adapter.set_children(item, kept_children)
            else:
                adapter.remove_children(item)

            queue.extend((child, depth + 1) for child in kept_children)
            self.kept += len(kept_children)

        logger.debug("tree_shake kept %d node(s), discarded %d subtree(s)",
                     self.kept, self.deleted)
        return root.children or []
