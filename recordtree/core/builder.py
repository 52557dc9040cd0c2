"""Rebuilding trees from flat records.

The TreeBuilder links flat records (each carrying a parent reference) into a
nested forest. Records are claimed by their parent at most once, so
self-referencing or cyclic parent chains cannot loop; records that are never
claimed are dropped.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .adapter import NodeAdapter, id_lookup_key, ids_match

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Links flat records into a forest through a NodeAdapter.

    With ``in_place=True`` (the default) the caller's records receive the
    children field and are returned as the tree nodes. With
    ``in_place=False`` every record is shallow-copied first and the caller's
    records are left untouched.

    Parent references must be hashable.
    """

    def __init__(self, adapter: NodeAdapter, in_place: bool = True):
        self.adapter = adapter
        self.in_place = in_place
        self.dropped: List[Any] = []

    def build(self, records: Optional[Iterable[Any]],
              is_root: Callable[[Any], bool]) -> List[Any]:
        """Split records into roots and pending records, then link them.

        Args:
            records: Flat records in their original order
            is_root: Predicate selecting the root records

        Returns:
            The root records, each carrying its linked descendants
        """
        records = list(records or ())
        if not self.in_place:
            records = [self.adapter.copy_node(record) for record in records]

        roots = []
        rest = []
        pending: Dict[Any, List[Any]] = {}
        for record in records:
            if is_root(record):
                roots.append(record)
            else:
                rest.append(record)
                key = id_lookup_key(self.adapter.get_parent_id(record))
                pending.setdefault(key, []).append(record)

        self._link(roots, pending)

        unclaimed = {id(record) for group in pending.values() for record in group}
        self.dropped = [record for record in rest if id(record) in unclaimed]
        if self.dropped:
            logger.debug("Dropped %d record(s) whose parent was never found",
                         len(self.dropped))
        logger.debug("Built forest with %d root(s) from %d record(s)",
                     len(roots), len(records))
        return roots

    def _link(self, roots: List[Any], pending: Dict[Any, List[Any]]) -> None:
        # Claims happen in pre-order: a node takes its children, then its
        # children take theirs before the node's next sibling is processed.
        # This only matters when ids are duplicated; the first node claims.
        stack = list(reversed(roots))
        while stack:
            node = stack.pop()
            children = pending.pop(id_lookup_key(self.adapter.get_id(node)), None)
            if not children:
                continue
            self.adapter.set_children(node, children)
            stack.extend(reversed(children))

    def build_flat(self, records: Optional[Iterable[Any]]) -> List[Any]:
        """Roots are the records with a falsy parent reference."""
        return self.build(records, lambda record: not self.adapter.get_parent_id(record))

    def build_anchored(self, anchor: Any, records: Optional[Iterable[Any]]) -> List[Any]:
        """Roots are the records whose parent reference matches anchor."""
        return self.build(
            records,
            lambda record: ids_match(self.adapter.get_parent_id(record), anchor),
        )
