"""Test fixtures for recordtree consumers.

Helpers for building sample data and observing callbacks in test suites,
without depending on recordtree internals.
"""

from typing import Any, Dict, List, Optional


def sample_tree(id_key: str = "id", children_key: str = "children") -> List[Dict[str, Any]]:
    """Build a fresh copy of a small, uneven forest.

    Structure (ids)::

        1
        ├── 2
        └── 3
            └── 4
        5
        ├── 6
        │   ├── 7
        │   └── 8
        └── 9

    A new structure is returned on every call, so tests may mutate it.
    """
    def node(node_id: int, *children: Dict[str, Any]) -> Dict[str, Any]:
        record: Dict[str, Any] = {id_key: node_id, "name": f"node-{node_id}"}
        if children:
            record[children_key] = list(children)
        return record

    return [
        node(1, node(2), node(3, node(4))),
        node(5, node(6, node(7), node(8)), node(9)),
    ]


def with_parent_ids(flat: List[Dict[str, Any]],
                    tree: List[Dict[str, Any]],
                    id_key: str = "id",
                    children_key: str = "children",
                    parent_key: str = "parentId") -> List[Dict[str, Any]]:
    """Turn flattened tree nodes into detached flat records.

    Each record is a copy without the children field, carrying the id of its
    parent in ``parent_key`` (roots get none).
    """
    parents: Dict[int, Any] = {}
    stack = list(tree)
    while stack:
        node = stack.pop()
        for child in node.get(children_key) or ():
            parents[id(child)] = node.get(id_key)
            stack.append(child)

    records = []
    for node in flat:
        record = {key: value for key, value in node.items() if key != children_key}
        if id(node) in parents:
            record[parent_key] = parents[id(node)]
        records.append(record)
    return records


class DeleteRecorder:
    """Callable that records every node passed to it.

    Example:
        recorder = DeleteRecorder()
        tree_shake(tree=tree, filter_fn=pred, on_delete=recorder)
        assert recorder.ids() == [2]
    """

    def __init__(self, id_key: str = "id"):
        self.id_key = id_key
        self.nodes: List[Any] = []

    def __call__(self, node: Any) -> None:
        self.nodes.append(node)

    def ids(self) -> List[Optional[Any]]:
        return [node.get(self.id_key) for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)
