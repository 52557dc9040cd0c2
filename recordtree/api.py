"""High-level API for recordtree.

Simple functional interfaces over the adapter/traverser/builder/shaker
core. Every function takes the structural field names as parameters; pass
``adapter=`` instead to work with any other node representation.

Read-only operations (search, flatten, walk) never modify nodes. The
building and pruning operations modify the records they are given unless
called with ``in_place=False``.
"""

from dataclasses import fields
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .core.adapter import MappingAdapter, NodeAdapter
from .core.builder import TreeBuilder
from .core.errors import ConfigurationError
from .core.shaker import TreeShaker
from .core.traverser import DepthFirstPreOrderTraverser, create_traverser
from ._common.config import ShakeConfig, TraversalStrategy

Tree = Optional[Sequence[Any]]


def get_node_from_tree(
    node_id: Any,
    tree: Tree = None,
    id_key: str = "id",
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> Optional[Any]:
    """Find the first node whose id matches node_id.

    Searches depth-first, pre-order, left to right, and only descends into a
    node's children after the node itself failed to match.

    Returns:
        The matching node, or None if no node matches

    Example:
        >>> tree = [{"id": 1, "children": [{"id": 2}]}]
        >>> get_node_from_tree(2, tree)
        {'id': 2}
    """
    adapter = _resolve_adapter(adapter, id_key, children_key)
    traverser = DepthFirstPreOrderTraverser(adapter, max_depth=max_depth)
    for node, _ in traverser.traverse(tree):
        if adapter.matches(node, node_id):
            return node
    return None


def get_node_path_from_tree(
    node_id: Any,
    tree: Tree = None,
    id_key: str = "id",
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> List[Any]:
    """Find the chain of nodes from a root down to the first match.

    Returns:
        Nodes in root-to-target order, target included. Empty if no node
        matches.

    Example:
        >>> tree = [{"id": 1, "children": [{"id": 2}, {"id": 3, "children": [{"id": 4}]}]}]
        >>> [node["id"] for node in get_node_path_from_tree(4, tree)]
        [1, 3, 4]
    """
    adapter = _resolve_adapter(adapter, id_key, children_key)
    traverser = DepthFirstPreOrderTraverser(adapter, max_depth=max_depth)
    path: List[Any] = []
    for node, depth in traverser.traverse(tree):
        # Pre-order guarantees path[:depth] holds exactly this node's ancestors
        del path[depth:]
        path.append(node)
        if adapter.matches(node, node_id):
            return path
    return []


def get_leaves_from_tree(
    tree: Tree = None,
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> List[Any]:
    """Collect every node without children, in pre-order."""
    adapter = _resolve_adapter(adapter, children_key=children_key)
    traverser = DepthFirstPreOrderTraverser(adapter, max_depth=max_depth)
    return [node for node, _ in traverser.traverse(tree) if adapter.is_leaf(node)]


def tree_to_flat(
    tree: Tree = None,
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> List[Any]:
    """Flatten a tree into a list of all nodes, parents before descendants.

    The nodes keep their children field; only the returned list is new.
    """
    adapter = _resolve_adapter(adapter, children_key=children_key)
    traverser = DepthFirstPreOrderTraverser(adapter, max_depth=max_depth)
    return [node for node, _ in traverser.traverse(tree)]


def flat_to_tree(
    flat: Tree = None,
    id_key: str = "id",
    children_key: str = "children",
    parent_key: str = "parentId",
    *,
    adapter: Optional[NodeAdapter] = None,
    in_place: bool = True,
) -> List[Any]:
    """Rebuild a tree from records carrying a parent reference.

    Records with a falsy parent reference become roots. Each node then
    claims the remaining records that name it as parent, in their original
    order. Records whose parent is never found are dropped.

    Args:
        flat: Flat records
        id_key: Field holding a record's id
        children_key: Field that receives the children list
        parent_key: Field holding the parent's id
        adapter: NodeAdapter overriding the three key names
        in_place: When False, work on shallow copies and leave the input
            records untouched

    Returns:
        The root records

    Example:
        >>> flat_to_tree([{"id": 1}, {"id": 2, "parentId": 1}, {"id": 3, "parentId": 99}])
        [{'id': 1, 'children': [{'id': 2, 'parentId': 1}]}]
    """
    adapter = _resolve_adapter(adapter, id_key, children_key, parent_key)
    return TreeBuilder(adapter, in_place=in_place).build_flat(flat)


def array_to_tree(
    anchor: Any,
    arr: Tree = None,
    id_key: str = "id",
    children_key: str = "children",
    parent_key: str = "parentId",
    *,
    adapter: Optional[NodeAdapter] = None,
    in_place: bool = True,
) -> List[Any]:
    """Rebuild the tree hanging below a known parent id.

    Like flat_to_tree(), but the roots are the records whose parent reference
    matches ``anchor``. Everything not reachable from those roots is dropped.

    Example:
        >>> rows = [{"id": 1, "parentId": 0}, {"id": 2, "parentId": 1}]
        >>> array_to_tree(0, rows)
        [{'id': 1, 'parentId': 0, 'children': [{'id': 2, 'parentId': 1}]}]
    """
    adapter = _resolve_adapter(adapter, id_key, children_key, parent_key)
    return TreeBuilder(adapter, in_place=in_place).build_anchored(anchor, arr)


def tree_shake(
    config: Union[ShakeConfig, Mapping[str, Any], None] = None,
    **options: Any,
) -> List[Any]:
    """Prune a tree down to the branches that contain a matching node.

    A node survives when it, or any node below it, satisfies ``filter_fn``.
    Every other subtree is removed, and ``on_delete`` is called once with the
    top node of each removed subtree. Nodes left without surviving children
    lose their children field entirely.

    Args:
        config: ShakeConfig, or a mapping of its fields
        **options: ShakeConfig fields, overriding those in config

    Returns:
        The surviving roots (empty list if nothing survived)

    Raises:
        ConfigurationError: If filter_fn is missing or not callable, or
            on_delete is given but not callable

    Example:
        >>> tree = [{"id": 1, "children": [{"id": 2}, {"id": 3, "children": [{"id": 4}]}]}]
        >>> tree_shake(tree=tree, filter_fn=lambda node: node["id"] == 4)
        [{'id': 1, 'children': [{'id': 3, 'children': [{'id': 4}]}]}]
    """
    return TreeShaker(_build_shake_config(config, options)).execute()


def walk_tree(
    tree: Tree = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[Any, int]]:
    """Lazily yield (node, depth) pairs; roots are at depth 0.

    Args:
        tree: Roots of the tree
        strategy: TraversalStrategy or its name (bfs, dfs_pre, dfs_post)
        children_key: Field holding the children list
        adapter: NodeAdapter overriding children_key
        max_depth: Raise DepthLimitError below this depth

    Raises:
        ValueError: If strategy is not recognized
    """
    adapter = _resolve_adapter(adapter, children_key=children_key)
    traverser = create_traverser(strategy, adapter, max_depth=max_depth)
    return traverser.traverse(tree)


def find_nodes(
    tree: Tree,
    predicate: Callable[[Any], bool],
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> List[Any]:
    """Collect every node satisfying predicate, in pre-order."""
    nodes = walk_tree(tree, children_key=children_key, adapter=adapter, max_depth=max_depth)
    return [node for node, _ in nodes if predicate(node)]


def count_nodes(
    tree: Tree,
    children_key: str = "children",
    *,
    adapter: Optional[NodeAdapter] = None,
    max_depth: Optional[int] = None,
) -> int:
    """Count all nodes in the tree."""
    count = 0
    for _ in walk_tree(tree, children_key=children_key, adapter=adapter, max_depth=max_depth):
        count += 1
    return count


def _resolve_adapter(adapter: Optional[NodeAdapter],
                     id_key: str = "id",
                     children_key: str = "children",
                     parent_key: str = "parentId") -> NodeAdapter:
    if adapter is not None:
        return adapter
    return MappingAdapter(id_key=id_key, children_key=children_key, parent_key=parent_key)


def _build_shake_config(config: Union[ShakeConfig, Mapping[str, Any], None],
                        options: Mapping[str, Any]) -> ShakeConfig:
    if config is None:
        return ShakeConfig.from_mapping(options)
    if isinstance(config, ShakeConfig):
        if not options:
            return config
        merged = {f.name: getattr(config, f.name) for f in fields(config)}
        merged.update(options)
        return ShakeConfig.from_mapping(merged)
    if isinstance(config, Mapping):
        merged = dict(config)
        merged.update(options)
        return ShakeConfig.from_mapping(merged)
    raise ConfigurationError(
        f"tree_shake expects a ShakeConfig or a mapping, got {type(config).__name__}"
    )
