"""recordtree - Generic operations on trees of records.

recordtree searches, flattens, rebuilds and prunes hierarchical data given
as nested sequences of records (dicts, dataclasses, ORM rows). No schema is
assumed: the id, children and parent fields are named per call.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from recordtree import flat_to_tree, get_node_path_from_tree, tree_shake

    tree = flat_to_tree(rows, id_key="id", parent_key="parentId")
    path = get_node_path_from_tree(42, tree)
    pruned = tree_shake(tree=tree, filter_fn=lambda node: node["active"])
━━━━━━━━━━━━━━━━━━━━━━━━━━

flat_to_tree, array_to_tree and tree_shake modify the records they are given
unless called with in_place=False. Everything else is read-only.
"""

__version__ = "0.3.0"

from .core import (
    TreeError,
    ConfigurationError,
    StructuralError,
    CycleError,
    DepthLimitError,
    NodeAdapter,
    MappingAdapter,
    AttributeAdapter,
    ForestRoot,
    ids_match,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
    TreeBuilder,
    TreeShaker,
)
from ._common.config import (
    TraversalStrategy,
    FieldConfig,
    DepthConfig,
    ShakeConfig,
)
from .api import (
    get_node_from_tree,
    get_node_path_from_tree,
    get_leaves_from_tree,
    tree_to_flat,
    flat_to_tree,
    array_to_tree,
    tree_shake,
    walk_tree,
    find_nodes,
    count_nodes,
)

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "ConfigurationError",
    "StructuralError",
    "CycleError",
    "DepthLimitError",
    # Core
    "NodeAdapter",
    "MappingAdapter",
    "AttributeAdapter",
    "ForestRoot",
    "ids_match",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "TreeBuilder",
    "TreeShaker",
    # Config
    "TraversalStrategy",
    "FieldConfig",
    "DepthConfig",
    "ShakeConfig",
    # API
    "get_node_from_tree",
    "get_node_path_from_tree",
    "get_leaves_from_tree",
    "tree_to_flat",
    "flat_to_tree",
    "array_to_tree",
    "tree_shake",
    "walk_tree",
    "find_nodes",
    "count_nodes",
]
