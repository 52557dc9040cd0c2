"""Core abstractions for recordtree.

This package contains the field accessors, traversal strategies and the
two mutating engines (TreeBuilder and TreeShaker) behind the functional API.
"""

from .errors import (
    TreeError,
    ConfigurationError,
    StructuralError,
    CycleError,
    DepthLimitError,
)
from .adapter import (
    NodeAdapter,
    MappingAdapter,
    AttributeAdapter,
    ForestRoot,
    ids_match,
)
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .builder import TreeBuilder
from .shaker import TreeShaker

__all__ = [
    "TreeError",
    "ConfigurationError",
    "StructuralError",
    "CycleError",
    "DepthLimitError",
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
]
