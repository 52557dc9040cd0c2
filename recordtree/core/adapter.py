"""NodeAdapter abstraction for recordtree.

Nodes are plain caller data - dicts, dataclasses, ORM rows. The adapter is
what knows where a node keeps its id, its children and its parent reference,
so every algorithm in recordtree reads and writes fields only through it.
"""

import copy
import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Hashable, List, Optional, Sequence, Tuple


def ids_match(left: Any, right: Any) -> bool:
    """Compare two node ids.

    Plain ``==`` except that a bool never equals a non-bool, so ``True`` does
    not match the id ``1``.
    """
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def id_lookup_key(value: Any) -> Tuple[bool, Hashable]:
    """Dictionary key for an id, consistent with ids_match()."""
    return (isinstance(value, bool), value)


class ForestRoot:
    """Synthetic parent for a whole forest.

    Used where root-level siblings must be handled the same way as any other
    group of children. It is a separate type rather than a node carrying a
    reserved id, so it cannot collide with caller data.
    """

    __slots__ = ("children",)

    def __init__(self, children: Optional[Sequence[Any]] = None):
        self.children = children

    def __repr__(self) -> str:
        count = len(self.children) if self.children else 0
        return f"ForestRoot(children={count})"


class NodeAdapter(ABC):
    """Abstract accessor for the structural fields of a node.

    Subclasses implement field access for one node representation. The
    ForestRoot handling lives here so that algorithms never need to special
    case the synthetic root.
    """

    @abstractmethod
    def _read_id(self, node: Any) -> Any:
        pass

    @abstractmethod
    def _read_children(self, node: Any) -> Optional[Sequence[Any]]:
        pass

    @abstractmethod
    def _write_children(self, node: Any, children: List[Any]) -> None:
        pass

    @abstractmethod
    def _delete_children(self, node: Any) -> None:
        pass

    @abstractmethod
    def get_parent_id(self, node: Any) -> Any:
        """Return the parent reference of a flat record, or None."""
        pass

    def get_id(self, node: Any) -> Any:
        """Return the id of a node (None when it has none)."""
        if isinstance(node, ForestRoot):
            return None
        return self._read_id(node)

    def get_children(self, node: Any) -> Optional[Sequence[Any]]:
        """Return the children sequence of a node as stored, possibly None."""
        if isinstance(node, ForestRoot):
            return node.children
        return self._read_children(node)

    def set_children(self, node: Any, children: List[Any]) -> None:
        if isinstance(node, ForestRoot):
            node.children = children
        else:
            self._write_children(node, children)

    def remove_children(self, node: Any) -> None:
        """Drop the children field entirely (not just empty it)."""
        if isinstance(node, ForestRoot):
            node.children = None
        else:
            self._delete_children(node)

    def is_leaf(self, node: Any) -> bool:
        """A leaf has no children field, a None one, or an empty one."""
        children = self.get_children(node)
        return not children

    def copy_node(self, node: Any) -> Any:
        """Shallow copy used by the non-mutating variants."""
        return copy.copy(node)

    def matches(self, node: Any, node_id: Any) -> bool:
        return ids_match(self.get_id(node), node_id)


class MappingAdapter(NodeAdapter):
    """Adapter for string-keyed mappings such as dicts decoded from JSON."""

    def __init__(self,
                 id_key: str = "id",
                 children_key: str = "children",
                 parent_key: str = "parentId"):
        self.id_key = id_key
        self.children_key = children_key
        self.parent_key = parent_key

    def _read_id(self, node):
        return node.get(self.id_key)

    def _read_children(self, node):
        return node.get(self.children_key)

    def _write_children(self, node, children):
        node[self.children_key] = children

    def _delete_children(self, node):
        node.pop(self.children_key, None)

    def get_parent_id(self, node):
        return node.get(self.parent_key)

    def __repr__(self) -> str:
        return (f"MappingAdapter(id_key={self.id_key!r}, "
                f"children_key={self.children_key!r}, "
                f"parent_key={self.parent_key!r})")


class AttributeAdapter(NodeAdapter):
    """Adapter for objects that keep their fields as attributes.

    Works with dataclasses, namedtuple-like records with writable fields and
    ordinary objects. Missing attributes read as None.
    """

    def __init__(self,
                 id_attr: str = "id",
                 children_attr: str = "children",
                 parent_attr: str = "parent_id"):
        self.id_attr = id_attr
        self.children_attr = children_attr
        self.parent_attr = parent_attr

    def _read_id(self, node):
        return getattr(node, self.id_attr, None)

    def _read_children(self, node):
        return getattr(node, self.children_attr, None)

    def _write_children(self, node, children):
        setattr(node, self.children_attr, children)

    def _delete_children(self, node):
        # Declared fields (dataclasses, __slots__) must stay readable, so
        # they are cleared rather than deleted.
        if dataclasses.is_dataclass(node) or not hasattr(node, "__dict__"):
            setattr(node, self.children_attr, None)
            return
        if self.children_attr in vars(node):
            delattr(node, self.children_attr)
        if getattr(node, self.children_attr, None) is not None:
            setattr(node, self.children_attr, None)

    def get_parent_id(self, node):
        return getattr(node, self.parent_attr, None)

    def __repr__(self) -> str:
        return (f"AttributeAdapter(id_attr={self.id_attr!r}, "
                f"children_attr={self.children_attr!r}, "
                f"parent_attr={self.parent_attr!r})")
