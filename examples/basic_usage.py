#!/usr/bin/env python3
"""
Basic usage of recordtree.

Builds a category tree from flat rows, searches it, and prunes it down to
the branches that contain in-stock products.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordtree import (
    flat_to_tree,
    get_leaves_from_tree,
    get_node_path_from_tree,
    tree_shake,
    walk_tree,
)


ROWS = [
    {"id": "root", "name": "Catalog"},
    {"id": "hw", "parentId": "root", "name": "Hardware"},
    {"id": "sw", "parentId": "root", "name": "Software"},
    {"id": "kb", "parentId": "hw", "name": "Keyboards", "stock": 12},
    {"id": "ms", "parentId": "hw", "name": "Mice", "stock": 0},
    {"id": "os", "parentId": "sw", "name": "Operating systems", "stock": 0},
    {"id": "old", "parentId": "gone", "name": "Discontinued"},
]


def print_tree(tree):
    for node, depth in walk_tree(tree):
        stock = node.get("stock")
        suffix = f" ({stock} in stock)" if stock is not None else ""
        print(f"{'  ' * depth}- {node['name']}{suffix}")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = flat_to_tree(ROWS)
    print("Full catalog:")
    print_tree(tree)

    path = get_node_path_from_tree("kb", tree)
    print("\nBreadcrumb:", " > ".join(node["name"] for node in path))

    leaves = get_leaves_from_tree(tree)
    print("Leaf categories:", ", ".join(node["name"] for node in leaves))

    removed = []
    in_stock = tree_shake(
        tree=tree,
        filter_fn=lambda node: node.get("stock", 0) > 0,
        on_delete=removed.append,
    )
    print("\nIn stock:")
    print_tree(in_stock)
    print("Removed:", ", ".join(node["name"] for node in removed))


if __name__ == "__main__":
    main()
