#!/usr/bin/env python3
"""
Test all examples from the documentation to ensure they work correctly.
"""

import doctest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import recordtree
from recordtree import api


def test_api_docstring_examples():
    """Every Example block in the functional API must run as written."""
    failures, attempted = doctest.testmod(api, verbose=False)
    assert attempted > 0
    assert failures == 0


def test_quick_start_example():
    """Test the quick start from the package docstring."""
    rows = [
        {"id": 1, "active": False},
        {"id": 42, "parentId": 1, "active": True},
        {"id": 43, "parentId": 1, "active": False},
    ]

    tree = recordtree.flat_to_tree(rows, id_key="id", parent_key="parentId")
    path = recordtree.get_node_path_from_tree(42, tree)
    pruned = recordtree.tree_shake(tree=tree, filter_fn=lambda node: node["active"])

    assert [node["id"] for node in path] == [1, 42]
    assert [node["id"] for node in recordtree.tree_to_flat(pruned)] == [1, 42]
