"""Unit tests for node lookup and path search.

Covers get_node_from_tree and get_node_path_from_tree: traversal order,
not-found results, custom field names and the ancestor chain property.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordtree import (
    MappingAdapter,
    get_node_from_tree,
    get_node_path_from_tree,
    tree_to_flat,
)
from recordtree.testing import sample_tree


class TestGetNodeFromTree(unittest.TestCase):
    """Test single-node lookup."""

    def setUp(self):
        self.tree = sample_tree()

    def test_finds_root(self):
        node = get_node_from_tree(1, self.tree)
        self.assertIs(node, self.tree[0])

    def test_finds_deep_node(self):
        node = get_node_from_tree(4, self.tree)
        self.assertIs(node, self.tree[0]["children"][1]["children"][0])

    def test_finds_node_in_second_root(self):
        node = get_node_from_tree(8, self.tree)
        self.assertEqual(node["name"], "node-8")

    def test_every_present_id_is_found(self):
        for expected in tree_to_flat(self.tree):
            self.assertIs(get_node_from_tree(expected["id"], self.tree), expected)

    def test_missing_id_returns_none(self):
        self.assertIsNone(get_node_from_tree(99, self.tree))

    def test_empty_and_none_tree(self):
        self.assertIsNone(get_node_from_tree(1, []))
        self.assertIsNone(get_node_from_tree(1, None))
        self.assertIsNone(get_node_from_tree(1))

    def test_first_match_wins_on_duplicate_ids(self):
        # Pre-order: the nested duplicate under the first root comes before
        # the second root
        first = {"id": 7, "tag": "nested"}
        tree = [
            {"id": 1, "children": [first]},
            {"id": 7, "tag": "root"},
        ]
        self.assertIs(get_node_from_tree(7, tree), first)

    def test_parent_checked_before_children(self):
        parent = {"id": 3, "children": [{"id": 3}]}
        self.assertIs(get_node_from_tree(3, [parent]), parent)

    def test_no_type_coercion(self):
        tree = [{"id": 1}, {"id": "2"}]
        self.assertIsNone(get_node_from_tree("1", tree))
        self.assertIsNone(get_node_from_tree(2, tree))
        self.assertIsNone(get_node_from_tree(True, tree))
        self.assertEqual(get_node_from_tree("2", tree), {"id": "2"})

    def test_custom_keys(self):
        tree = [{"key": "a", "items": [{"key": "b", "items": [{"key": "c"}]}]}]
        node = get_node_from_tree("c", tree, id_key="key", children_key="items")
        self.assertEqual(node, {"key": "c"})

    def test_adapter_overrides_keys(self):
        tree = [{"key": "a", "items": [{"key": "b"}]}]
        adapter = MappingAdapter(id_key="key", children_key="items")
        self.assertEqual(get_node_from_tree("b", tree, adapter=adapter), {"key": "b"})

    def test_does_not_mutate(self):
        tree = sample_tree()
        get_node_from_tree(9, tree)
        self.assertEqual(tree, sample_tree())


class TestGetNodePathFromTree(unittest.TestCase):
    """Test ancestor path reconstruction."""

    def setUp(self):
        self.tree = [{"id": 1, "children": [{"id": 2}, {"id": 3, "children": [{"id": 4}]}]}]

    def test_path_to_deep_node(self):
        path = get_node_path_from_tree(4, self.tree)
        self.assertEqual([node["id"] for node in path], [1, 3, 4])
        self.assertIs(path[0], self.tree[0])
        self.assertIs(path[-1], self.tree[0]["children"][1]["children"][0])

    def test_path_to_root(self):
        path = get_node_path_from_tree(1, self.tree)
        self.assertEqual(path, [self.tree[0]])

    def test_dead_end_branches_do_not_leak(self):
        tree = [
            {"id": 1, "children": [
                {"id": 2, "children": [{"id": 5}, {"id": 6}]},
                {"id": 3, "children": [{"id": 4}]},
            ]},
        ]
        path = get_node_path_from_tree(4, tree)
        self.assertEqual([node["id"] for node in path], [1, 3, 4])

    def test_path_into_second_root(self):
        path = get_node_path_from_tree(7, sample_tree())
        self.assertEqual([node["id"] for node in path], [5, 6, 7])

    def test_missing_id_returns_empty(self):
        self.assertEqual(get_node_path_from_tree(99, self.tree), [])
        self.assertEqual(get_node_path_from_tree(99, []), [])
        self.assertEqual(get_node_path_from_tree(99, None), [])

    def test_path_is_ancestor_chain(self):
        tree = sample_tree()
        for target in tree_to_flat(tree):
            path = get_node_path_from_tree(target["id"], tree)
            self.assertIs(path[-1], target)
            self.assertIs(path[-1], get_node_from_tree(target["id"], tree))
            self.assertIn(path[0], tree)
            for parent, child in zip(path, path[1:]):
                self.assertTrue(any(c is child for c in parent["children"]))

    def test_custom_keys(self):
        tree = [{"uid": "r", "kids": [{"uid": "x", "kids": [{"uid": "y"}]}]}]
        path = get_node_path_from_tree("y", tree, id_key="uid", children_key="kids")
        self.assertEqual([node["uid"] for node in path], ["r", "x", "y"])

    def test_returns_new_list_each_call(self):
        first = get_node_path_from_tree(4, self.tree)
        second = get_node_path_from_tree(4, self.tree)
        self.assertIsNot(first, second)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
