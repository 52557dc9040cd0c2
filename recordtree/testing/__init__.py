"""Testing utilities for recordtree.

This module provides fixtures for projects that consume recordtree.
"""

from .fixtures import sample_tree, with_parent_ids, DeleteRecorder

__all__ = ['sample_tree', 'with_parent_ids', 'DeleteRecorder']
