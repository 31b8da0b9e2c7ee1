"""Tree state engine: storage, selection, expansion, filtering, navigation.

Defines ``Node`` and ``TreePath`` plus the components the view composes.
"""

from __future__ import annotations

from .expansion import ExpansionManager, expand_selected_ancestors
from .filtering import FilterEngine, matches_query, prune_nodes
from .navigation import NavigationEngine
from .selection import MULTI_SELECTION, SINGLE_SELECTION, SelectionManager
from .store import NodeStore
from .types import (
    Node,
    TreePath,
    clone_tree,
    coerce_path,
    ensure_unique_ids,
    format_path,
    iter_post_order,
    iter_visible,
    nodes_from_data,
    nodes_to_data,
    parse_path,
)

__all__ = [
    "Node",
    "TreePath",
    "NodeStore",
    "SelectionManager",
    "SINGLE_SELECTION",
    "MULTI_SELECTION",
    "ExpansionManager",
    "expand_selected_ancestors",
    "FilterEngine",
    "matches_query",
    "prune_nodes",
    "NavigationEngine",
    "clone_tree",
    "coerce_path",
    "ensure_unique_ids",
    "format_path",
    "parse_path",
    "iter_post_order",
    "iter_visible",
    "nodes_from_data",
    "nodes_to_data",
]
