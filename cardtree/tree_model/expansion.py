"""Expanded/collapsed state, including ancestor auto-expansion."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable

from .store import NodeStore
from .types import Node, TreePath

logger = logging.getLogger(__name__)


def expand_selected_ancestors(
    nodes: Iterable[Node],
    is_selected: Callable[[Node], bool],
) -> tuple[list[Node], bool]:
    """Return a copy of ``nodes`` with selected nodes and their ancestors expanded.

    The walk is post-order: each node first learns whether its subtree holds a
    selected node, then expands itself when it already was expanded or that
    subtree (itself included) is selected. The second item of the result tells
    the caller whether any node in ``nodes`` is selected.
    """
    result: list[Node] = []
    contains_selected = False
    for node in nodes:
        children = node.children
        subtree_selected = False
        if children is not None:
            children, subtree_selected = expand_selected_ancestors(children, is_selected)
        subtree_selected = subtree_selected or is_selected(node)
        result.append(
            dataclasses.replace(
                node,
                children=children,
                expanded=node.expanded or subtree_selected,
                extra=dict(node.extra),
            )
        )
        contains_selected = contains_selected or subtree_selected
    return result, contains_selected


class ExpansionManager:
    """Read and write expansion flags on the working tree."""

    def __init__(self, store: NodeStore) -> None:
        self.store = store

    def compute_initial_expansion(self, is_selected: Callable[[Node], bool]) -> bool:
        """Expand ancestors of selected nodes; return whether any node is selected."""
        tree, contains_selected = expand_selected_ancestors(self.store.working, is_selected)
        self.store.replace_working_tree(tree)
        return contains_selected

    def set_expanded(self, path: TreePath, value: bool) -> bool:
        """Set one node's flag without cascading; ``False`` when ``path`` is stale."""
        node = self.store.try_resolve(path)
        if node is None:
            logger.debug("set_expanded ignored for unresolved path %r", path)
            return False
        node.expanded = bool(value)
        return True

    def toggle_expanded(self, path: TreePath) -> bool:
        """Flip one node's flag; ``False`` when ``path`` is stale."""
        node = self.store.try_resolve(path)
        if node is None:
            logger.debug("toggle_expanded ignored for unresolved path %r", path)
            return False
        return self.set_expanded(path, not node.expanded)
