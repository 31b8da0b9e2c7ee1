"""Canonical and working tree ownership with path resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import PathNotFound
from .types import Node, TreePath, clone_tree, ensure_unique_ids, iter_post_order

logger = logging.getLogger(__name__)


class NodeStore:
    """Own the canonical snapshot and the displayed working tree."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self.canonical: list[Node] = []
        self.working: list[Node] = []
        self.initialize(nodes)

    def initialize(self, nodes: Iterable[Node]) -> None:
        """Deep-copy ``nodes`` into both the canonical and the working tree.

        Raises ``InvalidOption`` when node ids are not unique.
        """
        snapshot = list(nodes)
        ensure_unique_ids(snapshot)
        self.canonical = clone_tree(snapshot)
        self.working = clone_tree(snapshot)
        logger.debug("node store initialized with %d root nodes", len(self.canonical))

    def resolve(self, path: TreePath) -> Node:
        """Return the working-tree node at ``path`` or raise ``PathNotFound``."""
        if not path:
            raise PathNotFound(path)
        level: list[Node] | None = self.working
        node: Node | None = None
        for index in path:
            if not level or index < 0 or index >= len(level):
                raise PathNotFound(path)
            node = level[index]
            level = node.children
        assert node is not None
        return node

    def try_resolve(self, path: TreePath) -> Node | None:
        """Like ``resolve`` but return ``None`` for stale or malformed paths."""
        try:
            return self.resolve(path)
        except PathNotFound:
            return None

    def replace_working_tree(self, tree: list[Node]) -> None:
        """Swap the working tree wholesale."""
        self.working = tree

    def path_of(self, node_id: str) -> TreePath | None:
        """Return the working-tree path of the node with ``node_id``."""
        for path, node in iter_post_order(self.working):
            if node.id == node_id:
                return path
        return None

    def find_node(self, node_id: str) -> Node | None:
        """Return the working-tree node with ``node_id``, or ``None`` if filtered out."""
        for _path, node in iter_post_order(self.working):
            if node.id == node_id:
                return node
        return None
