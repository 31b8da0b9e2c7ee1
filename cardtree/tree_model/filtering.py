"""Substring filtering that rebuilds the working tree from the canonical one."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable

from .store import NodeStore
from .types import Node, clone_tree

logger = logging.getLogger(__name__)


def matches_query(name: str, query: str) -> bool:
    """Return whether ``query`` occurs in ``name`` ignoring case."""
    return query.casefold() in name.casefold()


def prune_nodes(nodes: Iterable[Node], predicate: Callable[[Node], bool]) -> list[Node]:
    """Flatten matching nodes into one sibling list.

    Each node contributes its descendants' matches first and then itself when
    it matches. Surviving nodes never carry ``children``, so a matching parent
    lands after its matching children at the same level.
    """
    pruned: list[Node] = []
    for node in nodes:
        if node.children:
            pruned.extend(prune_nodes(node.children, predicate))
        survivor = dataclasses.replace(node, children=None, extra=dict(node.extra))
        if predicate(survivor):
            pruned.append(survivor)
    return pruned


class FilterEngine:
    """Derive the working tree from the canonical tree for a search string."""

    def __init__(self, store: NodeStore) -> None:
        self.store = store
        self.query = ""

    @property
    def active(self) -> bool:
        """Whether a non-empty query currently shapes the working tree."""
        return bool(self.query)

    def filter(self, query: str) -> list[Node]:
        """Replace the working tree with the result for ``query`` and return it."""
        self.query = query
        tree = clone_tree(self.store.canonical)
        if query:
            tree = prune_nodes(tree, lambda node: matches_query(node.name, query))
        self.store.replace_working_tree(tree)
        logger.debug("filter %r produced %d top-level nodes", query, len(tree))
        return tree
