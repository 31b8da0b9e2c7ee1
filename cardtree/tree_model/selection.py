"""Selection bookkeeping keyed by stable node identifiers.

Entries are resolved lazily against the current working tree, so a filter
rebuild never leaves the selection pointing at detached node objects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .types import Node, iter_post_order

logger = logging.getLogger(__name__)

SINGLE_SELECTION = "single"
MULTI_SELECTION = "multi"


class SelectionManager:
    """Track selected nodes in insertion order for single or multi mode."""

    def __init__(
        self,
        lookup: Callable[[str], Node | None],
        multi_selection: bool = False,
    ) -> None:
        self._lookup = lookup
        self.mode = MULTI_SELECTION if multi_selection else SINGLE_SELECTION
        self._selected_ids: list[str] = []

    @property
    def multi_selection(self) -> bool:
        """Whether clicks toggle nodes instead of replacing the selection."""
        return self.mode == MULTI_SELECTION

    @property
    def selected_ids(self) -> tuple[str, ...]:
        """Selected node ids in selection order, duplicates included."""
        return tuple(self._selected_ids)

    @property
    def selected_nodes(self) -> list[Node]:
        """Selected nodes still present in the working tree, in selection order."""
        nodes: list[Node] = []
        for node_id in self._selected_ids:
            node = self._lookup(node_id)
            if node is not None:
                nodes.append(node)
        return nodes

    def is_selected(self, node_id: str) -> bool:
        """Whether ``node_id`` has at least one selection entry."""
        return node_id in self._selected_ids

    def clear(self) -> None:
        """Forget every entry without touching node flags."""
        self._selected_ids.clear()

    def select(self, node: Node) -> None:
        """Flag ``node`` and append its id; selecting twice records the id twice."""
        node.selected = True
        self._selected_ids.append(node.id)

    def deselect(self, node: Node) -> None:
        """Clear the flag and drop one entry for ``node``, if it has any."""
        node.selected = False
        if node.id in self._selected_ids:
            self._selected_ids.remove(node.id)

    def deselect_all(self) -> None:
        """Clear every entry and reset the flag of each node still displayed."""
        while self._selected_ids:
            node = self._lookup(self._selected_ids.pop())
            if node is not None:
                node.selected = False

    def click(self, node: Node) -> bool:
        """Apply click-selection semantics and report whether state changed.

        Multi mode toggles the node. Single mode ignores a click on the sole
        selection and otherwise replaces the selection with ``node``.
        """
        if self.multi_selection:
            if node.selected:
                self.deselect(node)
            else:
                self.select(node)
            return True
        if node.selected:
            return False
        self.deselect_all()
        self.select(node)
        return True

    def seed(self, nodes: Iterable[Node]) -> None:
        """Select every node flagged ``selected``, walking children first."""
        for _path, node in iter_post_order(nodes):
            if not node.selected:
                continue
            if not self.multi_selection and self._selected_ids:
                logger.warning(
                    "single selection mode: ignoring extra initially selected node %r",
                    node.id,
                )
                node.selected = False
                continue
            self.select(node)

    def sync_flags(self, nodes: Iterable[Node]) -> None:
        """Set each node's ``selected`` flag from the identifier list."""
        selected = set(self._selected_ids)
        for _path, node in iter_post_order(nodes):
            node.selected = node.id in selected
