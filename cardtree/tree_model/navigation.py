"""Path navigation matching the visual order of a rendered, expandable tree."""

from __future__ import annotations

from .store import NodeStore
from .types import TreePath, iter_visible


class NavigationEngine:
    """Compute neighbour paths against the working tree at call time."""

    def __init__(self, store: NodeStore) -> None:
        self.store = store

    def next(self, path: TreePath) -> TreePath | None:
        """Return the path rendered right after ``path``, or ``None`` at the end."""
        node = self.store.try_resolve(path)
        if node is None:
            return None
        if node.children and node.expanded:
            return path + (0,)

        candidate = list(path)
        while candidate:
            candidate[-1] += 1
            if self.store.try_resolve(tuple(candidate)) is not None:
                return tuple(candidate)
            candidate.pop()
        return None

    def prev(self, path: TreePath) -> TreePath | None:
        """Return the path rendered right before ``path``.

        A first child steps up to its parent. Otherwise the previous sibling is
        taken and followed down through expanded nodes to the deepest last
        visible descendant.
        """
        if self.store.try_resolve(path) is None:
            return None
        if path[-1] == 0:
            return self.parent(path)

        candidate = path[:-1] + (path[-1] - 1,)
        node = self.store.resolve(candidate)
        while node.children and node.expanded:
            candidate = candidate + (len(node.children) - 1,)
            node = node.children[-1]
        return candidate

    def parent(self, path: TreePath) -> TreePath | None:
        """Return the parent path; ``None`` for root-level or stale paths."""
        if len(path) <= 1 or self.store.try_resolve(path) is None:
            return None
        return path[:-1]

    def first_child(self, path: TreePath) -> TreePath | None:
        """Return the path of the first child, whether or not ``path`` is expanded."""
        node = self.store.try_resolve(path)
        if node is None or not node.children:
            return None
        return path + (0,)

    def first(self) -> TreePath | None:
        """Return the first root path, or ``None`` for an empty tree."""
        return (0,) if self.store.working else None

    def last(self) -> TreePath | None:
        """Return the last visible path of the working tree."""
        last_path: TreePath | None = None
        for path, _node in iter_visible(self.store.working):
            last_path = path
        return last_path

    def visible_paths(self) -> list[TreePath]:
        """Return every rendered path in display order."""
        return [path for path, _node in iter_visible(self.store.working)]
