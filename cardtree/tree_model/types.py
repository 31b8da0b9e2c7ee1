"""Node datatypes, tree paths, and tree walking helpers."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from ..errors import InvalidOption, PathNotFound

TreePath = tuple[int, ...]
PATH_SEPARATOR = "-"
_NODE_KEYS = frozenset({"id", "name", "children", "selected", "expanded"})


@dataclass
class Node:
    """One tree node; ``children`` is ``None`` for leaves and filter survivors."""

    id: str
    name: str
    children: list[Node] | None = None
    selected: bool = False
    expanded: bool = False
    extra: dict[str, object] = field(default_factory=dict)

    @property
    def has_children(self) -> bool:
        return bool(self.children)


def format_path(path: TreePath) -> str:
    """Encode ``path`` as the ``"0-1-2"`` form used by renderers."""
    return PATH_SEPARATOR.join(str(index) for index in path)


def parse_path(text: str) -> TreePath:
    """Decode a renderer path string, raising ``PathNotFound`` when malformed."""
    if not text:
        raise PathNotFound(text)
    try:
        path = tuple(int(part) for part in text.split(PATH_SEPARATOR))
    except ValueError as exc:
        raise PathNotFound(text) from exc
    if any(index < 0 for index in path):
        raise PathNotFound(text)
    return path


def coerce_path(path: TreePath | str | Iterable[int]) -> TreePath:
    """Normalize event paths given as strings or integer sequences."""
    if isinstance(path, str):
        return parse_path(path)
    return tuple(int(index) for index in path)


def clone_tree(nodes: Iterable[Node]) -> list[Node]:
    """Return a deep copy of ``nodes``."""
    return copy.deepcopy(list(nodes))


def _node_from_data(raw: object, path: TreePath) -> Node:
    if not isinstance(raw, Mapping):
        raise InvalidOption(f"node at {format_path(path)!r} is not an object")
    name = raw.get("name")
    if not isinstance(name, str):
        raise InvalidOption(f"node at {format_path(path)!r} has no string name")

    raw_children = raw.get("children")
    children: list[Node] | None = None
    if raw_children is not None:
        if not isinstance(raw_children, list):
            raise InvalidOption(f"children of {name!r} must be a list")
        children = [_node_from_data(child, path + (idx,)) for idx, child in enumerate(raw_children)]

    raw_id = raw.get("id")
    return Node(
        id=format_path(path) if raw_id is None else str(raw_id),
        name=name,
        children=children,
        selected=bool(raw.get("selected", False)),
        expanded=bool(raw.get("expanded", False)),
        extra={key: value for key, value in raw.items() if key not in _NODE_KEYS},
    )


def ensure_unique_ids(nodes: Iterable[Node]) -> None:
    """Raise ``InvalidOption`` when two nodes anywhere in the tree share an id.

    Selection is keyed by id, so a shared id would tie two nodes to one entry.
    """
    seen: dict[str, TreePath] = {}
    for path, node in iter_post_order(nodes):
        if node.id in seen:
            raise InvalidOption(
                f"duplicate node id {node.id!r} at {format_path(seen[node.id])!r} and {format_path(path)!r}"
            )
        seen[node.id] = path


def nodes_from_data(items: Iterable[object]) -> list[Node]:
    """Build nodes from JSON-like mappings.

    Keys other than ``id``, ``name``, ``children``, ``selected`` and
    ``expanded`` are kept in ``Node.extra``. A missing ``id`` defaults to the
    node's formatted input path. Ids must be unique across the tree, defaulted
    ones included; a clash raises ``InvalidOption``.
    """
    nodes = [_node_from_data(raw, (idx,)) for idx, raw in enumerate(items)]
    ensure_unique_ids(nodes)
    return nodes


def nodes_to_data(nodes: Iterable[Node]) -> list[dict[str, object]]:
    """Serialize nodes back to JSON-like mappings."""
    out: list[dict[str, object]] = []
    for node in nodes:
        data: dict[str, object] = dict(node.extra)
        data.update(id=node.id, name=node.name, selected=node.selected, expanded=node.expanded)
        if node.children is not None:
            data["children"] = nodes_to_data(node.children)
        out.append(data)
    return out


def iter_post_order(nodes: Iterable[Node], parent: TreePath = ()) -> Iterator[tuple[TreePath, Node]]:
    """Yield ``(path, node)`` pairs children-first."""
    for idx, node in enumerate(nodes):
        path = parent + (idx,)
        if node.children:
            yield from iter_post_order(node.children, path)
        yield path, node


def iter_visible(nodes: Iterable[Node], parent: TreePath = ()) -> Iterator[tuple[TreePath, Node]]:
    """Yield ``(path, node)`` pairs in rendered order of an expandable tree."""
    for idx, node in enumerate(nodes):
        path = parent + (idx,)
        yield path, node
        if node.children and node.expanded:
            yield from iter_visible(node.children, path)
