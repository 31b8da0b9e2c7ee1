"""Formatting of visible tree nodes into ANSI-styled rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..tree_model import Node, TreePath, format_path, iter_visible
from .ui_theme import DEFAULT_THEME, UITheme

EXPANDED_MARKER = "▾ "
COLLAPSED_MARKER = "▸ "
LEAF_MARKER = "  "


@dataclass(frozen=True)
class TreeRow:
    """One rendered tree row addressable by its path."""

    path: TreePath
    path_id: str
    text: str


def highlight_substring(text: str, query: str) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    if not query:
        return text
    idx = text.casefold().find(query.casefold())
    if idx < 0:
        return text
    end = idx + len(query)
    return text[:idx] + "\033[7;1m" + text[idx:end] + "\033[27;22m" + text[end:]


def format_node_row(
    node: Node,
    depth: int,
    focused: bool = False,
    search_query: str = "",
    theme: UITheme | None = None,
) -> str:
    """Render one node as a card row: marker, checkbox, name, secondary text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * depth
    if node.has_children:
        marker = EXPANDED_MARKER if node.expanded else COLLAPSED_MARKER
    else:
        marker = LEAF_MARKER
    checkbox = "[x] " if node.selected else "[ ] "
    name_color = active_theme.card_selected if node.selected else active_theme.card_name
    name = highlight_substring(node.name, search_query) if reset else node.name

    secondary = node.extra.get("textSecondary")
    secondary_label = f" {active_theme.card_secondary}{secondary}{reset}" if isinstance(secondary, str) and secondary else ""

    row = (
        f"{indent}{active_theme.tree_marker}{marker}{reset}"
        f"{active_theme.checkbox}{checkbox}{reset}"
        f"{name_color}{name}{reset}{secondary_label}"
    )
    if focused:
        return f"{active_theme.reverse}{row}{reset}"
    return row


def build_tree_rows(
    nodes: Sequence[Node],
    focus_path: TreePath | None = None,
    search_query: str = "",
    theme: UITheme | None = None,
) -> list[TreeRow]:
    """Render every visible node in display order."""
    return [
        TreeRow(
            path=path,
            path_id=format_path(path),
            text=format_node_row(
                node,
                len(path) - 1,
                focused=path == focus_path,
                search_query=search_query,
                theme=theme,
            ),
        )
        for path, node in iter_visible(nodes)
    ]
