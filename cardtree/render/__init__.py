"""Terminal rendering of the working tree: themes, rows, JSON dumps."""

from __future__ import annotations

from .json_view import render_nodes_json
from .tree_rows import TreeRow, build_tree_rows, format_node_row, highlight_substring
from .ui_theme import UITheme, available_theme_names, resolve_theme

__all__ = [
    "TreeRow",
    "UITheme",
    "available_theme_names",
    "build_tree_rows",
    "format_node_row",
    "highlight_substring",
    "render_nodes_json",
    "resolve_theme",
]
