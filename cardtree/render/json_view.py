"""JSON dump of a node tree, syntax-highlighted with pygments."""

from __future__ import annotations

import json
from collections.abc import Sequence

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..tree_model import Node, nodes_to_data

DEFAULT_STYLE = "monokai"
_FORMATTERS: dict[str, TerminalFormatter] = {}


def normalize_style(style: str) -> str:
    """Return ``style`` when pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def render_nodes_json(nodes: Sequence[Node], style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``nodes`` as indented JSON, colorized unless ``no_color``."""
    text = json.dumps(nodes_to_data(nodes), indent=2, ensure_ascii=False) + "\n"
    if no_color:
        return text
    return highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
