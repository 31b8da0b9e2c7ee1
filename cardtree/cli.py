"""Command-line front door for cardtree.

Loads a JSON node file, builds the tree view with merged options, then either
prints the working tree or runs the interactive terminal session.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import TreeViewOptions, load_options, load_theme_name, save_multi_selection, save_theme_name
from .errors import InvalidOption
from .logging_config import setup_logging
from .render import available_theme_names, build_tree_rows, render_nodes_json, resolve_theme
from .runtime import SEARCH_FIELD_ID, LineSearchField, TerminalDocument, TerminalRenderer, run_tree_view
from .terminal import TerminalController
from .tree_model import Node, nodes_from_data
from .view import CardsTreeView

logger = logging.getLogger(__name__)


def load_tree_file(path: Path) -> tuple[list[Node], dict[str, object]]:
    """Read nodes and inline widget options from a JSON file.

    The file holds either a list of nodes or an object with a ``nodes`` list
    plus option keys such as ``multiSelection``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(data, list):
        raw_nodes: list[object] = data
        file_options: dict[str, object] = {}
    elif isinstance(data, dict) and isinstance(data.get("nodes"), list):
        raw_nodes = data["nodes"]
        file_options = {key: value for key, value in data.items() if key != "nodes"}
    else:
        raise SystemExit(f"{path} must contain a list of nodes or an object with a 'nodes' list")

    try:
        return nodes_from_data(raw_nodes), file_options
    except InvalidOption as exc:
        raise SystemExit(f"Invalid node data in {path}: {exc}") from exc


def build_options(file_options: dict[str, object], args: argparse.Namespace) -> TreeViewOptions:
    """Merge persisted preferences, file options, and CLI flags, in that order."""
    merged: dict[str, object] = {
        "multiSelection": load_options().multi_selection,
        "filterElementId": SEARCH_FIELD_ID,
    }
    merged.update(file_options)
    if args.multi_selection:
        merged["multiSelection"] = True
    if args.no_search:
        merged["filterElementId"] = ""
    try:
        return TreeViewOptions.from_mapping(merged)
    except InvalidOption as exc:
        raise SystemExit(f"Invalid option: {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and show the tree for a JSON node file."""
    parser = argparse.ArgumentParser(description="Browse, filter, and select nodes of a JSON tree in the terminal.")
    parser.add_argument("nodes", help="JSON file with a list of nodes or an object with a 'nodes' list.")
    parser.add_argument("--multi-selection", action="store_true", help="Allow selecting several nodes.")
    parser.add_argument("--no-search", action="store_true", help="Disable the search field.")
    parser.add_argument("--filter", metavar="QUERY", default=None, help="Apply a filter before showing the tree.")
    parser.add_argument("--dump", action="store_true", help="Print the working tree as JSON and exit.")
    parser.add_argument("--style", default="monokai", help="Pygments style name for --dump output.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print the tree rows instead of running interactively.")
    parser.add_argument(
        "--save-preferences",
        action="store_true",
        help="Remember --theme and --multi-selection as defaults.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING).")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    path = Path(args.nodes)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    nodes, file_options = load_tree_file(path)
    options = build_options(file_options, args)

    if args.save_preferences:
        save_multi_selection(options.multi_selection)
        if args.theme:
            save_theme_name(args.theme)

    renderer = TerminalRenderer()
    view = CardsTreeView(nodes, options=options, renderer=renderer)
    field = LineSearchField()
    view.attach(TerminalDocument({SEARCH_FIELD_ID: field}))

    if args.filter is not None:
        if view.search_field is not None:
            field.edit(args.filter)
        else:
            view.filter_nodes(args.filter)

    no_color = args.no_color or not sys.stdout.isatty()
    if args.dump:
        sys.stdout.write(render_nodes_json(view.nodes, args.style, no_color))
        return

    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    if args.nopager or not sys.stdin.isatty():
        for row in build_tree_rows(view.nodes, search_query=view.filter_query, theme=theme):
            sys.stdout.write(row.text + "\n")
        return

    stdin_fd = sys.stdin.fileno()
    run_tree_view(view, renderer, TerminalController(stdin_fd, sys.stdout.fileno()), stdin_fd, theme)
    for node_id in view.selected_ids:
        sys.stdout.write(node_id + "\n")


if __name__ == "__main__":
    main()
