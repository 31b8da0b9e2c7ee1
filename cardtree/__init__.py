"""Public package surface for cardtree.

Exports the tree view facade, node types, and error types. ``main`` defers
importing the CLI, whose terminal and argparse setup the library API does not
need.
"""

from __future__ import annotations

from .config import TreeViewOptions
from .errors import InvalidOption, MissingCollaborator, PathNotFound, TreeViewError
from .tree_model import Node, TreePath, nodes_from_data, nodes_to_data
from .view import CardsTreeView


def main(*args, **kwargs):
    """Run the command-line entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "CardsTreeView",
    "InvalidOption",
    "MissingCollaborator",
    "Node",
    "PathNotFound",
    "TreePath",
    "TreeViewError",
    "TreeViewOptions",
    "main",
    "nodes_from_data",
    "nodes_to_data",
]
