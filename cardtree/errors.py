"""Error types raised by the tree-view core.

Tree operations on the view treat ``PathNotFound`` as "no valid target".
``MissingCollaborator`` is caught at attach time and wiring is skipped.
"""

from __future__ import annotations


class TreeViewError(Exception):
    """Base class for all cardtree errors."""


class PathNotFound(TreeViewError, LookupError):
    """A path does not resolve against the current working tree."""

    def __init__(self, path: object) -> None:
        super().__init__(f"path does not resolve: {path!r}")
        self.path = path


class MissingCollaborator(TreeViewError):
    """A configured external element is absent at attach time."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"collaborator element not found: {element_id!r}")
        self.element_id = element_id


class InvalidOption(TreeViewError, ValueError):
    """A configuration or node-data value has the wrong shape."""


__all__ = ["TreeViewError", "PathNotFound", "MissingCollaborator", "InvalidOption"]
