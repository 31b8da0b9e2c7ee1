"""Narrow interfaces of the external collaborators the view talks to."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from .errors import MissingCollaborator
from .tree_model import Node, TreePath


class Renderer(Protocol):
    """Draws the working tree and moves input focus to a node."""

    def render(self, nodes: Sequence[Node]) -> None: ...

    def focus(self, path: TreePath) -> None: ...


class SearchField(Protocol):
    """Text-entry surface whose value drives filtering."""

    value: str

    def on_change(self, callback: Callable[[str], None]) -> None: ...


class ElementRegistry(Protocol):
    """Lookup of external elements by identifier (the page, in a browser)."""

    def get_element(self, element_id: str) -> object | None: ...


def find_search_field(document: ElementRegistry | None, element_id: str) -> SearchField:
    """Return the search field registered as ``element_id``.

    Raises ``MissingCollaborator`` when no id is configured or no element is
    registered under it.
    """
    if not element_id or document is None:
        raise MissingCollaborator(element_id)
    element = document.get_element(element_id)
    if element is None:
        raise MissingCollaborator(element_id)
    return element  # type: ignore[return-value]
