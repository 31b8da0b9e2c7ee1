"""Autocomplete data source backed by the canonical node list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tree_model import matches_query

if TYPE_CHECKING:
    from .collaborators import SearchField
    from .view import CardsTreeView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    """One autocomplete entry."""

    node_id: str
    name: str
    text_primary: str


class SuggestionProvider:
    """Offer top-level canonical node names and apply the chosen one as a filter."""

    def __init__(self, view: CardsTreeView, field: SearchField) -> None:
        self.view = view
        self.field = field

    def data(self, query: str) -> list[Suggestion]:
        """Return canonical top-level nodes whose name contains ``query``."""
        if not query:
            return []
        return [
            Suggestion(node_id=node.id, name=node.name, text_primary=node.name)
            for node in self.view.canonical_nodes
            if matches_query(node.name, query)
        ]

    def select(self, suggestion: Suggestion | str) -> None:
        """Write the chosen name into the search field and filter by it."""
        name = suggestion.name if isinstance(suggestion, Suggestion) else suggestion
        logger.debug("suggestion selected: %r", name)
        self.field.value = name
        self.view.filter_nodes(name)
