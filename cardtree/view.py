"""Tree view facade translating widget events into state-engine calls.

``CardsTreeView`` composes the node store, selection, expansion, filter, and
navigation components. Every mutating call notifies subscribers and asks the
renderer to redraw; focus moves are delegated to the renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from .collaborators import ElementRegistry, Renderer, SearchField, find_search_field
from .config import TreeViewOptions
from .errors import MissingCollaborator, PathNotFound
from .input import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    KeyComboBinding,
    KeyComboRegistry,
    normalize_key,
)
from .suggestions import SuggestionProvider
from .tree_model import (
    ExpansionManager,
    FilterEngine,
    NavigationEngine,
    Node,
    NodeStore,
    SelectionManager,
    TreePath,
    coerce_path,
)

logger = logging.getLogger(__name__)

EventPath = TreePath | str | Sequence[int]


class CardsTreeView:
    """Interactive tree state with single/multi selection and keyboard navigation."""

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        options: TreeViewOptions | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.options = options or TreeViewOptions()
        self.renderer = renderer
        self.store = NodeStore()
        self.selection = SelectionManager(self.store.find_node, multi_selection=self.options.multi_selection)
        self.expansion = ExpansionManager(self.store)
        self.filter_engine = FilterEngine(self.store)
        self.navigation = NavigationEngine(self.store)
        self.search_field: SearchField | None = None
        self.suggestions: SuggestionProvider | None = None
        self.root_expanded = False
        self._listeners: list[Callable[[], None]] = []
        self.node_keys: KeyComboRegistry[EventPath] = KeyComboRegistry(normalize_key).register_bindings(
            KeyComboBinding((KEY_LEFT,), lambda path: self.set_node_expanded(path, False)),
            KeyComboBinding((KEY_RIGHT,), lambda path: self.set_node_expanded(path, True)),
            KeyComboBinding((KEY_UP,), lambda path: self.focus_prev_node(path) is not None),
            KeyComboBinding((KEY_DOWN,), lambda path: self.focus_next_node(path) is not None),
            KeyComboBinding((KEY_ENTER, KEY_SPACE), self.handle_node_clicked),
        )
        self.initialize(nodes)

    # ------------------------------------------------------------------
    # derived state

    @property
    def nodes(self) -> list[Node]:
        return self.store.working

    @property
    def canonical_nodes(self) -> list[Node]:
        return self.store.canonical

    @property
    def selected_ids(self) -> tuple[str, ...]:
        return self.selection.selected_ids

    @property
    def selected_nodes(self) -> list[Node]:
        return self.selection.selected_nodes

    @property
    def filter_query(self) -> str:
        return self.filter_engine.query

    # ------------------------------------------------------------------
    # change notification

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register ``listener`` for state changes; return an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
        if self.renderer is not None:
            self.renderer.render(self.nodes)

    def _focus(self, path: TreePath | None) -> TreePath | None:
        if path is not None and self.renderer is not None:
            self.renderer.focus(path)
        return path

    def _resolve_event_path(self, path: EventPath) -> tuple[TreePath, Node] | None:
        try:
            tree_path = coerce_path(path)
            return tree_path, self.store.resolve(tree_path)
        except PathNotFound:
            logger.debug("event ignored for unresolved path %r", path)
            return None

    # ------------------------------------------------------------------
    # lifecycle

    def initialize(self, nodes: Iterable[Node]) -> None:
        """Load ``nodes``, expand ancestors of flagged nodes, then seed the selection.

        Expansion reads the input ``selected`` flags, so in single mode the
        ancestors of flagged nodes that seeding drops are expanded too.
        """
        self.store.initialize(nodes)
        self.filter_engine.query = ""
        self.selection.clear()
        self.root_expanded = self.expansion.compute_initial_expansion(lambda node: node.selected)
        self.selection.seed(self.store.working)
        self._notify()

    def attach(self, document: ElementRegistry | None) -> bool:
        """Wire the configured search field and suggestion provider.

        Returns ``False`` and skips wiring when the field is not configured or
        cannot be found.
        """
        try:
            field = find_search_field(document, self.options.filter_element_id)
        except MissingCollaborator as exc:
            logger.debug("search wiring skipped: %s", exc)
            return False
        field.on_change(self.handle_filter_input)
        self.search_field = field
        self.suggestions = SuggestionProvider(self, field)
        return True

    # ------------------------------------------------------------------
    # events

    def handle_node_clicked(self, path: EventPath) -> bool:
        """Apply click-selection to the node at ``path``."""
        resolved = self._resolve_event_path(path)
        if resolved is None:
            return False
        _tree_path, node = resolved
        changed = self.selection.click(node)
        self._notify()
        return changed

    def handle_node_toggler_clicked(self, path: EventPath) -> bool:
        """Flip expansion of the node at ``path``."""
        resolved = self._resolve_event_path(path)
        if resolved is None:
            return False
        changed = self.expansion.toggle_expanded(resolved[0])
        self._notify()
        return changed

    def set_node_expanded(self, path: EventPath, expanded: bool) -> bool:
        """Expand or collapse one node without touching its descendants."""
        resolved = self._resolve_event_path(path)
        if resolved is None:
            return False
        changed = self.expansion.set_expanded(resolved[0], expanded)
        self._notify()
        return changed

    def focus_next_node(self, path: EventPath) -> TreePath | None:
        """Move renderer focus to the row after ``path``; ``None`` at the end."""
        resolved = self._resolve_event_path(path)
        if resolved is None:
            return None
        return self._focus(self.navigation.next(resolved[0]))

    def focus_prev_node(self, path: EventPath) -> TreePath | None:
        """Move renderer focus to the row before ``path``; ``None`` at the top."""
        resolved = self._resolve_event_path(path)
        if resolved is None:
            return None
        return self._focus(self.navigation.prev(resolved[0]))

    def handle_node_key(self, path: EventPath, key: str | int) -> bool:
        """Handle one key press on the focused node.

        LEFT collapses, RIGHT expands, UP/DOWN move focus, and ENTER/SPACE
        select. Returns ``False`` when nothing changed, which includes unbound
        keys and moves past either end of the tree.
        """
        return bool(self.node_keys.dispatch(key, path))

    def filter_nodes(self, query: str) -> list[Node]:
        """Rebuild the working tree for ``query`` and restore selection flags."""
        tree = self.filter_engine.filter(query)
        self.selection.sync_flags(tree)
        self._notify()
        return tree

    def handle_filter_input(self, value: str) -> None:
        """Search-field change callback."""
        self.filter_nodes(value)
