"""Interactive terminal session driving a ``CardsTreeView``.

Provides terminal implementations of the renderer and search-field
collaborators, a key-handling session object, and the raw-mode main loop.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Sequence

from .render import UITheme, build_tree_rows, resolve_theme
from .terminal import KeyReader, TerminalController
from .tree_model import Node, TreePath
from .view import CardsTreeView

logger = logging.getLogger(__name__)

SEARCH_FIELD_ID = "search"
MAX_SUGGESTIONS = 5


class TerminalRenderer:
    """Keeps the latest tree snapshot and the focused path for screen drawing."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.focus_path: TreePath | None = None
        self.render_count = 0

    def render(self, nodes: Sequence[Node]) -> None:
        self.nodes = list(nodes)
        self.render_count += 1

    def focus(self, path: TreePath) -> None:
        self.focus_path = path


class LineSearchField:
    """Single-line search input; ``edit`` fires change callbacks, assignment does not."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        self._callbacks: list[Callable[[str], None]] = []

    def on_change(self, callback: Callable[[str], None]) -> None:
        self._callbacks.append(callback)

    def edit(self, value: str) -> None:
        self.value = value
        for callback in list(self._callbacks):
            callback(value)


class TerminalDocument:
    """Element registry for the terminal surface."""

    def __init__(self, elements: dict[str, object] | None = None) -> None:
        self.elements = dict(elements or {})

    def get_element(self, element_id: str) -> object | None:
        return self.elements.get(element_id)


class TreeSession:
    """Translate terminal key tokens into tree-view events."""

    def __init__(
        self,
        view: CardsTreeView,
        renderer: TerminalRenderer,
        theme: UITheme | None = None,
    ) -> None:
        self.view = view
        self.renderer = renderer
        self.theme = theme or resolve_theme(None)
        self.editing = False

    @property
    def search_field(self) -> LineSearchField | None:
        field = self.view.search_field
        return field if isinstance(field, LineSearchField) else None

    def ensure_focus(self) -> TreePath | None:
        """Keep focus on a resolvable node, falling back to the first one."""
        path = self.renderer.focus_path
        if path is None or self.view.store.try_resolve(path) is None:
            path = self.view.navigation.first()
            self.renderer.focus_path = path
        return path

    def handle_key(self, key: str) -> bool:
        """Handle one key token; returns ``False`` when the session should end."""
        if key in {"", "CTRL_C"}:
            return False
        if self.editing:
            self._handle_search_key(key)
            return True
        if key == "q":
            return False
        if key == "/" and self.search_field is not None:
            self.editing = True
            return True
        path = self.ensure_focus()
        if path is not None:
            self.view.handle_node_key(path, key)
        return True

    def _handle_search_key(self, key: str) -> None:
        field = self.search_field
        assert field is not None
        if key in {"ENTER", "ESC"}:
            self.editing = False
        elif key == "BACKSPACE":
            field.edit(field.value[:-1])
        elif key == "CTRL_U":
            field.edit("")
        elif key == "SPACE":
            field.edit(field.value + " ")
        elif key == "TAB":
            suggestions = self.view.suggestions.data(field.value) if self.view.suggestions else []
            if suggestions:
                self.view.suggestions.select(suggestions[0])
        elif len(key) == 1 and key.isprintable():
            field.edit(field.value + key)
        self.renderer.focus_path = None

    def screen_lines(self, rows: int) -> list[str]:
        """Compose prompt, suggestion, and tree rows for a screen of ``rows`` lines."""
        theme = self.theme
        lines: list[str] = []
        field = self.search_field
        if field is not None:
            hint = "" if self.editing else f"{theme.search_hint}  (/ to search, q to quit){theme.reset}"
            lines.append(f"{theme.search_prompt}/ {theme.reset}{theme.search_query}{field.value}{theme.reset}{hint}")
            if self.editing and self.view.suggestions is not None:
                names = [item.name for item in self.view.suggestions.data(field.value)[:MAX_SUGGESTIONS]]
                if names:
                    lines.append(f"{theme.search_hint}  {' | '.join(names)}{theme.reset}")

        focus = self.ensure_focus()
        tree_rows = build_tree_rows(
            self.view.nodes,
            focus_path=focus,
            search_query=self.view.filter_query,
            theme=theme,
        )
        available = max(1, rows - len(lines))
        focus_idx = next((idx for idx, row in enumerate(tree_rows) if row.path == focus), 0)
        start = max(0, focus_idx - available + 1)
        lines.extend(row.text for row in tree_rows[start : start + available])
        return lines


def run_tree_view(
    view: CardsTreeView,
    renderer: TerminalRenderer,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme | None = None,
) -> None:
    """Run the interactive loop until the user quits."""
    session = TreeSession(view, renderer, theme)
    keys = KeyReader(stdin_fd)
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            lines = session.screen_lines(term.lines)
            terminal.write("\x1b[H\x1b[2J" + "\r\n".join(lines))
            key = keys.read()
            if not session.handle_key(key):
                break
    logger.debug("tree session ended with selection %r", view.selected_ids)
