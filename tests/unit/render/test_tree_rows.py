"""Tree row formatting and JSON dump tests."""

from __future__ import annotations

import json
import unittest

from cardtree.render import build_tree_rows, format_node_row, highlight_substring, render_nodes_json, resolve_theme
from cardtree.render.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, available_theme_names, normalize_theme_name
from cardtree.tree_model import Node, nodes_from_data

NODES = [
    {
        "id": "a",
        "name": "Alpha",
        "expanded": True,
        "children": [{"id": "a1", "name": "Leaf", "selected": True, "textSecondary": "note"}],
    },
    {"id": "b", "name": "Beta", "children": [{"id": "b1", "name": "Hidden"}]},
]


class ThemeTests(unittest.TestCase):
    def test_resolve_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("OCEAN"), OCEAN_THEME)
        self.assertIs(resolve_theme("missing"), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(available_theme_names(), ("default", "ocean"))


class TreeRowTests(unittest.TestCase):
    def test_plain_rows_show_markers_checkboxes_and_secondary_text(self) -> None:
        rows = build_tree_rows(nodes_from_data(NODES), theme=PLAIN_THEME)

        self.assertEqual([row.path_id for row in rows], ["0", "0-0", "1"])
        self.assertEqual(
            [row.text for row in rows],
            [
                "▾ [ ] Alpha",
                "    [x] Leaf note",
                "▸ [ ] Beta",
            ],
        )

    def test_focused_row_is_reverse_video(self) -> None:
        rows = build_tree_rows(nodes_from_data(NODES), focus_path=(1,), theme=DEFAULT_THEME)

        self.assertTrue(rows[2].text.startswith(DEFAULT_THEME.reverse))
        self.assertFalse(rows[0].text.startswith(DEFAULT_THEME.reverse))

    def test_search_query_is_highlighted_only_with_color(self) -> None:
        node = Node(id="x", name="Quarterly")

        self.assertIn("\033[7;1mart\033[27;22m", format_node_row(node, 0, search_query="ART"))
        self.assertEqual(format_node_row(node, 0, search_query="art", theme=PLAIN_THEME), "  [ ] Quarterly")

    def test_highlight_substring_without_match_returns_text(self) -> None:
        self.assertEqual(highlight_substring("abc", "z"), "abc")
        self.assertEqual(highlight_substring("abc", ""), "abc")


class JsonViewTests(unittest.TestCase):
    def test_no_color_dump_is_plain_json(self) -> None:
        text = render_nodes_json(nodes_from_data(NODES), no_color=True)

        data = json.loads(text)
        self.assertEqual(data[0]["children"][0]["textSecondary"], "note")
        self.assertNotIn("children", data[1]["children"][0])

    def test_colored_dump_contains_ansi_and_tolerates_unknown_style(self) -> None:
        text = render_nodes_json(nodes_from_data(NODES), style="no-such-style")

        self.assertIn("\x1b[", text)
        self.assertIn("Alpha", text)


if __name__ == "__main__":
    unittest.main()
