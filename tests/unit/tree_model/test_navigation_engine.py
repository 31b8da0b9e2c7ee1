"""Tests for path navigation in rendered order of an expandable tree."""

from __future__ import annotations

import unittest

from cardtree.tree_model import NavigationEngine, NodeStore, nodes_from_data

SAMPLE = [
    {
        "id": "a",
        "name": "Alpha",
        "expanded": True,
        "children": [
            {"id": "a1", "name": "Alpha One"},
            {"id": "a2", "name": "Beta", "expanded": True, "children": [{"id": "a2x", "name": "Gamma"}]},
        ],
    },
    {"id": "b", "name": "Delta", "children": [{"id": "b1", "name": "Epsilon"}]},
    {"id": "c", "name": "Zeta"},
]

VISIBLE = [(0,), (0, 0), (0, 1), (0, 1, 0), (1,), (2,)]


class NavigationEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = NodeStore(nodes_from_data(SAMPLE))
        self.navigation = NavigationEngine(self.store)

    def test_visible_paths_follow_rendered_order(self) -> None:
        self.assertEqual(self.navigation.visible_paths(), VISIBLE)
        self.assertEqual(self.navigation.first(), (0,))
        self.assertEqual(self.navigation.last(), (2,))

    def test_next_walks_every_visible_node(self) -> None:
        for current, expected in zip(VISIBLE, VISIBLE[1:]):
            with self.subTest(path=current):
                self.assertEqual(self.navigation.next(current), expected)
        self.assertIsNone(self.navigation.next((2,)))

    def test_prev_walks_every_visible_node_backwards(self) -> None:
        for current, expected in zip(VISIBLE[1:], VISIBLE):
            with self.subTest(path=current):
                self.assertEqual(self.navigation.prev(current), expected)
        self.assertIsNone(self.navigation.prev((0,)))

    def test_prev_and_next_are_near_inverses_for_interior_paths(self) -> None:
        for path in VISIBLE[1:-1]:
            with self.subTest(path=path):
                self.assertEqual(self.navigation.prev(self.navigation.next(path)), path)
                self.assertEqual(self.navigation.next(self.navigation.prev(path)), path)

    def test_collapsed_node_is_skipped_over(self) -> None:
        self.store.resolve((0,)).expanded = False

        self.assertEqual(self.navigation.next((0,)), (1,))
        self.assertEqual(self.navigation.prev((1,)), (0,))

    def test_prev_descends_to_deepest_last_visible_descendant(self) -> None:
        self.store.resolve((1,)).expanded = True

        self.assertEqual(self.navigation.prev((2,)), (1, 0))
        self.assertEqual(self.navigation.prev((1,)), (0, 1, 0))

    def test_expanded_leaf_has_no_child_to_enter(self) -> None:
        self.store.resolve((2,)).expanded = True

        self.assertIsNone(self.navigation.next((2,)))

    def test_parent_and_first_child(self) -> None:
        self.assertEqual(self.navigation.parent((0, 1, 0)), (0, 1))
        self.assertIsNone(self.navigation.parent((1,)))
        self.assertEqual(self.navigation.first_child((1,)), (1, 0))
        self.assertIsNone(self.navigation.first_child((2,)))

    def test_unresolved_paths_do_not_move(self) -> None:
        for path in ((5,), (0, 9), (2, 0)):
            with self.subTest(path=path):
                self.assertIsNone(self.navigation.next(path))
                self.assertIsNone(self.navigation.prev(path))
                self.assertIsNone(self.navigation.parent(path))
                self.assertIsNone(self.navigation.first_child(path))

    def test_empty_tree_has_no_first_or_last(self) -> None:
        self.store.replace_working_tree([])

        self.assertIsNone(self.navigation.first())
        self.assertIsNone(self.navigation.last())


if __name__ == "__main__":
    unittest.main()
