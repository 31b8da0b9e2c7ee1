"""CLI entrypoint tests.

Verifies how ``cardtree.cli.main`` loads node files, merges options, and
prints the tree when not running interactively.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import cardtree
from cardtree import cli, config

SAMPLE = [
    {
        "id": "a",
        "name": "Alpha",
        "children": [{"id": "a1", "name": "One", "selected": True}],
    },
    {"id": "b", "name": "Beta"},
]


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.config_path = self.root / "config" / "config.json"
        patches = [
            mock.patch("cardtree.config.CONFIG_PATH", self.config_path),
            mock.patch("cardtree.cli.setup_logging"),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def write_nodes(self, payload: object, name: str = "nodes.json") -> Path:
        target = self.root / name
        target.write_text(json.dumps(payload), encoding="utf-8")
        return target

    def run_main(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(list(argv))
        return stdout.getvalue()


class CliOutputTests(CliTestCase):
    def test_nopager_prints_initially_expanded_rows(self) -> None:
        target = self.write_nodes(SAMPLE)

        output = self.run_main(str(target), "--nopager")

        self.assertEqual(output.splitlines(), ["▾ [ ] Alpha", "    [x] One", "  [ ] Beta"])

    def test_filter_flag_applies_before_printing(self) -> None:
        target = self.write_nodes(SAMPLE)

        output = self.run_main(str(target), "--nopager", "--filter", "bet")

        self.assertEqual(output.splitlines(), ["  [ ] Beta"])

    def test_dump_writes_working_tree_as_json(self) -> None:
        target = self.write_nodes({"nodes": SAMPLE, "multiSelection": True})

        output = self.run_main(str(target), "--dump", "--filter", "one")

        data = json.loads(output)
        self.assertEqual([item["id"] for item in data], ["a1"])
        self.assertTrue(data[0]["selected"])
        self.assertNotIn("\x1b[", output)

    def test_filter_without_search_field_still_filters(self) -> None:
        target = self.write_nodes(SAMPLE)

        output = self.run_main(str(target), "--nopager", "--no-search", "--filter", "alpha")

        self.assertEqual(output.splitlines(), ["  [ ] Alpha"])


class CliOptionTests(CliTestCase):
    def test_flags_override_file_options(self) -> None:
        parser_args = mock.Mock(multi_selection=True, no_search=True)

        options = cli.build_options({"multiSelection": False, "filterElementId": "box"}, parser_args)

        self.assertTrue(options.multi_selection)
        self.assertEqual(options.filter_element_id, "")

    def test_file_options_override_persisted_preferences(self) -> None:
        config.save_multi_selection(True)
        parser_args = mock.Mock(multi_selection=False, no_search=False)

        options = cli.build_options({"multiSelection": False}, parser_args)

        self.assertFalse(options.multi_selection)
        self.assertEqual(options.filter_element_id, "search")

    def test_save_preferences_persists_theme_and_mode(self) -> None:
        target = self.write_nodes(SAMPLE)

        self.run_main(str(target), "--nopager", "--multi-selection", "--theme", "ocean", "--save-preferences")

        self.assertEqual(config.load_config(), {"multi_selection": True, "theme": "ocean"})


class PackageEntrypointTests(unittest.TestCase):
    def test_package_main_delegates_to_cli(self) -> None:
        with mock.patch("cardtree.cli.main", return_value=None) as cli_main:
            cardtree.main(["nodes.json", "--nopager"])

        cli_main.assert_called_once_with(["nodes.json", "--nopager"])


class CliErrorTests(CliTestCase):
    def test_missing_file_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(str(self.root / "absent.json"))

        self.assertIn("Path not found", str(ctx.exception))

    def test_invalid_json_exits(self) -> None:
        target = self.root / "broken.json"
        target.write_text("{oops", encoding="utf-8")

        with self.assertRaises(SystemExit) as ctx:
            self.run_main(str(target), "--nopager")

        self.assertIn("Invalid JSON", str(ctx.exception))

    def test_wrong_shape_and_bad_nodes_exit(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_main(str(self.write_nodes({"items": []})), "--nopager")
        with self.assertRaises(SystemExit):
            self.run_main(str(self.write_nodes([{"id": "x"}], name="nameless.json")), "--nopager")
        with self.assertRaises(SystemExit):
            self.run_main(str(self.write_nodes([{"name": "A"}, {"id": "0", "name": "B"}], name="dup.json")), "--nopager")

    def test_wrongly_typed_option_exits(self) -> None:
        target = self.write_nodes({"nodes": SAMPLE, "multiSelection": "yes"})

        with self.assertRaises(SystemExit) as ctx:
            self.run_main(str(target), "--nopager")

        self.assertIn("Invalid option", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
