import tempfile
from pathlib import Path
import unittest

from textscrub.catalog import CATALOG
from textscrub.config import CleaningOptions, ConfigError
from textscrub.settings import MemorySettingsStore
from textscrub.tools import (
    ToolError,
    ts_catalog,
    ts_clean,
    ts_get_settings,
    ts_read_file,
    ts_reset_settings,
    ts_update_settings,
    ts_visualize,
)


class ToolTests(unittest.TestCase):
    def test_ts_clean_defaults(self) -> None:
        result = ts_clean("a\u2014b  c")
        self.assertEqual(result.cleaned_text, "a-b c")
        self.assertEqual(result.total_removed, 1)

    def test_ts_clean_overrides_defaults(self) -> None:
        defaults = CleaningOptions(text_case="uppercase")
        result = ts_clean("abc 1", options={"remove_numbers": True}, defaults=defaults)
        self.assertEqual(result.cleaned_text, "ABC")

    def test_ts_clean_rejects_bad_options(self) -> None:
        with self.assertRaises(ConfigError):
            ts_clean("abc", options={"remove_numbers": "sure"})

    def test_ts_clean_rejects_non_string(self) -> None:
        with self.assertRaises(ToolError):
            ts_clean(42)

    def test_ts_visualize(self) -> None:
        self.assertEqual(ts_visualize("a\u200Db")["text"], "a[Zero-Width]b")
        self.assertEqual(ts_visualize("a", html=True)["format"], "html")

    def test_ts_catalog(self) -> None:
        entries = ts_catalog()
        self.assertEqual(len(entries), len(CATALOG))
        self.assertEqual(entries[0]["hex_code_unit"], "U+202F")
        self.assertEqual(entries[0]["replacement"], " ")

    def test_ts_read_file_blocks_path_traversal(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ToolError):
                ts_read_file("../secrets.txt", base_dir=Path(tmpdir))

    def test_ts_read_file_cleans_contents(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            (base / "note.txt").write_text("\uFEFFHello\u2019s", encoding="utf-8")
            result = ts_read_file("note.txt", base_dir=base)
            self.assertEqual(result.cleaned_text, "Hello's")
            self.assertEqual(result.total_removed, 2)

    def test_ts_read_file_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ToolError):
                ts_read_file("missing.txt", base_dir=Path(tmpdir))


class SettingsToolTests(unittest.TestCase):
    def test_update_and_reset_settings(self) -> None:
        store = MemorySettingsStore()
        response = ts_update_settings(store, {"removeNumbers": True})
        self.assertTrue(response["saved"])
        self.assertTrue(response["options"]["remove_numbers"])
        self.assertTrue(ts_get_settings(store)["remove_numbers"])

        response = ts_reset_settings(store)
        self.assertFalse(response["options"]["remove_numbers"])
        self.assertFalse(ts_get_settings(store)["remove_numbers"])
