import tempfile
from pathlib import Path
import unittest

from textscrub.files import DOWNLOAD_FILENAME, read_text_file, write_cleaned_text


class FileTests(unittest.TestCase):
    def test_read_replaces_invalid_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "input.txt"
            path.write_bytes(b"ok \xff done\r\n")
            self.assertEqual(read_text_file(path), "ok \uFFFD done\r\n")

    def test_write_cleaned_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = write_cleaned_text("line\nnext", Path(tmpdir) / "out")
            self.assertEqual(target.name, DOWNLOAD_FILENAME)
            self.assertEqual(target.read_bytes(), b"line\nnext")

    def test_write_skips_empty_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertIsNone(write_cleaned_text("", Path(tmpdir)))
            self.assertFalse((Path(tmpdir) / DOWNLOAD_FILENAME).exists())
