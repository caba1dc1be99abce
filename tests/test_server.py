import io
import json
import tempfile
from pathlib import Path
import unittest

from textscrub.server import TextscrubServer, build_tool_handlers, load_context, serve_stdio


def _write_config(tmp_path: Path, data: dict) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_path = config_dir / "textscrub.yaml"
    config_path.write_text(json.dumps(data), encoding="utf-8")
    return config_path


class ServerTests(unittest.TestCase):
    def test_load_context_reads_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            config_path = _write_config(
                tmp_path, {"defaults": {"text_case": "lowercase"}, "auto_copy": False}
            )
            context = load_context(
                config_path=config_path,
                data_dir=tmp_path / "data",
                base_dir=tmp_path,
            )
            self.assertEqual(context.config.defaults.text_case, "lowercase")
            self.assertFalse(context.config.auto_copy)
            self.assertEqual(context.settings.load().text_case, "lowercase")

    def test_handle_request_dispatches_tool(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            context = load_context(
                config_path=tmp_path / "missing.yaml",
                data_dir=tmp_path / "data",
                base_dir=tmp_path,
            )
            server = TextscrubServer(build_tool_handlers(context))
            response = server.handle_request(
                {"id": 1, "tool": "ts_clean", "args": {"text": "Hello\u2014world"}}
            )
            self.assertEqual(response["id"], 1)
            result = response["result"]
            self.assertEqual(result["cleaned_text"], "Hello-world")
            self.assertEqual(result["matches"][0]["label"], "Em Dash")
            self.assertEqual(result["total_removed"], 1)

    def test_saved_settings_apply_to_clean(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            context = load_context(
                config_path=tmp_path / "missing.yaml",
                data_dir=tmp_path / "data",
                base_dir=tmp_path,
            )
            server = TextscrubServer(build_tool_handlers(context))
            update = server.handle_request(
                {"id": 2, "tool": "ts_update_settings", "args": {"changes": {"text_case": "uppercase"}}}
            )
            self.assertTrue(update["result"]["saved"])
            self.assertTrue((tmp_path / "data" / "settings.json").exists())
            response = server.handle_request({"id": 3, "tool": "ts_clean", "args": {"text": "abc"}})
            self.assertEqual(response["result"]["cleaned_text"], "ABC")

    def test_read_file_uses_base_dir(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            (tmp_path / "note.txt").write_text("x\u200By", encoding="utf-8")
            context = load_context(
                config_path=tmp_path / "missing.yaml",
                data_dir=tmp_path / "data",
                base_dir=tmp_path,
            )
            server = TextscrubServer(build_tool_handlers(context))
            response = server.handle_request(
                {"id": 4, "tool": "ts_read_file", "args": {"path": "note.txt"}}
            )
            self.assertEqual(response["result"]["cleaned_text"], "xy")
            escaped = server.handle_request(
                {"id": 5, "tool": "ts_read_file", "args": {"path": "../outside.txt"}}
            )
            self.assertEqual(escaped["error"]["code"], "TOOL_ERROR")

    def test_error_payloads(self) -> None:
        server = TextscrubServer({"ts_catalog": lambda: []})
        self.assertEqual(
            server.handle_request({"id": 1})["error"]["code"], "INVALID_REQUEST"
        )
        self.assertEqual(
            server.handle_request({"id": 1, "tool": "ts_catalog", "args": []})["error"]["code"],
            "INVALID_REQUEST",
        )
        self.assertEqual(
            server.handle_request({"id": 1, "tool": "missing"})["error"]["code"], "UNKNOWN_TOOL"
        )
        self.assertEqual(
            server.handle_request({"id": 1, "tool": "ts_catalog", "args": {"bad": 1}})["error"][
                "code"
            ],
            "TOOL_ERROR",
        )

    def test_serve_stdio(self) -> None:
        server = TextscrubServer({"ts_catalog": lambda: ["ok"]})
        input_stream = io.StringIO(
            '{"id": 1, "tool": "ts_catalog"}\n\nnot json\n[1, 2]\n'
        )
        output_stream = io.StringIO()
        serve_stdio(server, input_stream=input_stream, output_stream=output_stream)
        responses = [json.loads(line) for line in output_stream.getvalue().splitlines()]
        self.assertEqual(responses[0], {"id": 1, "result": ["ok"]})
        self.assertEqual(responses[1]["error"]["code"], "INVALID_JSON")
        self.assertEqual(responses[2]["error"]["code"], "INVALID_REQUEST")
