"""Line-delimited JSON stdio server exposing the cleaning tools."""

from dataclasses import asdict, dataclass, is_dataclass
from functools import partial
import json
import logging
from pathlib import Path
import sys
from typing import Callable, Dict, IO, Optional

from .config import TextscrubConfig, load_config
from .log import init_logging
from .settings import SettingsStore
from .tools import (
    ts_catalog,
    ts_clean,
    ts_get_settings,
    ts_read_file,
    ts_reset_settings,
    ts_update_settings,
    ts_visualize,
)

DEFAULT_CONFIG_PATH = Path("config/textscrub.yaml")
DEFAULT_DATA_DIR = Path(".textscrub")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextscrubContext:
    """Runtime context holding config and the settings store."""

    config: TextscrubConfig
    settings: SettingsStore
    base_dir: Path


def load_context(
    config_path: Optional[Path] = None,
    data_dir: Optional[Path] = None,
    base_dir: Optional[Path] = None,
) -> TextscrubContext:
    """Load configuration and initialize the settings store."""

    resolved_config = load_config(config_path or DEFAULT_CONFIG_PATH)
    resolved_base = base_dir or Path.cwd()
    resolved_data_dir = data_dir or resolved_base / DEFAULT_DATA_DIR
    settings = SettingsStore(resolved_data_dir, defaults=resolved_config.defaults)
    return TextscrubContext(
        config=resolved_config,
        settings=settings,
        base_dir=resolved_base,
    )


def build_tool_handlers(context: TextscrubContext) -> Dict[str, Callable[..., object]]:
    """Build tool handler callables bound to the runtime context."""

    def _saved_defaults():
        return context.settings.load()

    def clean(text: str, options: Optional[Dict[str, object]] = None) -> object:
        return ts_clean(text, options=options, defaults=_saved_defaults())

    def read_file(path: str, options: Optional[Dict[str, object]] = None) -> object:
        return ts_read_file(
            path, options=options, base_dir=context.base_dir, defaults=_saved_defaults()
        )

    return {
        "ts_clean": clean,
        "ts_read_file": read_file,
        "ts_visualize": ts_visualize,
        "ts_catalog": ts_catalog,
        "ts_get_settings": partial(ts_get_settings, context.settings),
        "ts_update_settings": partial(ts_update_settings, context.settings),
        "ts_reset_settings": partial(ts_reset_settings, context.settings),
    }


class TextscrubServer:
    """Dispatch tool calls from JSON requests."""

    def __init__(self, handlers: Dict[str, Callable[..., object]]) -> None:
        """Initialize the server with tool handlers."""

        self._handlers = handlers

    def handle_request(self, request: Dict[str, object]) -> Dict[str, object]:
        """Handle a single tool request payload."""

        request_id = request.get("id")
        tool = request.get("tool")
        args = request.get("args", {})
        if not isinstance(tool, str):
            return self._error(request_id, "INVALID_REQUEST", "missing tool name")
        if not isinstance(args, dict):
            return self._error(request_id, "INVALID_REQUEST", "args must be an object")
        handler = self._handlers.get(tool)
        if handler is None:
            return self._error(request_id, "UNKNOWN_TOOL", f"unknown tool: {tool}")
        try:
            result = handler(**args)
        except Exception as exc:
            logger.info("tool %s failed: %s", tool, exc)
            return self._error(request_id, "TOOL_ERROR", str(exc))
        return {"id": request_id, "result": self._serialize(result)}

    def _serialize(self, result: object) -> object:
        """Serialize dataclass results to plain dicts."""

        if is_dataclass(result):
            return asdict(result)
        return result

    def _error(self, request_id: object, code: str, message: str) -> Dict[str, object]:
        """Create a standard error payload."""

        return {"id": request_id, "error": {"code": code, "message": message}}


def serve_stdio(
    server: TextscrubServer,
    input_stream: IO[str] = sys.stdin,
    output_stream: IO[str] = sys.stdout,
) -> None:
    """Serve line-delimited JSON requests over stdio."""

    for line in input_stream:
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            response = {"id": None, "error": {"code": "INVALID_JSON", "message": str(exc)}}
        else:
            if not isinstance(request, dict):
                response = {
                    "id": None,
                    "error": {"code": "INVALID_REQUEST", "message": "request must be an object"},
                }
            else:
                response = server.handle_request(request)
        output_stream.write(json.dumps(response, ensure_ascii=True) + "\n")
        output_stream.flush()


def main(argv: Optional[list] = None) -> int:
    """CLI entrypoint for the stdio server."""

    import argparse

    parser = argparse.ArgumentParser(description="textscrub stdio server")
    parser.add_argument(
        "--config",
        dest="config_path",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config/textscrub.yaml (JSON-compatible YAML)",
    )
    parser.add_argument(
        "--data-dir",
        dest="data_dir",
        default=str(DEFAULT_DATA_DIR),
        help="Path to data directory (.textscrub by default)",
    )
    parser.add_argument(
        "--base-dir",
        dest="base_dir",
        default=str(Path.cwd()),
        help="Base directory for file access",
    )
    parser.add_argument("--log-level", dest="log_level", default=None, help="Logging level")
    args = parser.parse_args(argv)

    init_logging(args.log_level)
    context = load_context(
        config_path=Path(args.config_path),
        data_dir=Path(args.data_dir),
        base_dir=Path(args.base_dir),
    )
    server = TextscrubServer(build_tool_handlers(context))
    serve_stdio(server)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
