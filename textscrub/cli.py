"""One-shot command line cleaner."""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Dict, IO, Optional

from .clipboard import detect_clipboard, read_clipboard, write_clipboard
from .config import TEXT_CASES, ConfigError, load_config, options_from_dict, options_to_dict
from .files import read_text_file, write_cleaned_text
from .log import init_logging
from .pipeline import clean_text
from .server import DEFAULT_CONFIG_PATH, DEFAULT_DATA_DIR
from .settings import SettingsStore
from .visualize import visualize_text

_FLAG_OPTIONS = [
    ("--remove-all-spaces", "remove_all_spaces", "Delete every whitespace character"),
    ("--remove-line-breaks", "remove_line_breaks", "Turn line breaks into spaces"),
    ("--normalize-line-breaks", "normalize_line_breaks", "Collapse blank-line runs to one"),
    ("--remove-numbers", "remove_numbers", "Delete ASCII digits"),
    ("--remove-punctuation", "remove_punctuation", "Delete punctuation"),
    ("--remove-special-chars", "remove_special_chars", "Delete special characters"),
    ("--remove-non-ascii", "remove_non_ascii", "Delete characters outside ASCII"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Remove invisible and typographic Unicode characters from text."
    )
    parser.add_argument("path", nargs="?", help="Text file to clean (stdin when omitted)")
    parser.add_argument("--clipboard", action="store_true", help="Read input from the clipboard")
    parser.add_argument("--case", dest="text_case", choices=TEXT_CASES, default=None)
    parser.add_argument(
        "--keep-extra-spaces",
        dest="remove_extra_spaces",
        action="store_const",
        const=False,
        default=None,
        help="Do not collapse repeated spaces",
    )
    for flag, name, help_text in _FLAG_OPTIONS:
        parser.add_argument(flag, dest=name, action="store_const", const=True, default=None, help=help_text)
    parser.add_argument("--use-saved", action="store_true", help="Start from the saved settings")
    parser.add_argument("--save", action="store_true", help="Save the effective options")
    parser.add_argument("--output", default=None, help="Directory to write cleaned_text.txt into")
    parser.add_argument("--copy", action="store_true", help="Copy the cleaned text to the clipboard")
    parser.add_argument("--report", action="store_true", help="Print the match report to stderr")
    parser.add_argument(
        "--show-invisible", action="store_true", help="Print the input with visible markers"
    )
    parser.add_argument("--config", dest="config_path", default=str(DEFAULT_CONFIG_PATH))
    parser.add_argument("--data-dir", dest="data_dir", default=str(DEFAULT_DATA_DIR))
    parser.add_argument("--log-level", dest="log_level", default=None)
    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, object]:
    """Collect the option flags given explicitly on the command line."""

    names = ["text_case", "remove_extra_spaces"] + [name for _, name, _ in _FLAG_OPTIONS]
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


def _read_input(args: argparse.Namespace, stdin: IO[str], clipboard) -> Optional[str]:
    if args.path:
        return read_text_file(Path(args.path))
    if args.clipboard:
        return read_clipboard(clipboard)
    return stdin.read()


def main(
    argv: Optional[list] = None,
    stdin: IO[str] = sys.stdin,
    stdout: IO[str] = sys.stdout,
    stderr: IO[str] = sys.stderr,
    clipboard=None,
) -> int:
    """Entrypoint for the textscrub command."""

    parser = build_parser()
    args = parser.parse_args(argv)
    init_logging(args.log_level)
    if clipboard is None and (args.clipboard or args.copy):
        clipboard = detect_clipboard()

    try:
        config = load_config(Path(args.config_path))
        store = SettingsStore(Path(args.data_dir), defaults=config.defaults)
        base = store.load() if args.use_saved else config.defaults
        options = options_from_dict(_overrides(args), base=base)
    except ConfigError as exc:
        stderr.write(f"textscrub: {exc}\n")
        return 2

    try:
        text = _read_input(args, stdin, clipboard)
    except OSError as exc:
        stderr.write(f"textscrub: cannot read input: {exc}\n")
        return 1
    if text is None:
        stderr.write("textscrub: clipboard unavailable, pass a file or use stdin\n")
        return 1

    if args.show_invisible:
        stdout.write(visualize_text(text))
        return 0

    result = clean_text(text, options)
    stdout.write(result.cleaned_text)

    if args.report:
        report = {
            "total_removed": result.total_removed,
            "matches": [asdict(match) for match in result.matches],
            "options": options_to_dict(options),
        }
        stderr.write(json.dumps(report, ensure_ascii=True, sort_keys=True) + "\n")
    if args.save:
        store.save(options)
    if args.output:
        written = write_cleaned_text(result.cleaned_text, Path(args.output))
        if written is not None:
            stderr.write(f"wrote {written}\n")
    if args.copy:
        write_clipboard(clipboard, result.cleaned_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
