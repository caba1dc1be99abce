#!/usr/bin/env python3
"""Local demo runner for the textscrub session flow."""

from pathlib import Path

from textscrub.clipboard import MemoryClipboard
from textscrub.config import load_config
from textscrub.session import CleanerSession
from textscrub.settings import SettingsStore


def _repo_root() -> Path:
    """Return the repo root directory."""

    return Path(__file__).resolve().parents[1]


def _demo_data_dir() -> Path:
    """Return the demo data directory under .textscrub."""

    return _repo_root() / ".textscrub" / "demo"


def _print_result(label: str, session: CleanerSession) -> None:
    """Print the session result in a compact form."""

    result = session.result
    if result is None:
        print(f"{label}: no result")
        return
    print(f"{label}: removed={result.total_removed} text={result.cleaned_text!r}")
    for match in result.matches:
        print(f"  {match.label} ({match.hex_code_unit}) x{match.occurrence_count}")


def main() -> None:
    """Run the local demo flows."""

    data_dir = _demo_data_dir()
    clipboard = MemoryClipboard(
        "Here\u2019s the plan\u2014ship it\u2026\u200B\u00A0\u00A0today.\n\n\nThanks!"
    )
    config = load_config(_repo_root() / "config" / "textscrub.yaml")
    session = CleanerSession.from_config(
        config,
        SettingsStore(data_dir, defaults=config.defaults),
        clipboard=clipboard,
        user_agent="Mozilla/5.0 (X11; Linux x86_64) Firefox/128.0",
    )

    print("== focus reads clipboard")
    session.on_focus()
    _print_result("default options", session)
    print(f"  clipboard now holds {clipboard.text!r}")
    print(f"  visualized input: {session.visualized_input()!r}")

    print("\n== option changes recompute")
    session.update_options(text_case="sentence", normalize_line_breaks=True)
    _print_result("sentence case", session)
    session.update_options(remove_all_spaces=True)
    _print_result("all spaces removed", session)

    print("\n== download")
    target = session.download(data_dir)
    print(f"wrote {target}")

    session.reset_options()
    print(f"\nsettings saved under {data_dir}")


if __name__ == "__main__":
    main()
