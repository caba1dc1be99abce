"""Clipboard access through platform helper commands."""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_SECONDS = 5.0

# (copy command, paste command) pairs in order of preference
_HELPERS = [
    (["pbcopy"], ["pbpaste"]),
    (["wl-copy"], ["wl-paste", "--no-newline"]),
    (["xclip", "-selection", "clipboard"], ["xclip", "-selection", "clipboard", "-o"]),
    (["xsel", "--clipboard", "--input"], ["xsel", "--clipboard", "--output"]),
]

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class ClipboardUnavailable(RuntimeError):
    """Raised when the clipboard is missing or access is denied."""

    pass


@dataclass(frozen=True)
class CommandClipboard:
    """Clipboard backed by copy/paste helper commands."""

    copy_cmd: Sequence[str]
    paste_cmd: Sequence[str]
    runner: Runner = subprocess.run
    timeout_seconds: float = CLIPBOARD_TIMEOUT_SECONDS

    def read(self) -> str:
        """Return the clipboard text."""

        return self._run(list(self.paste_cmd), capture_output=True).stdout

    def write(self, text: str) -> None:
        """Replace the clipboard text."""

        # xclip and wl-copy fork a child that owns the selection; it must not
        # inherit output pipes.
        self._run(
            list(self.copy_cmd),
            input=text,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def _run(self, cmd: List[str], **kwargs: object) -> "subprocess.CompletedProcess[str]":
        try:
            return self.runner(
                cmd,
                text=True,
                encoding="utf-8",
                check=True,
                timeout=self.timeout_seconds,
                **kwargs,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise ClipboardUnavailable(f"{cmd[0]} failed: {exc}") from exc


class MemoryClipboard:
    """In-process clipboard, used when no system clipboard is wanted."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text


def detect_clipboard(which: Callable[[str], Optional[str]] = shutil.which) -> Optional[CommandClipboard]:
    """Pick the first helper pair available on PATH."""

    for copy_cmd, paste_cmd in _HELPERS:
        if which(copy_cmd[0]) and which(paste_cmd[0]):
            return CommandClipboard(copy_cmd=copy_cmd, paste_cmd=paste_cmd)
    return None


def read_clipboard(clipboard) -> Optional[str]:
    """Read clipboard text, returning None when it is unavailable."""

    if clipboard is None:
        return None
    try:
        return clipboard.read()
    except ClipboardUnavailable as exc:
        logger.debug("clipboard read unavailable: %s", exc)
        return None


def write_clipboard(clipboard, text: str) -> bool:
    """Write text to the clipboard; return False when it is unavailable."""

    if clipboard is None or not text:
        return False
    try:
        clipboard.write(text)
    except ClipboardUnavailable as exc:
        logger.warning("failed to copy text: %s", exc)
        return False
    return True
